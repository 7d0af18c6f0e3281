import pytest

from config import Config


def write_config(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body)
    return path


def test_defaults(tmp_path):
    config = Config(
        write_config(
            tmp_path, "config:\n  database_connection: sqlite+aiosqlite:///b.db\n"
        )
    )

    assert config.DATABASE_CONNECTION == "sqlite+aiosqlite:///b.db"
    assert config.LOG_LEVEL == "INFO"
    assert config.SQL_LOGGING is False
    assert config.LOG_FILE is None


def test_all_options(tmp_path):
    config = Config(
        write_config(
            tmp_path,
            "config:\n"
            "  database_connection: postgresql+asyncpg://localhost/birthdays\n"
            "  log_level: DEBUG\n"
            "  log_sql: True\n"
            "  log_file: birthdays.log\n",
        )
    )

    assert config.LOG_LEVEL == "DEBUG"
    assert config.SQL_LOGGING is True
    assert config.LOG_FILE.name == "birthdays.log"


MISSING_CONNECTION = {
    "Missing": "config:\n  log_level: INFO\n",
    "Empty config block": "config:\n",
    "Empty file": "",
    "Only comments": "# nothing\n",
    "No config block": "other: 1\n",
    "Config is a list": "config:\n  - database_connection\n",
    "Top level is a string": "just a string\n",
}


@pytest.mark.parametrize(
    "body", MISSING_CONNECTION.values(), ids=MISSING_CONNECTION.keys()
)
def test_missing_connection(tmp_path, body):
    with pytest.raises(ValueError):
        Config(write_config(tmp_path, body))
