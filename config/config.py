from pathlib import Path
from typing import Optional

import yaml


class Config:
    def __init__(self, filepath):
        with open(filepath) as f:
            loaded = yaml.full_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{filepath}: expected a mapping at the top level")
        parsed = loaded.get("config") or {}
        if not isinstance(parsed, dict):
            raise ValueError(f"{filepath}: config must be a mapping")

        # Essential
        self.DATABASE_CONNECTION: str = parsed.get("database_connection")
        if not self.DATABASE_CONNECTION:
            raise ValueError(f"{filepath}: database_connection must be set")

        # Configuration
        self.LOG_LEVEL: str = parsed.get("log_level", "INFO")
        self.SQL_LOGGING: bool = parsed.get("log_sql", False)
        log_file = parsed.get("log_file")
        self.LOG_FILE: Optional[Path] = Path(log_file) if log_file else None
