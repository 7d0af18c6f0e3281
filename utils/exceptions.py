class BirthdayDecodeError(ValueError):
    """Raised when a row from the backend cannot be turned into a birthday record"""

    def __init__(self, column: str, problem: str):
        self.column = column
        self.problem = problem
        super().__init__(f"Bad birthday row: column {column!r} {problem}")
