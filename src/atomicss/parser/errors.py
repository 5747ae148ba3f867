"""Parser error types."""


class ValueParseError(Exception):
    """Raised when a CSS value cannot be tokenized."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
