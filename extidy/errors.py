"""extidy-specific exceptions."""


class ExtidyParseError(Exception):
    """Raised when statement source text cannot be lexed or parsed.

    The rewrites themselves never raise; a pattern that does not apply is a
    no-op. Only the text front end has an error channel.
    """

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        super().__init__(message)
        self.line = line
        self.column = column
