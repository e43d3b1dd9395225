class BodyfileError(Exception):
    """Base class for errors raised by bodyfile collaborators."""


class BodyfileParseError(BodyfileError):
    """A body file line could not be turned into a record."""

    def __init__(self, message: str, line_no: int | None = None, line: str | None = None) -> None:
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
