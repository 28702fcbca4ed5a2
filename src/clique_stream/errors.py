"""Exception types raised by clique_stream."""


class InvalidArgumentError(ValueError):
    """A caller broke an operation's contract (e.g. passed a ``None`` node id)."""


class StreamFormatError(ValueError):
    """An input line could not be parsed into an interaction."""

    def __init__(self, message: str, line_no: int | None = None, line: str | None = None):
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
