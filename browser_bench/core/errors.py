"""Base exception class for all browser-bench errors."""


class BenchError(Exception):
    """Base class for all browser-bench errors.

    Every subclass builds a message starting with "Failed to " so the CLI can
    print it to the user as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
