from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument the converter cannot work with."""

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument
        self.message = message
