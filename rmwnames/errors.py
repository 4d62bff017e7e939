"""Exceptions raised by the name validation and options helpers."""


class RmwError(Exception):
    """Base class for every error this package raises."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(RmwError, ValueError):
    """An argument is missing, of the wrong kind, or otherwise unusable."""