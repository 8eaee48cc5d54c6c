"""Project-native typed exceptions for status reporting failures."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Precondition violation in status formatting or snapshot assembly.

    Attributes:
        argument_name: Name of the rejected argument.
    """

    def __init__(self, message: str, argument_name: str | None = None):
        super().__init__(message)
        self.argument_name = argument_name
