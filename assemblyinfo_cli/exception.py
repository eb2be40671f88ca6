"""
Exceptions for the entire program.
"""
from collections.abc import Iterable
from typing import Any

from assemblyinfo_cli.utils import SafeDict


class AssemblyInfoError(Exception):
    """
    Generic base class for all program-related errors.

    :param message: Explanation of the error.
    :param key: The key that caused the error.
    :param value: The value that caused the error.
    """
    def __init__(self, message: str = "An error occurred", key: Any | None = None, value: Any | None = None):
        suffix = []

        key = "->".join(map(str, key)) if isinstance(key, Iterable) and not isinstance(key, str) else key
        if key and "{key}" in message:
            message = message.format_map(SafeDict(key=key))
        elif key:
            suffix.append(f"key='{key}'")

        try:
            value = ", ".join(value) if isinstance(value, Iterable) and not isinstance(value, str) else value
        except TypeError:
            value = str(value)

        if value and "{value}" in message:
            message = message.format_map(SafeDict(value=value))
        elif value:
            suffix.append(f"value='{value}'")

        self.key = key
        self.value = value
        self.message = message

        super().__init__(": ".join([message, " | ".join(suffix)]) if suffix else message)


class ParserError(AssemblyInfoError):
    """Exception raised when parsing config gives an exception."""
    def __init__(self, message: str = "Could not process config", key: Any | None = None, value: Any | None = None):
        super().__init__(message=message, key=key, value=value)


class InvalidArgumentError(AssemblyInfoError, ValueError):
    """Exception raised when a required argument is missing or invalid."""
    def __init__(self, message: str = "Invalid argument given for {key}", key: Any | None = None, value: Any = None):
        super().__init__(message=message, key=key, value=value)


class FileSystemError(AssemblyInfoError, OSError):
    """Exception raised when a path cannot be opened or written to."""
    def __init__(self, message: str = "Could not write to path", key: Any | None = None, value: Any | None = None):
        super().__init__(message=message, key=key, value=value)
