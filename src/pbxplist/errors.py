"""Exceptions raised by pbxplist."""

from __future__ import annotations


class PlistError(Exception):
    """Base class for all pbxplist errors."""


class UnsupportedValueError(PlistError, TypeError):
    """A value that has no plist representation reached the converter or encoder."""

    def __init__(self, value: object, path: str = "") -> None:
        self.value = value
        self.path = path
        where = f" at {path}" if path else ""
        super().__init__(
            f"cannot encode {type(value).__name__} value{where}: {value!r}"
        )
