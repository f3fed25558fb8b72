"""Conversion of plain Python data into the plist value model."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from decimal import Decimal

from .commented_string import CommentedString
from .errors import UnsupportedValueError
from .model import PArray, PDict, PlistValue, PString

_PLIST_TYPES = (PString, PArray, PDict)


def to_plist(value: object, escaped_keys: Collection[str] = ()) -> PlistValue:
    """Convert *value* into a ``PlistValue`` tree.

    - ``str`` / ``int`` / ``float`` / ``Decimal`` → ``PString``
    - ``bool`` → ``PString("true"|"false")``, written as ``YES``/``NO``
    - ``Mapping`` → ``PDict`` (encounter order kept)
    - ``list`` / ``tuple`` → ``PArray``

    String leaves directly under a key in *escaped_keys* get
    ``special_flag=True``.  Anything else raises ``UnsupportedValueError``.
    """
    return _convert(value, frozenset(escaped_keys), "$", False)


def _convert(value: object, escaped_keys: frozenset[str], path: str, special: bool) -> PlistValue:
    if isinstance(value, _PLIST_TYPES):
        return value
    if isinstance(value, CommentedString):
        return PString(value)

    scalar = _scalar_text(value)
    if scalar is not None:
        return PString(CommentedString(scalar, special_flag=special))

    if isinstance(value, Mapping):
        entries: dict[CommentedString, PlistValue] = {}
        for key, item in value.items():
            ckey = _key(key, path)
            entries[ckey] = _convert(
                item, escaped_keys, f"{path}.{ckey.string}", ckey.string in escaped_keys,
            )
        return PDict(entries)

    if isinstance(value, (list, tuple)):
        return PArray([
            _convert(item, escaped_keys, f"{path}[{i}]", special)
            for i, item in enumerate(value)
        ])

    raise UnsupportedValueError(value, path)


def _scalar_text(value: object) -> str | None:
    # bool before int: True is an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return None


def _key(key: object, path: str) -> CommentedString:
    if isinstance(key, CommentedString):
        return key
    if isinstance(key, str):
        return CommentedString(key)
    raise UnsupportedValueError(key, f"{path} (key)")
