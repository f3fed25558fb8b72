"""Value model: the tree every project object is converted into before encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .commented_string import CommentedString


# ---------------------------------------------------------------------------
# Variant accessors
# ---------------------------------------------------------------------------

class _Accessors:
    """Typed views shared by every variant; ``None`` when the variant differs."""

    __slots__ = ()

    @property
    def string(self) -> CommentedString | None:
        return None

    @property
    def array(self) -> list[PlistValue] | None:
        return None

    @property
    def dictionary(self) -> dict[CommentedString, PlistValue] | None:
        return None


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class PString(_Accessors):
    value: CommentedString

    @property
    def string(self) -> CommentedString:
        return self.value


@dataclass(slots=True)
class PArray(_Accessors):
    items: list[PlistValue] = field(default_factory=list)

    @property
    def array(self) -> list[PlistValue]:
        return self.items


@dataclass(slots=True)
class PDict(_Accessors):
    """Ordered mapping; keys compare by (string, comment)."""

    entries: dict[CommentedString, PlistValue] = field(default_factory=dict)

    @property
    def dictionary(self) -> dict[CommentedString, PlistValue]:
        return self.entries

    def get(self, key: CommentedString | str) -> PlistValue | None:
        if isinstance(key, str):
            key = CommentedString(key)
        return self.entries.get(key)

    def __len__(self) -> int:
        return len(self.entries)


PlistValue = Union[PString, PArray, PDict]
