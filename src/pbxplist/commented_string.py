"""CommentedString — string leaf with an optional comment and the pbxproj quoting rules."""

from __future__ import annotations

import re
from dataclasses import dataclass

QUOTE = '"'

# Characters allowed in an unquoted value: A-Z, a-z, "." through "9", "_", "$".
_NEEDS_QUOTES = re.compile(r"[^A-Za-z0-9./_$]")

# ---------------------------------------------------------------------------
# Substitution table
# ---------------------------------------------------------------------------
#
# Escaping is one pass over the source characters, so the backslashes these
# replacements introduce are never escaped again.  0x0D is not in the
# table and passes through untouched.

_ESCAPES: dict[str, str] = {chr(c): f"\\U{c:04x}" for c in range(0x20)}
_ESCAPES.update({
    "\x01": "$(inherited)",
    "\x07": "\\a",
    "\x08": "\\b",
    "\x0b": "\\v",
    "\x0c": "\\f",
    '"': '\\"',
    "\\": "\\\\",
})
del _ESCAPES["\t"], _ESCAPES["\n"], _ESCAPES["\r"]

_SPECIAL_ESCAPES: dict[str, str] = {**_ESCAPES, "\t": "\\t", "\n": "\\n"}

_ESCAPED = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f"\\]')
_SPECIAL_ESCAPED = re.compile(r'[\x00-\x0c\x0e-\x1f"\\]')

_LITERALS = {"": QUOTE * 2, "false": "NO", "true": "YES"}


def quoted(s: str) -> str:
    return f"{QUOTE}{s}{QUOTE}"


def is_quoted(s: str) -> bool:
    return len(s) >= 2 and s.startswith(QUOTE) and s.endswith(QUOTE)


def escape(s: str, special: bool = False) -> str:
    """Apply the character substitution table to *s*.

    With *special*, tab and newline become ``\\t`` and ``\\n``; otherwise
    they are left as raw characters.
    """
    if special:
        return _SPECIAL_ESCAPED.sub(lambda m: _SPECIAL_ESCAPES[m.group(0)], s)
    return _ESCAPED.sub(lambda m: _ESCAPES[m.group(0)], s)


@dataclass(frozen=True, eq=False)
class CommentedString:
    """A string value with an optional inline ``/* comment */``.

    Two instances are equal when both ``string`` and ``comment`` match.
    The hash covers ``string`` only, so instances that differ by comment
    collide in hash-based containers without comparing equal.
    ``special_flag`` is a formatting hint and takes no part in either.
    """

    string: str
    comment: str | None = None
    special_flag: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommentedString):
            return NotImplemented
        return self.string == other.string and self.comment == other.comment

    def __hash__(self) -> int:
        return hash(self.string)

    def __str__(self) -> str:
        return self.string

    @property
    def valid_string(self) -> str:
        """The text that represents ``string`` in a pbxproj document.

        - ``""`` → ``""`` (quoted), ``"false"`` → ``NO``, ``"true"`` → ``YES``
        - control characters, ``"`` and ``\\`` are escaped
        - the result is quoted if it holds anything outside ``[A-Za-z0-9./_$]``
        """
        literal = _LITERALS.get(self.string)
        if literal is not None:
            return literal

        escaped = escape(self.string, self.special_flag)
        if not is_quoted(escaped) and _NEEDS_QUOTES.search(escaped):
            escaped = quoted(escaped)
        return escaped

    def render(self) -> str:
        """``valid_string`` followed by the comment, if any."""
        if self.comment is None:
            return self.valid_string
        return f"{self.valid_string} /* {self.comment} */"
