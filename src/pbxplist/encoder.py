"""Encoder — writes a value tree as a pbxproj text document."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .commented_string import CommentedString
from .config import EncoderSettings, ProjectMetadata
from .convert import to_plist
from .errors import UnsupportedValueError
from .model import PArray, PDict, PlistValue, PString

logger = logging.getLogger(__name__)

_ISA = CommentedString("isa")


class Encoder:
    """Renders ``PlistValue`` trees into the textual plist dialect.

    Usage::

        encoder = Encoder()
        text = encoder.encode(objects, ProjectMetadata(root_object="A1B2"))

    The whole document is assembled in a local buffer; nothing is returned
    unless every node in the tree could be rendered.
    """

    def __init__(self, settings: EncoderSettings | None = None) -> None:
        self.settings = settings or EncoderSettings()

    # -- Document -------------------------------------------------------

    def encode(self, objects: PDict, metadata: ProjectMetadata) -> str:
        if not isinstance(objects, PDict):
            raise UnsupportedValueError(objects, "objects")

        out: list[str] = [self.settings.header, "\n{\n"]
        ind = self.settings.indent

        self._root_entry(out, "archiveVersion", str(metadata.archive_version))
        out.append(f"{ind}classes = {{\n{ind}}};\n")
        self._root_entry(out, "objectVersion", str(metadata.object_version))

        out.append(f"{ind}objects = {{\n")
        self._objects(out, objects)
        out.append(f"{ind}}};\n")

        root = CommentedString(metadata.root_object, comment=metadata.root_comment)
        out.append(f"{ind}rootObject = {root.render()};\n")
        out.append("}\n")
        return "".join(out)

    def _root_entry(self, out: list[str], key: str, value: str) -> None:
        out.append(f"{self.settings.indent}{key} = {CommentedString(value).valid_string};\n")

    def _objects(self, out: list[str], objects: PDict) -> None:
        sections: dict[str, list[tuple[CommentedString, PlistValue]]] = {}
        loose: list[tuple[CommentedString, PlistValue]] = []
        for key, value in objects.entries.items():
            isa = _isa_of(value)
            if isa is None:
                loose.append((key, value))
            else:
                sections.setdefault(isa, []).append((key, value))

        logger.debug(
            "encoding %d objects in %d sections (%d without isa)",
            len(objects), len(sections), len(loose),
        )

        level = 2
        for isa in sorted(sections):
            out.append(f"\n/* Begin {isa} section */\n")
            single = isa in self.settings.single_line_isas
            for key, value in sections[isa]:
                out.append(self._entry(key, value, level, single, str(key)))
            out.append(f"/* End {isa} section */\n")
        for key, value in loose:
            out.append(self._entry(key, value, level, False, str(key)))

    def _entry(self, key: CommentedString, value: PlistValue, level: int, single: bool, path: str) -> str:
        return (
            f"{self.settings.indent * level}{key.render()} = "
            f"{self.render(value, level, single, path)};\n"
        )

    # -- Values ---------------------------------------------------------

    def render(self, value: PlistValue, level: int = 0, single_line: bool = False, path: str = "$") -> str:
        """Render one value whose opening token sits at indent *level*."""
        if isinstance(value, PString):
            return value.value.render()
        if isinstance(value, PArray):
            return self._array(value, level, single_line, path)
        if isinstance(value, PDict):
            return self._dict(value, level, single_line, path)
        raise UnsupportedValueError(value, path)

    def _array(self, value: PArray, level: int, single_line: bool, path: str) -> str:
        items = [
            self.render(item, level + 1, single_line, f"{path}[{i}]")
            for i, item in enumerate(value.items)
        ]
        if single_line:
            return "(" + "".join(f"{item}, " for item in items) + ")"
        inner = self.settings.indent * (level + 1)
        body = "".join(f"{inner}{item},\n" for item in items)
        return f"(\n{body}{self.settings.indent * level})"

    def _dict(self, value: PDict, level: int, single_line: bool, path: str) -> str:
        lines = [
            (key.render(), self.render(item, level + 1, single_line, f"{path}.{key}"))
            for key, item in value.entries.items()
        ]
        if single_line:
            return "{" + "".join(f"{k} = {v}; " for k, v in lines) + "}"
        inner = self.settings.indent * (level + 1)
        body = "".join(f"{inner}{k} = {v};\n" for k, v in lines)
        return f"{{\n{body}{self.settings.indent * level}}}"


def _isa_of(value: PlistValue) -> str | None:
    if not isinstance(value, PDict):
        return None
    isa = value.entries.get(_ISA)
    if isinstance(isa, PString):
        return isa.value.string
    return None


# ---------------------------------------------------------------------------
# Module-level shortcuts
# ---------------------------------------------------------------------------

def encode(objects: PDict, metadata: ProjectMetadata, settings: EncoderSettings | None = None) -> str:
    """Encode an ``objects`` dictionary into a complete document."""
    return Encoder(settings).encode(objects, metadata)


def encode_project(
    objects: Mapping,
    metadata: ProjectMetadata,
    settings: EncoderSettings | None = None,
    escaped_keys: tuple[str, ...] = ("shellScript",),
) -> str:
    """Convert plain *objects* data with ``to_plist`` and encode it.

    Conversion finishes before rendering starts, so an unsupported value
    fails the call without producing any text.
    """
    tree = to_plist(objects, escaped_keys)
    if not isinstance(tree, PDict):
        raise UnsupportedValueError(objects, "objects")
    return Encoder(settings).encode(tree, metadata)
