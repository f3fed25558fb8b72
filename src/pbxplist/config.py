"""Settings and root metadata for the encoder."""

from __future__ import annotations

from dataclasses import dataclass, field

UTF8_HEADER = "// !$*UTF8*$!"


@dataclass
class ProjectMetadata:
    """Root-level values written around the ``objects`` dictionary."""

    root_object: str
    archive_version: int = 1
    object_version: int = 46
    root_comment: str | None = "Project object"


@dataclass(frozen=True)
class EncoderSettings:
    header: str = UTF8_HEADER
    indent: str = "\t"
    # Xcode writes these object kinds on a single line
    single_line_isas: frozenset[str] = field(
        default_factory=lambda: frozenset({"PBXBuildFile", "PBXFileReference"})
    )
