"""``pbxplist-encode`` — encode a JSON project description as a pbxproj document.

Input shape::

    {
      "archiveVersion": 1,
      "objectVersion": 46,
      "rootObject": "A1B2C3",
      "objects": {"A1B2C3": {"isa": "PBXProject", ...}, ...}
    }
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO

from .config import ProjectMetadata
from .encoder import encode_project
from .errors import PlistError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pbxplist-encode",
        description="Encode a JSON project description as pbxproj text.",
    )
    parser.add_argument("input", nargs="?", help="JSON file (default: stdin)")
    parser.add_argument("-o", "--output", help="write here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _read(path: str | None) -> dict:
    if path is None:
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def _version(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise PlistError(f"{key} must be an integer, got {value!r}") from exc


def encode_document(data: dict) -> str:
    """Encode an already-loaded JSON project description."""
    if not isinstance(data, dict):
        raise PlistError("project description must be a JSON object")
    try:
        root_object = data["rootObject"]
        objects = data["objects"]
    except KeyError as exc:
        raise PlistError(f"missing required field {exc.args[0]!r}") from exc
    if not isinstance(root_object, str):
        raise PlistError(f"rootObject must be a string, got {root_object!r}")

    metadata = ProjectMetadata(
        root_object=root_object,
        archive_version=_version(data, "archiveVersion", 1),
        object_version=_version(data, "objectVersion", 46),
    )
    return encode_project(objects, metadata)


def main(argv: list[str] | None = None, stdout: IO[str] | None = None) -> int:
    """CLI entry point.  Returns the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    dest = stdout or sys.stdout

    try:
        data = _read(args.input)
    except (OSError, ValueError) as exc:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 1

    try:
        text = encode_document(data)
    except PlistError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if not args.output:
        dest.write(text)
        return 0
    try:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        print(f"error: cannot write output: {exc}", file=sys.stderr)
        return 1
    logger.debug("wrote %d characters to %s", len(text), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
