"""pbxplist — text property-list encoder for Xcode project files."""

import logging

from .commented_string import CommentedString, escape, is_quoted, quoted
from .config import EncoderSettings, ProjectMetadata
from .convert import to_plist
from .encoder import Encoder, encode, encode_project
from .errors import PlistError, UnsupportedValueError
from .model import PArray, PDict, PlistValue, PString
from .objects import BuildFile, ShellScriptBuildPhase

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CommentedString",
    "escape",
    "is_quoted",
    "quoted",
    "EncoderSettings",
    "ProjectMetadata",
    "to_plist",
    "Encoder",
    "encode",
    "encode_project",
    "PlistError",
    "UnsupportedValueError",
    "PArray",
    "PDict",
    "PlistValue",
    "PString",
    "BuildFile",
    "ShellScriptBuildPhase",
]
