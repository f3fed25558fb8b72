"""Project objects that produce ``(key, value)`` pairs for the ``objects`` dictionary."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .commented_string import CommentedString
from .convert import to_plist
from .model import PArray, PDict, PlistValue, PString


def _leaf(value: str, comment: str | None = None, special: bool = False) -> PString:
    return PString(CommentedString(value, comment=comment, special_flag=special))


@dataclass
class BuildFile:
    """A ``PBXBuildFile``: links a file reference into a build phase."""

    isa: ClassVar[str] = "PBXBuildFile"

    reference: str
    file_ref: str | None = None
    settings: dict[str, object] | None = None

    def __hash__(self) -> int:
        return hash(self.reference)

    def plist_key_and_value(
        self, comment: str | None = None, file_comment: str | None = None,
    ) -> tuple[CommentedString, PDict]:
        entries: dict[CommentedString, PlistValue] = {
            CommentedString("isa"): _leaf(self.isa),
        }
        if self.file_ref is not None:
            entries[CommentedString("fileRef")] = _leaf(self.file_ref, file_comment)
        if self.settings is not None:
            entries[CommentedString("settings")] = to_plist(self.settings)
        return CommentedString(self.reference, comment=comment), PDict(entries)


@dataclass
class ShellScriptBuildPhase:
    """A ``PBXShellScriptBuildPhase``; its script body is written with escaped tabs/newlines."""

    isa: ClassVar[str] = "PBXShellScriptBuildPhase"

    reference: str
    shell_script: str | None = None
    name: str | None = None
    files: list[str] = field(default_factory=list)
    input_paths: list[str] = field(default_factory=list)
    output_paths: list[str] = field(default_factory=list)
    shell_path: str = "/bin/sh"
    build_action_mask: int = 2147483647
    run_only_for_deployment_postprocessing: bool = False
    show_env_vars_in_log: bool = True

    def __hash__(self) -> int:
        return hash(self.reference)

    def plist_key_and_value(self) -> tuple[CommentedString, PDict]:
        entries: dict[CommentedString, PlistValue] = {
            CommentedString("isa"): _leaf(self.isa),
            CommentedString("buildActionMask"): _leaf(str(self.build_action_mask)),
            CommentedString("files"): PArray([_leaf(f) for f in self.files]),
            CommentedString("inputPaths"): PArray([_leaf(p) for p in self.input_paths]),
        }
        if self.name is not None:
            entries[CommentedString("name")] = _leaf(self.name)
        entries[CommentedString("outputPaths")] = PArray([_leaf(p) for p in self.output_paths])
        entries[CommentedString("runOnlyForDeploymentPostprocessing")] = _leaf(
            "1" if self.run_only_for_deployment_postprocessing else "0"
        )
        entries[CommentedString("shellPath")] = _leaf(self.shell_path)
        if self.shell_script is not None:
            entries[CommentedString("shellScript")] = _leaf(self.shell_script, special=True)
        if not self.show_env_vars_in_log:
            entries[CommentedString("showEnvVarsInLog")] = _leaf("0")
        key = CommentedString(self.reference, comment=self.name or "ShellScript")
        return key, PDict(entries)
