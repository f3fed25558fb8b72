"""Tests for the pbxplist-encode CLI."""

import io
import json

import pytest

from pbxplist.cli import encode_document, main
from pbxplist.errors import PlistError


def project(**overrides):
    data = {
        "archiveVersion": 1,
        "objectVersion": 46,
        "rootObject": "PR01",
        "objects": {
            "SS01": {
                "isa": "PBXShellScriptBuildPhase",
                "shellScript": "echo\tA\n",
                "runOnlyForDeploymentPostprocessing": False,
            },
        },
    }
    data.update(overrides)
    return data


@pytest.fixture
def project_file(tmp_path):
    path = tmp_path / "project.json"
    path.write_text(json.dumps(project()), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# encode_document
# ---------------------------------------------------------------------------

def test_encode_document():
    text = encode_document(project())
    assert text.startswith("// !$*UTF8*$!\n{\n")
    assert '\t\t\tshellScript = "echo\\tA\\n";\n' in text
    assert "\t\t\trunOnlyForDeploymentPostprocessing = NO;\n" in text
    assert "\trootObject = PR01 /* Project object */;\n" in text

def test_encode_document_missing_field():
    data = project()
    del data["rootObject"]
    with pytest.raises(PlistError, match="rootObject"):
        encode_document(data)

def test_encode_document_not_an_object():
    with pytest.raises(PlistError):
        encode_document([1, 2])


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def test_main_writes_stdout(project_file):
    out = io.StringIO()
    assert main([str(project_file)], stdout=out) == 0
    assert out.getvalue() == encode_document(project())

def test_main_writes_output_file(project_file, tmp_path):
    dest = tmp_path / "project.pbxproj"
    assert main([str(project_file), "-o", str(dest)]) == 0
    assert dest.read_text(encoding="utf-8") == encode_document(project())

def test_main_reads_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(project())))
    out = io.StringIO()
    assert main([], stdout=out) == 0
    assert "Begin PBXShellScriptBuildPhase section" in out.getvalue()

def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.json")]) == 1
    assert "cannot read input" in capsys.readouterr().err

def test_main_bad_json(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "error:" in capsys.readouterr().err

def test_main_unsupported_value(tmp_path, capsys):
    path = tmp_path / "null.json"
    path.write_text(json.dumps(project(objects={"A": {"isa": "PBXGroup", "name": None}})), encoding="utf-8")
    out = io.StringIO()
    assert main([str(path)], stdout=out) == 1
    assert out.getvalue() == ""
    assert "NoneType" in capsys.readouterr().err

def test_main_bad_version(tmp_path, capsys):
    path = tmp_path / "version.json"
    path.write_text(json.dumps(project(archiveVersion="abc")), encoding="utf-8")
    assert main([str(path)], stdout=io.StringIO()) == 1
    assert "archiveVersion must be an integer" in capsys.readouterr().err

def test_main_null_version(tmp_path, capsys):
    path = tmp_path / "version.json"
    path.write_text(json.dumps(project(objectVersion=None)), encoding="utf-8")
    assert main([str(path)], stdout=io.StringIO()) == 1
    assert "objectVersion must be an integer" in capsys.readouterr().err

def test_main_unwritable_output(project_file, tmp_path, capsys):
    dest = tmp_path / "missing" / "dir" / "project.pbxproj"
    assert main([str(project_file), "-o", str(dest)]) == 1
    assert "cannot write output" in capsys.readouterr().err
    assert not dest.exists()

def test_main_input_not_utf8(tmp_path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"rootObject": "\xff"}')
    assert main([str(path)], stdout=io.StringIO()) == 1
    assert "cannot read input" in capsys.readouterr().err

def test_encode_document_root_object_must_be_string():
    with pytest.raises(PlistError, match="rootObject must be a string"):
        encode_document(project(rootObject=None))
    with pytest.raises(PlistError, match="rootObject must be a string"):
        encode_document(project(rootObject=12))
