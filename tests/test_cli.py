"""Tests for the command line entry point (openscad mocked)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest import mock

import pytest

from keycase.app import build_parser, main
from keycase.csg import node_to_dict
from keycase.features import case_auxiliaries
from tests.case_fixture import make_case


def write_config(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "case.json"
    path.write_text(json.dumps(data))
    return path


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_build_writes_scad_files(tmp_path):
    out = tmp_path / "build"
    assert main(["build", "--out", str(out)]) == 0
    for name in ("aux_positive", "aux_negative", "mcu_preview", "case_aux"):
        scad = out / f"{name}.scad"
        assert scad.exists()
        assert scad.read_text().startswith(f"// keycase: {name}")
    assert "difference() {" in (out / "case_aux.scad").read_text()
    assert not (out / "case_aux.json").exists()


def test_build_json_dump(tmp_path):
    out = tmp_path / "build"
    assert main(["build", "--out", str(out), "--json"]) == 0
    data = json.loads((out / "case_aux.json").read_text())
    assert data["kind"] == "difference"


def test_build_with_config(tmp_path):
    config = write_config(tmp_path, {"mcu": {"include": False}})
    out = tmp_path / "build"
    assert main(["build", "--config", str(config), "--out", str(out)]) == 0
    assert (out / "mcu_preview.scad").read_text().strip().endswith("union() {}")


def test_build_stl(tmp_path):
    out = tmp_path / "build"
    stl = out / "case_aux.stl"
    with mock.patch("keycase.app.compile_scad", return_value=(True, "OK", stl)) as compile_:
        assert main(["build", "--out", str(out), "--stl"]) == 0
    compile_.assert_called_once_with(out.resolve() / "case_aux.scad")


def test_build_stl_without_openscad(tmp_path):
    with mock.patch("keycase.scad.compiler._find_openscad", return_value=None):
        assert main(["build", "--out", str(tmp_path / "build"), "--stl"]) == 1


def test_build_rejects_invalid_config(tmp_path):
    config = write_config(tmp_path, {"case": {"leds": {"interval": -2}}})
    out = tmp_path / "build"
    assert main(["build", "--config", str(config), "--out", str(out)]) == 1
    assert not (out / "case_aux.scad").exists()


def test_missing_option_exits_with_error(tmp_path, caplog):
    config = write_config(tmp_path, {"case": {"back-plate": {"fasteners": "M6"}}})
    with caplog.at_level("ERROR"):
        assert main(["build", "--config", str(config), "--out", str(tmp_path / "b")]) == 1
    assert "case.back-plate.fasteners" in caplog.text


def test_validate(tmp_path, capsys):
    assert main(["validate"]) == 0
    assert "Configuration OK" in capsys.readouterr().out

    config = write_config(tmp_path, {"connection": {"position": {"key-alias": "ghost"}}})
    assert main(["validate", "--config", str(config)]) == 1
    assert "unknown key alias 'ghost'" in capsys.readouterr().out


def test_build_check_runs_openscad_on_each_file(tmp_path):
    out = tmp_path / "build"
    with mock.patch("keycase.app.check_scad", return_value=(True, "OK")) as check:
        assert main(["build", "--out", str(out), "--check"]) == 0
    checked = sorted(call.args[0].name for call in check.call_args_list)
    assert checked == ["aux_negative.scad", "aux_positive.scad", "case_aux.scad", "mcu_preview.scad"]


def test_build_check_failure(tmp_path, caplog):
    out = tmp_path / "build"
    with mock.patch("keycase.app.check_scad", return_value=(False, "Parser error")):
        with caplog.at_level("ERROR"):
            assert main(["build", "--out", str(out), "--check"]) == 1
    assert "Parser error" in caplog.text


def test_build_case_aux_matches_composition(tmp_path):
    out = tmp_path / "build"
    assert main(["build", "--out", str(out), "--json"]) == 0
    options, engine = make_case()
    expected = node_to_dict(case_auxiliaries(options, engine))
    assert json.loads((out / "case_aux.json").read_text()) == expected


@pytest.mark.parametrize("overrides", [
    {"mcu": {"finger-column": "two"}},
    {"key-clusters": {"finger": {"matrix-columns": [
        None, {"rows-below-home": 1, "rows-above-home": 2},
    ], "aliases": {}}}, "mcu": {"finger-column": 1}},
])
def test_bad_matrix_references_exit_with_error(tmp_path, overrides):
    config = write_config(tmp_path, overrides)
    out = tmp_path / "build"
    assert main(["build", "--config", str(config), "--out", str(out)]) == 1
    assert main(["validate", "--config", str(config)]) == 1
