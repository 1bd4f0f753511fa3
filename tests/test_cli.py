"""Testy komend CLI goreorder."""

from __future__ import annotations

import json

import pytest

from conftest import FREE_ONLY_SRC, SCENARIO_SRC
from goreorder import cli
from goreorder._config import ENV_CONSTRUCTOR_PREFIX, get_policy


def test_methods_rewrites_file(go_file, capsys) -> None:
    path = go_file(SCENARIO_SRC)
    cli.main(["methods", str(path)])

    text = path.read_text()
    assert text.index("Apple()") < text.index("Mango()") < text.index("Zebra()")
    out = capsys.readouterr().out
    assert "OK" in out
    assert "helper" in out


def test_methods_noop(go_file, capsys) -> None:
    path = go_file(FREE_ONLY_SRC)
    cli.main(["methods", str(path)])

    assert path.read_text() == FREE_ONLY_SRC
    assert "Brak metod" in capsys.readouterr().out


def test_methods_stdout_keeps_file(go_file, capsys) -> None:
    path = go_file(SCENARIO_SRC)
    cli.main(["methods", str(path), "--stdout"])

    out = capsys.readouterr().out
    assert out.startswith("package demo\n")
    assert out.index("Apple()") < out.index("Zebra()")
    assert path.read_text() == SCENARIO_SRC


def test_methods_check_exit_codes(go_file) -> None:
    path = go_file(SCENARIO_SRC)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["methods", str(path), "--check"])
    assert exc_info.value.code == 1
    assert path.read_text() == SCENARIO_SRC

    cli.main(["methods", str(path)])
    cli.main(["methods", str(path), "--check"])


def test_methods_dry_run_verbose(go_file, capsys) -> None:
    path = go_file(SCENARIO_SRC)
    cli.main(["methods", str(path), "--dry-run", "--verbose"])

    out = capsys.readouterr().out
    assert "METODA" in out
    assert "Zebra" in out
    assert path.read_text() == SCENARIO_SRC


def test_methods_missing_file_exits_1(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["methods", str(tmp_path / "missing.go")])
    assert exc_info.value.code == 1
    assert "E_READ_FAILURE" in capsys.readouterr().out


def test_methods_parse_error_exits_1(go_file, capsys) -> None:
    path = go_file("package p\n\nfunc (v V) B( {\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["methods", str(path)])
    assert exc_info.value.code == 1
    assert "E_PARSE_FAILURE" in capsys.readouterr().out


def test_units_json_output(go_file, capsys) -> None:
    path = go_file(SCENARIO_SRC)
    cli.main(["units", str(path), "--json-output"])

    data = json.loads(capsys.readouterr().out)
    assert data["package"] == "demo"
    verdicts = {d["name"]: d["skip"] for d in data["declarations"] if d["name"]}
    assert verdicts["Zebra"] is None
    assert verdicts["helper"] == "free-function"
    assert verdicts["T"] == "not-function"


def test_units_table(go_file, capsys) -> None:
    cli.main(["units", str(go_file(SCENARIO_SRC))])
    out = capsys.readouterr().out
    assert "sortowana" in out
    assert "free-function" in out


def test_constructor_prefix_from_environment(monkeypatch) -> None:
    monkeypatch.setenv(ENV_CONSTRUCTOR_PREFIX, "Make")
    assert get_policy().constructor_prefix == "Make"
    assert get_policy("Build").constructor_prefix == "Build"

    monkeypatch.delenv(ENV_CONSTRUCTOR_PREFIX)
    assert get_policy().constructor_prefix == "New"


def test_command_is_required() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 2


def test_methods_stdout_is_byte_exact(go_file, capsysbinary) -> None:
    source = (
        b"package p\n\n"
        b"// \xff\xfe latin-1\n"
        b"func (v V) B() {}\n\n"
        b"func (v V) A() {}\n"
    )
    path = go_file("")
    path.write_bytes(source)
    cli.main(["methods", str(path), "--stdout"])

    out = capsysbinary.readouterr().out
    assert out == (
        b"package p\n\n"
        b"func (v V) A() {}\n\n"
        b"// \xff\xfe latin-1\n"
        b"func (v V) B() {}\n"
    )
    assert path.read_bytes() == source


def test_methods_stdout_noop_is_byte_exact(go_file, capsysbinary) -> None:
    source = b"package p\n\n// \xff\nfunc a() {}\n"
    path = go_file("")
    path.write_bytes(source)
    cli.main(["methods", str(path), "--stdout"])

    assert capsysbinary.readouterr().out == source


def test_units_json_receiver_type(go_file, capsys) -> None:
    cli.main(["units", str(go_file(SCENARIO_SRC)), "--json-output"])

    data = json.loads(capsys.readouterr().out)
    types = {d["name"]: d["receiver_type"] for d in data["declarations"] if d["name"]}
    assert types["Zebra"] == "*T"
    assert types["helper"] is None
