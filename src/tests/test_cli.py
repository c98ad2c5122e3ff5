"""
Tests de la línea de comandos: salida estándar exacta y códigos de salida.
"""

import io
import logging
import os

import pytest

import cli

PROGRAMS = os.path.join(os.path.dirname(__file__), "programs")


def program_path(name):
    return os.path.join(PROGRAMS, name)


class TestCli:
    def test_report_on_success(self, capsys):
        code = cli.main([program_path("demo.little")])
        out = capsys.readouterr().out
        with open(program_path("demo.out"), encoding="utf-8") as fh:
            assert out == fh.read()
        assert code == cli.EXIT_OK

    def test_duplicate_prints_only_the_error(self, capsys):
        code = cli.main([program_path("duplicate.little")])
        captured = capsys.readouterr()
        assert captured.out == "DECLARATION ERROR count\n"
        assert code == cli.EXIT_DECLARATION_ERROR != 0

    def test_syntax_error_goes_to_stderr(self, tmp_path, capsys):
        path = tmp_path / "bad.little"
        path.write_text("PROGRAM p BEGIN INT ; END", encoding="utf-8")
        code = cli.main([str(path)])
        captured = capsys.readouterr()
        assert code == cli.EXIT_SYNTAX_ERROR
        assert captured.out == ""
        assert "línea 1, col 20" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        code = cli.main([str(tmp_path / "nope.little")])
        assert code == cli.EXIT_SYNTAX_ERROR
        assert "No se pudo leer" in capsys.readouterr().err

    def test_reads_stdin(self, monkeypatch, capsys):
        source = 'PROGRAM p BEGIN FUNCTION VOID main() BEGIN STRING s := "hi"; END END'
        monkeypatch.setattr("sys.stdin", io.StringIO(source))
        assert cli.main([]) == cli.EXIT_OK
        assert capsys.readouterr().out == 'Symbol table main\nname s type STRING value "hi"\n\n'

    def test_verbose_keeps_stdout_clean(self, monkeypatch, capsys, caplog):
        calls = []
        monkeypatch.setattr(cli.logging, "basicConfig", lambda **kw: calls.append(kw))
        with caplog.at_level(logging.DEBUG, logger="semantic.scope_builder"):
            code = cli.main([program_path("nested.little"), "--verbose"])
        assert code == cli.EXIT_OK
        with open(program_path("nested.out"), encoding="utf-8") as fh:
            assert capsys.readouterr().out == fh.read()
        assert calls[0]["level"] == logging.DEBUG
        assert any("descarta bloque vacío BLOCK 1" in r.getMessage() for r in caplog.records)

    def test_execute_cli_exits_with_status(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["little-scopes", program_path("duplicate.little")])
        with pytest.raises(SystemExit) as info:
            cli.execute_cli()
        assert info.value.code == 1
        capsys.readouterr()
