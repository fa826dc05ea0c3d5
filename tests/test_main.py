"""Tests for slidedeckml.__main__ — CLI argument parsing and compilation."""

from __future__ import annotations

import json
import runpy
from unittest.mock import patch

import pytest

from slidedeckml.__main__ import main


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestArgParsing:
    def test_command_required(self):
        with patch("sys.argv", ["slidedeckml"]):
            with pytest.raises(SystemExit):
                main()

    def test_input_required(self):
        with patch("sys.argv", ["slidedeckml", "compile"]):
            with pytest.raises(SystemExit):
                main()

    def test_missing_input_file_exits(self, tmp_path, capsys):
        with patch("sys.argv", ["slidedeckml", "compile", str(tmp_path / "nope.json")]):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert "Input file not found" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------

class TestCompile:
    def test_writes_output(self, tmp_ast, tmp_path, capsys):
        out = tmp_path / "out.html"
        with patch("sys.argv", ["slidedeckml", "compile", str(tmp_ast), "-o", str(out)]):
            main()
        html = out.read_text(encoding="utf-8")
        assert "<title>Quarterly Review</title>" in html
        assert html.index("<p>Footer</p>") < html.index("<h2>Agenda</h2>")
        assert '<blockquote style="position: absolute; z-index: 2; left: 40px">' in html
        assert 'data-line-numbers="1-2"' in html
        assert "x = 1 &lt; 2" in html
        stdout = capsys.readouterr().out
        assert f"Compiling {tmp_ast}..." in stdout
        assert f"Generated: {out}" in stdout

    def test_default_output_name(self, tmp_ast, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("sys.argv", ["slidedeckml", "compile", str(tmp_ast)]):
            main()
        assert (tmp_path / "presentation.html").exists()

    def test_theme_and_transition(self, tmp_ast, tmp_path):
        out = tmp_path / "out.html"
        argv = ["slidedeckml", "compile", str(tmp_ast), "-o", str(out),
                "--theme", "night", "--transition", "zoom"]
        with patch("sys.argv", argv):
            main()
        html = out.read_text(encoding="utf-8")
        assert "theme/night.css" in html
        assert "transition: 'zoom'" in html

    def test_log_file_written(self, tmp_ast, tmp_path):
        out = tmp_path / "out.html"
        log = tmp_path / "build.log"
        argv = ["slidedeckml", "compile", str(tmp_ast), "-o", str(out), "--log-file", str(log)]
        with patch("sys.argv", argv):
            main()
        assert "Compiled 2 slide(s)" in log.read_text(encoding="utf-8")

    def test_malformed_tree_exits(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"$type": "Presentation"}))
        with patch("sys.argv", ["slidedeckml", "compile", str(bad), "-o", str(tmp_path / "o.html")]):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert "missing required field 'slides'" in capsys.readouterr().err

    def test_invalid_json_exits(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{")
        with patch("sys.argv", ["slidedeckml", "compile", str(bad), "-o", str(tmp_path / "o.html")]):
            with pytest.raises(SystemExit):
                main()
        err_lines = capsys.readouterr().err.strip().splitlines()
        assert len(err_lines) == 1
        assert err_lines[0].startswith("Error: ")

    def test_traceback_only_in_log_file(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{")
        log = tmp_path / "build.log"
        argv = ["slidedeckml", "compile", str(bad), "-o", str(tmp_path / "o.html"),
                "--log-file", str(log)]
        with patch("sys.argv", argv):
            with pytest.raises(SystemExit):
                main()
        assert "Traceback" not in capsys.readouterr().err
        assert "Traceback" in log.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Running as ``python -m slidedeckml``
# ---------------------------------------------------------------------------

class TestRunModule:
    def test_log_file_receives_cli_records(self, tmp_ast, tmp_path):
        out = tmp_path / "out.html"
        log = tmp_path / "build.log"
        argv = ["slidedeckml", "compile", str(tmp_ast), "-o", str(out), "--log-file", str(log)]
        with patch("sys.argv", argv):
            runpy.run_module("slidedeckml", run_name="__main__")
        text = log.read_text(encoding="utf-8")
        assert "CLI arguments" in text
        assert "Compiled 2 slide(s)" in text
