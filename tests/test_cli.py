# tests/test_cli.py
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from markdowntool.cli import build_parser, main, parse_args

ROOT = Path(__file__).resolve().parents[1]


def _write_md(tmp: Path, name: str = "post.md") -> Path:
    p = tmp / name
    p.write_text("# Post\n\n| a | b |\n|---|---|\n| 1 | 2 |\n", encoding="utf-8")
    return p


def test_parse_args_defaults():
    args = parse_args([])
    assert args.input == ""
    assert args.output == ""
    assert args.standalone is False
    assert args.title is None


def test_build_parser_flags():
    ap = build_parser()
    assert ap.prog == "markdowntool"
    args = ap.parse_args(["--input", "a.md", "--output", "b.html", "--standalone"])
    assert (args.input, args.output, args.standalone) == ("a.md", "b.html", True)


def test_main_converts(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("MARKDOWNTOOL_STANDALONE", raising=False)
    src = _write_md(tmp_path)
    rc = main(["--input", str(src)])
    assert rc == 0
    html = (tmp_path / "post.html").read_text(encoding="utf-8")
    assert "<table>" in html
    assert "<html" not in html


def test_main_standalone_with_title(tmp_path: Path):
    src = _write_md(tmp_path)
    out = tmp_path / "page.html"
    rc = main(["--input", str(src), "--output", str(out), "--standalone", "--title", "My Page"])
    assert rc == 0
    assert "<title>My Page</title>" in out.read_text(encoding="utf-8")


def test_main_standalone_from_env(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("MARKDOWNTOOL_STANDALONE", "1")
    monkeypatch.delenv("MARKDOWNTOOL_TITLE", raising=False)
    src = _write_md(tmp_path)
    assert main(["--input", str(src)]) == 0
    assert "<title>Post</title>" in (tmp_path / "post.html").read_text(encoding="utf-8")


def test_main_missing_input(capsys):
    rc = main([])
    assert rc == 1
    err = capsys.readouterr().err
    assert "ERROR: You must provide a path to your markdown file" in err


def test_main_wrong_extension(tmp_path: Path, capsys):
    src = tmp_path / "post.txt"
    src.write_text("text", encoding="utf-8")
    rc = main(["--input", str(src)])
    assert rc == 1
    assert "markdown (.md) file" in capsys.readouterr().err
    assert not (tmp_path / "post.html").exists()


def test_main_unreadable_input(tmp_path: Path, capsys):
    rc = main(["--input", str(tmp_path / "absent.md")])
    assert rc == 1
    assert "ERROR: Could not read" in capsys.readouterr().err


def test_module_entrypoint_end_to_end(tmp_path: Path):
    src = _write_md(tmp_path)
    cmd = [sys.executable, "-m", "markdowntool", "--input", str(src)]
    proc = subprocess.run(cmd, cwd=ROOT, capture_output=True, text=True)
    assert proc.returncode == 0, proc.stderr
    assert "Converting post.md." in proc.stdout
    assert (tmp_path / "post.html").exists()


def test_module_entrypoint_failure_exit_code(tmp_path: Path):
    cmd = [sys.executable, "-m", "markdowntool", "--input", str(tmp_path / "post.rst")]
    proc = subprocess.run(cmd, cwd=ROOT, capture_output=True, text=True)
    assert proc.returncode == 1
    assert "ERROR:" in proc.stderr
