#!/usr/bin/env python3
"""
cli.py
Convert one Markdown file to HTML.

Usage:
  python -m markdowntool --input notes.md [--output notes.html] [--standalone] [--title TEXT]

Env:
  MARKDOWNTOOL_STANDALONE  wrap output in a full XHTML page (1/true/yes/on)
  MARKDOWNTOOL_TITLE       page title used with --standalone

Exit codes:
 0 = converted
 1 = missing/invalid input path, unreadable input, or failed write
"""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from markdowntool.convert import convert
from markdowntool.errors import MarkdownToolError
from markdowntool.render import RenderOptions


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="markdowntool", description="Convert a Markdown file to HTML")
    # --input is validated by clean_path so a missing flag gets the same message as an empty one
    ap.add_argument("--input", default="", help="Filepath for the markdown file you would like to convert")
    ap.add_argument("--output", default="", help="Path for your html output (default: <input>.html)")
    ap.add_argument("--standalone", action="store_true", help="Wrap the HTML in a complete page")
    ap.add_argument("--title", default=None, help="Page title for --standalone (default: first heading)")
    return ap


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    options = RenderOptions.from_env()
    if args.standalone:
        options.standalone = True
    if args.title:
        options.title = args.title

    try:
        convert(args.input, args.output or None, options)
    except MarkdownToolError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
