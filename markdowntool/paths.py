#!/usr/bin/env python3
"""
paths.py
Input validation and output-path derivation for a single conversion.

- clean_path(path): reject non-.md input, expand a leading "~", normalize
- output_file_path(output, input_path): explicit output, or the sibling .html file
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from markdowntool.errors import PathError

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"


def extension(path: str) -> str:
    # Suffix of the last path element only; "foo.md/" has none.
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def expand_tilde(path: str) -> str:
    if not path.startswith("~"):
        return path
    return path.replace("~", str(Path.home()), 1)


def clean_path(path: Optional[str]) -> str:
    if not path:
        raise PathError("You must provide a path to your markdown file")
    if extension(path) != MARKDOWN_SUFFIX:
        raise PathError("You must provide a markdown (.md) file.")
    return os.path.normpath(expand_tilde(path))


def output_file_path(output: Optional[str], input_path: str) -> str:
    """
    Return the absolute output path. Without an explicit output the result sits
    next to the input with its .md suffix replaced by .html.
    """
    if not output:
        input_dir, input_file = os.path.split(input_path)
        if input_file.endswith(MARKDOWN_SUFFIX):
            input_file = input_file[: -len(MARKDOWN_SUFFIX)]
        output = os.path.join(input_dir, input_file + HTML_SUFFIX)
    return os.path.abspath(output)
