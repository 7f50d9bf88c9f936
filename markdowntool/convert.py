#!/usr/bin/env python3
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from markdowntool.errors import ReadError, WriteError
from markdowntool.paths import MARKDOWN_SUFFIX, clean_path, output_file_path
from markdowntool.render import RenderOptions, render_file_contents

# -rw-r--r--, the usual mode for files served by a web server
OUTPUT_MODE = 0o644


@dataclass
class ConversionResult:
    input_path: str
    output_path: str
    bytes_written: int


def read_input(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ReadError(f"Could not read {path}: {e.strerror or e}") from e


def write_output(path: str, data: bytes, mode: int = OUTPUT_MODE) -> None:
    try:
        Path(path).write_bytes(data)
        os.chmod(path, mode)
    except OSError as e:
        raise WriteError(f"Could not write {path}: {e.strerror or e}") from e


def convert(
    input_path: Optional[str],
    output_path: Optional[str] = None,
    options: Optional[RenderOptions] = None,
) -> ConversionResult:
    """
    Convert one Markdown file to HTML.

    The input must end in ".md"; a leading "~" is expanded. Without an explicit
    output path the HTML lands next to the input. Raises a MarkdownToolError
    subclass on bad paths, unreadable input or a failed write.
    """
    src = clean_path(input_path)
    dst = output_file_path(output_path, src)

    raw = read_input(src)
    stem = os.path.basename(src)[: -len(MARKDOWN_SUFFIX)] or os.path.basename(src)
    body = render_file_contents(raw, options, fallback_title=stem)

    print(f"Converting {os.path.basename(src)}. Output is located at {dst}")
    write_output(dst, body)
    return ConversionResult(input_path=src, output_path=dst, bytes_written=len(body))
