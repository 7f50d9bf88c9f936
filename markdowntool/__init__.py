"""Convert a single Markdown document into HTML."""

from markdowntool.convert import ConversionResult, convert
from markdowntool.errors import MarkdownToolError, PathError, ReadError, WriteError

__version__ = "1.0.0"

__all__ = [
    "ConversionResult",
    "MarkdownToolError",
    "PathError",
    "ReadError",
    "WriteError",
    "convert",
]
