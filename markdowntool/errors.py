from __future__ import annotations


class MarkdownToolError(Exception):
    """Base class for failures that end a conversion."""


class PathError(MarkdownToolError):
    pass


class ReadError(MarkdownToolError):
    pass


class WriteError(MarkdownToolError):
    pass
