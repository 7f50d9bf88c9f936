#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Markdown -> HTML rendering with a fixed extension set.

Exports:
- EXTENSIONS / EXTENSION_CONFIGS / OUTPUT_FORMAT: the fixed renderer setup
- BackslashLineBreakExtension: a trailing "\\" becomes <br />
- RenderOptions: dataclass of renderer settings (with from_env for page wrapping)
- render_markdown(text, options): HTML body fragment
- document_title(body_html, fallback): text of the first <h1>
- wrap_document(body_html, title): standalone XHTML page
- render_file_contents(raw, options, fallback_title): bytes in, bytes out
"""

from __future__ import annotations

import html
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import markdown
from bs4 import BeautifulSoup
from markdown.extensions import Extension
from markdown.inlinepatterns import SubstituteTagInlineProcessor

# ---------------------------------------------------------------------------
# Fixed renderer setup
# ---------------------------------------------------------------------------

# A backslash that ends a line (and is not itself escaped)
BACKSLASH_BREAK_RE = r"(?<!\\)\\\n"


class BackslashLineBreakExtension(Extension):
    """Turn a trailing backslash into <br />, consuming the backslash."""

    def extendMarkdown(self, md):
        # ahead of the backslash-escape pattern (180) and nl2br (5)
        md.inlinePatterns.register(
            SubstituteTagInlineProcessor(BACKSLASH_BREAK_RE, "br"), "backslash_br", 185
        )


EXTENSIONS: List[str] = [
    "pymdownx.betterem",       # no intra-word emphasis
    "tables",
    "fenced_code",
    "pymdownx.magiclink",      # bare URLs become links
    "pymdownx.tilde",          # ~~strikethrough~~
    "attr_list",               # "# Title {#id}" sets the heading id
    "def_list",
    "markdowntool.render:BackslashLineBreakExtension",
    "nl2br",                   # every newline is a hard break
    "smarty",                  # quotes, ellipses, -- and --- dashes
    "pymdownx.smartsymbols",   # 1/2 -> fraction glyphs, (c) (r) (tm)
]

EXTENSION_CONFIGS: Dict[str, Dict[str, Any]] = {
    "pymdownx.betterem": {"smart_enable": "all"},
    "pymdownx.tilde": {"subscript": False},
    "smarty": {"smart_dashes": True, "smart_quotes": True, "smart_ellipses": True},
    "pymdownx.smartsymbols": {
        "fractions": True,
        "trademark": True,
        "copyright": True,
        "registered": True,
        "ordinal_numbers": False,
        "arrows": False,
        "plusminus": False,
        "notequal": False,
        "care_of": False,
    },
}

OUTPUT_FORMAT = "xhtml"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class RenderOptions:
    extensions: List[str] = field(default_factory=lambda: list(EXTENSIONS))
    extension_configs: Dict[str, Dict[str, Any]] = field(
        default_factory=lambda: {k: dict(v) for k, v in EXTENSION_CONFIGS.items()}
    )
    output_format: str = OUTPUT_FORMAT
    standalone: bool = False
    title: Optional[str] = None

    @staticmethod
    def from_env() -> "RenderOptions":
        standalone = os.environ.get("MARKDOWNTOOL_STANDALONE", "").strip().lower() in _TRUTHY
        title = os.environ.get("MARKDOWNTOOL_TITLE") or None
        return RenderOptions(standalone=standalone, title=title)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_markdown(text: str, options: Optional[RenderOptions] = None) -> str:
    opts = options or RenderOptions()
    # Markdown instances keep state (toc ids, footnotes); never share one.
    md = markdown.Markdown(
        extensions=opts.extensions,
        extension_configs=opts.extension_configs,
        output_format=opts.output_format,
    )
    return md.convert(text)


def document_title(body_html: str, fallback: str) -> str:
    soup = BeautifulSoup(body_html, "html.parser")
    h1 = soup.find("h1")
    if h1 is not None:
        text = h1.get_text(" ", strip=True)
        if text:
            return text
    return fallback


def wrap_document(body_html: str, title: str) -> str:
    """Wrap a rendered fragment in a minimal XHTML page with a UTF-8 charset."""
    return (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
        '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">\n'
        '<html xmlns="http://www.w3.org/1999/xhtml">\n'
        "<head>\n"
        '<meta charset="utf-8"/>\n'
        f"<title>{html.escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{body_html}\n"
        "</body>\n"
        "</html>\n"
    )


def render_file_contents(
    raw: bytes, options: Optional[RenderOptions] = None, fallback_title: str = ""
) -> bytes:
    opts = options or RenderOptions()
    text = raw.decode("utf-8-sig", errors="replace")
    body = render_markdown(text, opts)
    if opts.standalone:
        title = opts.title or document_title(body, fallback_title)
        body = wrap_document(body, title)
    return body.encode("utf-8")
