"""Syntax highlighting for source mirrors and code samples."""

import re

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import PhpLexer, get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound

DEFAULT_LANGUAGE = "php"

LINE_ANCHOR_PREFIX = "L"
# Source links end in "#<line>", so anchors drop the formatter's "L-" prefix.
LINE_ANCHOR_RE = re.compile(rf'"(#?){LINE_ANCHOR_PREFIX}-(\d+)"')


def lexer_for(
    filename: str | None = None,
    language: str = DEFAULT_LANGUAGE,
    startinline: bool = False,
) -> Lexer:
    """Pick a lexer by file name, falling back to ``language``.

    ``startinline`` lexes code that lacks an opening ``<?php`` tag.
    """
    if filename:
        try:
            return get_lexer_for_filename(filename, startinline=startinline)
        except ClassNotFound:
            pass
    try:
        return get_lexer_by_name(language, startinline=startinline)
    except ClassNotFound:
        return PhpLexer(startinline=startinline)


def highlight_source(code: str, filename: str | None = None) -> str:
    """Highlight a whole file; line N is reachable as ``#N``."""
    formatter = HtmlFormatter(
        linenos="inline",
        lineanchors=LINE_ANCHOR_PREFIX,
        anchorlinenos=True,
        cssclass="source",
    )
    html = highlight(code, lexer_for(filename), formatter)
    return LINE_ANCHOR_RE.sub(r'"\1\2"', html)


def highlight_snippet(code: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Highlight a short fragment without the wrapping block."""
    formatter = HtmlFormatter(nowrap=True)
    lexer = lexer_for(None, language, startinline=True)
    return highlight(code, lexer, formatter).rstrip("\n")


def highlight_css() -> str:
    """Stylesheet for the classes emitted by ``highlight_source``."""
    return HtmlFormatter().get_style_defs(".source")
