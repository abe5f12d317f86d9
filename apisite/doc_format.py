"""Formatting of documentation comments into HTML."""

import html
import re

import markdown

from apisite.highlight import highlight_snippet

# <code>...</code> blocks are highlighted, <pre>...</pre> blocks kept verbatim.
CODE_BLOCK_RE = re.compile(r"<(code|pre)>(.+?)</\1>", re.DOTALL)
PARAGRAPH_RE = re.compile(r"^<p>(.*)</p>$", re.DOTALL)

MARKDOWN_EXTENSIONS = ["tables", "sane_lists"]


def _render(text: str) -> str:
    """Run Markdown over escaped text, protecting code blocks."""
    blocks: list[str] = []

    def stash(m: re.Match[str]) -> str:
        body = m.group(2).strip("\n")
        if m.group(1) == "code":
            content = highlight_snippet(body)
        else:
            content = html.escape(body)
        blocks.append(f"<pre>{content}</pre>")
        return f"\n\nAPISITEBLOCK{len(blocks) - 1}\n\n"

    text = CODE_BLOCK_RE.sub(stash, text)
    escaped = html.escape(text, quote=False)
    out = markdown.markdown(escaped, extensions=MARKDOWN_EXTENSIONS)
    for i, block in enumerate(blocks):
        out = out.replace(f"<p>APISITEBLOCK{i}</p>", block)
    return out


def docblock(text: str | None) -> str:
    """Format a multi-paragraph description."""
    if not text:
        return ""
    return _render(text)


def docline(text: str | None) -> str:
    """Format a one-line description without the paragraph wrapper."""
    if not text:
        return ""
    out = _render(text.strip())
    m = PARAGRAPH_RE.match(out)
    if m and "<p>" not in m.group(1):
        return m.group(1)
    return out


def short_description(annotations: dict[str, str]) -> str:
    """The first paragraph of a documentation comment."""
    return annotations.get("short_description", "")


def long_description(annotations: dict[str, str]) -> str:
    """The short description followed by the long one, if any."""
    short = annotations.get("short_description", "")
    long = annotations.get("long_description", "")
    if long:
        return f"{short}\n\n{long}"
    return short
