"""
Minimal Markdown to HTML renderer.

Supported: headings, bold/italic, inline and fenced code, flat lists, links,
paragraphs. All literal text is HTML-escaped exactly once; the only tags in the
output are the ones produced here.
"""

import re
from enum import Enum

# Control characters reserved for placeholder tokens, removed from input
_BLOCK_MARK = "\x00"
_INLINE_MARK = "\x01"

_FENCE_RE = re.compile(r"```([\s\S]*?)```")
# A lone word on the opening line is the language tag
_FENCE_INFO_RE = re.compile(r"^([A-Za-z0-9_+#.-]+)?[ \t]*\n")
_BLOCK_TOKEN_RE = re.compile(_BLOCK_MARK + r"CODEBLOCK_(\d+)" + _BLOCK_MARK)
_INLINE_TOKEN_RE = re.compile(_INLINE_MARK + r"(\d+)" + _INLINE_MARK)

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_BULLET_RE = re.compile(r"^[-*]\s+(.*)$")
_NUMBERED_RE = re.compile(r"^\d+\.\s+(.*)$")

_CODE_SPAN_RE = re.compile(r"`([^`]+)`")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC_RE = re.compile(r"\*([^*]+)\*")


class _ListState(Enum):
    NONE = ""
    UNORDERED = "ul"
    ORDERED = "ol"


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters."""
    return (
        str(text)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def _emphasis(text: str) -> str:
    # Bold first so that **x** is never split into two italics
    text = _BOLD_RE.sub(lambda m: f"<b>{m.group(1)}</b>", text)
    return _ITALIC_RE.sub(lambda m: f"<i>{m.group(1)}</i>", text)


def render_inline(text: str) -> str:
    """
    Render inline Markdown for a single line of text.

    Order: escape, code spans, links, bold, italic. Code spans and finished
    links are parked behind tokens so later patterns cannot reach into them.
    """
    held: list[tuple[str, str]] = []  # (html, escaped source)

    def hold(html: str, source: str) -> str:
        held.append((html, source))
        return f"{_INLINE_MARK}{len(held) - 1}{_INLINE_MARK}"

    def restore(value: str, as_source: bool = False) -> str:
        slot = 1 if as_source else 0
        return _INLINE_TOKEN_RE.sub(lambda m: held[int(m.group(1))][slot], value)

    out = escape_html(text)
    out = _CODE_SPAN_RE.sub(lambda m: hold(f"<code>{m.group(1)}</code>", m.group(0)), out)

    def link(match: re.Match) -> str:
        label = restore(_emphasis(match.group(1)))
        url = restore(match.group(2), as_source=True)
        anchor = f'<a href="{url}" target="_blank" rel="noopener noreferrer">{label}</a>'
        return hold(anchor, match.group(0))

    out = _LINK_RE.sub(link, out)
    out = _emphasis(out)
    return restore(out)


def _extract_code_blocks(text: str) -> tuple[str, list[str]]:
    blocks: list[str] = []

    def stash(match: re.Match) -> str:
        code = match.group(1)
        css = ""
        info = _FENCE_INFO_RE.match(code)
        if info:
            if info.group(1):
                css = f' class="language-{escape_html(info.group(1))}"'
            code = code[info.end():]
        blocks.append(f"<pre><code{css}>{escape_html(code)}</code></pre>")
        return f"{_BLOCK_MARK}CODEBLOCK_{len(blocks) - 1}{_BLOCK_MARK}"

    return _FENCE_RE.sub(stash, text), blocks


def _render_text(line: str, blocks: list[str]) -> str:
    """Inline-render a line, splicing stored code blocks back in verbatim."""
    # Text either side of a block is rendered separately, so emphasis cannot span it
    parts = _BLOCK_TOKEN_RE.split(line)
    # re.split with one group alternates text, index, text, ...
    rendered = []
    for i, part in enumerate(parts):
        if i % 2:
            rendered.append(blocks[int(part)])
        elif part:
            rendered.append(render_inline(part))
    return "".join(rendered)


def _switch_list(state: _ListState, target: _ListState, out: list[str]) -> _ListState:
    if state is target:
        return state
    if state is not _ListState.NONE:
        out.append(f"</{state.value}>")
    if target is not _ListState.NONE:
        out.append(f"<{target.value}>")
    return target


def render_markdown(text: str | None) -> str:
    """Render Markdown text to an HTML fragment. Never raises."""
    src = str(text or "").replace("\r\n", "\n").replace("\r", "\n")
    src = src.replace(_BLOCK_MARK, "").replace(_INLINE_MARK, "")

    src, blocks = _extract_code_blocks(src)

    out: list[str] = []
    state = _ListState.NONE

    for raw_line in src.split("\n"):
        line = raw_line.rstrip()

        if not line.strip():
            state = _switch_list(state, _ListState.NONE, out)
            continue

        token = _BLOCK_TOKEN_RE.fullmatch(line.strip())
        if token:
            state = _switch_list(state, _ListState.NONE, out)
            out.append(blocks[int(token.group(1))])
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            state = _switch_list(state, _ListState.NONE, out)
            level = len(heading.group(1))
            out.append(f"<h{level}>{_render_text(heading.group(2), blocks)}</h{level}>")
            continue

        bullet = _BULLET_RE.match(line)
        if bullet:
            state = _switch_list(state, _ListState.UNORDERED, out)
            out.append(f"<li>{_render_text(bullet.group(1), blocks)}</li>")
            continue

        numbered = _NUMBERED_RE.match(line)
        if numbered:
            state = _switch_list(state, _ListState.ORDERED, out)
            out.append(f"<li>{_render_text(numbered.group(1), blocks)}</li>")
            continue

        state = _switch_list(state, _ListState.NONE, out)
        out.append(f"<p>{_render_text(line, blocks)}</p>")

    _switch_list(state, _ListState.NONE, out)
    return "\n".join(out)
