"""
vocabsync/render.py

Section → HTML.

A glossary section looks like

  46.
  "I am starting to get nervous." Tôi bắt đầu thấy lo.
  Key Vocabulary:
  Nervous: lo lắng

The part above the header (the head) holds the spoken English line and may be
highlighted; everything below it (the body) is translation/explanation and is
only ever escaped.
"""

from __future__ import annotations
import re

from vocabsync import config
from vocabsync.config import GLOSSARY_HEADER_RE, GLOSSARY_SENTINEL_LINE_RE, LEADING_DIVIDERS_RE, TRAILING_DIVIDERS_RE
from vocabsync.search import Hit
from vocabsync.section import SectionStart, line_index_for_pos, section_bounds, section_bounds_for_line
from vocabsync.text import escape_html, find_normalized_span, is_source_language

MARK_OPEN, MARK_CLOSE = "<mark>", "</mark>"

def strip_divider_lines(s: str) -> str:
    s = LEADING_DIVIDERS_RE.sub("", s)
    return TRAILING_DIVIDERS_RE.sub("", s)

def split_first_quote(head: str) -> tuple[str, str, str, str, str] | None:
    """(pre, open, inner, close, post) around the first "…" / “…” span."""
    m = re.search(r"[\"“]", head)
    if not m:
        return None
    open_idx = m.start()
    c = re.search(r"[\"”]", head[open_idx + 1:])
    if not c:
        return None
    close_idx = open_idx + 1 + c.start()
    return (head[:open_idx], head[open_idx], head[open_idx + 1:close_idx], head[close_idx], head[close_idx + 1:])

def _mark_span(container: str, span: tuple[int, int]) -> str:
    a, b = span
    return escape_html(container[:a]) + MARK_OPEN + escape_html(container[a:b]) + MARK_CLOSE + escape_html(container[b:])

def _paint(container: str, fragment: str | None) -> str:
    if not fragment:
        return escape_html(container)
    if not is_source_language(fragment) and not is_source_language(container):
        return escape_html(container)
    span = find_normalized_span(container, fragment)
    if not span:
        return escape_html(container)
    return _mark_span(container, span)

def mark_head(head: str, fragment: str | None = None) -> str:
    """Highlight `fragment` inside the first quoted span of the head (or the head itself)."""
    if not head:
        return ""
    q = split_first_quote(head)
    if q:
        pre, open_q, inner, close_q, post = q
        return escape_html(pre) + escape_html(open_q) + _paint(inner, fragment) + escape_html(close_q) + escape_html(post)
    return _paint(head, fragment)

def split_section_at_header(section_text: str) -> tuple[str, str] | None:
    """(before, after) around the glossary header line; None when the slice has no header."""
    if not section_text:
        return None
    m = GLOSSARY_SENTINEL_LINE_RE.search(section_text) or GLOSSARY_HEADER_RE.search(section_text)
    if not m:
        return None
    before = section_text[:m.start()].rstrip()
    after = section_text[m.end():]
    if after.startswith("\r\n"):
        after = after[2:]
    elif after.startswith("\n"):
        after = after[1:]
    return before, after

def render_section(raw_section: str, fragment: str | None = None) -> str | None:
    """Head (highlighted) + newline + body (escaped). None: no header in this slice."""
    split = split_section_at_header(strip_divider_lines(raw_section))
    if split is None:
        return None
    before, body = split
    head = before.strip()
    head_html = mark_head(head, fragment) + "\n" if head else ""
    return head_html + escape_html(body)

def render_section_at(content: str, section_starts: list[SectionStart], anchor_pos: int, fragment: str | None = None) -> tuple[str | None, int]:
    start, end = section_bounds(section_starts, anchor_pos, len(content))
    return render_section(content[start:end], fragment), start

def render_section_for_line(content: str, starts: list[int], section_starts: list[SectionStart], line_idx: int, fragment: str | None = None) -> tuple[str | None, int]:
    start, end = section_bounds_for_line(starts, section_starts, line_idx, len(content))
    return render_section(content[start:end], fragment), start

def render_context(
    content: str,
    lines: list[str],
    starts: list[int],
    header_idx: int,
    hit: Hit,
    fragment: str | None = None,
    section_starts: list[SectionStart] | None = None,
    up: int | None = None,
    down: int | None = None,
) -> str:
    """A few lines around the hit, clamped to its section; best-effort highlight."""
    up = config.CONTEXT_LINES_UP if up is None else up
    down = config.CONTEXT_LINES_DOWN if down is None else down
    last = len(lines) - 1
    hit_line = line_index_for_pos(starts, lines, hit.start)
    glossary_first = header_idx + 1 if header_idx >= 0 else 0
    # transcript-side hits are not pushed into the glossary
    floor_line = glossary_first if hit_line >= glossary_first else 0
    from_line = min(last, max(floor_line, hit_line - up))
    to_line = min(last, hit_line + down)

    if section_starts:
        sec_start, sec_end = section_bounds_for_line(starts, section_starts, hit_line, len(content))
        from_line = max(from_line, line_index_for_pos(starts, lines, sec_start))
        to_line = min(to_line, line_index_for_pos(starts, lines, max(sec_start, sec_end - 1)))
    to_line = max(to_line, from_line)

    snippet = content[starts[from_line]:starts[to_line] + len(lines[to_line])]

    full = render_section(snippet, fragment)
    if full:
        return full

    if fragment:
        split = split_section_at_header(snippet)
        head_part, body_part = split if split else (snippet, "")
        span = find_normalized_span(head_part, fragment)
        if span:
            body_html = "\n" + escape_html(body_part) if body_part else ""
            return _mark_span(head_part, span) + body_html

    return escape_html(snippet)

# ---------------- Edit-mode find-all ----------------

def find_all_hits(text: str, term: str) -> list[tuple[int, int]]:
    if not term.strip():
        return []
    return [(m.start(), m.end()) for m in re.finditer(re.escape(term), text, re.IGNORECASE)]

def highlight_all(text: str, term: str, active: int = -1) -> str:
    """Escaped text with every occurrence of term marked; hit #active gets class="active"."""
    out, pos = [], 0
    for i, (a, b) in enumerate(find_all_hits(text, term)):
        out.append(escape_html(text[pos:a]))
        open_tag = '<mark class="active">' if i == active else MARK_OPEN
        out.append(open_tag + escape_html(text[a:b]) + MARK_CLOSE)
        pos = b
    out.append(escape_html(text[pos:]))
    return "".join(out)
