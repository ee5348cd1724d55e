"""
vocabsync/text.py

Normalization, escaping and quote/whitespace tolerant substring search.
"""

from __future__ import annotations
import html
import re

LOOSE_QUOTES_RE = re.compile(r"[“”\"’‘']")
LOOSE_PUNCT_RE  = re.compile(r"[.,!?;:()\[\]{}/\\]")
DOUBLE_QUOTES_RE = re.compile(r"[“”]")
SINGLE_QUOTES_RE = re.compile(r"[’‘]")
WS_RE = re.compile(r"\s+")

def normalize_loose(s: str) -> str:
    """Lowercase, one apostrophe for every quote, no punctuation, single spaces."""
    s = LOOSE_QUOTES_RE.sub("'", (s or "").lower())
    s = LOOSE_PUNCT_RE.sub("", s)
    return WS_RE.sub(" ", s).strip()

def normalize_search(s: str) -> str:
    """Like normalize_loose but keeps punctuation (used for containment checks)."""
    s = DOUBLE_QUOTES_RE.sub('"', (s or "").lower())
    s = SINGLE_QUOTES_RE.sub("'", s)
    return WS_RE.sub(" ", s).strip()

def _permissive_pattern(needle: str) -> re.Pattern:
    parts = []
    for chunk in re.split(r"(\s+)", needle.strip()):
        if not chunk:
            continue
        if chunk.isspace():
            parts.append(r"\s+")
            continue
        for ch in chunk:
            if ch in "\"“”":
                parts.append("[\"“”]")
            elif ch in "'’‘":
                parts.append("['’‘]")
            else:
                parts.append(re.escape(ch))
    return re.compile("".join(parts), re.IGNORECASE)

def find_normalized_span(haystack: str, needle: str) -> tuple[int, int] | None:
    """
    Locate `needle` in `haystack` ignoring case, quote style and whitespace runs.
    Returns the (start, end) slice of the ORIGINAL haystack, or None.
    """
    n = normalize_search(needle)
    if not n or n not in normalize_search(haystack):
        return None
    m = _permissive_pattern(needle).search(haystack)
    if not m:
        return None
    return m.start(), m.end()

def find_normalized_index(haystack: str, needle: str) -> int:
    span = find_normalized_span(haystack, needle)
    return span[0] if span else -1

def is_source_language(s: str) -> bool:
    """True when at least 60% of the non-space characters are ASCII letters."""
    total = len(WS_RE.sub("", s or ""))
    if not total:
        return False
    letters = len(re.sub(r"[^A-Za-z]", "", s))
    return letters / total >= 0.6

def escape_html(s: str) -> str:
    return html.escape(s or "", quote=True)
