"""
vocabsync/parse.py

Document → lines with start offsets, glossary header location, transcript entries.

Accepted transcript lines (before the glossary header):
  00:00:02 - I am starting to get nervous
  1:02:03 – caption
  02:03 caption
Anything else before the header is ignored; partial documents are normal.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from vocabsync.config import GLOSSARY_HEADER_RE, GLOSSARY_SENTINEL, TIMESTAMP_LINE_RE


@dataclass(frozen=True)
class TranscriptEntry:
    seconds: float
    text: str


def time_to_sec(s: str) -> float:
    """'01:02:03' → 3723, '02:03' → 123, anything else → nan."""
    try:
        parts = [float(p) for p in s.strip().split(":")]
    except ValueError:
        return math.nan
    if len(parts) == 2:
        return parts[0] * 60 + parts[1]
    if len(parts) == 3:
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    return math.nan

def compute_lines(content: str) -> tuple[list[str], list[int]]:
    """
    Split on '\\n' (dropping a trailing '\\r') and record each line's start offset.
    Always ends with a line starting at len(content), possibly empty.
    """
    lines: list[str] = []
    starts: list[int] = []
    pos = 0
    while True:
        starts.append(pos)
        nl = content.find("\n", pos)
        if nl == -1:
            lines.append(content[pos:].removesuffix("\r"))
            break
        lines.append(content[pos:nl].removesuffix("\r"))
        pos = nl + 1
    return lines, starts

def is_glossary_header_line(line: str) -> bool:
    if GLOSSARY_SENTINEL in line:
        return True
    return GLOSSARY_HEADER_RE.search(line) is not None

def locate_glossary(content: str) -> tuple[list[str], list[int], int, int]:
    """Return (lines, starts, header_idx, glossary_start); header_idx is -1 when absent."""
    lines, starts = compute_lines(content)
    header_idx = next((i for i, ln in enumerate(lines) if is_glossary_header_line(ln)), -1)
    if header_idx >= 0 and header_idx + 1 < len(starts):
        glossary_start = starts[header_idx + 1]
    else:
        glossary_start = len(content)
    return lines, starts, header_idx, glossary_start

def parse_transcript(lines: list[str], header_idx: int) -> list[TranscriptEntry]:
    end = header_idx if header_idx >= 0 else len(lines)
    entries = []
    for raw in lines[:end]:
        m = TIMESTAMP_LINE_RE.match(raw)
        if not m:
            continue
        t = time_to_sec(m.group(1))
        txt = (m.group(2) or "").strip()
        if not math.isfinite(t) or not txt:
            continue
        entries.append(TranscriptEntry(seconds=t, text=txt))
    return entries

def first_idx_after(entries: list[TranscriptEntry], t: float) -> int:
    """Index of the first entry with seconds > t (entries taken in parsed order)."""
    lo, hi = 0, len(entries)
    while lo < hi:
        mid = (lo + hi) // 2
        if entries[mid].seconds > t:
            hi = mid
        else:
            lo = mid + 1
    return lo
