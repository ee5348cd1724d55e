"""
vocabsync/section.py

Section boundaries ("46." lines and divider rules) and offset → line/section lookups.
"""

from __future__ import annotations
from dataclasses import dataclass

from vocabsync.config import SECTION_DIVIDER_RE, SECTION_HEADER_RE


@dataclass(frozen=True)
class SectionStart:
    line: int
    pos: int


def is_section_boundary(line: str) -> bool:
    return bool(SECTION_HEADER_RE.match(line) or SECTION_DIVIDER_RE.match(line))

def compute_section_starts(lines: list[str], starts: list[int]) -> list[SectionStart]:
    return [SectionStart(line=i, pos=starts[i]) for i, ln in enumerate(lines) if is_section_boundary(ln)]

def line_index_for_pos(starts: list[int], lines: list[str], pos: int) -> int:
    """Line containing `pos`; the trailing newline belongs to its line."""
    lo, hi, ans = 0, len(starts) - 1, 0
    while lo <= hi:
        mid = (lo + hi) // 2
        start = starts[mid]
        end = start + len(lines[mid]) + 1
        if start <= pos < end:
            return mid
        if pos < start:
            hi = mid - 1
        else:
            ans = mid
            lo = mid + 1
    return ans

def section_bounds(section_starts: list[SectionStart], anchor_pos: int, total_len: int) -> tuple[int, int]:
    """(start, end) of the section holding anchor_pos; whole document without boundaries."""
    start = 0
    end = section_starts[0].pos if section_starts else total_len
    for i, s in enumerate(section_starts):
        if s.pos > anchor_pos:
            break
        start = s.pos
        end = section_starts[i + 1].pos if i + 1 < len(section_starts) else total_len
    return start, end

def section_bounds_for_line(starts: list[int], section_starts: list[SectionStart], line_idx: int, total_len: int) -> tuple[int, int]:
    pos = starts[max(0, min(line_idx, len(starts) - 1))] if starts else 0
    return section_bounds(section_starts, pos, total_len)
