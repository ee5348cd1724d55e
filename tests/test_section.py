from vocabsync.parse import compute_lines
from vocabsync.section import (
    SectionStart,
    compute_section_starts,
    line_index_for_pos,
    section_bounds,
    section_bounds_for_line,
)


def test_section_boundaries():
    lines = ["intro", "46.", "  12.  ", "------", "────────", "abc.", "12. text", "-----"]
    starts = list(range(0, 10 * len(lines), 10))
    found = compute_section_starts(lines, starts)
    assert [s.line for s in found] == [1, 2, 3, 4]
    assert found[0] == SectionStart(line=1, pos=10)


def test_section_bounds_without_boundaries():
    assert section_bounds([], 42, 100) == (0, 100)


def test_section_bounds():
    secs = [SectionStart(1, 10), SectionStart(3, 20)]
    assert section_bounds(secs, 10, 100) == (10, 20)
    assert section_bounds(secs, 15, 100) == (10, 20)
    assert section_bounds(secs, 25, 100) == (20, 100)
    # text before the first boundary is its own section
    assert section_bounds(secs, 5, 100) == (0, 10)


def test_line_index_for_pos():
    lines, starts = compute_lines("ab\ncd\n")
    assert line_index_for_pos(starts, lines, 0) == 0
    assert line_index_for_pos(starts, lines, 2) == 0  # the newline
    assert line_index_for_pos(starts, lines, 3) == 1
    assert line_index_for_pos(starts, lines, 6) == 2
    assert line_index_for_pos(starts, lines, 100) == 2


def test_section_bounds_for_line(lesson_doc, section_offsets):
    lines, starts = compute_lines(lesson_doc)
    secs = compute_section_starts(lines, starts)
    line_of_quote2 = lines.index("\"I need a deep breath.\" Tôi cần hít thở sâu.")
    assert section_bounds_for_line(starts, secs, line_of_quote2, len(lesson_doc)) == (section_offsets[2], section_offsets[3])
