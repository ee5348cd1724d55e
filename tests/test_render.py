from vocabsync.parse import locate_glossary
from vocabsync.render import (
    find_all_hits,
    highlight_all,
    mark_head,
    render_context,
    render_section,
    split_first_quote,
    split_section_at_header,
    strip_divider_lines,
)
from vocabsync.search import Hit
from vocabsync.section import compute_section_starts


def test_highlight_only_inside_quoted_head():
    raw = "He said \"I am fine.\"\n:::VOCAB:::\nTôi khỏe: I'm fine"
    html = render_section(raw, "I am fine")
    assert html == "He said &quot;<mark>I am fine</mark>.&quot;\nTôi khỏe: I&#x27;m fine"


def test_body_is_never_highlighted():
    raw = "He said \"I am fine.\"\n:::VOCAB:::\nTôi khỏe: I'm fine"
    html = render_section(raw, "I'm fine")
    assert "<mark>" not in html
    assert html.endswith("Tôi khỏe: I&#x27;m fine")


def test_section_without_header_is_not_renderable():
    assert render_section("1.\n\"Hello.\"\nHello: xin chào", "Hello") is None


def test_divider_lines_are_stripped():
    raw = "──────\n46.\n\"Hi there.\"\nKey Vocabulary:\nHi: chào\n──────"
    assert strip_divider_lines(raw) == "46.\n\"Hi there.\"\nKey Vocabulary:\nHi: chào"
    html = render_section(raw, "Hi there")
    assert html == "46.\n&quot;<mark>Hi there</mark>.&quot;\nHi: chào"


def test_split_section_at_header():
    assert split_section_at_header("head text\n- Key Vocabulary:\nTerm: x\n") == ("head text", "Term: x\n")
    assert split_section_at_header("head\n• :::VOCAB:::\nbody") == ("head", "body")
    assert split_section_at_header("nothing here") is None
    assert split_section_at_header("") is None


def test_split_first_quote():
    assert split_first_quote('a “b c” d') == ("a ", "“", "b c", "”", " d")
    assert split_first_quote("no quotes") is None
    assert split_first_quote('only "open') is None


def test_unquoted_head_highlights_when_english():
    html = render_section("I am fine today\nKey Vocabulary:\nfine: khỏe", "fine today")
    assert html == "I am <mark>fine today</mark>\nfine: khỏe"


def test_translated_head_is_left_alone():
    assert render_section("こんにちは\n:::VOCAB:::\nhello", "こんにちは") == "こんにちは\nhello"


def test_mark_head_without_fragment_only_escapes():
    assert mark_head('say "a & b"') == "say &quot;a &amp; b&quot;"


def test_context_fallback_marks_the_hit(nervous_doc):
    lines, starts, header_idx, _ = locate_glossary(nervous_doc)
    secs = compute_section_starts(lines, starts)
    start = nervous_doc.index("I am starting to get nervous.\"")
    hit = Hit(start, start + 29)
    html = render_context(nervous_doc, lines, starts, header_idx, hit, "I am starting to get nervous.", secs)
    assert html == "1.\n&quot;<mark>I am starting to get nervous.</mark>&quot;\nNervous: lo lắng"


def test_context_fallback_without_fragment_is_plain(nervous_doc):
    lines, starts, header_idx, _ = locate_glossary(nervous_doc)
    secs = compute_section_starts(lines, starts)
    start = nervous_doc.index("Nervous:")
    html = render_context(nervous_doc, lines, starts, header_idx, Hit(start, start + 7), "zzz", secs)
    assert "<mark>" not in html
    assert html.startswith("1.\n&quot;I am starting")


def test_context_window_is_bounded():
    doc = ":::VOCAB:::\n" + "\n".join(f"line {i}" for i in range(20))
    lines, starts, header_idx, _ = locate_glossary(doc)
    hit_line = lines.index("line 10")
    html = render_context(doc, lines, starts, header_idx, Hit(starts[hit_line], starts[hit_line] + 7), None, [], up=2, down=3)
    assert html == "line 8\nline 9\nline 10\nline 11\nline 12\nline 13"


def test_find_all_hits_and_highlight_all():
    assert find_all_hits("Aa aA", "aa") == [(0, 2), (3, 5)]
    assert find_all_hits("abc", "  ") == []
    assert highlight_all("a<b a", "a", active=1) == '<mark>a</mark>&lt;b <mark class="active">a</mark>'
