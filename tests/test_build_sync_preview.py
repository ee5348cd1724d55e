import importlib.util
from pathlib import Path

from vocabsync.engine import NoteEngine

TOOL = Path(__file__).resolve().parents[1] / "tools" / "build_sync_preview.py"


def _load_tool():
    spec = importlib.util.spec_from_file_location("build_sync_preview", TOOL)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_cards_follow_display_changes(lesson_doc):
    tool = _load_tool()
    cards = tool.build_cards(NoteEngine(lesson_doc), 0, 10, 1)
    assert len(cards) == 3
    assert "t = 5.00s" in cards[1]
    assert "<mark>I need a deep breath.</mark>" in cards[1]


def test_shell_escapes_title():
    tool = _load_tool()
    page = tool.wrap_shell("a <b>", "<p>x</p>")
    assert "<title>a &lt;b&gt;</title>" in page
    assert "<p>x</p>" in page
