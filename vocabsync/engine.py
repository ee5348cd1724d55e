"""
vocabsync/engine.py

Playback synchronizer. A UI layer drives it with three calls:

  engine.on_document_changed(text)   # user pasted/edited/loaded a note
  engine.on_time_tick(t)             # player time in seconds (≤ 1 Hz is plenty)
  engine.search(term)                # manual lookup

and shows `engine.display_html` (already escaped; render it as markup).

While playback moves forward the displayed section never moves back to an
earlier section unless no forward match exists. A backward jump of more than
SEEK_BACK_THRESHOLD seconds is treated as a seek and drops that floor.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from rapidfuzz import fuzz, process, utils

from vocabsync import config
from vocabsync.document import ParsedDocument, analyze
from vocabsync.errors import MatchNotFound
from vocabsync.log import info
from vocabsync.parse import first_idx_after
from vocabsync.render import render_context, render_section_at, render_section_for_line
from vocabsync.search import build_search_plan, find_best_hit, pick_best_glossary_line, tokens_from_sentence
from vocabsync.section import section_bounds


@dataclass
class EngineState:
    prev_time: float = 0.0
    last_section_start: Optional[int] = None
    display_html: str = ""
    next_idx: int = 0


class NoteEngine:
    def __init__(self, content: str = ""):
        self.state = EngineState()
        self.doc = ParsedDocument()
        self.on_document_changed(content)

    # ---------- Inputs ----------

    @property
    def content(self) -> str:
        return self.doc.content

    @property
    def display_html(self) -> str:
        return self.state.display_html

    def on_document_changed(self, text: str) -> None:
        self.doc = analyze(text or "")
        self.state.next_idx = first_idx_after(self.doc.entries, self.state.prev_time)
        self.state.display_html = ""
        self.state.last_section_start = None
        info(f"parsed: entries={len(self.doc.entries)} header_line={self.doc.header_idx} sections={len(self.doc.section_starts)}")

    def on_time_tick(self, t: float) -> str | None:
        """Follow playback. Returns the new HTML when a candidate was accepted, else None."""
        st = self.state
        prev = st.prev_time
        st.prev_time = t
        entries = self.doc.entries
        if not entries:
            return None

        if t < prev - config.SEEK_BACK_THRESHOLD:
            st.next_idx = first_idx_after(entries, t)
            st.last_section_start = None
            info(f"seek back {prev:.2f}s -> {t:.2f}s; section floor cleared")
            return None

        st.next_idx = first_idx_after(entries, t)
        j = max(0, min(st.next_idx - 1, len(entries) - 1))
        plan = build_search_plan(entries, j)
        if not plan:
            return None

        gs = self.doc.glossary_start
        floor = max(gs, st.last_section_start if st.last_section_start is not None else gs)
        for needle in plan:
            found = self._match(needle.search, needle.highlight, floor)
            if found:
                html, sec_start = found
                self._accept(html, sec_start)
                return html
        return None

    def search(self, term: str) -> str | None:
        """
        Manual lookup with the same pipeline, minus the forward floor.
        Blank terms are ignored; raises MatchNotFound (state untouched) on a miss.
        """
        term = (term or "").strip()
        if not term:
            return None
        found = self._match(term, term, None)
        if not found:
            raise MatchNotFound(term, self.suggest(term))
        html, sec_start = found
        self._accept(html, sec_start)
        return html

    def clear(self) -> None:
        self.on_document_changed("")

    # ---------- Matching ----------

    def _match(self, search: str, highlight: str, floor: int | None) -> tuple[str, int] | None:
        d = self.doc
        gs = d.glossary_start

        tokens = tokens_from_sentence(search)
        line = pick_best_glossary_line(tokens, d.glossary_index, floor)
        if line >= 0 and d.starts[line] >= gs:
            html, sec_start = render_section_for_line(d.content, d.starts, d.section_starts, line, highlight)
            if html:
                info(f"glossary line {line} -> section @{sec_start}")
                return html, sec_start

        hit = find_best_hit(d.content, gs, search, d.glossary_index, d.lines, d.starts, d.header_idx)
        if hit is None:
            return None

        html, sec_start = render_section_at(d.content, d.section_starts, hit.start, highlight)
        if html and (floor is None or sec_start >= floor):
            info(f"hit @{hit.start} -> section @{sec_start}")
            return html, sec_start

        html = render_context(d.content, d.lines, d.starts, d.header_idx, hit, highlight, d.section_starts)
        sec_start, _ = section_bounds(d.section_starts, hit.start, len(d.content))
        info(f"hit @{hit.start} -> context fallback, section @{sec_start}")
        return html, sec_start

    def _accept(self, html: str, section_start: int) -> None:
        self.state.display_html = html
        self.state.last_section_start = section_start

    def suggest(self, term: str) -> list[str]:
        """Closest glossary lines (rapidfuzz WRatio) for a term that matched nothing."""
        choices = [g.raw.strip() for g in self.doc.glossary_index]
        if not choices:
            return []
        found = process.extract(
            term, choices,
            scorer=fuzz.WRatio, processor=utils.default_process,
            limit=config.SUGGEST_LIMIT, score_cutoff=config.SUGGEST_CUTOFF,
        )
        return [choice for choice, _score, _idx in found]

    # ---------- Introspection ----------

    @property
    def debug_info(self) -> dict:
        n = len(self.doc.entries)
        return {
            "entries_count": n,
            "header_idx": self.doc.header_idx,
            "next_idx": min(self.state.next_idx, n),
            "sections_count": len(self.doc.section_starts),
        }

    @property
    def empty_text(self) -> str:
        if not self.content.strip():
            return f"No content yet. Paste a transcript followed by {config.GLOSSARY_SENTINEL} (or Key Vocabulary)."
        if not self.state.display_html:
            return "Nothing matched yet. Play the video or use Search to show a related passage."
        return ""
