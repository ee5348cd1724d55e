"""Every structure derived from the raw document text, rebuilt together."""

from __future__ import annotations
from dataclasses import dataclass, field

from vocabsync.parse import TranscriptEntry, locate_glossary, parse_transcript
from vocabsync.search import GlossaryLine, build_glossary_index
from vocabsync.section import SectionStart, compute_section_starts


@dataclass(frozen=True)
class ParsedDocument:
    content: str = ""
    lines: list[str] = field(default_factory=lambda: [""])
    starts: list[int] = field(default_factory=lambda: [0])
    header_idx: int = -1
    glossary_start: int = 0
    entries: list[TranscriptEntry] = field(default_factory=list)
    glossary_index: list[GlossaryLine] = field(default_factory=list)
    section_starts: list[SectionStart] = field(default_factory=list)

    @property
    def has_glossary(self) -> bool:
        return self.header_idx >= 0


def analyze(content: str) -> ParsedDocument:
    lines, starts, header_idx, glossary_start = locate_glossary(content)
    return ParsedDocument(
        content=content,
        lines=lines,
        starts=starts,
        header_idx=header_idx,
        glossary_start=glossary_start,
        entries=parse_transcript(lines, header_idx),
        glossary_index=build_glossary_index(lines, starts, header_idx),
        section_starts=compute_section_starts(lines, starts),
    )
