"""
vocabsync/search.py

Glossary line index, token-overlap scoring, sentence reconstruction across
caption lines, and the staged hit resolver.

Captions are chunked by time, glossaries explain whole sentences. A search plan
therefore carries two strings per candidate:
  highlight  the part actually spoken on the active line (what gets marked)
  search     the reconstructed sentence it belongs to (what gets located)
"""

from __future__ import annotations
from dataclasses import dataclass

from vocabsync import config
from vocabsync.config import SENTENCE_END_RE
from vocabsync.parse import TranscriptEntry
from vocabsync.text import find_normalized_span, normalize_loose, normalize_search


@dataclass(frozen=True)
class GlossaryLine:
    line: int
    start: int
    end: int
    raw: str
    norm: str


@dataclass(frozen=True)
class SearchNeedle:
    highlight: str
    search: str


@dataclass(frozen=True)
class Hit:
    start: int
    end: int


# ---------------- Glossary index / scoring ----------------

def build_glossary_index(lines: list[str], starts: list[int], header_idx: int) -> list[GlossaryLine]:
    begin = header_idx + 1 if header_idx >= 0 else len(lines)
    out = []
    for i in range(begin, len(lines)):
        raw = lines[i]
        if not raw.strip():
            continue
        out.append(GlossaryLine(line=i, start=starts[i], end=starts[i] + len(raw), raw=raw, norm=normalize_loose(raw)))
    return out

def tokens_from_sentence(s: str) -> list[str]:
    toks = [w for w in normalize_search(s).split(" ") if len(w) >= config.MIN_TOKEN_LEN]
    return toks[:config.MAX_TOKENS]

def overlap_score(tokens: list[str], norm: str) -> int:
    return sum(1 for t in tokens if t in norm)

def _best_glossary_entry(tokens: list[str], glossary_index: list[GlossaryLine], min_start: int | None = None) -> GlossaryLine | None:
    # strict ">" keeps the earliest line among equal scores
    best, best_score = None, 0
    if not tokens:
        return None
    for g in glossary_index:
        if min_start is not None and g.start < min_start:
            continue
        sc = overlap_score(tokens, g.norm)
        if sc > best_score:
            best, best_score = g, sc
    return best

def pick_best_glossary_line(tokens: list[str], glossary_index: list[GlossaryLine], min_start: int | None = None) -> int:
    """Line index of the best-scoring glossary line at/after min_start, or -1."""
    best = _best_glossary_entry(tokens, glossary_index, min_start)
    return best.line if best else -1

# ---------------- Sentence reconstruction ----------------

def ends_sentence(s: str) -> bool:
    s = s.rstrip()
    return bool(s) and s[-1] in ".!?"

def split_sentences(s: str) -> list[str]:
    """Split after every . ? ! (kept); an unterminated remainder is the last item."""
    out, acc = [], ""
    for ch in s:
        acc += ch
        if ch in ".!?":
            if acc.strip():
                out.append(acc.strip())
            acc = ""
    if acc.strip():
        out.append(acc.strip())
    return out

def previous_sentence(entries: list[TranscriptEntry], idx: int, fragment: str, max_back: int | None = None) -> str:
    """
    `fragment` closes a sentence that started on earlier lines. Walk back until a
    line holding a terminator (or the budget runs out) and return the full sentence.
    """
    if max_back is None:
        max_back = config.MAX_BACK_LINES
    buf = fragment.strip()
    i = idx - 1
    while i >= 0 and idx - i <= max_back:
        prev = entries[i].text
        buf = f"{prev} {buf}".strip()
        if SENTENCE_END_RE.search(prev):
            break
        i -= 1
    sentences = split_sentences(buf)
    if not sentences:
        return ""
    last = sentences[-1]
    if ends_sentence(last):
        return last
    return sentences[-2] if len(sentences) >= 2 else last

def complete_sentence_forward(entries: list[TranscriptEntry], idx: int, head: str, max_forward: int | None = None) -> str:
    """Extend an unterminated `head` with the following lines until a sentence closes."""
    if max_forward is None:
        max_forward = config.MAX_FORWARD_LINES
    acc = head.strip()
    if ends_sentence(acc):
        return acc
    for i in range(idx + 1, min(len(entries), idx + 1 + max_forward)):
        acc = f"{acc} {entries[i].text.strip()}".strip()
        if SENTENCE_END_RE.search(acc):
            break
    parts = split_sentences(acc)
    return parts[0] if parts else acc

def build_search_plan(entries: list[TranscriptEntry], idx: int) -> list[SearchNeedle]:
    """Ordered candidates for the active caption line `idx`."""
    if not 0 <= idx < len(entries):
        return []
    min_len = config.MIN_SEARCH_LEN
    line = entries[idx].text
    segs = split_sentences(line)
    plan: list[SearchNeedle] = []
    if not segs:
        return plan

    first = segs[0]
    if ends_sentence(first) and len(first.strip()) >= min_len:
        full = previous_sentence(entries, idx, first)
        plan.append(SearchNeedle(highlight=first, search=full or first))

    for sent in segs[1:]:
        if ends_sentence(sent) and len(sent.strip()) >= min_len:
            plan.append(SearchNeedle(highlight=sent, search=sent))

    tail = segs[-1]
    if not ends_sentence(tail) and len(tail.strip()) >= min_len:
        completed = complete_sentence_forward(entries, idx, tail)
        plan.append(SearchNeedle(highlight=tail.strip(), search=completed.strip()))

    if not plan and len(line.strip()) >= min_len:
        plan.append(SearchNeedle(highlight=line.strip(), search=line.strip()))
    return plan

# ---------------- Hit resolver ----------------

def find_best_hit(
    content: str,
    glossary_start: int,
    needle: str,
    glossary_index: list[GlossaryLine],
    lines: list[str],
    starts: list[int],
    header_idx: int,
) -> Hit | None:
    """
    Stages, first success wins:
      1. normalized substring inside the glossary region
      2. token overlap over glossary lines
      3. normalized substring anywhere
      4. token overlap over transcript lines (only when a header exists)
    """
    if not needle.strip():
        return None

    region_start = max(0, glossary_start)
    span = find_normalized_span(content[region_start:], needle)
    if span:
        return Hit(region_start + span[0], region_start + span[1])

    tokens = tokens_from_sentence(needle)
    best = _best_glossary_entry(tokens, glossary_index)
    if best:
        return Hit(best.start, best.end)

    span = find_normalized_span(content, needle)
    if span:
        return Hit(*span)

    if header_idx >= 0 and tokens:
        best_line, best_score = -1, 0
        for i in range(header_idx):
            sc = overlap_score(tokens, normalize_loose(lines[i]))
            if sc > best_score:
                best_line, best_score = i, sc
        if best_line >= 0:
            return Hit(starts[best_line], starts[best_line] + len(lines[best_line]))
    return None
