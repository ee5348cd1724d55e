"""
vocabsync/config.py

Tunables and structural patterns for the sync engine.

Values come from the environment (a local .env is loaded first, silently
skipped if missing). Malformed numbers fall back to the defaults.

ENV (tunable):
  VOCABSYNC_SEEK_BACK_THRESHOLD=1.5   # seconds; a larger backward jump is a seek
  VOCABSYNC_MIN_SEARCH_LEN=3          # shortest fragment worth searching ("joy.")
  VOCABSYNC_CONTEXT_LINES_UP=4
  VOCABSYNC_CONTEXT_LINES_DOWN=6
  VOCABSYNC_MAX_TOKENS=8
  VOCABSYNC_MIN_TOKEN_LEN=3
  VOCABSYNC_MAX_BACK_LINES=3
  VOCABSYNC_MAX_FORWARD_LINES=2
  VOCABSYNC_SUGGEST_LIMIT=3
  VOCABSYNC_SUGGEST_CUTOFF=60
  VOCABSYNC_NOTES_PATH=notes/notes.json
  VOCABSYNC_VERBOSE=0                 # 1/true/yes/y prints [info] lines
"""

from __future__ import annotations
import os
import re

from dotenv import load_dotenv

load_dotenv()

def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    try:
        return int(v)
    except ValueError:
        return default

def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    try:
        return float(v)
    except ValueError:
        return default

def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "y")

# ---- Timing / search tunables ----
SEEK_BACK_THRESHOLD = _env_float("VOCABSYNC_SEEK_BACK_THRESHOLD", 1.5)
MIN_SEARCH_LEN      = _env_int("VOCABSYNC_MIN_SEARCH_LEN", 3)
CONTEXT_LINES_UP    = _env_int("VOCABSYNC_CONTEXT_LINES_UP", 4)
CONTEXT_LINES_DOWN  = _env_int("VOCABSYNC_CONTEXT_LINES_DOWN", 6)
MAX_TOKENS          = _env_int("VOCABSYNC_MAX_TOKENS", 8)
MIN_TOKEN_LEN       = _env_int("VOCABSYNC_MIN_TOKEN_LEN", 3)
MAX_BACK_LINES      = _env_int("VOCABSYNC_MAX_BACK_LINES", 3)
MAX_FORWARD_LINES   = _env_int("VOCABSYNC_MAX_FORWARD_LINES", 2)

# ---- Not-found suggestions (rapidfuzz) ----
SUGGEST_LIMIT  = _env_int("VOCABSYNC_SUGGEST_LIMIT", 3)
SUGGEST_CUTOFF = _env_int("VOCABSYNC_SUGGEST_CUTOFF", 60)

# ---- Misc ----
NOTES_PATH = os.getenv("VOCABSYNC_NOTES_PATH", "notes/notes.json").strip() or "notes/notes.json"
VERBOSE    = _env_flag("VOCABSYNC_VERBOSE")

# ---- Document structure ----
GLOSSARY_SENTINEL = ":::VOCAB:::"

NOTE_PLACEHOLDER = f"""Paste using this layout:

00:00:00 - And I'm starting to get really nervous
00:00:02 - because for a long time no one says
...

{GLOSSARY_SENTINEL}
Nervous: lo lắng, bồn chồn
Deep breath: hít một hơi thật sâu
..."""

# Tolerates bullets from mobile pastes ("- Key Vocabulary:", "• vocab —").
# The header must be alone on its line: "Vocabulary is important" is prose.
GLOSSARY_HEADER_RE = re.compile(
    r"^[^\S\r\n]*"
    r"(?:[+\-•*o●◦·‣▪▫]+[.)]?[^\S\r\n]*)?"
    r"(?:key[^\S\r\n]*)?"
    r"(?:vocab(?:ulary)?|từ[^\S\r\n]*vựng)"
    r"[^\S\r\n]*(?:[-:：–—][^\S\r\n]*)?\r?$",
    re.IGNORECASE | re.MULTILINE,
)

# Whole header line carrying the sentinel, bullets or not.
GLOSSARY_SENTINEL_LINE_RE = re.compile(
    r"^[^\n]*?" + re.escape(GLOSSARY_SENTINEL) + r"[^\n]*",
    re.MULTILINE,
)

TIMESTAMP_LINE_RE = re.compile(r"^\s*((?:\d{1,3}:)?\d{1,2}:\d{2})\s*(?:[-–—]\s*)?(.*)$")

DIVIDER_CHARS = "─━┄┅_\\-=–—"

# "46." on a line of its own
SECTION_HEADER_RE  = re.compile(r"^\s*\d+\.\s*$")
SECTION_DIVIDER_RE = re.compile(rf"^[{DIVIDER_CHARS}]{{6,}}\s*$")

LEADING_DIVIDERS_RE  = re.compile(rf"\A(?:[{DIVIDER_CHARS}]{{6,}}[ \t]*\r?\n)+")
TRAILING_DIVIDERS_RE = re.compile(rf"(?:\r?\n[{DIVIDER_CHARS}]{{6,}}[ \t]*)+\s*\Z")

SENTENCE_END_RE = re.compile(r"[.!?]")
