"""Bracket-tagged console messages ([info] / [warn]) on stderr."""

from __future__ import annotations
import sys

from vocabsync import config

def info(msg: str, enabled: bool | None = None) -> None:
    if enabled is None:
        enabled = config.VERBOSE
    if enabled:
        print(f"[info] {msg}", file=sys.stderr, flush=True)

def warn(msg: str) -> None:
    print(f"[warn] {msg}", file=sys.stderr, flush=True)
