#!/usr/bin/env python3
"""
vocabsync/cli.py

Drive the sync engine from the shell.

Usage:
  vocabsync search lesson.txt "deep breath"
  vocabsync replay lesson.txt --start 0 --end 120 --step 1
  vocabsync info lesson.txt
  vocabsync notes save "Episode 12" lesson.txt
  vocabsync notes list [KEYWORD]
  vocabsync notes show "Episode 12"
  vocabsync notes clear
"""

from __future__ import annotations
import argparse
import json
import sys

from vocabsync.engine import NoteEngine
from vocabsync.errors import MatchNotFound, NoteStoreError
from vocabsync.log import warn
from vocabsync.notes import NoteStore, read_document

def frange(start: float, end: float, step: float):
    if step <= 0:
        raise ValueError("step must be > 0")
    n = 0
    t = start
    while t <= end + 1e-9:
        yield round(t, 3)
        n += 1
        t = start + n * step

def cmd_search(args) -> int:
    engine = NoteEngine(read_document(args.file))
    try:
        print(engine.search(args.term) or "")
    except MatchNotFound as e:
        warn(f"not found: {e.term}")
        for s in e.suggestions:
            print(f"  did you mean: {s}", file=sys.stderr)
        return 1
    return 0

def cmd_replay(args) -> int:
    engine = NoteEngine(read_document(args.file))
    shown = ""
    for t in frange(args.start, args.end, args.step):
        html = engine.on_time_tick(t)
        if html is not None and html != shown:
            shown = html
            print(f"[t={t:.2f}]")
            print(html)
            print()
    return 0

def cmd_info(args) -> int:
    engine = NoteEngine(read_document(args.file))
    print(json.dumps(engine.debug_info, indent=2))
    return 0

def cmd_notes(args) -> int:
    store = NoteStore(args.store)
    if args.notes_cmd == "save":
        name = store.import_file(args.title, args.file)
        print(f"[ok] saved: {name}")
    elif args.notes_cmd == "show":
        text = store.load(args.title)
        if text is None:
            warn(f"no note titled {args.title!r}")
            return 1
        print(text)
    elif args.notes_cmd == "list":
        for title in store.titles(args.keyword):
            print(title)
    elif args.notes_cmd == "clear":
        print(f"[ok] removed {store.delete_all()} notes")
    return 0

def _positive_float(v: str) -> float:
    try:
        x = float(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {v!r}")
    if not x > 0:
        raise argparse.ArgumentTypeError(f"must be > 0: {v!r}")
    return x

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="vocabsync", description="Follow a timestamped transcript through its vocabulary notes.")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("search", help="Manual lookup of a term or phrase")
    p.add_argument("file")
    p.add_argument("term")
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("replay", help="Simulate playback and print every display change")
    p.add_argument("file")
    p.add_argument("--start", type=float, default=0.0)
    p.add_argument("--end", type=float, default=600.0)
    p.add_argument("--step", type=_positive_float, default=1.0)
    p.set_defaults(func=cmd_replay)

    p = sub.add_parser("info", help="Parse a document and print its structure counts")
    p.add_argument("file")
    p.set_defaults(func=cmd_info)

    p = sub.add_parser("notes", help="Named note store")
    p.add_argument("--store", default=None, help="Path to the notes JSON (default: VOCABSYNC_NOTES_PATH)")
    nsub = p.add_subparsers(dest="notes_cmd", required=True)
    q = nsub.add_parser("save")
    q.add_argument("title")
    q.add_argument("file")
    q = nsub.add_parser("show")
    q.add_argument("title")
    q = nsub.add_parser("list")
    q.add_argument("keyword", nargs="?", default="")
    nsub.add_parser("clear")
    p.set_defaults(func=cmd_notes)
    return ap

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except NoteStoreError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
