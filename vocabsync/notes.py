"""
vocabsync/notes.py

Named notes: a JSON object file mapping note title → document text.

  store = NoteStore("notes/notes.json")
  store.save("Episode 12", text)
  store.titles("nervous")      # titles whose title or text mentions "nervous"
  store.load("Episode 12")

Text read from disk is repaired with ftfy (mojibake from copy/paste through
Windows-1252 tools is common); quote style is left alone because the
highlighter matches curly and straight quotes itself.
"""

from __future__ import annotations
import json
import os
from pathlib import Path

from ftfy import fix_text

from vocabsync import config
from vocabsync.errors import NoteStoreError
from vocabsync.log import info

def read_document(path: str | Path) -> str:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise NoteStoreError(f"cannot read {p}: {e}") from e
    return fix_text(raw, uncurl_quotes=False)


class NoteStore:
    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or config.NOTES_PATH)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise NoteStoreError(f"unreadable note store {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise NoteStoreError(f"note store {self.path} is not a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, notes: dict[str, str]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(notes, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                pass
            raise NoteStoreError(f"cannot write note store {self.path}: {e}") from e

    def save(self, title: str, content: str) -> str:
        name = (title or "").strip()
        if not name:
            raise NoteStoreError("note title is empty")
        body = (content or "").strip()
        if not body:
            raise NoteStoreError("note content is empty")
        notes = self._read()
        notes[name] = body
        self._write(notes)
        info(f"saved note {name!r} ({len(body)} chars)")
        return name

    def import_file(self, title: str, path: str | Path) -> str:
        return self.save(title, read_document(path))

    def load(self, title: str) -> str | None:
        return self._read().get((title or "").strip())

    def titles(self, keyword: str = "") -> list[str]:
        q = (keyword or "").strip().lower()
        notes = self._read()
        out = [t for t, body in notes.items() if not q or q in t.lower() or q in body.lower()]
        return sorted(out, key=str.casefold)

    def delete_all(self) -> int:
        n = len(self._read())
        if n:
            self._write({})
        return n
