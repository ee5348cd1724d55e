#!/usr/bin/env python3
"""
Static preview of what the viewer shows while a video plays.
- Replays a document through the sync engine (fixed tick step).
- One card per display change, labelled with the tick time.
- Safe: writes only the given --out file (default ./site/preview.html).

Usage:
  python tools/build_sync_preview.py lesson.txt --end 300 --step 1
"""

from __future__ import annotations
from pathlib import Path
import argparse, html, sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from vocabsync.cli import frange
from vocabsync.engine import NoteEngine
from vocabsync.notes import read_document

STYLE = """
body{font-family:system-ui,sans-serif;margin:0;background:#f7f7f8;color:#1b1b1f}
.container{max-width:860px;margin:0 auto;padding:24px}
.hero .pill{display:inline-block;padding:2px 10px;border-radius:999px;background:#3b5bdb;color:#fff;font-size:12px}
.card{background:#fff;border:1px solid #e3e3e8;border-radius:12px;padding:16px;margin:12px 0}
.card h2{margin:0 0 8px 0;font-size:14px;color:#666}
.viewer{white-space:pre-wrap;font-size:15px;line-height:1.5;margin:0}
mark{background:#ffe066;padding:0 2px}
.muted{color:#888}
"""

def wrap_shell(page_title: str, body_inner: str) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>{html.escape(page_title)}</title>
  <style>{STYLE}</style>
</head>
<body>
  <div class="container">
{body_inner}
  </div>
</body>
</html>"""

def hero_block(pill: str, h1: str, subtitle: str) -> str:
    return f"""
<header class="hero">
  <span class="pill">{html.escape(pill)}</span>
  <h1>{html.escape(h1)}</h1>
  <p class="muted">{html.escape(subtitle)}</p>
</header>""".strip()

def card(title: str, viewer_html: str) -> str:
    # viewer_html comes escaped from the renderer
    return f"""
<section class="card">
  <h2>{html.escape(title)}</h2>
  <pre class="viewer">{viewer_html}</pre>
</section>""".strip()

def build_cards(engine: NoteEngine, start: float, end: float, step: float) -> list[str]:
    cards, shown = [], ""
    for t in frange(start, end, step):
        out = engine.on_time_tick(t)
        if out is not None and out != shown:
            shown = out
            cards.append(card(f"t = {t:.2f}s", out))
    return cards

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("file", help="Transcript + vocabulary document")
    ap.add_argument("--out", default=str(ROOT / "site" / "preview.html"))
    ap.add_argument("--start", type=float, default=0.0)
    ap.add_argument("--end", type=float, default=600.0)
    ap.add_argument("--step", type=float, default=1.0)
    args = ap.parse_args()

    engine = NoteEngine(read_document(args.file))
    cards = build_cards(engine, args.start, args.end, args.step)
    info = engine.debug_info
    subtitle = f"{info['entries_count']} caption lines • {info['sections_count']} sections • {len(cards)} display changes"
    body = "\n".join([hero_block("Preview", Path(args.file).name, subtitle)] + (cards or ["<p class='muted'>(no matches)</p>"]))

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(wrap_shell(f"{Path(args.file).name} — sync preview", body), encoding="utf-8")
    print(f"[ok] {out_path}")

if __name__ == "__main__":
    main()
