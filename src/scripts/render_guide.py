#!/usr/bin/env python3
"""
Render a guide (by manifest id) or any Markdown file to an HTML fragment.

Usage:
    uv run python src/scripts/render_guide.py --id vpn-setup
    uv run python src/scripts/render_guide.py --file notes.md --out notes.html
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import PORTAL_ROOT
from core.errors import NotFoundError
from core.markdown import render_markdown
from core.storage import DataPaths
from services.guides import render_guide


def main():
    parser = argparse.ArgumentParser(description="Render Markdown to HTML")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--id", help="Guide id from data/guides.json")
    source.add_argument("--file", type=Path, help="Markdown file to render")
    parser.add_argument("--root", type=Path, default=PORTAL_ROOT, help="Portal root directory")
    parser.add_argument("--out", type=Path, help="Write HTML here instead of stdout")
    args = parser.parse_args()

    if args.file:
        html = render_markdown(args.file.read_text(encoding="utf-8"))
    else:
        try:
            html = render_guide(DataPaths.from_root(args.root), args.id)["html"]
        except NotFoundError as e:
            print(f"Error: {e.message} ({args.id})", file=sys.stderr)
            sys.exit(1)

    if args.out:
        args.out.write_text(html + "\n", encoding="utf-8")
        print(f"Wrote {args.out}")
    else:
        print(html)


if __name__ == "__main__":
    main()
