#!/usr/bin/env python3
"""
Print remaining break and lunch minutes per employee for one day.

Usage:
    uv run python src/scripts/break_summary.py --date 2025-11-07
"""

import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import httpx

from core.apps_script import create_client
from core.config import PORTAL_ROOT, UPSTREAM_TIMEOUT_SECONDS
from core.errors import PortalError
from core.storage import DataPaths
from models.breaks import BalanceRow
from services.breaks import load_break_config, summarize_day, validate_day


def format_rows(rows: list[BalanceRow]) -> list[str]:
    """One line per employee: 'Name: break left/limit, lunch left/limit'."""
    if not rows:
        return ["No employees configured."]
    return [
        f"{row.name}: break {row.break_left_minutes}/{row.break_limit_minutes} min, "
        f"lunch {row.lunch_left_minutes}/{row.lunch_limit_minutes} min"
        for row in rows
    ]


async def run(root: Path, day_str: str) -> list[BalanceRow]:
    paths = DataPaths.from_root(root)
    cfg = load_break_config(paths)
    day = validate_day(day_str, cfg["maxHistoryDays"])
    async with httpx.AsyncClient(
        timeout=UPSTREAM_TIMEOUT_SECONDS, follow_redirects=True
    ) as http:
        return await summarize_day(create_client(paths, http), cfg, day)


def main():
    parser = argparse.ArgumentParser(description="Remaining break/lunch minutes for a day")
    parser.add_argument("--date", default=date.today().isoformat(), help="Day (YYYY-MM-DD)")
    parser.add_argument("--root", type=Path, default=PORTAL_ROOT, help="Portal root directory")
    args = parser.parse_args()

    try:
        rows = asyncio.run(run(args.root, args.date))
    except PortalError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        for detail in e.details:
            print(f"  {detail}", file=sys.stderr)
        sys.exit(1)

    print(f"Break balances for {args.date}")
    for line in format_rows(rows):
        print(f"  {line}")


if __name__ == "__main__":
    main()
