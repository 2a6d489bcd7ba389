#!/usr/bin/env python3
"""
Create the portal data directories, seed missing manifests and configs, and
create the request-log database.

Usage:
    uv run python src/scripts/init_data.py [--root /srv/techpedia]
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.logging import create_schema
from core.config import BREAK_CONFIG_DEFAULTS, PORTAL_ROOT, REQUEST_LOG_DB
from core.storage import DataPaths, write_json_atomic


def seed_files(paths: DataPaths) -> dict[Path, dict]:
    """Initial content for every data file the portal reads."""
    return {
        paths.guides_json: {"version": 1, "guides": []},
        paths.software_json: {"version": 1, "items": []},
        paths.integrations_json: {"appsScriptUrl": ""},
        paths.tasks_config_json: {
            "spreadsheetId": "",
            "sheetName": "Tasks",
            "pollMs": 5000,
        },
        paths.break_config_json: {
            "spreadsheetId": "",
            "dailySheetPrefix": "Break_",
            "configSheetName": "BreakConfig",
            **BREAK_CONFIG_DEFAULTS,
        },
    }


def init_data(root: Path, request_log_db: Path | None) -> list[Path]:
    """Create directories and missing files. Existing files are left alone."""
    paths = DataPaths.from_root(root)
    paths.ensure_dirs()

    created = []
    for path, content in seed_files(paths).items():
        if not path.exists():
            write_json_atomic(path, content)
            created.append(path)

    if request_log_db is not None:
        create_schema(request_log_db)
    return created


def main():
    parser = argparse.ArgumentParser(description="Initialize portal data directory")
    parser.add_argument("--root", type=Path, default=PORTAL_ROOT, help="Portal root directory")
    args = parser.parse_args()

    created = init_data(args.root, REQUEST_LOG_DB)
    print(f"Portal root: {args.root}")
    for path in created:
        print(f"  Created: {path}")
    if not created:
        print("  All data files already present")
    if REQUEST_LOG_DB is not None:
        print(f"Request log: {REQUEST_LOG_DB}")


if __name__ == "__main__":
    main()
