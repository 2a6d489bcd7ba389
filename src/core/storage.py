"""
JSON manifest storage and file-name helpers for the portal data directory.
"""

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Anything other than letters, digits, space, dot, underscore, parens, dash
_UNSAFE_CHARS_RE = re.compile(r"[^\w .()-]+")


@dataclass(frozen=True)
class DataPaths:
    """Locations of the portal's on-disk data under one root."""

    root: Path

    @classmethod
    def from_root(cls, root: Path | str) -> "DataPaths":
        return cls(root=Path(root))

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def guides_dir(self) -> Path:
        return self.root / ".guides"

    @property
    def downloads_dir(self) -> Path:
        return self.root / "downloads"

    @property
    def guides_json(self) -> Path:
        return self.data_dir / "guides.json"

    @property
    def software_json(self) -> Path:
        return self.data_dir / "software.json"

    @property
    def integrations_json(self) -> Path:
        return self.data_dir / "integrations.json"

    @property
    def tasks_config_json(self) -> Path:
        return self.data_dir / "tasks.config.json"

    @property
    def break_config_json(self) -> Path:
        return self.data_dir / "break.config.json"

    def ensure_dirs(self) -> None:
        """Create the data, guides and downloads directories if missing."""
        for directory in (self.data_dir, self.guides_dir, self.downloads_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def resolve_inside(self, rel_path: str) -> Path | None:
        """Resolve a root-relative path, or None if it escapes the root."""
        root = self.root.resolve()
        candidate = (root / rel_path).resolve()
        if candidate != root and root not in candidate.parents:
            return None
        return candidate


def read_json(path: Path) -> Any:
    """Read and parse a UTF-8 JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))


def write_json_atomic(path: Path, obj: Any) -> None:
    """Write JSON to a temp file beside `path`, then swap it in."""
    tmp = path.with_name(path.name + ".tmp")
    data = json.dumps(obj, indent=2, ensure_ascii=False) + "\n"
    tmp.write_text(data, encoding="utf-8")
    os.replace(tmp, path)


def safe_file_name(name: str | None) -> str:
    """
    Reduce a client-supplied name to a safe base file name.

    Directory parts are dropped and unexpected characters become '_'.
    """
    base = str(name or "").replace("\\", "/").split("/")[-1]
    cleaned = _UNSAFE_CHARS_RE.sub("_", base).strip()
    if not cleaned.strip("."):
        return "file"
    return cleaned


def unique_file_name(directory: Path, name: str) -> str:
    """Return `name`, or 'stem (N).ext' with the first free N."""
    candidate = name
    suffix = Path(name).suffix
    stem = name[: len(name) - len(suffix)] or "file"
    counter = 1
    while (directory / candidate).exists():
        candidate = f"{stem} ({counter}){suffix}"
        counter += 1
    return candidate
