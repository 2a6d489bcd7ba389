"""
Software catalog (data/software.json) and the downloads directory.
"""

import logging
from typing import Any
from urllib.parse import quote

from core.errors import InvalidRequestError, NotFoundError
from core.search import filter_software
from core.storage import (
    DataPaths,
    read_json,
    safe_file_name,
    unique_file_name,
    write_json_atomic,
)

logger = logging.getLogger(__name__)


def download_url(file_name: str) -> str:
    # Same reserved set as JavaScript's encodeURIComponent
    return "/downloads/" + quote(file_name, safe="!~*'()")


def load_catalog(
    paths: DataPaths, query: str | None = None, tags: list[str] | None = None
) -> dict[str, Any]:
    """Read the catalog; `query` and `tags` narrow the items list."""
    if not paths.software_json.exists():
        return {"version": 1, "items": []}
    catalog = read_json(paths.software_json)
    items = catalog.get("items") if isinstance(catalog.get("items"), list) else []
    if query or tags:
        items = filter_software(items, query, tags or [])
    catalog["items"] = items
    return catalog


def save_catalog(paths: DataPaths, catalog: dict[str, Any]) -> None:
    """Replace the catalog. The body must carry an `items` list."""
    if not isinstance(catalog.get("items"), list):
        raise InvalidRequestError("items[] required")
    write_json_atomic(paths.software_json, catalog)
    logger.info("Saved software catalog with %d items", len(catalog["items"]))


def store_file(paths: DataPaths, original_name: str, content: bytes) -> dict[str, Any]:
    """Save an upload under a safe, collision-free name."""
    paths.downloads_dir.mkdir(parents=True, exist_ok=True)
    file_name = unique_file_name(paths.downloads_dir, safe_file_name(original_name))
    (paths.downloads_dir / file_name).write_bytes(content)
    logger.info("Stored upload %s (%d bytes)", file_name, len(content))
    return {"ok": True, "fileName": file_name, "url": download_url(file_name)}


def rename_file(paths: DataPaths, file_name: str, new_file_name: str) -> dict[str, Any]:
    """
    Rename a stored download.

    Raises:
        InvalidRequestError: either name missing
        NotFoundError: source file absent
    """
    if not file_name or not new_file_name:
        raise InvalidRequestError("fileName and newFileName required")

    old_path = paths.downloads_dir / safe_file_name(file_name)
    if not old_path.is_file():
        raise NotFoundError("File not found")

    candidate = unique_file_name(paths.downloads_dir, safe_file_name(new_file_name))
    old_path.rename(paths.downloads_dir / candidate)
    return {"ok": True, "fileName": candidate, "url": download_url(candidate)}
