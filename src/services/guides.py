"""
Guides wiki: manifest CRUD over data/guides.json and .guides/*.md files.
"""

import logging
from pathlib import Path
from typing import Any

from core.errors import ConflictError, InvalidRequestError, NotFoundError
from core.markdown import render_markdown
from core.search import filter_guides
from core.storage import DataPaths, read_json, safe_file_name, write_json_atomic
from models.catalog import GuideEntry

logger = logging.getLogger(__name__)


def load_manifest(paths: DataPaths) -> dict[str, Any]:
    """Read the guides manifest, tolerating a missing file or guides list."""
    if not paths.guides_json.exists():
        return {"guides": []}
    manifest = read_json(paths.guides_json)
    if not isinstance(manifest.get("guides"), list):
        manifest["guides"] = []
    return manifest


def list_guides(paths: DataPaths, query: str | None = None) -> dict[str, Any]:
    """Return the manifest, with guides narrowed to those matching `query`."""
    manifest = load_manifest(paths)
    if query:
        manifest["guides"] = filter_guides(manifest["guides"], query)
    return manifest


def _find(guides: list[GuideEntry], guide_id: str) -> int:
    for idx, guide in enumerate(guides):
        if guide.get("id") == guide_id:
            return idx
    raise NotFoundError("Not found", details=[f"Guide id: {guide_id}"])


def _guide_file(paths: DataPaths, guide: GuideEntry) -> Path:
    abs_path = paths.resolve_inside(str(guide.get("path") or ""))
    if abs_path is None:
        raise NotFoundError("Not found", details=["Guide path is outside the portal root"])
    return abs_path


def create_guide(
    paths: DataPaths,
    guide_id: str,
    title: str,
    category: str = "",
    tags: list[str] | None = None,
    keywords: list[str] | None = None,
    summary: str = "",
    content_markdown: str = "",
) -> GuideEntry:
    """
    Add a guide: write its Markdown file and append a manifest entry.

    Raises:
        InvalidRequestError: id or title missing
        ConflictError: id already in the manifest or file already present
    """
    if not guide_id or not title:
        raise InvalidRequestError("id and title are required")

    manifest = load_manifest(paths)
    guides = manifest["guides"]
    if any(g.get("id") == guide_id for g in guides):
        raise ConflictError("Duplicate id")

    file_name = safe_file_name(f"{guide_id}.md")
    abs_path = paths.guides_dir / file_name
    if abs_path.exists():
        raise ConflictError("Guide already exists")

    paths.guides_dir.mkdir(parents=True, exist_ok=True)
    abs_path.write_text(content_markdown or "", encoding="utf-8")

    entry: GuideEntry = {
        "id": guide_id,
        "title": title,
        "category": category or "",
        "path": f".guides/{file_name}",
        "tags": list(tags or []),
        "keywords": list(keywords or []),
        "summary": summary or "",
    }
    guides.append(entry)
    write_json_atomic(paths.guides_json, manifest)
    logger.info("Created guide %s", guide_id)
    return entry


def update_guide(
    paths: DataPaths,
    guide_id: str,
    title: str | None = None,
    category: str | None = None,
    tags: list[str] | None = None,
    keywords: list[str] | None = None,
    summary: str | None = None,
    content_markdown: str | None = None,
) -> GuideEntry:
    """Merge metadata changes and optionally replace the Markdown content."""
    manifest = load_manifest(paths)
    guides = manifest["guides"]
    idx = _find(guides, guide_id)
    guide = guides[idx]

    if content_markdown is not None:
        _guide_file(paths, guide).write_text(content_markdown, encoding="utf-8")

    updated: GuideEntry = {
        **guide,
        "title": title if title is not None else guide.get("title"),
        "category": category if category is not None else guide.get("category"),
        "tags": tags if tags is not None else guide.get("tags"),
        "keywords": keywords if keywords is not None else guide.get("keywords"),
        "summary": summary if summary is not None else guide.get("summary"),
    }
    guides[idx] = updated
    write_json_atomic(paths.guides_json, manifest)
    return updated


def delete_guide(paths: DataPaths, guide_id: str) -> None:
    """Remove the manifest entry, then the Markdown file if present."""
    manifest = load_manifest(paths)
    guides = manifest["guides"]
    guide = guides.pop(_find(guides, guide_id))
    write_json_atomic(paths.guides_json, manifest)

    abs_path = paths.resolve_inside(str(guide.get("path") or ""))
    if abs_path is None or not abs_path.is_file():
        logger.warning("Guide %s had no file to remove at %s", guide_id, guide.get("path"))
        return
    abs_path.unlink()


def _load_guide(paths: DataPaths, guide_id: str) -> tuple[GuideEntry, str]:
    guides = load_manifest(paths)["guides"]
    guide = guides[_find(guides, guide_id)]
    abs_path = _guide_file(paths, guide)
    if not abs_path.is_file():
        raise NotFoundError("Guide file not found", details=[str(guide.get("path"))])
    return guide, abs_path.read_text(encoding="utf-8")


def read_guide_content(paths: DataPaths, guide_id: str) -> dict[str, str]:
    """Return the raw Markdown of a guide."""
    guide, text = _load_guide(paths, guide_id)
    return {"id": guide_id, "path": guide["path"], "content": text}


def render_guide(paths: DataPaths, guide_id: str) -> dict[str, str]:
    """Return a guide rendered to an HTML fragment."""
    guide, text = _load_guide(paths, guide_id)
    return {"id": guide_id, "title": guide.get("title", ""), "html": render_markdown(text)}
