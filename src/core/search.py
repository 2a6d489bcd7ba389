"""
Free-text and tag filtering for the guides wiki and software catalog.
"""

import re
from typing import Iterable

from models.catalog import GuideEntry, SoftwareItem

_SEPARATORS_RE = re.compile(r"[#,]")


def _norm(value) -> str:
    return str(value if value is not None else "").lower()


def tokenize(query: str | None) -> list[str]:
    """Split a search query into lowercase tokens; '#' and ',' act as spaces."""
    return _SEPARATORS_RE.sub(" ", _norm(query)).split()


def matches_tokens(fields: Iterable[str], tokens: list[str]) -> bool:
    """True if every token occurs somewhere in the joined fields."""
    if not tokens:
        return True
    haystack = _norm(" ".join(str(f) for f in fields if f is not None))
    return all(token in haystack for token in tokens)


def has_all_tags(item_tags: Iterable[str] | None, selected: Iterable[str]) -> bool:
    """True if the item carries every selected tag (case-insensitive)."""
    tags = {_norm(t) for t in item_tags or []}
    return all(_norm(t) in tags for t in selected)


def filter_guides(guides: list[GuideEntry], query: str | None) -> list[GuideEntry]:
    tokens = tokenize(query)
    return [
        g
        for g in guides
        if matches_tokens(
            [
                g.get("title", ""),
                g.get("category", ""),
                g.get("summary", ""),
                *(g.get("tags") or []),
                *(g.get("keywords") or []),
            ],
            tokens,
        )
    ]


def filter_software(
    items: list[SoftwareItem], query: str | None, tags: Iterable[str] = ()
) -> list[SoftwareItem]:
    tokens = tokenize(query)
    selected = [t for t in tags if t]
    return [
        item
        for item in items
        if matches_tokens(
            [
                item.get("title", ""),
                item.get("description", ""),
                *(item.get("tags") or []),
                *(item.get("keywords") or []),
            ],
            tokens,
        )
        and has_all_tags(item.get("tags"), selected)
    ]
