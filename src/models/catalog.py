"""
Manifest entry shapes for the guides wiki and the software catalog.

Manifests are stored as plain JSON, so entries stay dictionaries.
"""

from typing import NotRequired, TypedDict


class GuideEntry(TypedDict):
    """Entry in data/guides.json."""
    id: str
    title: str
    category: str
    path: str  # relative to the portal root, e.g. ".guides/vpn.md"
    tags: list[str]
    keywords: list[str]
    summary: str


class SoftwareItem(TypedDict):
    """Entry in data/software.json."""
    id: str
    title: str
    file: str  # download URL, usually /downloads/<name>
    description: NotRequired[str]
    tags: NotRequired[list[str]]
    keywords: NotRequired[list[str]]
    guideId: NotRequired[str]
