#!/usr/bin/env python3
"""
Tip Catalog

Read-only money tips shipped with the package as YAML. The catalog is
configuration, not user data: favorites refer to tips by id but are never
validated against it.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources

import yaml

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class Tip:
    """A single static tip."""

    id: str
    title: str
    category: str
    summary: str
    content: str


def parse_catalog(text: str) -> tuple[Tip, ...]:
    """
    Parse catalog YAML into Tip objects.

    Raises:
        ValueError: If the document isn't a list of complete tip mappings
    """
    data = yaml.safe_load(text) or []
    if not isinstance(data, list):
        raise ValueError("Tip catalog must be a YAML list")

    tips = []
    for item in data:
        try:
            tips.append(Tip(**{key: str(item[key]) for key in ("id", "title", "category", "summary", "content")}))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid tip in catalog: {item!r}") from e
    return tuple(tips)


@lru_cache(maxsize=1)
def load_catalog() -> tuple[Tip, ...]:
    """Load the packaged catalog once."""
    text = resources.files("pft.tips").joinpath("catalog.yaml").read_text(encoding="utf-8")
    tips = parse_catalog(text)
    logger.debug("Loaded %d tips", len(tips))
    return tips


def search_tips(tips: Iterable[Tip], query: str | None = "", category: str | None = ALL_CATEGORIES) -> list[Tip]:
    """
    Filter tips by text and category.

    The query matches case-insensitively against title, summary or content.
    A blank query or the "all" category matches everything. Order is preserved.
    """
    q = (query or "").strip().lower()
    cat = (category or ALL_CATEGORIES).strip().lower()

    def matches(tip: Tip) -> bool:
        matches_query = not q or q in tip.title.lower() or q in tip.summary.lower() or q in tip.content.lower()
        matches_category = cat == ALL_CATEGORIES or tip.category.lower() == cat
        return matches_query and matches_category

    return [tip for tip in tips if matches(tip)]


def popular_categories(tips: Iterable[Tip]) -> list[tuple[str, int]]:
    """Categories with tip counts, most tips first; ties keep first-seen order."""
    counts: dict[str, int] = {}
    for tip in tips:
        counts[tip.category] = counts.get(tip.category, 0) + 1
    return sorted(counts.items(), key=lambda item: -item[1])


def get_tip(tips: Iterable[Tip], tip_id: str) -> Tip | None:
    """Find a tip by id."""
    return next((tip for tip in tips if tip.id == tip_id), None)
