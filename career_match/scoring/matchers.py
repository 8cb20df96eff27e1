"""Text matching utilities for career scoring."""

from __future__ import annotations

import re
from collections.abc import Iterable


def normalize_term(term: str) -> str:
    """Normalize a skill, field or interest name for comparison.

    Lowercases and collapses whitespace. Punctuation is preserved so that
    names like "C++", "C#", "UI/UX Design" and "Node.js" keep their meaning.
    """
    value = term.strip().lower()
    return re.sub(r"\s+", " ", value)


def names_match(name1: str, name2: str) -> bool:
    """Return True if two names are equal ignoring case."""
    return name1.lower() == name2.lower()


def mutually_contains(value1: str, value2: str) -> bool:
    """Return True if either value is a case-insensitive substring of the other."""
    lowered1 = value1.lower()
    lowered2 = value2.lower()
    return lowered1 in lowered2 or lowered2 in lowered1


def contains_any(value: str, candidates: Iterable[str]) -> bool:
    """Return True if ``value`` mutually contains any of ``candidates``."""
    return any(mutually_contains(candidate, value) for candidate in candidates)


def find_by_name(name: str, items: Iterable, attr: str = "name"):
    """Return the first item whose ``attr`` matches ``name`` ignoring case."""
    for item in items:
        if names_match(getattr(item, attr), name):
            return item
    return None
