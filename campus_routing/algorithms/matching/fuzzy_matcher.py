"""
Typo-tolerant place search over the campus catalog.

A place is suggested when any query word loosely matches any word of its
name. Results keep catalog order; nothing is scored or ranked.
"""

import logging
import re
from typing import List, Optional, Sequence

from ...data.place_catalog import PlaceRecord

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')
_NON_WORD = re.compile(r'[^\w]+')


def tokenize_query(query: str) -> List[str]:
    """Trim and split user input on whitespace runs."""
    if not query:
        return []
    return [word for word in _WHITESPACE.split(query.strip()) if word]


def tokenize_name(name: str) -> List[str]:
    """Split a place name into words, treating punctuation as a separator."""
    return [word for word in _NON_WORD.split(name or '') if word]


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance (insertions, deletions, substitutions) between two strings."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost
            ))
        previous = current
    return previous[-1]


def words_match(input_word: str, target_word: str) -> bool:
    """
    Loose word comparison: substring either way, or a small edit distance.

    The allowed distance is a quarter of the shorter word, and at least 1.
    """
    a = input_word.lower()
    b = target_word.lower()
    if a in b or b in a:
        return True
    max_dist = max(1, min(len(a), len(b)) // 4)
    return levenshtein_distance(a, b) <= max_dist


def suggest_places(query: str, catalog: Sequence[PlaceRecord], limit: int = 5) -> List[PlaceRecord]:
    """
    Suggest catalog places for a free-text query.

    Args:
        query: Raw user input
        catalog: Places in display order
        limit: Maximum number of suggestions

    Returns:
        Matching places in catalog order, at most `limit` of them
    """
    words = tokenize_query(query)
    if not words or limit <= 0:
        return []

    matches = []
    for place in catalog:
        name_words = tokenize_name(place.display_name)
        if any(words_match(iw, nw) for iw in words for nw in name_words):
            matches.append(place)
            if len(matches) >= limit:
                break

    logger.debug(f"Query {query!r}: {len(matches)} suggestions")
    return matches


class FuzzyPlaceMatcher:
    """Place search bound to one catalog and a default limit."""

    def __init__(self, catalog: Sequence[PlaceRecord], limit: int = 5):
        self.catalog = list(catalog)
        self.limit = limit

    def suggest(self, query: str, limit: Optional[int] = None) -> List[PlaceRecord]:
        return suggest_places(query, self.catalog, self.limit if limit is None else limit)

    def best_match(self, query: str) -> Optional[PlaceRecord]:
        """First suggestion in catalog order, or None."""
        matches = suggest_places(query, self.catalog, 1)
        return matches[0] if matches else None
