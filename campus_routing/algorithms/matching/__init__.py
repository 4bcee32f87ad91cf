"""
Place name matching.
"""

from .fuzzy_matcher import (
    FuzzyPlaceMatcher,
    suggest_places,
    tokenize_query,
    tokenize_name,
    levenshtein_distance,
    words_match
)

__all__ = [
    'FuzzyPlaceMatcher',
    'suggest_places',
    'tokenize_query',
    'tokenize_name',
    'levenshtein_distance',
    'words_match'
]
