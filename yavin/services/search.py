"""
Site search over the static lesson index.
"""
from typing import List

from yavin.core.catalog import MIN_SEARCH_QUERY_LENGTH, SEARCH_INDEX, SearchEntry


def search(query: str, limit: int = 10) -> List[SearchEntry]:
    """Case-insensitive substring match on title, section and keywords."""
    needle = (query or "").strip().lower()
    if len(needle) < MIN_SEARCH_QUERY_LENGTH:
        return []

    results = []
    for entry in SEARCH_INDEX:
        haystack = [entry.title, entry.section, *entry.keywords]
        if any(needle in text.lower() for text in haystack):
            results.append(entry)
            if len(results) >= limit:
                break
    return results
