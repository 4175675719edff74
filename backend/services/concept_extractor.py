"""Lexical extraction of concepts from free text.

Matching is literal, lower-cased substring containment. This is
deliberately imprecise: "java" is found inside "javascript" and "go"
inside "google". Results are ordered by table position, so the output is
deterministic for a given input.
"""

from services.thesaurus import (
    CONCEPT_THESAURUS,
    RANKER_THESAURUS,
    TECHNICAL_TERMS,
    display_name,
)


def _add(found: list[str], seen: set[str], item: str) -> None:
    if item not in seen:
        seen.add(item)
        found.append(item)


def _thesaurus_hits(
    text_lower: str,
    thesaurus: dict[str, tuple[str, ...]],
    found: list[str],
    seen: set[str],
) -> None:
    for key, related in thesaurus.items():
        name = display_name(key)
        if name in text_lower or any(term in text_lower for term in related):
            _add(found, seen, name)


def extract_concepts(text: str) -> list[str]:
    """Extract canonical concepts plus verbatim technical terms from text.

    Thesaurus keys come first (in table order), followed by any hits from
    the flat vocabulary that were not already added.
    """
    text_lower = text.lower()
    found: list[str] = []
    seen: set[str] = set()

    _thesaurus_hits(text_lower, CONCEPT_THESAURUS, found, seen)

    for term in TECHNICAL_TERMS:
        if term in text_lower:
            _add(found, seen, term)

    return found


def extract_ranker_concepts(text: str) -> list[str]:
    """Coarse family-only extraction used by the bulk ranker."""
    text_lower = text.lower()
    found: list[str] = []
    seen: set[str] = set()
    _thesaurus_hits(text_lower, RANKER_THESAURUS, found, seen)
    return found
