"""Shared dependencies for API routes."""

from services.ranker import CandidateRanker

# One collection per process; nothing is persisted.
_ranker = CandidateRanker()


def get_ranker() -> CandidateRanker:
    return _ranker
