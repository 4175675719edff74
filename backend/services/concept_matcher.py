"""Three-tier concept matching of a job description against a resume.

Each job concept is scored at the first tier that produces a hit:

1. EXACT (100): the concept string occurs in the resume text.
2. SYNONYM (80): a related term of the concept's family occurs in the resume.
3. FUZZY (60): a concept extracted from the resume is within edit-distance
   similarity threshold of the job concept.
4. NONE (0): the concept is reported as unmatched.

Lower tiers are never consulted once a higher tier hits.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from models.schemas.semantic_analysis import ConceptMatch, SemanticAnalysisResult
from services.concept_extractor import extract_concepts
from services.scoring import clamp_score, round_half_up
from services.similarity import is_close
from services.thesaurus import ConceptFamily, family_of

logger = logging.getLogger(__name__)


class MatchTier(Enum):
    EXACT = 100
    SYNONYM = 80
    FUZZY = 60
    NONE = 0

    @property
    def score(self) -> int:
        return self.value


@dataclass(frozen=True)
class TierOutcome:
    tier: MatchTier
    matched_in: tuple[str, ...] = ()

    @property
    def is_hit(self) -> bool:
        return self.tier is not MatchTier.NONE


_MISS = TierOutcome(MatchTier.NONE)


def exact_tier(concept: str, resume_lower: str) -> TierOutcome:
    if concept in resume_lower:
        return TierOutcome(MatchTier.EXACT, (concept,))
    return _MISS


def synonym_tier(family: ConceptFamily | None, resume_lower: str) -> TierOutcome:
    if family is None:
        return _MISS
    hits = tuple(term for term in family.related_terms if term in resume_lower)
    if hits:
        return TierOutcome(MatchTier.SYNONYM, hits)
    return _MISS


def fuzzy_tier(concept: str, resume_concepts: list[str]) -> TierOutcome:
    close = tuple(c for c in resume_concepts if is_close(concept, c))
    if close:
        return TierOutcome(MatchTier.FUZZY, close)
    return _MISS


def evaluate_concept(
    concept: str,
    resume_lower: str,
    resume_concepts: list[str],
) -> tuple[TierOutcome, ConceptFamily | None]:
    """Run the tiers in priority order and return the first hit (or a miss)."""
    family = family_of(concept)
    tiers = (
        lambda: exact_tier(concept, resume_lower),
        lambda: synonym_tier(family, resume_lower),
        lambda: fuzzy_tier(concept, resume_concepts),
    )
    for run in tiers:
        outcome = run()
        if outcome.is_hit:
            return outcome, family
    return _MISS, family


def compute_overall_match(total_score: int, concept_count: int) -> int:
    """Average tier score as a 0-100 percentage.

    A job description with no recognizable concepts scores 0.
    """
    if concept_count == 0:
        return 0
    return clamp_score(round_half_up(total_score / (concept_count * 100) * 100))


def match_concepts(resume_text: str, job_text: str) -> SemanticAnalysisResult:
    """Match every job-description concept against the resume."""
    resume_lower = resume_text.lower()
    job_concepts = extract_concepts(job_text)
    resume_concepts = extract_concepts(resume_text)

    matches: list[ConceptMatch] = []
    unmatched: list[str] = []
    total_score = 0

    for concept in job_concepts:
        outcome, family = evaluate_concept(concept, resume_lower, resume_concepts)
        if outcome.is_hit:
            matches.append(
                ConceptMatch(
                    concept=concept,
                    score=outcome.tier.score,
                    matched_in=list(outcome.matched_in),
                    category=family.category if family else "general",
                )
            )
            total_score += outcome.tier.score
        else:
            unmatched.append(concept)

    overall = compute_overall_match(total_score, len(job_concepts))
    logger.debug(
        "Concept match: %d/%d job concepts matched, overall %d",
        len(matches), len(job_concepts), overall,
    )

    return SemanticAnalysisResult(
        overall_match=overall,
        matches=matches,
        unmatched_concepts=unmatched,
        job_concepts=job_concepts,
        resume_concepts=resume_concepts,
        total_job_concepts=len(job_concepts),
        matched_concept_count=len(matches),
    )
