"""Concept-level match results between a resume and a job description."""

from pydantic import BaseModel


class ConceptMatch(BaseModel):
    """One job-description concept found in the resume."""
    concept: str
    score: int  # 100 exact, 80 synonym, 60 fuzzy
    matched_in: list[str] = []  # literal terms that produced the hit
    category: str = "general"  # concept family, "general" if none


class SemanticAnalysisResult(BaseModel):
    """Aggregate of all concept matches for one (resume, job) pair.

    Every job concept lands in exactly one of ``matches`` or
    ``unmatched_concepts``, both in job-description extraction order.
    """
    overall_match: int = 0  # 0-100
    matches: list[ConceptMatch] = []
    unmatched_concepts: list[str] = []
    job_concepts: list[str] = []
    resume_concepts: list[str] = []
    total_job_concepts: int = 0
    matched_concept_count: int = 0
