"""Single resume vs. job description analysis.

Pipeline:
1. Concept matching (lexical extraction + thesaurus + fuzzy fallback)
2. ATS formatting score
3. Skill extraction on both texts and the resulting skill gap
4. Recommendations: suggestions, strengths, gap groups, learning paths,
   portfolio project

Every step is a pure function of the two texts and the static tables,
so ``analyze`` returns a well-defined report for any pair of strings.
"""

import logging

from models.responses import AnalysisReport, SkillsReport
from services import recommendations
from services.ats_scorer import ats_score
from services.concept_matcher import match_concepts
from services.skill_extractor import ANALYZER_VOCABULARY, extract_skills, identify_skill_gaps

logger = logging.getLogger(__name__)


class InputRejectedError(ValueError):
    """Resume or job description is blank; analysis is not attempted."""


def validate_inputs(resume_text: str, job_description: str) -> None:
    if not resume_text.strip():
        raise InputRejectedError("Please provide resume content")
    if not job_description.strip():
        raise InputRejectedError("Please provide a job description")


def analyze(resume_text: str, job_description: str) -> AnalysisReport:
    """Run the full heuristic analysis pipeline."""
    # --- Concept matching ---
    semantic = match_concepts(resume_text, job_description)

    # --- Formatting ---
    ats = ats_score(resume_text)

    # --- Skills ---
    resume_skills = extract_skills(resume_text, ANALYZER_VOCABULARY)
    job_skills = extract_skills(job_description, ANALYZER_VOCABULARY)
    skill_gap = identify_skill_gaps(resume_skills, job_skills)

    # --- Recommendations ---
    suggestions = recommendations.generate_suggestions(
        resume_text, job_description, semantic.matches, semantic.unmatched_concepts
    )

    logger.info(
        "Analyzed resume: match=%d ats=%d matched=%d unmatched=%d missing_skills=%d",
        semantic.overall_match,
        ats,
        semantic.matched_concept_count,
        len(semantic.unmatched_concepts),
        len(skill_gap.missing_skills),
    )

    return AnalysisReport(
        match_percentage=semantic.overall_match,
        ats_score=ats,
        matched_keywords=[m.concept for m in semantic.matches],
        missing_keywords=list(semantic.unmatched_concepts),
        suggestions=suggestions,
        strengths=recommendations.generate_strengths(resume_text),
        improvement_areas=recommendations.generate_improvement_areas(resume_text),
        skills=SkillsReport(present=resume_skills, required=job_skills, gap=skill_gap),
        gap_analysis=recommendations.generate_gap_analysis(skill_gap),
        learning_paths=recommendations.generate_learning_paths(skill_gap.missing_skills),
        project_suggestion=recommendations.generate_project_suggestion(job_description),
        semantic_analysis=semantic,
    )
