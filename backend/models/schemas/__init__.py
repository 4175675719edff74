"""Pydantic contracts shared between the matching services and the API."""

from models.schemas.candidate import Candidate, ExtractionFailure, PreparedEmail
from models.schemas.interview import Difficulty, InterviewQuestion, InterviewScores, Scorecard
from models.schemas.semantic_analysis import ConceptMatch, SemanticAnalysisResult
from models.schemas.skills import SkillGap, SkillSet

__all__ = [
    "Candidate",
    "ExtractionFailure",
    "PreparedEmail",
    "Difficulty",
    "InterviewQuestion",
    "InterviewScores",
    "Scorecard",
    "ConceptMatch",
    "SemanticAnalysisResult",
    "SkillGap",
    "SkillSet",
]
