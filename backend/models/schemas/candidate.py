"""Ranker contracts: one uploaded resume and per-file extraction failures."""

from typing import Literal

from pydantic import BaseModel

from models.schemas.skills import SkillSet


class Candidate(BaseModel):
    """A ranked resume held in the ranker's in-memory collection."""
    id: str
    file_name: str
    resume_text: str
    email: str = ""
    phone: str = ""
    name: str = "Unknown"
    match_percentage: int = 0
    ats_score: int = 0
    resume_skills: SkillSet = SkillSet()
    job_skills: SkillSet = SkillSet()
    missing_skills: list[str] = []  # job technical skills not in resume
    present_skills: list[str] = []  # resume technical skills the job asks for
    rank_label: str = "Poor"  # Excellent / Good / Fair / Poor


FailureReason = Literal["no_text", "unsupported", "too_large", "error"]


class ExtractionFailure(BaseModel):
    file_name: str
    reason: FailureReason
    detail: str = ""


class PreparedEmail(BaseModel):
    """A simulated outgoing message; nothing is actually sent."""
    candidate_id: str
    name: str
    to: str
    subject: str
    message: str
