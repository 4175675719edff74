"""Skill buckets and the gap derived from two of them."""

from pydantic import BaseModel


class SkillSet(BaseModel):
    technical: list[str] = []
    soft: list[str] = []

    def all_skills(self) -> list[str]:
        return self.technical + self.soft


class SkillGap(BaseModel):
    missing_skills: list[str] = []  # job skills (technical + soft) absent from resume
    matched_skills: list[str] = []  # job technical skills present in resume
    match_percentage: int = 0  # 0 when the job lists no technical skills
