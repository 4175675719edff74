from pydantic import BaseModel

from models.schemas.candidate import Candidate, ExtractionFailure, PreparedEmail
from models.schemas.semantic_analysis import SemanticAnalysisResult
from models.schemas.skills import SkillGap, SkillSet


class Suggestion(BaseModel):
    category: str
    text: str


class GapGroup(BaseModel):
    priority: str  # "Critical" | "High"
    skills: list[str]
    description: str


class LearningPath(BaseModel):
    skill: str
    resources: list[str]
    timeframe: str
    platform: list[str]


class ProjectSuggestion(BaseModel):
    title: str
    description: str
    features: list[str] = []
    tech_stack: list[str] = []
    estimated_duration: str = "8-12 weeks"
    portfolio: bool = True
    github_public: bool = True
    demo_url: bool = True


class SkillsReport(BaseModel):
    present: SkillSet = SkillSet()
    required: SkillSet = SkillSet()
    gap: SkillGap = SkillGap()


class AnalysisReport(BaseModel):
    match_percentage: int = 0
    ats_score: int = 0
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    suggestions: list[Suggestion] = []
    strengths: list[str] = []
    improvement_areas: list[str] = []
    skills: SkillsReport = SkillsReport()
    gap_analysis: list[GapGroup] = []
    learning_paths: list[LearningPath] = []
    project_suggestion: ProjectSuggestion | None = None
    semantic_analysis: SemanticAnalysisResult = SemanticAnalysisResult()


class RankerState(BaseModel):
    job_description: str = ""
    candidates: list[Candidate] = []
    selected: list[str] = []


class UploadResult(BaseModel):
    added: list[Candidate] = []
    failures: list[ExtractionFailure] = []
    state: RankerState = RankerState()


class EmailResult(BaseModel):
    prepared: list[PreparedEmail] = []
    selected_count: int = 0
    detail: str = ""


class ClarificationResponse(BaseModel):
    reply: str


class InterviewConfig(BaseModel):
    duration_seconds: int
    difficulties: list[str]
    language_templates: dict[str, str]
