"""Mock coding interview payloads parsed from LLM output."""

from typing import Literal

from pydantic import BaseModel, Field

Difficulty = Literal["Easy", "Medium", "Hard"]


class InterviewQuestion(BaseModel):
    problem: str = ""
    examples: str = ""
    constraints: str = ""
    follow_up: str = Field("", alias="followUp")

    model_config = {"populate_by_name": True}


class InterviewScores(BaseModel):
    correctness: int = 0
    efficiency: int = 0
    code_quality: int = Field(0, alias="codeQuality")
    communication: int = 0
    problem_solving: int = Field(0, alias="problemSolving")

    model_config = {"populate_by_name": True}


class Scorecard(BaseModel):
    scores: InterviewScores = InterviewScores()
    verdict: str = ""
    feedback: str = ""
