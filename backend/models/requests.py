from pydantic import BaseModel, Field

from models.schemas.interview import Difficulty


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=10000, description="Job description text")


class JobDescriptionRequest(BaseModel):
    job_description: str = Field("", max_length=10000, description="Job description used to rank new uploads")


class EmailRequest(BaseModel):
    subject: str = Field("Interview Opportunity", max_length=200)
    message: str = Field(
        "We are impressed with your profile and would like to invite you for an interview.",
        max_length=5000,
    )


class QuestionRequest(BaseModel):
    difficulty: Difficulty = "Medium"


class ClarificationRequest(BaseModel):
    question: str = Field(..., min_length=1, max_length=2000)


class SolutionRequest(BaseModel):
    language: str = Field("C++", description="One of JavaScript, Python, Java, C++")
    problem: str = Field(..., min_length=1, max_length=10000)
    code: str = Field(..., max_length=50000)
