"""Mock coding interview backed by Gemini.

The model's replies are free text expected to contain a JSON object; a
reply that cannot be parsed is a recoverable GenerationFailedError.
"""

import logging
from typing import get_args

from pydantic import ValidationError

from models.schemas.interview import Difficulty, InterviewQuestion, Scorecard
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

INTERVIEW_DURATION_SECONDS = 45 * 60
DIFFICULTIES: tuple[str, ...] = get_args(Difficulty)

LANGUAGE_TEMPLATES: dict[str, str] = {
    "JavaScript": "function solution() {\n  \n}",
    "Python": "def solution():\n    pass",
    "Java": "class Solution {\n  public static void solution() {\n    \n  }\n}",
    "C++": "#include <bits/stdc++.h>\nusing namespace std;\n\nvoid solution() {\n\n}",
}


class GenerationFailedError(RuntimeError):
    pass


class UnknownLanguageError(ValueError):
    pass


def template_for(language: str) -> str:
    try:
        return LANGUAGE_TEMPLATES[language]
    except KeyError:
        raise UnknownLanguageError(f"Unsupported language: {language}") from None


async def generate_question(difficulty: str = "Medium") -> InterviewQuestion:
    data = await gemini_client.generate_json(prompt_builder.build_question_prompt(difficulty))
    if data is None:
        raise GenerationFailedError("Failed to generate question.")
    try:
        question = InterviewQuestion.model_validate(data)
    except ValidationError as e:
        logger.error("Malformed interview question: %s", e)
        raise GenerationFailedError("Failed to generate question.") from e
    if not question.problem:
        raise GenerationFailedError("Failed to generate question.")
    return question


async def ask_clarification(question: str) -> str:
    reply = await gemini_client.generate_text(prompt_builder.build_clarification_prompt(question))
    if not reply:
        raise GenerationFailedError("Interviewer is unavailable.")
    return reply


async def evaluate_solution(language: str, problem: str, code: str) -> Scorecard:
    template_for(language)
    data = await gemini_client.generate_json(
        prompt_builder.build_evaluation_prompt(language, problem, code),
        temperature=0.3,
    )
    if data is None:
        raise GenerationFailedError("Evaluation failed.")
    try:
        return Scorecard.model_validate(data)
    except ValidationError as e:
        logger.error("Malformed scorecard: %s", e)
        raise GenerationFailedError("Evaluation failed.") from e
