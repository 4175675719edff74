"""All prompt templates for the mock interview's Gemini calls."""


def build_question_prompt(difficulty: str) -> str:
    """Call A: generate a coding problem."""
    return f"""Generate a FAANG-style {difficulty} coding interview problem.

Return ONLY JSON:
{{
  "problem": "",
  "examples": "",
  "constraints": "",
  "followUp": ""
}}"""


def build_clarification_prompt(question: str) -> str:
    """Call B: the interviewer answers a clarifying question (free text)."""
    return f"""You are the interviewer.
Answer the candidate's clarification briefly and realistically.

Question:
{question}"""


def build_evaluation_prompt(language: str, problem: str, code: str) -> str:
    """Call C: score a submitted solution."""
    return f"""You are a FAANG interviewer.

Language: {language}
Problem:
{problem}

Candidate Solution:
{code}

Evaluate and score.

Return JSON ONLY:
{{
  "scores": {{
    "correctness": 0,
    "efficiency": 0,
    "codeQuality": 0,
    "communication": 0,
    "problemSolving": 0
  }},
  "verdict": "Hire / No Hire",
  "feedback": ""
}}"""
