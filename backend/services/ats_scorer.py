"""Rule-based estimate of how well a resume survives ATS screening.

Starts from a base of 50 and adds independent formatting bonuses,
capped at 100. No rule ever subtracts, so any input scores 50-100.
"""

import re

from services.scoring import clamp_score

BASE_SCORE = 50

# "Firstname Lastname"-shaped pair of capitalized words
NAME_RE = re.compile(r"[A-Z][a-z]+\s+[A-Z][a-z]+")
PHONE_RE = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII)
EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)
# Bullet glyphs counted for formatting (hyphen included)
BULLET_RE = re.compile(r"[•\-*]")

SECTION_KEYWORDS: tuple[str, ...] = (
    "experience", "education", "skills", "projects", "certification",
)

ACTION_VERBS: tuple[str, ...] = (
    "developed", "managed", "led", "created", "implemented", "designed",
    "improved", "achieved",
)

NAME_BONUS = 10
PHONE_BONUS = 5
EMAIL_BONUS = 5
SECTION_BONUS = 5
BULLET_BONUS = 10
BULLET_MIN_COUNT = 5  # strictly more than this many glyphs
ACTION_VERB_BONUS = 5


def count_bullets(text: str) -> int:
    return len(BULLET_RE.findall(text))


def found_sections(text: str) -> list[str]:
    text_lower = text.lower()
    return [s for s in SECTION_KEYWORDS if s in text_lower]


def ats_score(resume_text: str) -> int:
    score = BASE_SCORE

    if NAME_RE.search(resume_text):
        score += NAME_BONUS
    if PHONE_RE.search(resume_text):
        score += PHONE_BONUS
    if EMAIL_RE.search(resume_text):
        score += EMAIL_BONUS

    score += SECTION_BONUS * len(found_sections(resume_text))

    if count_bullets(resume_text) > BULLET_MIN_COUNT:
        score += BULLET_BONUS

    text_lower = resume_text.lower()
    if any(verb in text_lower for verb in ACTION_VERBS):
        score += ACTION_VERB_BONUS

    return clamp_score(score)
