"""Fixed-vocabulary skill extraction and skill-gap computation.

The single-resume analyzer and the bulk ranker each use their own named
vocabulary.
"""

from dataclasses import dataclass

from models.schemas.skills import SkillGap, SkillSet
from services.scoring import percentage


@dataclass(frozen=True)
class SkillVocabulary:
    name: str
    technical: tuple[str, ...]
    soft: tuple[str, ...]


ANALYZER_VOCABULARY = SkillVocabulary(
    name="analyzer",
    technical=(
        # Languages
        "javascript", "typescript", "python", "java", "c++",
        # Frameworks
        "react", "vue", "angular", "node.js", "express", "django", "flask",
        # Data stores
        "sql", "mongodb",
        # Cloud & DevOps
        "aws", "azure", "docker", "kubernetes", "git", "rest api", "graphql",
        # Web
        "html", "css", "tailwind", "bootstrap", "webpack", "vite",
        # Testing & delivery
        "jest", "testing", "ci/cd", "jenkins", "github actions", "terraform",
        "ansible", "microservices", "agile", "scrum",
        # Platforms
        "linux", "windows", "mac", "mac os",
        # Roles & domains
        "devops", "cloud", "api", "web development", "full stack", "frontend",
        "backend", "database",
        # Data & ML
        "machine learning", "artificial intelligence", "data analysis",
        "data science", "deep learning", "neural network", "tensorflow",
        "pytorch", "pandas", "numpy",
    ),
    soft=(
        "communication", "leadership", "problem solving", "team work",
        "collaboration", "project management", "critical thinking",
        "time management", "attention to detail", "creativity", "adaptability",
        "work ethic", "accountability",
    ),
)

RANKER_VOCABULARY = SkillVocabulary(
    name="ranker",
    technical=(
        "javascript", "typescript", "python", "java", "react", "vue", "angular",
        "node.js", "express", "django", "flask", "sql", "mongodb", "aws", "azure",
        "docker", "kubernetes", "git", "rest api", "graphql", "html", "css",
        "devops", "ci/cd", "jenkins", "terraform", "ansible", "kafka", "redis",
        "testing", "jest", "pytest", "agile", "scrum", "machine learning",
    ),
    soft=(
        "communication", "leadership", "problem solving", "teamwork",
        "project management", "critical thinking", "time management",
    ),
)


def extract_skills(text: str, vocabulary: SkillVocabulary = ANALYZER_VOCABULARY) -> SkillSet:
    """Return every vocabulary term that occurs as a lower-cased substring.

    Buckets keep vocabulary order. Substring matching means "java" also
    hits inside "javascript".
    """
    text_lower = text.lower()
    return SkillSet(
        technical=[s for s in vocabulary.technical if s in text_lower],
        soft=[s for s in vocabulary.soft if s in text_lower],
    )


def identify_skill_gaps(resume_skills: SkillSet, job_skills: SkillSet) -> SkillGap:
    """Compare job skills against resume skills.

    ``missing_skills`` covers technical and soft skills; ``matched_skills``
    and ``match_percentage`` only consider technical ones. A job with no
    technical skills has a match percentage of 0.
    """
    resume_all = set(resume_skills.all_skills())
    resume_technical = set(resume_skills.technical)

    missing = [s for s in job_skills.all_skills() if s not in resume_all]
    matched = [s for s in job_skills.technical if s in resume_technical]

    return SkillGap(
        missing_skills=missing,
        matched_skills=matched,
        match_percentage=percentage(len(matched), len(job_skills.technical), empty=0),
    )


def missing_technical(resume_skills: SkillSet, job_skills: SkillSet) -> list[str]:
    """Job technical skills the resume lacks (ranker view)."""
    have = set(resume_skills.technical)
    return [s for s in job_skills.technical if s not in have]


def present_technical(resume_skills: SkillSet, job_skills: SkillSet) -> list[str]:
    """Resume technical skills the job asks for (ranker view)."""
    wanted = set(job_skills.technical)
    return [s for s in resume_skills.technical if s in wanted]
