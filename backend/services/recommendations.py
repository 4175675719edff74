"""Suggestions, strengths and learning plans derived from match results.

Every check below is independent: each one that triggers contributes its
entry, in the order listed, and none suppresses another.
"""

import re

from models.responses import GapGroup, LearningPath, ProjectSuggestion, Suggestion
from models.schemas.semantic_analysis import ConceptMatch
from models.schemas.skills import SkillGap
from services.ats_scorer import count_bullets
from services.scoring import round_half_up
from services.thesaurus import family_of

# ---------------------------------------------------------------------------
# Gap analysis
# ---------------------------------------------------------------------------
CRITICAL_COUNT = 3
HIGH_COUNT = 3


def generate_gap_analysis(skill_gap: SkillGap) -> list[GapGroup]:
    """Group missing skills by priority: first three Critical, next three High."""
    missing = skill_gap.missing_skills
    critical = missing[:CRITICAL_COUNT]
    high = missing[CRITICAL_COUNT:CRITICAL_COUNT + HIGH_COUNT]

    groups: list[GapGroup] = []
    if critical:
        groups.append(GapGroup(
            priority="Critical",
            skills=critical,
            description=(
                f"The role requires advanced proficiency in {', '.join(critical)}. "
                "These are core competencies that differentiate competitive candidates. "
                "Prioritize building expertise in these areas immediately."
            ),
        ))
    if high:
        groups.append(GapGroup(
            priority="High",
            skills=high,
            description=(
                f"Additional skills including {', '.join(high)} would significantly "
                "enhance your candidacy and make you a more competitive applicant."
            ),
        ))
    return groups


# ---------------------------------------------------------------------------
# Learning paths
# ---------------------------------------------------------------------------
LEARNING_RESOURCES: dict[str, dict] = {
    "javascript": {
        "resources": ["freeCodeCamp", "MDN Web Docs", "JavaScript.info"],
        "timeframe": "4-8 weeks",
        "platform": ["Udemy", "Coursera"],
    },
    "typescript": {
        "resources": ["Official TypeScript Handbook", "freeCodeCamp", "Udemy"],
        "timeframe": "2-4 weeks",
        "platform": ["TypeScript.org", "Udemy"],
    },
    "react": {
        "resources": ["Official React Docs", "freeCodeCamp", "Scrimba"],
        "timeframe": "6-10 weeks",
        "platform": ["React.dev", "Udemy", "Frontend Masters"],
    },
    "python": {
        "resources": ["Python.org", "Real Python", "freeCodeCamp"],
        "timeframe": "4-8 weeks",
        "platform": ["Udemy", "Coursera"],
    },
    "aws": {
        "resources": ["AWS Training Center", "A Cloud Guru", "Linux Academy"],
        "timeframe": "8-12 weeks",
        "platform": ["AWS Academy", "Udemy"],
    },
    "docker": {
        "resources": ["Docker Docs", "Play with Docker", "freeCodeCamp"],
        "timeframe": "2-4 weeks",
        "platform": ["Docker.com", "Udemy"],
    },
    "kubernetes": {
        "resources": ["Official Kubernetes Docs", "Linux Academy", "freeCodeCamp"],
        "timeframe": "6-10 weeks",
        "platform": ["Linux Academy", "Udemy"],
    },
    "sql": {
        "resources": ["Mode Analytics SQL", "LeetCode Database", "HackerRank"],
        "timeframe": "3-6 weeks",
        "platform": ["Mode Analytics", "Udemy"],
    },
}

DEFAULT_LEARNING_RESOURCE: dict = {
    "resources": ["Official Documentation", "Udemy", "Coursera"],
    "timeframe": "4-8 weeks",
    "platform": ["Udemy", "Coursera"],
}

MAX_LEARNING_PATHS = 3


def generate_learning_paths(missing_skills: list[str]) -> list[LearningPath]:
    paths = []
    for skill in missing_skills[:MAX_LEARNING_PATHS]:
        data = LEARNING_RESOURCES.get(skill.lower(), DEFAULT_LEARNING_RESOURCE)
        paths.append(LearningPath(
            skill=skill,
            resources=list(data["resources"]),
            timeframe=data["timeframe"],
            platform=list(data["platform"]),
        ))
    return paths


# ---------------------------------------------------------------------------
# Portfolio project
# ---------------------------------------------------------------------------
TECH_STACK_PATTERNS: dict[str, tuple[str, ...]] = {
    "React": ("react", "component", "jsx", "hooks"),
    "Node.js": ("nodejs", "node.js", "express", "backend"),
    "Python": ("python", "django", "flask"),
    "AWS": ("aws", "s3", "lambda", "cloud"),
    "Docker": ("docker", "container", "kubernetes"),
}
DEFAULT_TECH_STACK = ["React", "Node.js", "MongoDB"]

# First keyword hit wins
PROJECT_ARCHETYPES: tuple[tuple[str, str], ...] = (
    ("ecommerce", "E-Commerce Platform"),
    ("social", "Social Media Application"),
    ("saas", "SaaS Application"),
    ("analytics", "Analytics Dashboard"),
)
DEFAULT_ARCHETYPE = "Full-Stack Application"

PROJECT_FEATURES = [
    "User authentication and authorization",
    "Real-time data processing",
    "Responsive UI/UX design",
    "RESTful API design",
    "Database design and optimization",
    "Error handling and logging",
    "Unit and integration testing",
    "CI/CD pipeline implementation",
    "Cloud deployment (AWS/Azure/GCP)",
    "Performance optimization",
]


def detect_tech_stack(job_text: str) -> list[str]:
    job_lower = job_text.lower()
    return [
        tech for tech, patterns in TECH_STACK_PATTERNS.items()
        if any(p in job_lower for p in patterns)
    ]


def detect_project_archetype(job_text: str) -> str:
    job_lower = job_text.lower()
    for keyword, archetype in PROJECT_ARCHETYPES:
        if keyword in job_lower:
            return archetype
    return DEFAULT_ARCHETYPE


def generate_project_suggestion(job_text: str) -> ProjectSuggestion:
    tech_stack = detect_tech_stack(job_text)
    stack_text = ", ".join(tech_stack) if tech_stack else "modern web technologies"
    return ProjectSuggestion(
        title=f"Build a {detect_project_archetype(job_text)}",
        description=(
            "Create a comprehensive portfolio project that demonstrates proficiency "
            f"in the required tech stack: {stack_text}."
        ),
        features=list(PROJECT_FEATURES),
        tech_stack=tech_stack or list(DEFAULT_TECH_STACK),
    )


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------
YEARS_RE = re.compile(r"\d+\s*(?:years|yrs)", re.IGNORECASE | re.ASCII)
QUANTIFIED_RE = re.compile(
    r"[0-9]{1,3}%|[0-9]+(?:\.[0-9]+)?x\s+(?:increase|growth|improvement)",
    re.IGNORECASE,
)
LEADERSHIP_RESUME_RE = re.compile(r"lead|manage|supervise|directed|team", re.IGNORECASE)
SENIOR_JOB_RE = re.compile(r"senior|architect|technical lead|principal", re.IGNORECASE)
DEPTH_RESUME_RE = re.compile(
    r"architecture|design|pattern|framework|scale|optimize|mentor", re.IGNORECASE
)

LEADERSHIP_JOB_TERMS = ("leadership", "manage", "lead")
RECOMMENDED_SECTIONS = (
    "professional summary",
    "core competencies",
    "professional certifications",
    "professional affiliations",
)
COVERAGE_TARGET = 70
MAX_CRITICAL_CONCEPTS = 3


def generate_suggestions(
    resume_text: str,
    job_text: str,
    matches: list[ConceptMatch],
    unmatched_concepts: list[str],
) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    resume_lower = resume_text.lower()
    job_lower = job_text.lower()

    # Semantic gaps, reported by concept family where one exists
    if unmatched_concepts:
        families = []
        for concept in unmatched_concepts[:MAX_CRITICAL_CONCEPTS]:
            family = family_of(concept)
            families.append(family.category if family else concept)
        suggestions.append(Suggestion(
            category="Semantic Gap - Technical Alignment",
            text=(
                f"Your resume lacks semantic alignment in critical areas: {', '.join(families)}. "
                "Incorporate related keywords, demonstrate experience with similar technologies, "
                "and highlight relevant project work to improve semantic matching with this role."
            ),
        ))

    total = len(matches) + len(unmatched_concepts)
    if total > 0:
        match_rate = len(matches) / total * 100
        if match_rate < COVERAGE_TARGET:
            suggestions.append(Suggestion(
                category="Job Requirements Alignment",
                text=(
                    f"Your resume's semantic coverage is {round_half_up(match_rate)}%. "
                    "Increase alignment by: (1) Adding missing technology stacks, "
                    "(2) Emphasizing relevant methodologies, (3) Highlighting similar "
                    "projects or experiences that demonstrate capability in required domains."
                ),
            ))

    if not YEARS_RE.search(resume_lower):
        suggestions.append(Suggestion(
            category="Experience Clarity",
            text=(
                "Explicitly state years of professional experience for each role. "
                "Include both duration in years and specific employment dates to "
                "demonstrate career progression."
            ),
        ))

    if not QUANTIFIED_RE.search(resume_lower):
        suggestions.append(Suggestion(
            category="Quantifiable Achievements",
            text=(
                "Enhance impact statements with measurable results (e.g., 'increased "
                "revenue by 25%', 'reduced processing time by 40%'). Quantified "
                "accomplishments demonstrate concrete value delivery and are "
                "significantly more compelling to recruiters."
            ),
        ))

    if count_bullets(resume_lower) <= 5:
        suggestions.append(Suggestion(
            category="Formatting & Readability",
            text=(
                "Use consistent bullet-point formatting throughout your professional "
                "experience section. This improves ATS compatibility and makes content "
                "more scannable for human reviewers."
            ),
        ))

    missing_sections = [s for s in RECOMMENDED_SECTIONS if s not in resume_lower]
    if missing_sections:
        suggestions.append(Suggestion(
            category="Content Structure",
            text=(
                f"Consider adding a {' or '.join(missing_sections[:2])} section to provide "
                "additional context and strengthen your candidacy."
            ),
        ))

    if any(term in job_lower for term in LEADERSHIP_JOB_TERMS):
        if not LEADERSHIP_RESUME_RE.search(resume_lower):
            suggestions.append(Suggestion(
                category="Leadership Visibility",
                text=(
                    "The role emphasizes leadership responsibilities. Highlight team "
                    "management experiences, project leadership, mentoring activities, "
                    "and cross-functional collaboration to demonstrate capability for "
                    "leadership requirements."
                ),
            ))

    if SENIOR_JOB_RE.search(job_lower):
        if not DEPTH_RESUME_RE.search(resume_lower):
            suggestions.append(Suggestion(
                category="Technical Depth Enhancement",
                text=(
                    "Senior-level roles require demonstrating deep technical expertise. "
                    "Add content about system architecture, technical design decisions, "
                    "performance optimizations, and technical mentorship to establish "
                    "seniority."
                ),
            ))

    return suggestions


# ---------------------------------------------------------------------------
# Strengths
# ---------------------------------------------------------------------------
_STRENGTH_CHECKS: tuple[tuple[re.Pattern, str], ...] = (
    (
        re.compile(r"phd|master|m\.s\.|m\.a\.|b\.s\.|b\.a\.|certification in|certified|degree", re.IGNORECASE),
        "Comprehensive educational qualifications demonstrating professional development and expertise",
    ),
    (
        re.compile(r"lead|manager|director|supervisor|head of|chief|vice president|president", re.IGNORECASE),
        "Leadership and management experience showcasing progressive career growth and team management capabilities",
    ),
    (
        re.compile(r"certificate|certified|certification|credential|licensed|accredited", re.IGNORECASE),
        "Professional certifications and credentials enhancing domain expertise and industry credibility",
    ),
)
TIMELINE_RE = re.compile(r"\d+\+?\s+(?:years?|months?)", re.IGNORECASE | re.ASCII)
IMPACT_RE = re.compile(
    r"[0-9]{1,3}%|[0-9]+x|improved|increased|optimized|streamlined|enhanced|accelerated",
    re.IGNORECASE,
)
SKILLS_SECTION_RE = re.compile(r"\b(?:skills|proficiencies|expertise in)\b", re.IGNORECASE | re.ASCII)
DEFAULT_STRENGTH = "Resume demonstrates relevant professional experience and qualifications"


def generate_strengths(resume_text: str) -> list[str]:
    strengths = [text for pattern, text in _STRENGTH_CHECKS if pattern.search(resume_text)]

    if len(TIMELINE_RE.findall(resume_text)) > 2:
        strengths.append(
            "Clear professional timeline demonstrating sustained career trajectory and experience depth"
        )
    if IMPACT_RE.search(resume_text):
        strengths.append("Strong emphasis on measurable impact and quantified business outcomes")
    if SKILLS_SECTION_RE.search(resume_text):
        strengths.append("Well-defined technical skills and competencies clearly articulated")

    return strengths or [DEFAULT_STRENGTH]


# ---------------------------------------------------------------------------
# Improvement areas
# ---------------------------------------------------------------------------
STATED_YEARS_RE = re.compile(r"\d+\+?\s+(?:years?|yrs)", re.IGNORECASE | re.ASCII)
CONTACT_EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)
CONTACT_PHONE_RE = re.compile(r"phone|\(\d{3}\)|\d{3}[-.]?\d{3}[-.]?\d{4}", re.IGNORECASE | re.ASCII)
MIN_BULLETS = 8
MIN_LINES = 15


def generate_improvement_areas(resume_text: str) -> list[str]:
    areas = []

    if not STATED_YEARS_RE.search(resume_text):
        areas.append(
            "Career timeline lacks specificity: Clearly indicate the duration of experience "
            "for each position to help recruiters assess your expertise level."
        )
    if count_bullets(resume_text) < MIN_BULLETS:
        areas.append(
            "Insufficient use of bullet points: Enhance visual hierarchy and scannability by "
            "using consistent bullet-point formatting throughout your experience section."
        )
    if not CONTACT_EMAIL_RE.search(resume_text):
        areas.append(
            "Contact information incomplete: Include a professional email address prominently "
            "in the header for easy recruiter outreach."
        )
    if len(resume_text.split("\n")) < MIN_LINES:
        areas.append(
            "Content depth is insufficient: Expand your professional experience descriptions "
            "with more detail about accomplishments, responsibilities, and impact."
        )
    if not CONTACT_PHONE_RE.search(resume_text):
        areas.append(
            "Phone number missing: Include your phone number in the contact section for "
            "comprehensive recruiter accessibility."
        )

    return areas
