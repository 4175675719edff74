"""Tests for fixed-vocabulary skill extraction."""

from models.schemas.skills import SkillSet
from services.skill_extractor import (
    ANALYZER_VOCABULARY,
    RANKER_VOCABULARY,
    extract_skills,
    identify_skill_gaps,
    missing_technical,
    present_technical,
)


def test_extract_skills_empty_text():
    skills = extract_skills("")
    assert skills.technical == []
    assert skills.soft == []


def test_extract_skills_case_insensitive():
    skills = extract_skills("Python, DOCKER and Kubernetes")
    assert "python" in skills.technical
    assert "docker" in skills.technical
    assert "kubernetes" in skills.technical


def test_extract_skills_keeps_vocabulary_order():
    skills = extract_skills("kubernetes then docker then python")
    assert skills.technical.index("python") < skills.technical.index("docker")
    assert skills.technical.index("docker") < skills.technical.index("kubernetes")


def test_substring_matching_hits_java_inside_javascript():
    skills = extract_skills("JavaScript developer")
    assert "javascript" in skills.technical
    assert "java" in skills.technical


def test_soft_skills_bucket():
    skills = extract_skills("Strong communication and leadership, good at problem solving")
    assert skills.soft == ["communication", "leadership", "problem solving"]


def test_vocabularies_differ():
    text = "Kafka, Redis and pytest. Great teamwork."
    analyzer = extract_skills(text, ANALYZER_VOCABULARY)
    ranker = extract_skills(text, RANKER_VOCABULARY)
    assert "kafka" not in analyzer.technical
    assert {"kafka", "redis", "pytest"} <= set(ranker.technical)
    assert "teamwork" in ranker.soft
    assert "teamwork" not in analyzer.soft


def test_vocabulary_sizes():
    assert len(ANALYZER_VOCABULARY.technical) == 59
    assert len(ANALYZER_VOCABULARY.soft) == 13
    assert len(RANKER_VOCABULARY.technical) == 35
    assert len(RANKER_VOCABULARY.soft) == 7


def test_all_skills_concatenates_buckets():
    skills = SkillSet(technical=["python"], soft=["leadership"])
    assert skills.all_skills() == ["python", "leadership"]


def test_identify_skill_gaps():
    resume = SkillSet(technical=["python", "git"], soft=[])
    job = SkillSet(technical=["python", "docker"], soft=["leadership"])
    gap = identify_skill_gaps(resume, job)
    assert gap.missing_skills == ["docker", "leadership"]
    assert gap.matched_skills == ["python"]
    assert gap.match_percentage == 50


def test_identify_skill_gaps_rounds_half_up():
    resume = SkillSet(technical=["python"])
    job = SkillSet(technical=["python", "docker", "aws", "sql", "git", "java", "css", "html"])
    assert identify_skill_gaps(resume, job).match_percentage == 13


def test_identify_skill_gaps_without_job_technical_skills():
    resume = SkillSet(technical=["python"])
    job = SkillSet(technical=[], soft=["communication"])
    gap = identify_skill_gaps(resume, job)
    assert gap.match_percentage == 0
    assert gap.matched_skills == []
    assert gap.missing_skills == ["communication"]


def test_identify_skill_gaps_full_match():
    skills = SkillSet(technical=["python", "docker"], soft=["leadership"])
    gap = identify_skill_gaps(skills, skills)
    assert gap.missing_skills == []
    assert gap.match_percentage == 100


def test_ranker_technical_views():
    resume = SkillSet(technical=["python", "git", "docker"])
    job = SkillSet(technical=["docker", "kafka", "python"])
    assert missing_technical(resume, job) == ["kafka"]
    assert present_technical(resume, job) == ["python", "docker"]
