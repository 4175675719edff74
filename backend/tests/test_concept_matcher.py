import dataclasses

import pytest

from services.concept_extractor import extract_concepts
from services.concept_matcher import (
    MatchTier,
    compute_overall_match,
    evaluate_concept,
    exact_tier,
    fuzzy_tier,
    match_concepts,
    synonym_tier,
)
from services.thesaurus import family_of

PAIRS = [
    ("Experienced React developer, built REST APIs", "Looking for a React engineer"),
    ("", "Python Django SQL"),
    ("Python Django SQL", ""),
    ("", ""),
    ("Kubernetes, Terraform, Jenkins pipelines", "DevOps engineer with CI/CD and monitoring"),
    ("Team lead, mentoring, communication", "Leadership and collaboration across teams"),
]


# --- Individual tiers ---


def test_exact_tier_hit():
    outcome = exact_tier("aws", "deployed on aws")
    assert outcome.tier is MatchTier.EXACT
    assert outcome.matched_in == ("aws",)


def test_exact_tier_miss():
    assert exact_tier("aws", "deployed on azure").tier is MatchTier.NONE


def test_synonym_tier_collects_all_hits():
    outcome = synonym_tier(family_of("cloud computing"), "used azure and gcp")
    assert outcome.tier is MatchTier.SYNONYM
    assert outcome.matched_in == ("azure", "gcp")


def test_synonym_tier_without_family():
    assert synonym_tier(None, "anything").tier is MatchTier.NONE


def test_fuzzy_tier_hit():
    outcome = fuzzy_tier("devops", ["dev ops", "react"])
    assert outcome.tier is MatchTier.FUZZY
    assert outcome.matched_in == ("dev ops",)


def test_fuzzy_tier_miss():
    assert fuzzy_tier("devops", ["react", "frontend"]).tier is MatchTier.NONE


def test_misses_share_an_immutable_outcome():
    miss = exact_tier("aws", "nothing here")
    assert miss is synonym_tier(None, "nothing here")
    assert miss.matched_in == ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        miss.matched_in = ("aws",)
    assert exact_tier("aws", "nothing here").matched_in == ()


def test_tier_scores():
    assert [t.score for t in MatchTier] == [100, 80, 60, 0]


# --- Tier priority ---


def test_exact_beats_synonym():
    outcome, family = evaluate_concept(
        "cloud computing", "cloud computing on aws", ["cloud computing", "aws"]
    )
    assert outcome.tier is MatchTier.EXACT
    assert outcome.matched_in == ("cloud computing",)
    assert family.category == "cloud computing"


def test_synonym_beats_fuzzy():
    outcome, _ = evaluate_concept("cloud computing", "aws lambda", ["cloud computin"])
    assert outcome.tier is MatchTier.SYNONYM


def test_fuzzy_used_only_as_fallback():
    outcome, _ = evaluate_concept("devops", "nothing relevant", ["dev ops"])
    assert outcome.tier is MatchTier.FUZZY
    assert outcome.matched_in == ("dev ops",)


def test_no_tier_hits():
    outcome, _ = evaluate_concept("devops", "nothing relevant", [])
    assert outcome.tier is MatchTier.NONE
    assert not outcome.is_hit


# --- Overall score ---


def test_compute_overall_match_zero_concepts():
    assert compute_overall_match(0, 0) == 0


def test_compute_overall_match_rounds_half_up():
    assert compute_overall_match(250, 4) == 63
    assert compute_overall_match(260, 3) == 87


def test_compute_overall_match_clamped():
    assert compute_overall_match(500, 4) == 100


# --- Full matching ---


@pytest.mark.parametrize("resume,jd", PAIRS)
def test_concepts_partitioned_exactly(resume, jd):
    result = match_concepts(resume, jd)
    matched = [m.concept for m in result.matches]
    assert result.total_job_concepts == len(result.matches) + len(result.unmatched_concepts)
    assert not set(matched) & set(result.unmatched_concepts)
    assert sorted(matched + result.unmatched_concepts) == sorted(result.job_concepts)
    assert result.matched_concept_count == len(result.matches)
    assert all(m.score > 0 for m in result.matches)
    assert 0 <= result.overall_match <= 100


def test_matches_keep_job_description_order():
    result = match_concepts("React AWS Docker", "Docker, AWS and React")
    matched = [m.concept for m in result.matches]
    assert matched == [c for c in result.job_concepts if c in matched]


@pytest.mark.parametrize("jd", [
    "Looking for a React engineer with REST API and AWS cloud experience.",
    "Python Django SQL",
    "DevOps engineer: Kubernetes, Terraform, monitoring, leadership",
])
def test_verbatim_concepts_score_100(jd):
    resume = jd + " " + " ".join(extract_concepts(jd))
    result = match_concepts(resume, jd)
    assert result.overall_match == 100
    assert result.unmatched_concepts == []


def test_general_category_for_unfamilied_concept():
    result = match_concepts("python developer", "python")
    assert result.job_concepts == ["python"]
    assert result.matches[0].score == 100
    assert result.matches[0].category == "general"
    assert result.overall_match == 100


def test_synonym_match_reports_terms_and_family():
    result = match_concepts("Deployed to azure", "cloud computing")
    by_concept = {m.concept: m for m in result.matches}
    assert by_concept["cloud computing"].score == 80
    assert by_concept["cloud computing"].matched_in == ["azure"]
    assert by_concept["cloud computing"].category == "cloud computing"


def test_empty_job_description_scores_zero():
    result = match_concepts("Python developer", "")
    assert result.overall_match == 0
    assert result.total_job_concepts == 0
    assert result.matches == []


def test_empty_resume_scenario():
    result = match_concepts("", "Python Django SQL")
    assert result.overall_match == 0
    assert result.matches == []
    assert result.unmatched_concepts
    assert "python" in result.unmatched_concepts


def test_react_rest_aws_scenario():
    resume = (
        "Experienced React developer, built REST APIs, AWS deployment, "
        "5 years experience, increased conversion by 20%."
    )
    jd = "Looking for a React engineer with REST API and AWS cloud experience."
    result = match_concepts(resume, jd)
    by_concept = {m.concept: m for m in result.matches}

    assert result.overall_match >= 80
    assert result.unmatched_concepts == []
    assert by_concept["frontend frameworks"].score == 80
    assert by_concept["cloud computing"].score == 80
    assert by_concept["api development"].score == 80
    assert by_concept["rest api"].score == 100
    assert by_concept["react"].score == 100
