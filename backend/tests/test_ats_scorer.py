"""Tests for the ATS formatting score."""

import pytest

from services.ats_scorer import BASE_SCORE, ats_score, count_bullets, found_sections


def test_empty_text_gets_base_score():
    assert ats_score("") == BASE_SCORE == 50


def test_name_bonus():
    assert ats_score("Jane Doe") == 60


def test_phone_bonus():
    assert ats_score("call 555-123-4567") == 55


def test_email_bonus():
    assert ats_score("mail: a@b.com") == 55


def test_section_bonus_per_section():
    assert ats_score("experience education skills projects certification") == 75


def test_bullets_need_more_than_five():
    five = "\n".join(["- x"] * 5)
    six = "\n".join(["- x"] * 6)
    assert ats_score(five) == 50
    assert ats_score(six) == 60


def test_action_verb_bonus():
    assert ats_score("developed things") == 55


def test_full_resume_is_capped(sample_resume):
    assert ats_score(sample_resume) == 100


@pytest.mark.parametrize("text", [
    "",
    "   \n\t",
    "lorem ipsum",
    "Jane Doe 555.123.4567 jane@x.io",
    "•" * 200,
    "experience " * 50,
])
def test_score_stays_in_range(text):
    assert 50 <= ats_score(text) <= 100


def test_count_bullets_counts_all_glyphs():
    assert count_bullets("• a * b - c") == 3
    assert count_bullets("no bullets here") == 0


def test_found_sections_case_insensitive():
    assert found_sections("EXPERIENCE and Skills") == ["experience", "skills"]


def test_non_ascii_digits_are_not_a_phone():
    assert ats_score("١٢٣٤٥٦٧٨٩٠") == 50


def test_non_ascii_word_characters_are_not_an_email():
    assert ats_score("é@é.é") == 50
