"""
Unit Tests for Profile Extractor

Tests bilingual keyword extraction of experience, goals, style, language
and email.
"""

import pytest
import sys
import os

# Add project root to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
sys.path.insert(0, os.path.join(project_root, "ellu_course_advisor", "src"))

from ellu_course_advisor.conversation_state import UserProfile
from ellu_course_advisor.profile_extractor import (
    EXPERIENCE_RULES,
    GOAL_RULES,
    ProfileExtractor,
    infer_language,
)


class TestExperienceExtraction:
    """Test experience detection (first match wins)."""

    @pytest.fixture
    def extractor(self):
        return ProfileExtractor()

    @pytest.mark.parametrize("text,expected", [
        ("I'm a complete beginner", "complete-beginner"),
        ("I have never sewn anything", "complete-beginner"),
        ("Ich bin kompletter Anfänger", "complete-beginner"),
        ("I have some experience with basic sewing", "some-sewing"),
        ("Ich habe etwas Erfahrung", "some-sewing"),
        ("I would call myself intermediate", "intermediate"),
        ("Ich bin fortgeschritten", "intermediate"),
        ("I'm an experienced sewer", "advanced"),
        ("Ich bin Experte", "advanced"),
    ])
    def test_levels(self, extractor, text, expected):
        profile = extractor.extract(text, UserProfile())
        assert profile.experience == expected

    def test_earlier_rule_wins(self, extractor):
        """Test a complete-beginner phrase beats a later some-experience phrase."""
        profile = extractor.extract("I'm a complete beginner, well maybe some experience", UserProfile())
        assert profile.experience == "complete-beginner"

    def test_learn_more_is_not_experience(self, extractor):
        """Test "mehr erfahren" (learn more) leaves the level alone."""
        profile = UserProfile(experience="complete-beginner")
        extractor.extract("Ich möchte mehr über die Kurse erfahren", profile)
        assert profile.experience == "complete-beginner"

    @pytest.mark.parametrize("text", ["Ich bin erfahren", "Ich bin eine erfahrene Schneiderin"])
    def test_german_advanced(self, extractor, text):
        assert extractor.extract(text, UserProfile()).experience == "advanced"

    def test_no_match_keeps_value(self, extractor):
        profile = UserProfile(experience="advanced")
        extractor.extract("I love dresses", profile)
        assert profile.experience == "advanced"

    def test_rule_order_is_exposed(self):
        assert [level for level, _ in EXPERIENCE_RULES] == [
            "complete-beginner", "some-sewing", "intermediate", "advanced",
        ]


class TestGoalExtraction:
    """Test goal detection and accumulation."""

    @pytest.fixture
    def extractor(self):
        return ProfileExtractor()

    def test_goals_accumulate(self, extractor):
        profile = UserProfile()
        extractor.extract("I'm thinking about a career change", profile)
        extractor.extract("and I care about sustainable fashion", profile)
        assert profile.goals == ["career-change", "sustainability"]

    def test_goals_not_duplicated(self, extractor):
        profile = UserProfile()
        extractor.extract("career change", profile)
        extractor.extract("a new career, a real career change", profile)
        assert profile.goals == ["career-change"]

    def test_goals_never_removed(self, extractor):
        profile = UserProfile(goals=["hobby"])
        extractor.extract("Nothing relevant here", profile)
        assert profile.goals == ["hobby"]

    def test_multiple_goals_one_message(self, extractor):
        goals = extractor.detect_goals("I want to start my own business with digital tools")
        assert goals == ["start-business", "digital-skills"]

    @pytest.mark.parametrize("text,expected", [
        ("Ich plane einen Karrierewechsel", "career-change"),
        ("Ich möchte mich selbstständig machen", "start-business"),
        ("Nur als Hobby in der Freizeit", "hobby"),
        ("Nachhaltige Mode ist mir wichtig", "sustainability"),
        ("Digitales Design mit dem Computer", "digital-skills"),
    ])
    def test_german_goals(self, extractor, text, expected):
        assert expected in extractor.detect_goals(text)

    def test_recommend_is_not_eco(self, extractor):
        assert "sustainability" not in extractor.detect_goals("What do you recommend?")

    def test_goal_table_covers_all_goals(self):
        assert {goal for goal, _ in GOAL_RULES} == {
            "hobby", "career-change", "start-business", "sustainability", "digital-skills",
        }


class TestStyleExtraction:
    """Test style detection (mixed checked first)."""

    @pytest.fixture
    def extractor(self):
        return ProfileExtractor()

    def test_creative_and_technical_is_mixed(self, extractor):
        profile = extractor.extract("I like both creative and technical approaches", UserProfile())
        assert profile.preferred_style == "mixed"

    def test_co_occurrence_without_mixed_keyword(self, extractor):
        assert extractor.detect_style("creative but also technical") == "mixed"

    @pytest.mark.parametrize("text,expected", [
        ("technical", "precise-technical"),
        ("I prefer precise, mathematical work", "precise-technical"),
        ("präzise und genau", "precise-technical"),
        ("I'm very creative and intuitive", "creative-intuitive"),
        ("eher kreativ", "creative-intuitive"),
        ("Ich bin offen für beides", "mixed"),
    ])
    def test_styles(self, extractor, text, expected):
        assert extractor.detect_style(text) == expected

    def test_later_match_overwrites(self, extractor):
        profile = UserProfile(preferred_style="mixed")
        extractor.extract("actually I'm more artistic", profile)
        assert profile.preferred_style == "creative-intuitive"


class TestLanguageExtraction:
    """Test explicit and inferred language preference."""

    @pytest.fixture
    def extractor(self):
        return ProfileExtractor()

    def test_explicit_english(self, extractor):
        profile = extractor.extract("Please answer in English", UserProfile())
        assert profile.preferred_language == "english"

    def test_explicit_german_overrides_inferred(self, extractor):
        profile = UserProfile(preferred_language="english")
        extractor.extract("Bitte auf Deutsch", profile)
        assert profile.preferred_language == "german"

    def test_inferred_only_when_unset(self, extractor):
        profile = UserProfile(preferred_language="english")
        extractor.extract("Hallo, ich bin neu und möchte einen Kurs", profile)
        assert profile.preferred_language == "english"

    def test_clear_english_inferred(self):
        assert infer_language("Hello, can you please help me, what courses are there?") == "english"

    def test_few_english_words_default_to_german(self):
        assert infer_language("Hello there") == "german"

    def test_english_needs_margin_over_german(self):
        # 3 English hits vs 1 German hit: lead of 2 is not enough
        assert infer_language("hello what can ich") == "german"

    def test_german_inferred(self):
        assert infer_language("Hallo, ich möchte einen Kurs buchen") == "german"


class TestEmailExtraction:
    """Test email capture."""

    def test_email_captured(self):
        profile = ProfileExtractor().extract("You can reach me at anna.schmidt@example.de, thanks", UserProfile())
        assert profile.email == "anna.schmidt@example.de"

    def test_no_email(self):
        profile = ProfileExtractor().extract("no address here", UserProfile())
        assert profile.email is None
