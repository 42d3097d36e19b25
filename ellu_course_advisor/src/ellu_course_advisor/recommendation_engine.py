"""
Course Recommendation Engine

Selects one learning journey for a (partial) profile through an ordered rule
chain, then ranks that journey's courses with an additive 0-100 match score.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ellu_course_advisor.catalog import Catalog, Course, LearningJourney, default_catalog
from ellu_course_advisor.conversation_state import CourseRecommendation, UserProfile

logger = logging.getLogger(__name__)

UNABLE_TO_COMPARE = "Unable to compare courses."

JourneyRule = Tuple[str, Callable[[UserProfile], bool], str]

# Evaluated top to bottom, first match wins. An advanced user with a
# sustainability goal lands in advanced-journey because rule 2 fires first.
JOURNEY_RULES: List[JourneyRule] = [
    (
        "beginner-with-career-goal",
        lambda p: p.experience in ("complete-beginner", "some-sewing")
        and ("career-change" in p.goals or "start-business" in p.goals),
        "beginner-journey",
    ),
    (
        "experienced",
        lambda p: p.experience in ("intermediate", "advanced"),
        "advanced-journey",
    ),
    (
        "sustainability",
        lambda p: "sustainability" in p.goals or "sustainable fashion" in p.interests,
        "sustainable-journey",
    ),
    (
        "digital",
        lambda p: "digital-skills" in p.goals or "digital tools" in p.interests,
        "digital-journey",
    ),
    (
        "default",
        lambda p: True,
        "beginner-journey",
    ),
]

# (profile experience, course level) -> points
LEVEL_MATCH_POINTS: Dict[str, Dict[str, int]] = {
    "complete-beginner": {"beginner": 25, "intermediate": 10, "advanced": 0},
    "some-sewing": {"beginner": 20, "intermediate": 25, "advanced": 5},
    "intermediate": {"beginner": 10, "intermediate": 25, "advanced": 20},
    "advanced": {"beginner": 5, "intermediate": 15, "advanced": 25},
}

CONSTRUCTION_CATEGORY = "construction"


class RecommendationEngine:
    """
    Deterministic journey selection and course scoring.

    Scoring (base 50, clamped to 0-100):
    - experience vs course level: LEVEL_MATCH_POINTS
    - goals: +20 sustainability/sustainable, +20 digital-skills/digital,
      +15 career-change/beginner level (cumulative)
    - time commitment vs duration in weeks: 0-10
    - preferred style vs category: 5-15
    """

    BASE_SCORE = 50
    MAX_RECOMMENDATIONS = 5

    SUSTAINABILITY_BONUS = 20
    DIGITAL_BONUS = 20
    CAREER_CHANGE_BONUS = 15

    TIME_FULL = 10
    TIME_HALF = 5

    STYLE_BONUS = {
        "precise-technical": {CONSTRUCTION_CATEGORY: 15, "digital": 10},
        "creative-intuitive": {"draping": 15, "sustainable": 10},
    }
    STYLE_DEFAULT = 5
    MIXED_STYLE_BONUS = 10

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog or default_catalog()

    def recommend_journey(self, profile: UserProfile) -> Optional[LearningJourney]:
        """First journey whose rule matches the profile (None only if the catalog lacks it)."""
        for rule_name, predicate, journey_id in JOURNEY_RULES:
            if predicate(profile):
                logger.debug(f"🧭 [RecommendationEngine] Rule '{rule_name}' -> {journey_id}")
                return self.catalog.get_journey(journey_id)
        return None

    def generate_recommendations(self, profile: UserProfile) -> List[CourseRecommendation]:
        """
        Score every course of the selected journey.

        Args:
            profile: Current user profile

        Returns:
            At most MAX_RECOMMENDATIONS entries sorted by descending score
        """
        journey = self.recommend_journey(profile)
        if journey is None:
            logger.warning("⚠️ [RecommendationEngine] No journey available for profile")
            return []

        recommendations = [
            CourseRecommendation(
                course=course,
                match_score=self.calculate_match_score(course, profile),
                reasoning=self.generate_reasoning(course, profile, journey),
                journey=journey,
            )
            for course in self.catalog.journey_courses(journey)
        ]
        # sorted() is stable, ties keep journey order
        recommendations = sorted(recommendations, key=lambda r: r.match_score, reverse=True)
        return recommendations[:self.MAX_RECOMMENDATIONS]

    def calculate_match_score(self, course: Course, profile: UserProfile) -> int:
        score = self.BASE_SCORE

        if profile.experience:
            score += LEVEL_MATCH_POINTS.get(profile.experience, {}).get(course.level, 0)

        if "sustainability" in profile.goals and course.category == "sustainable":
            score += self.SUSTAINABILITY_BONUS
        if "digital-skills" in profile.goals and course.category == "digital":
            score += self.DIGITAL_BONUS
        if "career-change" in profile.goals and course.level == "beginner":
            score += self.CAREER_CHANGE_BONUS

        if profile.time_commitment:
            score += self._time_points(profile.time_commitment, course.duration_weeks)

        if profile.preferred_style == "mixed":
            score += self.MIXED_STYLE_BONUS
        elif profile.preferred_style in self.STYLE_BONUS:
            score += self.STYLE_BONUS[profile.preferred_style].get(course.category, self.STYLE_DEFAULT)

        return min(100, max(0, score))

    def _time_points(self, time_commitment: str, weeks: Optional[int]) -> int:
        # An unparseable duration fails every comparison.
        if time_commitment == "minimal":
            if weeks is not None and weeks <= 4:
                return self.TIME_FULL
            if weeks is not None and weeks <= 6:
                return self.TIME_HALF
            return 0
        if time_commitment == "moderate":
            return self.TIME_FULL if weeks is not None and 4 <= weeks <= 8 else self.TIME_HALF
        if time_commitment == "intensive":
            return self.TIME_FULL if weeks is not None and weeks >= 6 else self.TIME_HALF
        return 0

    def generate_reasoning(
        self,
        course: Course,
        profile: UserProfile,
        journey: Optional[LearningJourney] = None
    ) -> str:
        """Human-readable list of the rule components that fired."""
        reasons = []

        if profile.experience == "complete-beginner" and course.level == "beginner":
            reasons.append("Perfect for complete beginners")
        elif profile.experience == "advanced" and course.level == "advanced":
            reasons.append("Matches your advanced skill level")

        if "career-change" in profile.goals:
            reasons.append("Excellent for career changers")
        if "sustainability" in profile.goals and course.category == "sustainable":
            reasons.append("Aligns with your sustainability interests")
        if "digital-skills" in profile.goals and course.category == "digital":
            reasons.append("Develops your desired digital skills")

        if profile.preferred_style == "precise-technical" and course.category == CONSTRUCTION_CATEGORY:
            reasons.append("Matches your preference for technical precision")
        elif profile.preferred_style == "creative-intuitive" and course.category == "draping":
            reasons.append("Perfect for your creative, intuitive approach")

        if journey is not None:
            reasons.append(f"Part of your {journey.name.lower()}")

        if not reasons:
            reasons.append("Well-suited based on your profile")

        return ", ".join(reasons) + "."

    def compare_courses(self, course1_id: str, course2_id: str) -> str:
        """Templated side-by-side comparison, or UNABLE_TO_COMPARE if either id is unknown."""
        course1 = self.catalog.get_course(course1_id)
        course2 = self.catalog.get_course(course2_id)
        if course1 is None or course2 is None:
            return UNABLE_TO_COMPARE

        technical1 = course1.category == CONSTRUCTION_CATEGORY
        technical2 = course2.category == CONSTRUCTION_CATEGORY

        return (
            f"**{course1.name}** vs **{course2.name}**:\n\n"
            f"**Approach**: {course1.name} uses "
            f"{'mathematical, precise methods' if technical1 else 'creative, intuitive techniques'}, "
            f"while {course2.name} focuses on "
            f"{'systematic construction' if technical2 else 'artistic expression'}.\n\n"
            f"**Duration**: {course1.duration} vs {course2.duration}\n\n"
            f"**Perfect for**: {course1.name} suits {', '.join(course1.perfect_for)}, "
            f"while {course2.name} is ideal for {', '.join(course2.perfect_for)}.\n\n"
            f"**Investment**: {_format_amount(course1.pricing.amount)}€ vs "
            f"{_format_amount(course2.pricing.amount)}€\n\n"
            f"Both courses lead to valuable skills, but your choice depends on whether you prefer "
            f"{'structured precision' if technical1 else 'creative freedom'} or "
            f"{'technical accuracy' if technical2 else 'artistic expression'}."
        )


def _format_amount(amount: float) -> str:
    return str(int(amount)) if float(amount).is_integer() else f"{amount:.2f}"
