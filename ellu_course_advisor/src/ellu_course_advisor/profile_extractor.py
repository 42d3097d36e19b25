"""
Profile Extraction

Greedy, order-sensitive keyword matching (German + English) that updates a
partial UserProfile from free text. Safe to run on every turn: fields are only
ever overwritten by a later match, goals only accumulate.
"""

import logging
import re
from typing import List, Optional, Tuple

from ellu_course_advisor.conversation_state import UserProfile

logger = logging.getLogger(__name__)

Rule = Tuple[str, Tuple[str, ...]]

# First match wins, so order is precedence.
EXPERIENCE_RULES: Tuple[Rule, ...] = (
    ("complete-beginner", (
        "complete beginner", "never", "new to",
        "völliger anfänger", "kompletter anfänger", "noch nie", "neu dabei", "keine erfahrung",
    )),
    ("some-sewing", (
        "some experience", "basic", "little",
        "etwas erfahrung", "grundlagen", "bisschen", "wenig erfahrung", "anfänger",
    )),
    ("intermediate", (
        "intermediate", "moderate",
        "mittelstufe", "fortgeschritten", "mittel",
    )),
    ("advanced", (
        "advanced", "experienced", "expert",
        "bin erfahren", "erfahrene", "experte",
    )),
)

# Independent checks, any subset may fire.
GOAL_RULES: Tuple[Rule, ...] = (
    ("career-change", (
        "career change", "new career",
        "karrierewechsel", "berufswechsel", "neue karriere",
    )),
    ("start-business", (
        "business", "start my own", "own company", "own label",
        "unternehmen", "selbstständig", "firma gründen", "eigenes label",
    )),
    ("hobby", (
        "hobby", "for fun", "personal",
        "spaß", "freizeit", "privat",
    )),
    ("sustainability", (
        "sustainab", "eco-", "eco fashion", "ecolog", "environment",
        "nachhaltig", "öko", "umwelt",
    )),
    ("digital-skills", (
        "digital", "computer", "technology",
        "technologie",
    )),
)

# "mixed" signals are checked before the single styles.
MIXED_STYLE_KEYWORDS = ("both", "open", "either", "beides", "offen", "sowohl")
STYLE_RULES: Tuple[Rule, ...] = (
    ("precise-technical", (
        "precise", "technical", "mathematical", "systematic",
        "präzise", "technisch", "mathematisch", "genau", "systematisch",
    )),
    ("creative-intuitive", (
        "creative", "intuitive", "artistic", "organic",
        "kreativ", "intuitiv", "künstlerisch",
    )),
)

EXPLICIT_LANGUAGE_RULES: Tuple[Rule, ...] = (
    ("english", ("english", "englisch")),
    ("german", ("deutsch", "german")),
)

ENGLISH_STOPWORDS = frozenset([
    "hello", "hi", "english", "please", "help", "what", "how", "when", "where",
    "can", "could", "would", "should",
])
GERMAN_STOPWORDS = frozenset([
    "hallo", "deutsch", "bitte", "hilfe", "was", "wie", "wann", "wo", "können", "kann",
    "möchte", "sollte", "ich", "bin", "ist", "das", "der", "die", "und", "mit", "für",
    "ein", "eine", "nicht", "haben", "sein", "werden", "kurs", "kurse",
])
ENGLISH_MIN_HITS = 2
ENGLISH_MARGIN = 2

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
_WORD = re.compile(r"\w+", re.UNICODE)


def _first_match(text: str, rules: Tuple[Rule, ...]) -> Optional[str]:
    for value, keywords in rules:
        if any(keyword in text for keyword in keywords):
            return value
    return None


def has_mixed_style_signal(text: str) -> bool:
    return any(k in text for k in MIXED_STYLE_KEYWORDS) or ("creative" in text and "technical" in text)


def infer_language(text: str) -> str:
    """
    Statistical language guess from stopword hits.

    English wins only with more than ENGLISH_MIN_HITS hits and a lead of more
    than ENGLISH_MARGIN over German; otherwise German.
    """
    words = set(_WORD.findall(text.lower()))
    english_count = len(words & ENGLISH_STOPWORDS)
    german_count = len(words & GERMAN_STOPWORDS)
    if english_count > ENGLISH_MIN_HITS and english_count > german_count + ENGLISH_MARGIN:
        return "english"
    return "german"


class ProfileExtractor:
    """
    Incrementally fills a UserProfile from raw user text.

    Four independent fields are scanned: experience (first match wins),
    goals (accumulate), preferred style (mixed before single styles) and
    preferred language (explicit request beats statistical guess).
    """

    def extract(self, user_input: str, profile: UserProfile) -> UserProfile:
        """
        Update the profile in place from one user message.

        Args:
            user_input: Raw (already sanitized) user text
            profile: Profile to update

        Returns:
            The same profile instance
        """
        text = user_input.lower()
        changes: List[str] = []

        experience = _first_match(text, EXPERIENCE_RULES)
        if experience and experience != profile.experience:
            profile.experience = experience
            changes.append(f"experience={experience}")

        for goal in self.detect_goals(text):
            if profile.add_goal(goal):
                changes.append(f"goal+={goal}")

        style = self.detect_style(text)
        if style and style != profile.preferred_style:
            profile.preferred_style = style
            changes.append(f"style={style}")

        language = _first_match(text, EXPLICIT_LANGUAGE_RULES)
        if language is None and not profile.preferred_language:
            language = infer_language(text)
        if language and language != profile.preferred_language:
            profile.preferred_language = language
            changes.append(f"language={language}")

        email = EMAIL_PATTERN.search(user_input)
        if email and email.group(0) != profile.email:
            profile.email = email.group(0)
            changes.append("email")

        if changes:
            logger.debug(f"🧩 [ProfileExtractor] Updated profile: {', '.join(changes)}")

        return profile

    def detect_goals(self, text: str) -> List[str]:
        text = text.lower()
        return [goal for goal, keywords in GOAL_RULES if any(k in text for k in keywords)]

    def detect_style(self, text: str) -> Optional[str]:
        text = text.lower()
        if has_mixed_style_signal(text):
            return "mixed"
        return _first_match(text, STYLE_RULES)
