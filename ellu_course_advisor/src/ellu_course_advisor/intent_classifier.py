"""
Intent Classification

Phase-independent keyword rules. Several intents may fire on the same input.
"""

import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)

SCHEDULE = "schedule"
EMAIL = "email"
COMPARE = "compare"
PRICING = "pricing"
SCHEDULE_INFO = "schedule_info"

INTENT_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (SCHEDULE, (
        "schedule", "book", "appointment", "consultation",
        "beratung", "einen termin", "termin vereinbaren",
    )),
    (EMAIL, (
        "email", "send me", "information",
        "e-mail", "zusenden",
    )),
    (COMPARE, (
        "compare", "difference", "vs", "versus",
        "vergleich", "unterschied",
    )),
    (PRICING, (
        "price", "cost", "fee",
        "preis", "kosten", "gebühr",
    )),
    (SCHEDULE_INFO, (
        "when", "start", "available",
        "wann", "verfügbar",
    )),
)

# Intents that jump the funnel regardless of phase, in handling priority.
OVERRIDE_INTENTS = (COMPARE, SCHEDULE, EMAIL)


class IntentClassifier:
    """Lower-case substring matching against INTENT_RULES."""

    def detect(self, user_input: str) -> List[str]:
        """Return every intent whose keywords appear, in rule order."""
        text = user_input.lower()
        intents = [intent for intent, keywords in INTENT_RULES if any(k in text for k in keywords)]
        if intents:
            logger.debug(f"🎯 [IntentClassifier] Detected intents: {intents}")
        return intents

    @staticmethod
    def override_intent(intents: List[str]) -> str:
        """The intent that should short-circuit phase dispatch, or '' if none."""
        for intent in OVERRIDE_INTENTS:
            if intent in intents:
                return intent
        return ""
