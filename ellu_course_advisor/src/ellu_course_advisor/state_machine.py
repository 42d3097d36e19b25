"""
Conversation State Machine

Drives one session through greeting -> assessment -> recommendation, with
compare / schedule / email intents able to jump the funnel from any phase.

Per turn:
1. injection check (refusal, blocked)
2. length check (soft refusal)
3. profile extraction + intent detection
4. intent override, else phase dispatch
5. optional prose rewrite, output redaction, history update
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ellu_course_advisor.catalog import Catalog, default_catalog
from ellu_course_advisor.conversation_state import ConversationPhase, ConversationState
from ellu_course_advisor.intent_classifier import COMPARE, EMAIL, SCHEDULE, IntentClassifier
from ellu_course_advisor.profile_extractor import ProfileExtractor
from ellu_course_advisor.prose_generator import ProseContext, ProseGenerator
from ellu_course_advisor.recommendation_engine import RecommendationEngine
from ellu_course_advisor.response_templates import ResponseTemplates
from ellu_course_advisor.validation import (
    MAX_INPUT_CHARS,
    contains_injection,
    sanitize_input,
    sanitize_output,
)

logger = logging.getLogger(__name__)

SECURITY_VIOLATION = "security_violation"
MESSAGE_TOO_LONG = "message_too_long"
PROCESSING_ERROR = "processing_error"


@dataclass
class TurnResult:
    """Outcome of one processed user turn."""
    response: str
    blocked: bool = False
    reason_code: Optional[str] = None
    intents: List[str] = field(default_factory=list)


class ConversationStateMachine:
    """
    Owns exactly one ConversationState and mutates it turn by turn.

    Collaborators are injectable for testing; by default the bundled catalog,
    templated prose and the keyword extractors are used.
    """

    def __init__(
        self,
        state: ConversationState,
        catalog: Optional[Catalog] = None,
        prose_generator: Optional[ProseGenerator] = None,
        templates: Optional[ResponseTemplates] = None,
        max_input_chars: int = MAX_INPUT_CHARS
    ):
        self.state = state
        self.catalog = catalog or default_catalog()
        self.engine = RecommendationEngine(self.catalog)
        self.extractor = ProfileExtractor()
        self.classifier = IntentClassifier()
        self.prose = prose_generator or ProseGenerator()
        self.templates = templates or ResponseTemplates()
        self.max_input_chars = max_input_chars

        self._phase_handlers: Dict[ConversationPhase, Callable[[str], str]] = {
            ConversationPhase.GREETING: self._handle_greeting,
            ConversationPhase.ASSESSMENT: self._handle_assessment,
            ConversationPhase.RECOMMENDATION: self._handle_recommendation,
            ConversationPhase.SCHEDULING: self._handle_scheduling,
            ConversationPhase.FOLLOWUP: self._handle_followup,
        }

    @property
    def language(self) -> str:
        return self.templates.language(self.state.user_profile.preferred_language)

    async def handle(self, user_input: str) -> TurnResult:
        """
        Process one user message.

        Never raises: every failure becomes an in-character reply, and both the
        user message and the reply are always appended to the history.

        Args:
            user_input: Raw user text

        Returns:
            TurnResult with the reply, blocked flag and reason code
        """
        user_input = user_input or ""
        session_tag = self.state.session_id[:8]

        try:
            if contains_injection(user_input):
                logger.warning(f"🛡️ [StateMachine] Blocked injection attempt (session={session_tag})")
                return self._finish(
                    user_input,
                    self.templates.get("refusal", self.language),
                    blocked=True,
                    reason_code=SECURITY_VIOLATION,
                )

            if len(user_input.strip()) > self.max_input_chars:
                logger.info(f"📏 [StateMachine] Message too long ({len(user_input.strip())} chars)")
                return self._finish(
                    user_input,
                    self.templates.get("message_too_long", self.language),
                    reason_code=MESSAGE_TOO_LONG,
                )

            text = sanitize_input(user_input, self.max_input_chars)

            # Extraction and intent logging happen before any suspend point.
            self.extractor.extract(text, self.state.user_profile)
            intents = self.classifier.detect(text)
            self.state.record_intents(intents)

            draft = self._dispatch(text, intents)

            response = await self.prose.generate(ProseContext(
                user_input=text,
                draft=draft,
                phase=self.state.phase.value,
                profile=self.state.user_profile,
                intents=intents,
                history=self.state.conversation_history,
                language=self.language,
            ))

            logger.info(
                f"✅ [StateMachine] Turn processed (session={session_tag}, "
                f"phase={self.state.phase.value}, step={self.state.assessment_step}, intents={intents})"
            )
            return self._finish(text, response, intents=intents)

        except Exception as e:
            logger.error(f"❌ [StateMachine] Turn failed (session={session_tag}): {e}", exc_info=True)
            return self._finish(
                user_input,
                self.templates.get("apology", self.language),
                reason_code=PROCESSING_ERROR,
            )

    def _finish(
        self,
        user_text: str,
        response: str,
        blocked: bool = False,
        reason_code: Optional[str] = None,
        intents: Optional[List[str]] = None
    ) -> TurnResult:
        response = sanitize_output(response)
        self.state.add_message("user", sanitize_input(user_text, self.max_input_chars))
        self.state.add_message("agent", response)
        return TurnResult(response=response, blocked=blocked, reason_code=reason_code, intents=intents or [])

    # ==================== Dispatch ====================

    def _dispatch(self, text: str, intents: List[str]) -> str:
        override = self.classifier.override_intent(intents)
        if override == COMPARE:
            return self._handle_comparison(text)
        if override == SCHEDULE:
            return self._handle_scheduling(text)
        if override == EMAIL:
            return self._handle_email(text)

        handler = self._phase_handlers.get(self.state.phase, self._handle_greeting)
        return handler(text)

    def _handle_greeting(self, text: str) -> str:
        first_turn = self.state.user_turn_count() == 0
        self.state.transition_to_assessment(step=1)
        return self.templates.get("welcome" if first_turn else "welcome_again", self.language)

    def _handle_assessment(self, text: str) -> str:
        step = self.state.assessment_step

        if step == 1:
            self.state.assessment_step = 2
            return self.templates.get("ask_goals", self.language)

        if step == 2:
            self.state.assessment_step = 3
            return self.templates.get("ask_style", self.language)

        return self._recommend()

    def _handle_recommendation(self, text: str) -> str:
        return self.templates.get("recommendation_menu", self.language)

    def _handle_scheduling(self, text: str) -> str:
        self.state.transition_to_scheduling()
        return self.templates.get("scheduling", self.language)

    def _handle_followup(self, text: str) -> str:
        return self.templates.get("followup", self.language)

    # ==================== Intent handlers ====================

    def _handle_comparison(self, text: str) -> str:
        mentioned = self.catalog.find_mentioned_courses(text)
        if len(mentioned) >= 2:
            logger.debug(f"⚖️ [StateMachine] Comparing {mentioned[0].id} vs {mentioned[1].id}")
            return self.engine.compare_courses(mentioned[0].id, mentioned[1].id)
        return self.templates.get("comparison", self.language)

    def _handle_email(self, text: str) -> str:
        email = self.state.user_profile.email
        if email:
            return self.templates.get("email_confirmed", self.language, email=email)
        return self.templates.get("email_request", self.language)

    def _recommend(self) -> str:
        recommendations = self.engine.generate_recommendations(self.state.user_profile)
        self.state.transition_to_recommendation(recommendations)

        if not recommendations:
            return self.templates.get("no_recommendations", self.language)

        top = recommendations[0]
        logger.info(
            f"🎓 [StateMachine] Recommended {top.journey.id if top.journey else 'no journey'} "
            f"({len(recommendations)} courses, top={top.course.id}:{top.match_score})"
        )
        return self.templates.recommendation(top.journey, top.reasoning, self.language)
