"""
ELLU Studios Course Advisor

Turn-processing entry point: looks up (or creates) the session, runs one
state-machine turn over it and stores it back.
"""

import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv

from ellu_course_advisor.catalog import Catalog, default_catalog
from ellu_course_advisor.conversation_state import ConversationState
from ellu_course_advisor.prose_generator import OpenAIProseGenerator, ProseGenerator
from ellu_course_advisor.session_manager import SessionManager
from ellu_course_advisor.state_machine import ConversationStateMachine, TurnResult
from ellu_course_advisor.validation import MAX_INPUT_CHARS

load_dotenv()

logger = logging.getLogger(__name__)


class CourseAdvisor:
    """
    Course-recommendation assistant over an injected session store.

    One ConversationStateMachine is bound to a session's state for the
    duration of a turn; states never cross sessions.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        session_manager: Optional[SessionManager] = None,
        prose_generator: Optional[ProseGenerator] = None,
        max_input_chars: int = MAX_INPUT_CHARS
    ):
        self.catalog = catalog or default_catalog()
        self.session_manager = session_manager or SessionManager(catalog=self.catalog)
        self.prose_generator = prose_generator or ProseGenerator()
        self.max_input_chars = max_input_chars

        logger.info(
            f"✅ [CourseAdvisor] Initialized ({len(self.catalog.courses)} courses, "
            f"{len(self.catalog.journeys)} journeys, llm={'on' if self.prose_generator.enabled else 'off'}, "
            f"persistence={'supabase' if self.session_manager.use_supabase else 'memory'})"
        )

    @classmethod
    def from_env(cls, supabase_client=None) -> "CourseAdvisor":
        """
        Build an advisor from environment configuration.

        ADVISOR_LLM_ENABLED turns on the OpenAI prose variant (templated prose
        is used if no API key is available); ADVISOR_MAX_INPUT_CHARS sets the
        soft length limit.
        """
        catalog = default_catalog()

        prose_generator = None
        if os.getenv("ADVISOR_LLM_ENABLED", "false").lower() == "true":
            prose_generator = OpenAIProseGenerator.from_env()

        return cls(
            catalog=catalog,
            session_manager=SessionManager(supabase_client=supabase_client, catalog=catalog),
            prose_generator=prose_generator,
            max_input_chars=int(os.getenv("ADVISOR_MAX_INPUT_CHARS", str(MAX_INPUT_CHARS))),
        )

    async def process_turn(self, session_id: str, user_input: str) -> TurnResult:
        """
        Process one user message for a session.

        Args:
            session_id: Session identifier (created on first use)
            user_input: Raw user text

        Returns:
            TurnResult (response, blocked, reason_code)
        """
        state = await self.session_manager.get_or_create_session(session_id)

        machine = ConversationStateMachine(
            state,
            catalog=self.catalog,
            prose_generator=self.prose_generator,
            max_input_chars=self.max_input_chars,
        )
        result = await machine.handle(user_input)

        await self.session_manager.save_session(state)
        return result

    async def get_state(self, session_id: str) -> Optional[ConversationState]:
        return await self.session_manager.get_session(session_id)

    async def update_profile(self, session_id: str, **fields: Any) -> ConversationState:
        """Merge explicit profile fields (e.g. interests) into a session's profile."""
        state = await self.session_manager.get_or_create_session(session_id)
        state.update_profile(**fields)
        await self.session_manager.save_session(state)
        return state

    async def end_session(self, session_id: str) -> bool:
        deleted = await self.session_manager.delete_session(session_id)
        if deleted:
            logger.info(f"🗑️ [CourseAdvisor] Deleted session {session_id[:8]}")
        return deleted
