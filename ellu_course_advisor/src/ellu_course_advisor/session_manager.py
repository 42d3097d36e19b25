"""
Session Manager for State Persistence

Stores ConversationState per session id, in Supabase when a client is
configured and in memory otherwise (or when the database is unreachable).
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

from ellu_course_advisor.catalog import Catalog, default_catalog
from ellu_course_advisor.conversation_state import (
    ConversationPhase,
    ConversationState,
    CourseRecommendation,
    Message,
    UserProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_SESSIONS_TABLE = "advisor_sessions"


class SessionManager:
    """
    Get/create/put store for conversation states.

    Every state read from the database is a fresh object; callers save it
    back after the turn. The in-memory map is always present as a fallback.
    """

    def __init__(self, supabase_client=None, catalog: Optional[Catalog] = None, table: Optional[str] = None):
        """
        Initialize SessionManager.

        Args:
            supabase_client: Supabase client instance (optional)
            catalog: Catalog used to resolve stored recommendations
            table: Sessions table name (defaults to ADVISOR_SESSIONS_TABLE)
        """
        self.supabase = supabase_client
        self.use_supabase = supabase_client is not None
        self.catalog = catalog or default_catalog()
        self.table = table or os.getenv("ADVISOR_SESSIONS_TABLE", DEFAULT_SESSIONS_TABLE)

        self._in_memory_sessions: Dict[str, ConversationState] = {}

    def session_to_dict(self, state: ConversationState) -> Dict[str, Any]:
        """Flatten a state into one table row (JSON-encoded nested fields)."""
        return {
            "session_id": state.session_id,
            "phase": state.phase.value,
            "assessment_step": state.assessment_step,
            "user_profile": json.dumps(state.user_profile.to_dict()),
            "recommendations": json.dumps([
                {
                    "course_id": r.course.id,
                    "match_score": r.match_score,
                    "reasoning": r.reasoning,
                    "journey_id": r.journey.id if r.journey else None,
                }
                for r in state.recommendations
            ]),
            "conversation_history": json.dumps([m.to_dict() for m in state.conversation_history]),
            "intents": json.dumps(state.intents),
            "created_at": state.created_at.isoformat(),
            "last_updated": state.last_updated.isoformat(),
        }

    def dict_to_session(self, data: Dict[str, Any]) -> ConversationState:
        """
        Rebuild a state from a table row.

        Stored recommendations whose course no longer exists are dropped.
        """
        recommendations = []
        for item in json.loads(data.get("recommendations") or "[]"):
            course = self.catalog.get_course(item["course_id"])
            if course is None:
                continue
            journey_id = item.get("journey_id")
            recommendations.append(CourseRecommendation(
                course=course,
                match_score=item["match_score"],
                reasoning=item.get("reasoning", ""),
                journey=self.catalog.get_journey(journey_id) if journey_id else None,
            ))

        created_at = datetime.fromisoformat(data["created_at"]) if data.get("created_at") else datetime.now()
        last_updated = datetime.fromisoformat(data["last_updated"]) if data.get("last_updated") else datetime.now()

        return ConversationState(
            session_id=data["session_id"],
            phase=ConversationPhase(data.get("phase") or ConversationPhase.GREETING.value),
            user_profile=UserProfile.from_dict(json.loads(data.get("user_profile") or "{}")),
            assessment_step=data.get("assessment_step") or 0,
            recommendations=recommendations,
            conversation_history=[
                Message.from_dict(m) for m in json.loads(data.get("conversation_history") or "[]")
            ],
            intents=json.loads(data.get("intents") or "[]"),
            created_at=created_at,
            last_updated=last_updated,
        )

    async def get_session(self, session_id: str) -> Optional[ConversationState]:
        """
        Load a session.

        Args:
            session_id: Session identifier

        Returns:
            ConversationState or None if not found
        """
        if not self.use_supabase:
            return self._in_memory_sessions.get(session_id)

        cached = self._in_memory_sessions.get(session_id)
        try:
            result = self.supabase.table(self.table).select("*").eq("session_id", session_id).execute()
            if not result.data:
                return cached

            stored = self.dict_to_session(result.data[0])
            # A failed save leaves the newer copy in memory only
            if cached is not None and cached.last_updated > stored.last_updated:
                return cached
            return stored

        except Exception as e:
            logger.warning(f"⚠️ [SessionManager] Error loading session from database: {e}")
            return cached

    async def create_session(self, session_id: str) -> ConversationState:
        """Create and store an empty session."""
        state = ConversationState(session_id=session_id)
        await self.save_session(state)
        logger.info(f"🆕 [SessionManager] Created session {session_id[:8]}")
        return state

    async def get_or_create_session(self, session_id: str) -> ConversationState:
        state = await self.get_session(session_id)
        if state is None:
            state = await self.create_session(session_id)
        return state

    async def save_session(self, state: ConversationState) -> bool:
        """
        Save a session.

        Args:
            state: ConversationState to store

        Returns:
            True if it reached the primary store, False if only the in-memory fallback
        """
        state.last_updated = datetime.now()

        if not self.use_supabase:
            self._in_memory_sessions[state.session_id] = state
            return True

        try:
            self.supabase.table(self.table).upsert(
                self.session_to_dict(state), on_conflict="session_id"
            ).execute()
            self._in_memory_sessions.pop(state.session_id, None)
            return True

        except Exception as e:
            logger.warning(f"⚠️ [SessionManager] Error saving session to database: {e}")
            self._in_memory_sessions[state.session_id] = state
            return False

    async def delete_session(self, session_id: str) -> bool:
        """
        Delete a session.

        Returns:
            True if something was deleted, False otherwise
        """
        removed = self._in_memory_sessions.pop(session_id, None) is not None

        if not self.use_supabase:
            return removed

        try:
            result = self.supabase.table(self.table).delete().eq("session_id", session_id).execute()
            return removed or bool(result.data)

        except Exception as e:
            logger.warning(f"⚠️ [SessionManager] Error deleting session: {e}")
            return removed
