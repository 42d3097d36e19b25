"""
Unit Tests for Session Manager

Tests in-memory storage, row serialization and Supabase fallback behaviour.
"""

import pytest
import sys
import os
from types import SimpleNamespace

# Add project root to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
sys.path.insert(0, os.path.join(project_root, "ellu_course_advisor", "src"))

from ellu_course_advisor.catalog import default_catalog
from ellu_course_advisor.conversation_state import ConversationPhase, ConversationState, UserProfile
from ellu_course_advisor.recommendation_engine import RecommendationEngine
from ellu_course_advisor.session_manager import SessionManager


class FakeTable:
    """Minimal stand-in for a supabase-py table query builder."""

    def __init__(self, rows):
        self.rows = rows
        self._op = None
        self._payload = None
        self._filter = None

    def select(self, *columns):
        self._op = "select"
        return self

    def upsert(self, row, on_conflict=None):
        self._op, self._payload = "upsert", row
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filter = (column, value)
        return self

    def execute(self):
        column, value = self._filter or (None, None)
        matching = [r for r in self.rows.values() if column is None or r.get(column) == value]
        if self._op == "upsert":
            self.rows[self._payload["session_id"]] = dict(self._payload)
            return SimpleNamespace(data=[self._payload])
        if self._op == "delete":
            for row in matching:
                del self.rows[row["session_id"]]
        return SimpleNamespace(data=matching)


class FakeSupabase:
    def __init__(self):
        self.tables = {}

    def table(self, name):
        return FakeTable(self.tables.setdefault(name, {}))


class ReadOnlySupabase(FakeSupabase):
    """Reads succeed, writes raise (e.g. a lost write permission)."""

    def __init__(self, tables):
        self.tables = tables

    def table(self, name):
        table = super().table(name)

        def refuse(row, on_conflict=None):
            raise ConnectionError("write rejected")

        table.upsert = refuse
        return table


class BrokenSupabase:
    def table(self, name):
        raise ConnectionError("database unreachable")


def populated_state(session_id="session-1"):
    state = ConversationState(session_id=session_id)
    state.user_profile = UserProfile(experience="complete-beginner", goals=["career-change"], email="a@b.de")
    state.transition_to_recommendation(RecommendationEngine().generate_recommendations(state.user_profile))
    state.assessment_step = 3
    state.add_message("user", "Hello")
    state.add_message("agent", "Willkommen!")
    state.record_intents(["pricing", "pricing"])
    return state


class TestInMemorySessions:
    """Test the store without a database."""

    @pytest.fixture
    def manager(self):
        return SessionManager()

    @pytest.mark.asyncio
    async def test_unknown_session(self, manager):
        assert await manager.get_session("missing") is None

    @pytest.mark.asyncio
    async def test_get_or_create(self, manager):
        created = await manager.get_or_create_session("s1")
        again = await manager.get_or_create_session("s1")
        assert created is again
        assert created.phase == ConversationPhase.GREETING

    @pytest.mark.asyncio
    async def test_sessions_are_isolated(self, manager):
        first = await manager.get_or_create_session("s1")
        second = await manager.get_or_create_session("s2")
        first.user_profile.experience = "advanced"
        assert second.user_profile.experience is None

    @pytest.mark.asyncio
    async def test_delete(self, manager):
        await manager.create_session("s1")
        assert await manager.delete_session("s1") is True
        assert await manager.delete_session("s1") is False
        assert await manager.get_session("s1") is None


class TestSerialization:
    """Test session_to_dict / dict_to_session."""

    def test_round_trip(self):
        manager = SessionManager()
        state = populated_state()

        restored = manager.dict_to_session(manager.session_to_dict(state))

        assert restored.phase == ConversationPhase.RECOMMENDATION
        assert restored.assessment_step == 3
        assert restored.user_profile == state.user_profile
        assert [m.content for m in restored.conversation_history] == ["Hello", "Willkommen!"]
        assert restored.intents == ["pricing", "pricing"]
        assert [r.course.id for r in restored.recommendations] == [r.course.id for r in state.recommendations]
        assert restored.recommendations[0].journey.id == "beginner-journey"

    def test_unknown_recommended_course_dropped(self):
        manager = SessionManager()
        row = manager.session_to_dict(populated_state())
        row["recommendations"] = '[{"course_id": "ghost", "match_score": 80, "reasoning": "x", "journey_id": null}]'
        assert manager.dict_to_session(row).recommendations == []


class TestSupabaseSessions:
    """Test database-backed storage with a fake client."""

    @pytest.mark.asyncio
    async def test_save_and_load(self):
        client = FakeSupabase()
        manager = SessionManager(supabase_client=client, catalog=default_catalog(), table="advisor_sessions")

        assert await manager.save_session(populated_state("db-1")) is True
        assert "db-1" in client.tables["advisor_sessions"]

        loaded = await manager.get_session("db-1")
        assert loaded.user_profile.goals == ["career-change"]
        assert len(loaded.conversation_history) == 2

    @pytest.mark.asyncio
    async def test_delete(self):
        manager = SessionManager(supabase_client=FakeSupabase())
        await manager.create_session("db-2")
        assert await manager.delete_session("db-2") is True
        assert await manager.get_session("db-2") is None

    @pytest.mark.asyncio
    async def test_falls_back_to_memory_on_error(self):
        manager = SessionManager(supabase_client=BrokenSupabase())
        state = populated_state("db-3")

        assert await manager.save_session(state) is False
        assert await manager.get_session("db-3") is state

    @pytest.mark.asyncio
    async def test_newer_memory_copy_wins_after_failed_save(self):
        client = FakeSupabase()
        manager = SessionManager(supabase_client=client)
        state = populated_state("db-4")
        await manager.save_session(state)
        client.tables["advisor_sessions"]["db-4"]["last_updated"] = "2020-01-01T00:00:00"

        manager.supabase = ReadOnlySupabase(client.tables)
        state.user_profile.experience = "advanced"
        assert await manager.save_session(state) is False

        loaded = await manager.get_session("db-4")
        assert loaded is state
        assert loaded.user_profile.experience == "advanced"

    @pytest.mark.asyncio
    async def test_database_row_wins_when_memory_is_older(self):
        client = FakeSupabase()
        manager = SessionManager(supabase_client=client)
        await manager.save_session(populated_state("db-5"))

        loaded = await manager.get_session("db-5")
        assert loaded.user_profile.experience == "complete-beginner"
        assert "db-5" not in manager._in_memory_sessions
