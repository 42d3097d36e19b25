"""
FastAPI Backend for the ELLU Studios Course Advisor

Provides REST API endpoints for:
- Chat turns against the course advisor (/api/agent)
- Session inspection, profile updates and deletion
- Email capture and consultation requests
"""

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
import os
import sys
import time
import uuid
from datetime import datetime as dt
import logging
import signal

# Setup enhanced logging with pretty formatting
from lib.logger import setup_logging, get_logger

setup_logging(level=logging.INFO, use_colors=True)

logger = get_logger("backend.main")

# Add the ellu_course_advisor package to Python path
backend_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(backend_dir)

package_src = os.path.join(project_root, 'ellu_course_advisor', 'src')
if os.path.exists(package_src) and package_src not in sys.path:
    sys.path.insert(0, package_src)

from lib.supabase_client import get_supabase_client

from ellu_course_advisor.course_advisor import CourseAdvisor
from ellu_course_advisor.validation import ConsultationBooking, EmailCapture, UserProfileUpdate

API_VERSION = "1.0.0"
MAX_MESSAGE_CHARS = 10000

# Singleton advisor to avoid rebuilding the catalog on every request
_advisor_instance: Optional[CourseAdvisor] = None


def get_advisor_instance() -> CourseAdvisor:
    """Get or create singleton CourseAdvisor instance."""
    global _advisor_instance
    if _advisor_instance is None:
        _advisor_instance = CourseAdvisor.from_env(supabase_client=get_supabase_client())
    return _advisor_instance


app = FastAPI(
    title="ELLU Studios Course Advisor API",
    description="Conversational course recommendations for ELLU Studios",
    version=API_VERSION
)

# CORS middleware for the chat widget
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:3001",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==================== Pydantic Models ====================

class AgentRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_CHARS)
    session_id: Optional[str] = None


class AgentResponse(BaseModel):
    response: str
    blocked: bool
    reason: Optional[str] = None
    session_id: str
    timestamp: str


class StateSummary(BaseModel):
    session_id: str
    phase: str
    assessment_step: int
    user_profile: Dict[str, Any]
    history_length: int
    intents: List[str]
    recommendations: List[Dict[str, Any]]
    last_updated: str


# ==================== Helper Functions ====================

async def load_state_or_404(advisor: CourseAdvisor, session_id: str):
    state = await advisor.get_state(session_id)
    if state is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return state


def summarize_state(state) -> StateSummary:
    return StateSummary(
        session_id=state.session_id,
        phase=state.phase.value,
        assessment_step=state.assessment_step,
        user_profile=state.user_profile.to_dict(),
        history_length=len(state.conversation_history),
        intents=state.intents,
        recommendations=[
            {"course_id": r.course.id, "match_score": r.match_score, "reasoning": r.reasoning}
            for r in state.recommendations
        ],
        last_updated=state.last_updated.isoformat(),
    )


# ==================== API Endpoints ====================

@app.get("/")
async def root(advisor: CourseAdvisor = Depends(get_advisor_instance)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "ELLU Studios Course Advisor API",
        "version": API_VERSION,
        "llm_enabled": advisor.prose_generator.enabled,
        "persistence": "supabase" if advisor.session_manager.use_supabase else "memory",
    }


@app.post("/api/agent", response_model=AgentResponse)
async def agent_turn(request: AgentRequest, advisor: CourseAdvisor = Depends(get_advisor_instance)):
    """
    Process one chat message.

    A new session id is issued when none is supplied. Blocked and too-long
    messages are answered normally (blocked / reason tell them apart).
    """
    session_id = request.session_id or str(uuid.uuid4())
    start_time = time.time()
    logger.request("POST", "/api/agent", session_id=session_id, data={
        "message_length": len(request.message),
    })

    try:
        result = await advisor.process_turn(session_id, request.message)
    except Exception as e:
        logger.error("Advisor turn failed", error=e)
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.response(200, "/api/agent", duration=time.time() - start_time, data={
        "blocked": result.blocked,
        "reason": result.reason_code,
        "intents": result.intents,
    })

    return AgentResponse(
        response=result.response,
        blocked=result.blocked,
        reason=result.reason_code,
        session_id=session_id,
        timestamp=dt.now().isoformat(),
    )


@app.get("/api/agent")
async def agent_info():
    """API usage information."""
    return {
        "service": "ELLU Studios Course Advisor",
        "version": API_VERSION,
        "endpoints": {
            "POST /api/agent": "Send a message: {message, session_id?}",
            "GET /api/sessions/{session_id}/state": "Inspect a session",
            "PUT /api/sessions/{session_id}/profile": "Merge profile fields",
            "POST /api/sessions/{session_id}/email": "Capture an email address",
            "POST /api/sessions/{session_id}/consultation": "Request a consultation",
            "DELETE /api/sessions/{session_id}": "Delete a session",
        },
        "max_message_chars": MAX_MESSAGE_CHARS,
    }


@app.get("/api/sessions/{session_id}/state", response_model=StateSummary)
async def get_state(session_id: str, advisor: CourseAdvisor = Depends(get_advisor_instance)):
    """Get current session state."""
    state = await load_state_or_404(advisor, session_id)
    return summarize_state(state)


@app.put("/api/sessions/{session_id}/profile", response_model=StateSummary)
async def update_profile(
    session_id: str,
    update: UserProfileUpdate,
    advisor: CourseAdvisor = Depends(get_advisor_instance)
):
    """Merge explicit profile fields (goals and interests are only ever added)."""
    await load_state_or_404(advisor, session_id)
    fields = update.model_dump(exclude_none=True)
    state = await advisor.update_profile(session_id, **fields)
    logger.info("Profile updated", data={"session": session_id[:8], "fields": list(fields)})
    return summarize_state(state)


@app.post("/api/sessions/{session_id}/email")
async def capture_email(
    session_id: str,
    capture: EmailCapture,
    advisor: CourseAdvisor = Depends(get_advisor_instance)
):
    """Store the visitor's email address on the session profile."""
    await load_state_or_404(advisor, session_id)
    await advisor.update_profile(session_id, email=capture.email)
    logger.success("Email captured", data={"session": session_id[:8], "interest": capture.interest})
    return {"status": "captured", "session_id": session_id, "email": capture.email}


@app.post("/api/sessions/{session_id}/consultation")
async def request_consultation(
    session_id: str,
    booking: ConsultationBooking,
    advisor: CourseAdvisor = Depends(get_advisor_instance)
):
    """Record a consultation request; confirmation is sent out of band."""
    state = await load_state_or_404(advisor, session_id)
    state.update_profile(email=booking.email)
    state.transition_to_scheduling()
    await advisor.session_manager.save_session(state)
    logger.success("Consultation requested", data={
        "session": session_id[:8],
        "date": booking.preferred_date,
        "time": booking.preferred_time,
        "timezone": booking.timezone,
    })
    return {
        "status": "requested",
        "session_id": session_id,
        "preferred_date": booking.preferred_date,
        "preferred_time": booking.preferred_time,
        "timezone": booking.timezone,
    }


@app.delete("/api/sessions/{session_id}")
async def delete_session(session_id: str, advisor: CourseAdvisor = Depends(get_advisor_instance)):
    """Delete a session."""
    if not await advisor.end_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "deleted", "session_id": session_id}


if __name__ == "__main__":
    import uvicorn

    def handle_exit(*args):
        """Handle graceful shutdown."""
        logger.section("SERVER SHUTDOWN", {"reason": "signal received"})
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    logger.section("ELLU COURSE ADVISOR", {
        "version": API_VERSION,
        "llm_enabled": os.getenv("ADVISOR_LLM_ENABLED", "false"),
    })
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
