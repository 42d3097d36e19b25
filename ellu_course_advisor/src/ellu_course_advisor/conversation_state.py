"""
Conversation State Management

Explicit per-session state for the course-advisor funnel:
greeting -> assessment -> recommendation -> scheduling -> followup.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ellu_course_advisor.catalog import Course, LearningJourney


class ConversationPhase(Enum):
    """Conversation phases."""
    GREETING = "greeting"
    ASSESSMENT = "assessment"
    RECOMMENDATION = "recommendation"
    SCHEDULING = "scheduling"
    FOLLOWUP = "followup"


EXPERIENCE_LEVELS = ("complete-beginner", "some-sewing", "intermediate", "advanced")
GOALS = ("hobby", "career-change", "start-business", "sustainability", "digital-skills")
TIME_COMMITMENTS = ("minimal", "moderate", "intensive")
STYLES = ("precise-technical", "creative-intuitive", "mixed")
LANGUAGES = ("german", "english")


@dataclass
class UserProfile:
    """Partial visitor profile, filled in turn by turn."""
    experience: Optional[str] = None
    goals: List[str] = field(default_factory=list)  # grows only
    time_commitment: Optional[str] = None
    interests: List[str] = field(default_factory=list)
    preferred_style: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    email: Optional[str] = None
    preferred_language: Optional[str] = None

    def add_goal(self, goal: str) -> bool:
        """Append a goal once. Returns True if it was new."""
        if goal in self.goals:
            return False
        self.goals.append(goal)
        return True

    def is_empty(self) -> bool:
        return not (self.experience or self.goals or self.preferred_style)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "experience": self.experience,
            "goals": list(self.goals),
            "time_commitment": self.time_commitment,
            "interests": list(self.interests),
            "preferred_style": self.preferred_style,
            "budget": self.budget,
            "timeline": self.timeline,
            "email": self.email,
            "preferred_language": self.preferred_language,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "UserProfile":
        data = data or {}
        return cls(
            experience=data.get("experience"),
            goals=list(data.get("goals") or []),
            time_commitment=data.get("time_commitment"),
            interests=list(data.get("interests") or []),
            preferred_style=data.get("preferred_style"),
            budget=data.get("budget"),
            timeline=data.get("timeline"),
            email=data.get("email"),
            preferred_language=data.get("preferred_language"),
        )


@dataclass
class Message:
    """One entry in the conversation history."""
    role: str  # "user" or "agent"
    content: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content, "timestamp": self.timestamp.isoformat()}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Message":
        timestamp = datetime.fromisoformat(data["timestamp"]) if data.get("timestamp") else datetime.now()
        return cls(role=data["role"], content=data["content"], timestamp=timestamp)


@dataclass
class CourseRecommendation:
    course: Course
    match_score: int  # 0-100
    reasoning: str
    journey: Optional[LearningJourney] = None


@dataclass
class ConversationState:
    """
    Explicit state structure for one advisor session.

    Owned by exactly one ConversationStateMachine at a time. The history and
    intent log are append-only; recommendations are overwritten on every
    computation.
    """
    session_id: str
    phase: ConversationPhase = ConversationPhase.GREETING
    user_profile: UserProfile = field(default_factory=UserProfile)
    assessment_step: int = 0  # 0..3
    recommendations: List[CourseRecommendation] = field(default_factory=list)
    conversation_history: List[Message] = field(default_factory=list)
    intents: List[str] = field(default_factory=list)  # never deduplicated
    created_at: datetime = field(default_factory=datetime.now)
    last_updated: datetime = field(default_factory=datetime.now)

    def add_message(self, role: str, content: str):
        """Append a message to the history."""
        self.conversation_history.append(Message(role=role, content=content))
        self.last_updated = datetime.now()

    def record_intents(self, intents: List[str]):
        self.intents.extend(intents)

    def transition_to_assessment(self, step: Optional[int] = None):
        self.phase = ConversationPhase.ASSESSMENT
        if step is not None:
            self.assessment_step = step

    def transition_to_recommendation(self, recommendations: List[CourseRecommendation]):
        self.phase = ConversationPhase.RECOMMENDATION
        self.recommendations = recommendations

    def transition_to_scheduling(self):
        self.phase = ConversationPhase.SCHEDULING

    def transition_to_followup(self):
        self.phase = ConversationPhase.FOLLOWUP

    def user_turn_count(self) -> int:
        return sum(1 for m in self.conversation_history if m.role == "user")

    def update_profile(self, **updates: Any):
        """
        Merge explicit field updates into the profile.

        Goals and interests are merged, never replaced.
        """
        for key, value in updates.items():
            if key == "goals":
                for goal in value or []:
                    self.user_profile.add_goal(goal)
            elif key == "interests":
                for interest in value or []:
                    if interest not in self.user_profile.interests:
                        self.user_profile.interests.append(interest)
            elif hasattr(self.user_profile, key):
                setattr(self.user_profile, key, value)
            else:
                raise AttributeError(f"UserProfile has no field '{key}'")
