"""
Input/Output Security and Request Schemas

Injection denylist, input/output sanitizers and the pydantic models used to
validate inbound requests before they reach the advisor.
"""

import re
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

MAX_INPUT_CHARS = 2000

INJECTION_PATTERNS = [
    re.compile(r"ignore.*(previous|above|earlier).*(instruction|prompt|rule)", re.IGNORECASE),
    re.compile(r"you are now", re.IGNORECASE),
    re.compile(r"system.*override", re.IGNORECASE),
    re.compile(r"jailbreak", re.IGNORECASE),
    re.compile(r"act as if", re.IGNORECASE),
    re.compile(r"pretend to be", re.IGNORECASE),
    re.compile(r"roleplay.*as", re.IGNORECASE),
    re.compile(r"(tell|show|give|provide).*(system|instruction|prompt)", re.IGNORECASE),
    re.compile(r"what.*your.*(instruction|prompt|system)", re.IGNORECASE),
    re.compile(r"bypass.*(safety|security|filter)", re.IGNORECASE),
]

# Order matters: the longer key name is redacted before its suffix.
REDACTION_PATTERNS = [
    re.compile(r"ANTHROPIC_API_KEY", re.IGNORECASE),
    re.compile(r"API_KEY", re.IGNORECASE),
    re.compile(r"password", re.IGNORECASE),
    re.compile(r"secret", re.IGNORECASE),
]
REDACTED = "[REDACTED]"

_ANGLE_BRACKETS = re.compile(r"[<>]")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def contains_injection(text: str) -> bool:
    """True if the text matches any prompt-injection pattern."""
    return any(pattern.search(text) for pattern in INJECTION_PATTERNS)


def sanitize_input(text: str, max_length: int = MAX_INPUT_CHARS) -> str:
    """Trim, strip angle brackets and cap the length."""
    return _ANGLE_BRACKETS.sub("", text.strip())[:max_length]


def sanitize_output(text: str) -> str:
    """Redact secret-like substrings from agent output."""
    for pattern in REDACTION_PATTERNS:
        text = pattern.sub(REDACTED, text)
    return text


def _check_email(value: str) -> str:
    value = value.strip()
    if not _EMAIL.match(value):
        raise ValueError("Please enter a valid email address")
    return value


# ==================== Request Schemas ====================

class UserProfileUpdate(BaseModel):
    """Partial profile; unset fields are left untouched when merged."""
    experience: Optional[Literal["complete-beginner", "some-sewing", "intermediate", "advanced"]] = None
    goals: Optional[List[Literal["hobby", "career-change", "start-business", "sustainability", "digital-skills"]]] = None
    time_commitment: Optional[Literal["minimal", "moderate", "intensive"]] = None
    interests: Optional[List[str]] = None
    preferred_style: Optional[Literal["precise-technical", "creative-intuitive", "mixed"]] = None
    budget: Optional[Literal["budget-conscious", "moderate", "premium"]] = None
    timeline: Optional[Literal["asap", "1-3months", "3-6months", "flexible"]] = None
    email: Optional[str] = None
    preferred_language: Optional[Literal["german", "english"]] = None

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: Optional[str]) -> Optional[str]:
        return _check_email(value) if value is not None else None


class EmailCapture(BaseModel):
    email: str
    name: str = Field(..., min_length=1, max_length=100)
    interest: Optional[str] = None

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        return _check_email(value)


class ConsultationBooking(BaseModel):
    email: str
    name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = None
    preferred_date: str  # ISO date
    preferred_time: str
    timezone: str = "Europe/Berlin"
    message: Optional[str] = Field(None, max_length=500)

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        return _check_email(value)
