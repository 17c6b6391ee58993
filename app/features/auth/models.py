from beanie import Document, Indexed
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Literal
from datetime import datetime, timedelta
from app.config import settings
from app.shared.enums import Clinic, ClinicalContext, UserRole, DEFAULT_CONTEXT
from app.shared.models import TimestampMixin


class UserPreferences(BaseModel):
    """Per-user preferences embedded in the user document."""

    default_context: ClinicalContext = DEFAULT_CONTEXT
    session_timeout_minutes: int = Field(default=settings.SESSION_TIMEOUT_MINUTES, ge=1, le=240)


class User(Document, TimestampMixin):
    """User document model."""

    email: Indexed(EmailStr, unique=True)
    password_hash: str
    display_name: str
    is_active: bool = True

    # Clinic affiliation and role
    clinic: Clinic = Clinic.HMHI_DOWNTOWN
    role: UserRole = UserRole.RESIDENT

    last_login: Optional[datetime] = None
    preferences: UserPreferences = Field(default_factory=UserPreferences)

    class Settings:
        name = "users"
        use_state_management = True

    class Config:
        json_schema_extra = {
            "example": {
                "email": "resident@example.com",
                "display_name": "Dr. Jane Smith",
                "clinic": "HMHI Downtown",
                "role": "resident",
                "preferences": {
                    "default_context": "hmhi-transfer",
                    "session_timeout_minutes": 15,
                },
            }
        }


class UserSession(Document):
    """
    Sign-in session with an inactivity window.

    Every authenticated request counts as activity. Once the idle window
    has elapsed the session is ended and cannot be revived.
    """

    session_id: Indexed(str, unique=True)
    user_id: Indexed(str)
    timeout_minutes: int
    started_at: datetime = Field(default_factory=datetime.utcnow)
    last_activity_at: datetime = Field(default_factory=datetime.utcnow)
    ended_at: Optional[datetime] = None
    end_reason: Optional[Literal["logout", "inactivity"]] = None

    class Settings:
        name = "user_sessions"
        use_state_management = True

    @property
    def is_ended(self) -> bool:
        return self.ended_at is not None

    def is_idle(self, now: Optional[datetime] = None) -> bool:
        """Whether the inactivity window has elapsed."""
        now = now or datetime.utcnow()
        return now - self.last_activity_at >= timedelta(minutes=self.timeout_minutes)
