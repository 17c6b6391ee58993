from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from app.shared.enums import Clinic, ClinicalContext, UserRole


# Request Schemas
class SignupRequest(BaseModel):
    """Signup request schema."""

    display_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)
    clinic: Clinic = Clinic.HMHI_DOWNTOWN
    role: UserRole = UserRole.RESIDENT

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not any(c.isupper() for c in v):
            raise ValueError('Password must contain at least one uppercase letter')
        if not any(c.islower() for c in v):
            raise ValueError('Password must contain at least one lowercase letter')
        if not any(c.isdigit() for c in v):
            raise ValueError('Password must contain at least one digit')
        return v


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str


class PreferencesUpdate(BaseModel):
    """Partial update of user preferences."""

    default_context: Optional[ClinicalContext] = None
    session_timeout_minutes: Optional[int] = Field(None, ge=1, le=240)


class UpdateProfileRequest(BaseModel):
    """Update profile request schema."""

    display_name: Optional[str] = Field(None, min_length=2, max_length=100)
    clinic: Optional[Clinic] = None
    role: Optional[UserRole] = None
    preferences: Optional[PreferencesUpdate] = None


# Response Schemas
class PreferencesResponse(BaseModel):
    """User preferences response schema."""

    default_context: ClinicalContext
    session_timeout_minutes: int


class UserResponse(BaseModel):
    """User response schema."""

    id: str
    email: EmailStr
    display_name: str
    clinic: Clinic
    role: UserRole
    is_active: bool
    preferences: PreferencesResponse
    created_at: datetime
    last_login: Optional[datetime] = None


class SessionResponse(BaseModel):
    """Session status response schema."""

    session_id: str
    timeout_minutes: int
    last_activity_at: datetime
    expires_at: datetime


class LoginResponse(BaseModel):
    """Login/signup response schema."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
    session: SessionResponse
