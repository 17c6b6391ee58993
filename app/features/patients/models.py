# Patient Directory Feature - Models

from typing import Optional
from datetime import date
from enum import Enum
from beanie import Document, Indexed
from app.shared.models import TimestampMixin


class Gender(str, Enum):
    """Gender options for a patient record."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer-not-to-say"


class PatientStatus(str, Enum):
    """Lifecycle status. Deactivation is the only delete."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Patient(Document, TimestampMixin):
    """Patient record owned by the user who created it."""

    # Owning user - every read and write filters on this
    created_by: Indexed(str)

    name: str
    mrn: Optional[str] = None
    dob: Optional[date] = None
    gender: Optional[Gender] = None

    status: PatientStatus = PatientStatus.ACTIVE

    class Settings:
        name = "patients"
        use_state_management = True
        # Unset optional fields are left out of the stored document
        keep_nulls = False
        indexes = [
            [("created_by", 1), ("status", 1), ("updated_at", -1)],
        ]

    class Config:
        json_schema_extra = {
            "example": {
                "created_by": "user_123",
                "name": "Jane Doe",
                "mrn": "MRN-004512",
                "dob": "1985-03-14",
                "gender": "female",
                "status": "active",
            }
        }
