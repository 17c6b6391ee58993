"""Enumerations shared across features."""

from enum import Enum


class Clinic(str, Enum):
    """Clinics a user can be affiliated with."""
    HMHI_DOWNTOWN = "HMHI Downtown"
    DAVIS_BEHAVIORAL_HEALTH = "Davis Behavioral Health"
    REDWOOD_CLINIC_MHI = "Redwood Clinic MHI"


class UserRole(str, Enum):
    """Role of a user within their clinic."""
    RESIDENT = "resident"
    ATTENDING = "attending"
    NURSE = "nurse"
    ADMIN = "admin"


class VisitType(str, Enum):
    """Kind of visit a note documents."""
    TRANSFER = "transfer"
    INTAKE = "intake"
    FOLLOWUP = "followup"


class ClinicalContext(str, Enum):
    """Clinic x visit-type pairing that selects a note template."""
    HMHI_TRANSFER = "hmhi-transfer"
    HMHI_FOLLOWUP = "hmhi-followup"
    DBH_INTAKE = "dbh-intake"
    DBH_FOLLOWUP = "dbh-followup"
    REDWOOD_INTAKE = "redwood-intake"
    REDWOOD_FOLLOWUP = "redwood-followup"


# Fallback for unknown or missing context keys
DEFAULT_CONTEXT = ClinicalContext.HMHI_TRANSFER
