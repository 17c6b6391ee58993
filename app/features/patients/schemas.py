# Patient Directory Feature - Schemas

from typing import Optional, List
from datetime import date, datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from app.features.patients.models import Gender, PatientStatus


class PatientSortField(str, Enum):
    """Fields a patient list can be ordered by."""
    NAME = "name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ============== Create Patient ==============

class CreatePatientRequest(BaseModel):
    """Request schema for creating a new patient."""
    name: str = Field(..., max_length=100)
    mrn: Optional[str] = Field(None, max_length=50)
    dob: Optional[date] = None
    gender: Optional[Gender] = None

    @field_validator('dob', 'gender', mode='before')
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


# ============== Update Patient ==============

class UpdatePatientRequest(BaseModel):
    """
    Request schema for updating a patient.

    Omitted fields are left unchanged. An explicit null (or blank string)
    clears mrn, dob or gender.
    """
    name: Optional[str] = Field(None, max_length=100)
    mrn: Optional[str] = Field(None, max_length=50)
    dob: Optional[date] = None
    gender: Optional[Gender] = None
    status: Optional[PatientStatus] = None

    @field_validator('dob', 'gender', mode='before')
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


# ============== List Filters ==============

class PatientSearchFilters(BaseModel):
    """Filters for listing patients."""
    search_term: Optional[str] = None
    status: Optional[PatientStatus] = None
    sort_by: PatientSortField = PatientSortField.UPDATED_AT
    sort_order: SortOrder = SortOrder.DESC


# ============== Patient Response ==============

class PatientResponse(BaseModel):
    """Response schema for patient data. Unset optional fields are omitted."""
    id: str
    name: str
    mrn: Optional[str] = None
    dob: Optional[date] = None
    gender: Optional[Gender] = None
    status: PatientStatus
    created_by: str
    created_at: datetime
    updated_at: datetime


class PatientListResponse(BaseModel):
    """Response schema for list of patients."""
    patients: List[PatientResponse]
    total: int
