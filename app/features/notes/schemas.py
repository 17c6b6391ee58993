# Notes Feature - Schemas

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field
from app.shared.enums import Clinic, ClinicalContext, VisitType


class PatientContext(BaseModel):
    """
    Point-in-time copy of the patient a note is generated for.

    Frozen so the note always reflects what the clinician saw when
    generating, even if the directory record changes later.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    patient_id: Optional[str] = Field(None, alias="patientId")
    patient_name: str = Field(..., alias="patientName")
    patient_mrn: Optional[str] = Field(None, alias="patientMRN")
    patient_dob: Optional[str] = Field(None, alias="patientDOB")
    patient_gender: Optional[str] = Field(None, alias="patientGender")


class GenerateNoteRequest(BaseModel):
    """
    Request schema for note generation.

    Transcript and context are validated by the service rather than here,
    so a blank transcript is a 400 and an unknown context falls back to
    transfer of care.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "transcript": "Doctor: How have you been sleeping since we adjusted the dose? ...",
                "context": "hmhi-transfer",
                "previousNote": "HPI: ...",
                "patientContext": {
                    "patientId": "665f1c2e9b1e8a0012345678",
                    "patientName": "Jane Doe",
                    "patientMRN": "MRN-004512",
                    "patientDOB": "1985-03-14",
                    "patientGender": "female",
                },
            }
        },
    )

    transcript: Optional[str] = None
    context: Optional[str] = None
    previous_note: Optional[str] = Field(None, alias="previousNote")
    patient_context: Optional[PatientContext] = Field(None, alias="patientContext")


class GenerateNoteResponse(BaseModel):
    """Generated note with the echoed patient snapshot (or null)."""
    model_config = ConfigDict(populate_by_name=True)

    note: str
    patient_context: Optional[PatientContext] = Field(None, alias="patientContext")


class ContextOption(BaseModel):
    """A selectable clinical context."""
    key: ClinicalContext
    clinic: Clinic
    visit_type: VisitType
    label: str
    accepts_previous_note: bool = False


class ContextListResponse(BaseModel):
    contexts: List[ContextOption]
    default: ClinicalContext
