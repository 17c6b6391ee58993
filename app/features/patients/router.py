# Patient Directory Feature - Router

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from app.features.patients.models import PatientStatus
from app.features.patients.schemas import (
    CreatePatientRequest,
    UpdatePatientRequest,
    PatientResponse,
    PatientListResponse,
    PatientSearchFilters,
    PatientSortField,
    SortOrder,
)
from app.features.patients.service import PatientService
from app.features.auth.dependencies import get_current_user
from app.features.auth.models import User


router = APIRouter(prefix="/patients", tags=["Patients"])


@router.post(
    "",
    response_model=PatientResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_patient(
    request: CreatePatientRequest,
    current_user: User = Depends(get_current_user)
):
    """
    Create a new patient owned by the current user.

    Optional fields left blank are not stored.
    """
    patient = await PatientService.create_patient(str(current_user.id), request)
    return PatientService.patient_to_response(patient)


@router.get("", response_model=PatientListResponse, response_model_exclude_none=True)
async def list_patients(
    status_filter: Optional[PatientStatus] = Query(None, alias="status"),
    sort_by: PatientSortField = PatientSortField.UPDATED_AT,
    sort_order: SortOrder = SortOrder.DESC,
    search: Optional[str] = None,
    current_user: User = Depends(get_current_user)
):
    """
    List the current user's patients.

    - **status**: active or inactive (default: both)
    - **sort_by**: name, created_at or updated_at
    - **sort_order**: asc or desc
    - **search**: case-insensitive match on name or MRN
    """
    patients = await PatientService.get_patients(
        str(current_user.id),
        PatientSearchFilters(
            search_term=search,
            status=status_filter,
            sort_by=sort_by,
            sort_order=sort_order,
        ),
    )

    return PatientListResponse(
        patients=[PatientService.patient_to_response(p) for p in patients],
        total=len(patients)
    )


# NOTE: /search must be registered before /{patient_id}

@router.get("/search", response_model=PatientListResponse, response_model_exclude_none=True)
async def search_patients(
    q: str = Query("", description="Name or MRN fragment"),
    limit: int = Query(10, ge=1, le=50),
    current_user: User = Depends(get_current_user)
):
    """Typeahead search over active patients, ordered by name."""
    patients = await PatientService.search_patients(str(current_user.id), q, max_results=limit)

    return PatientListResponse(
        patients=[PatientService.patient_to_response(p) for p in patients],
        total=len(patients)
    )


@router.get("/{patient_id}", response_model=PatientResponse, response_model_exclude_none=True)
async def get_patient(
    patient_id: str,
    current_user: User = Depends(get_current_user)
):
    """Get one of the current user's patients."""
    patient = await PatientService.get_patient(str(current_user.id), patient_id)
    return PatientService.patient_to_response(patient)


@router.patch("/{patient_id}", response_model=PatientResponse, response_model_exclude_none=True)
async def update_patient(
    patient_id: str,
    request: UpdatePatientRequest,
    current_user: User = Depends(get_current_user)
):
    """
    Update a patient.

    Omitted fields are unchanged. Send `null` to clear mrn, dob or gender.
    """
    patient = await PatientService.update_patient(str(current_user.id), patient_id, request)
    return PatientService.patient_to_response(patient)


@router.post("/{patient_id}/deactivate", response_model=PatientResponse, response_model_exclude_none=True)
async def deactivate_patient(
    patient_id: str,
    current_user: User = Depends(get_current_user)
):
    """Deactivate a patient. Records are never hard deleted."""
    patient = await PatientService.deactivate_patient(str(current_user.id), patient_id)
    return PatientService.patient_to_response(patient)


@router.post("/{patient_id}/reactivate", response_model=PatientResponse, response_model_exclude_none=True)
async def reactivate_patient(
    patient_id: str,
    current_user: User = Depends(get_current_user)
):
    """Reactivate a deactivated patient."""
    patient = await PatientService.reactivate_patient(str(current_user.id), patient_id)
    return PatientService.patient_to_response(patient)
