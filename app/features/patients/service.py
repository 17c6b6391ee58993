# Patient Directory Feature - Service

from typing import Optional, List
from beanie import PydanticObjectId
from app.features.patients.models import Patient, PatientStatus
from app.features.patients.schemas import (
    CreatePatientRequest,
    UpdatePatientRequest,
    PatientResponse,
    PatientSearchFilters,
    PatientSortField,
    SortOrder,
)
from app.core.logging import logger
from app.shared.exceptions import NotFoundException, BadRequestException


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim a string, mapping blank values to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class PatientService:
    """
    Owner-scoped patient directory.

    Every operation takes the owning user's id. Records owned by someone
    else are reported as not found so their existence is never revealed.
    """

    @staticmethod
    async def create_patient(owner_id: str, request: CreatePatientRequest) -> Patient:
        """Create a new active patient owned by `owner_id`."""
        name = _clean(request.name)
        if not name:
            raise BadRequestException("Patient name is required")

        patient = Patient(
            created_by=owner_id,
            name=name,
            mrn=_clean(request.mrn),
            dob=request.dob,
            gender=request.gender,
            status=PatientStatus.ACTIVE,
        )
        await patient.insert()

        logger.info(f"Created patient {patient.id} for user {owner_id}")
        return patient

    @staticmethod
    async def get_patient(owner_id: str, patient_id: str) -> Patient:
        """Get a patient by id, only if owned by `owner_id`."""
        try:
            patient = await Patient.get(PydanticObjectId(patient_id))
        except Exception:
            raise NotFoundException("Patient not found")

        if not patient:
            raise NotFoundException("Patient not found")

        if patient.created_by != owner_id:
            logger.warning(f"User {owner_id} attempted to access patient {patient_id} owned by another user")
            raise NotFoundException("Patient not found")

        return patient

    @staticmethod
    async def get_patients(owner_id: str, filters: Optional[PatientSearchFilters] = None) -> List[Patient]:
        """
        List the owner's patients.

        Status and ordering are applied by the store; the name/MRN search
        term is matched afterwards, case-insensitively.
        """
        filters = filters or PatientSearchFilters()

        query = Patient.find(Patient.created_by == owner_id)
        if filters.status:
            query = query.find(Patient.status == filters.status)

        direction = 1 if filters.sort_order == SortOrder.ASC else -1
        patients = await query.sort([(filters.sort_by.value, direction)]).to_list()

        term = (filters.search_term or "").strip().lower()
        if term:
            patients = [
                p for p in patients
                if term in p.name.lower() or (p.mrn and term in p.mrn.lower())
            ]

        return patients

    @staticmethod
    async def update_patient(
        owner_id: str,
        patient_id: str,
        request: UpdatePatientRequest
    ) -> Patient:
        """
        Merge the explicitly provided fields into a patient.

        Omitted fields are unchanged; null or blank clears mrn, dob or
        gender. The name can be changed but never cleared.
        """
        patient = await PatientService.get_patient(owner_id, patient_id)

        update_dict = request.model_dump(exclude_unset=True)

        if "name" in update_dict:
            name = _clean(update_dict["name"])
            if not name:
                raise BadRequestException("Patient name cannot be empty")
            update_dict["name"] = name

        if "mrn" in update_dict:
            update_dict["mrn"] = _clean(update_dict["mrn"])

        if "status" in update_dict and update_dict["status"] is None:
            raise BadRequestException("Patient status cannot be empty")

        for field, value in update_dict.items():
            setattr(patient, field, value)

        patient.update_timestamp()
        # replace() rewrites the document, dropping cleared fields
        await patient.replace()

        logger.info(f"Updated patient {patient_id} ({', '.join(sorted(update_dict)) or 'no fields'})")
        return patient

    @staticmethod
    async def deactivate_patient(owner_id: str, patient_id: str) -> Patient:
        """Soft delete a patient."""
        return await PatientService.update_patient(
            owner_id, patient_id, UpdatePatientRequest(status=PatientStatus.INACTIVE)
        )

    @staticmethod
    async def reactivate_patient(owner_id: str, patient_id: str) -> Patient:
        """Restore a deactivated patient."""
        return await PatientService.update_patient(
            owner_id, patient_id, UpdatePatientRequest(status=PatientStatus.ACTIVE)
        )

    @staticmethod
    async def search_patients(owner_id: str, search_term: str, max_results: int = 10) -> List[Patient]:
        """Typeahead search over active patients by name or MRN."""
        if not search_term or not search_term.strip():
            return []

        patients = await PatientService.get_patients(
            owner_id,
            PatientSearchFilters(
                search_term=search_term.strip(),
                status=PatientStatus.ACTIVE,
                sort_by=PatientSortField.NAME,
                sort_order=SortOrder.ASC,
            ),
        )
        return patients[:max_results]

    @staticmethod
    def patient_to_response(patient: Patient) -> PatientResponse:
        """Convert Patient model to response schema."""
        return PatientResponse(
            id=str(patient.id),
            name=patient.name,
            mrn=patient.mrn,
            dob=patient.dob,
            gender=patient.gender,
            status=patient.status,
            created_by=patient.created_by,
            created_at=patient.created_at,
            updated_at=patient.updated_at,
        )
