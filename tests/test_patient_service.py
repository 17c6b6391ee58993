"""
Tests for the owner-scoped patient directory
"""

from datetime import date, datetime

import pytest

from app.features.patients.models import Gender, Patient, PatientStatus
from app.features.patients.schemas import (
    CreatePatientRequest,
    PatientSearchFilters,
    PatientSortField,
    SortOrder,
    UpdatePatientRequest,
)
from app.features.patients.service import PatientService
from app.shared.exceptions import BadRequestException, NotFoundException


OWNER = "user-a"
OTHER_OWNER = "user-b"


async def create(name: str, owner: str = OWNER, **fields) -> Patient:
    return await PatientService.create_patient(owner, CreatePatientRequest(name=name, **fields))


class TestCreatePatient:

    async def test_name_is_trimmed(self, db):
        patient = await create("  Jane Doe  ")

        assert patient.name == "Jane Doe"
        assert patient.status == PatientStatus.ACTIVE
        assert patient.created_by == OWNER
        assert patient.created_at is not None
        assert patient.updated_at is not None

    async def test_omitted_optionals_are_not_stored(self, db):
        patient = await create("Jane Doe", mrn="   ")

        raw = await Patient.get_motor_collection().find_one({"_id": patient.id})
        assert "mrn" not in raw
        assert "dob" not in raw
        assert "gender" not in raw

        response = PatientService.patient_to_response(patient).model_dump(exclude_none=True)
        assert "mrn" not in response

    async def test_optionals_are_trimmed_and_stored(self, db):
        patient = await create("Jane Doe", mrn=" MRN-42 ", dob=date(1985, 3, 14), gender=Gender.FEMALE)

        stored = await PatientService.get_patient(OWNER, str(patient.id))
        assert stored.mrn == "MRN-42"
        assert stored.dob == date(1985, 3, 14)
        assert stored.gender == Gender.FEMALE

    @pytest.mark.parametrize("name", ["", "   "])
    async def test_blank_name_rejected(self, db, name):
        with pytest.raises(BadRequestException):
            await create(name)


class TestGetPatient:

    async def test_owner_can_read(self, db):
        patient = await create("Jane Doe")

        found = await PatientService.get_patient(OWNER, str(patient.id))

        assert found.id == patient.id

    async def test_other_owner_gets_not_found(self, db):
        patient = await create("Jane Doe", owner=OTHER_OWNER)

        with pytest.raises(NotFoundException) as exc_info:
            await PatientService.get_patient(OWNER, str(patient.id))

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Patient not found"

    @pytest.mark.parametrize("patient_id", ["not-an-object-id", "665f1c2e9b1e8a0012345678"])
    async def test_unknown_id_not_found(self, db, patient_id):
        with pytest.raises(NotFoundException):
            await PatientService.get_patient(OWNER, patient_id)


class TestListPatients:

    async def test_only_owner_records_listed(self, db):
        await create("Jane Doe")
        await create("John Roe", owner=OTHER_OWNER)

        patients = await PatientService.get_patients(OWNER)

        assert [p.name for p in patients] == ["Jane Doe"]

    async def test_active_filter_excludes_deactivated(self, db):
        keep = await create("Alice Active")
        gone = await create("Ian Inactive")
        await PatientService.deactivate_patient(OWNER, str(gone.id))

        active = await PatientService.get_patients(OWNER, PatientSearchFilters(status=PatientStatus.ACTIVE))
        inactive = await PatientService.get_patients(OWNER, PatientSearchFilters(status=PatientStatus.INACTIVE))

        assert [p.id for p in active] == [keep.id]
        assert [p.id for p in inactive] == [gone.id]

    async def test_sort_by_name(self, db):
        for name in ["Carol", "Alice", "Bob"]:
            await create(name)

        asc = await PatientService.get_patients(
            OWNER, PatientSearchFilters(sort_by=PatientSortField.NAME, sort_order=SortOrder.ASC)
        )
        desc = await PatientService.get_patients(
            OWNER, PatientSearchFilters(sort_by=PatientSortField.NAME, sort_order=SortOrder.DESC)
        )

        assert [p.name for p in asc] == ["Alice", "Bob", "Carol"]
        assert [p.name for p in desc] == ["Carol", "Bob", "Alice"]

    async def test_sort_by_created_at(self, db):
        for day, name in [(3, "Third"), (1, "First"), (2, "Second")]:
            await Patient(
                created_by=OWNER,
                name=name,
                created_at=datetime(2024, 1, day),
                updated_at=datetime(2024, 1, day),
            ).insert()

        patients = await PatientService.get_patients(
            OWNER, PatientSearchFilters(sort_by=PatientSortField.CREATED_AT, sort_order=SortOrder.ASC)
        )

        assert [p.name for p in patients] == ["First", "Second", "Third"]

    async def test_search_matches_name_or_mrn_case_insensitive(self, db):
        await create("Jane Doe", mrn="ABC-100")
        await create("John Smith", mrn="XYZ-200")
        await create("Mary Major")

        by_name = await PatientService.get_patients(OWNER, PatientSearchFilters(search_term="DOE"))
        by_mrn = await PatientService.get_patients(OWNER, PatientSearchFilters(search_term="xyz"))

        assert [p.name for p in by_name] == ["Jane Doe"]
        assert [p.name for p in by_mrn] == ["John Smith"]


class TestUpdatePatient:

    async def test_omitted_fields_unchanged(self, db):
        patient = await create("Jane Doe", mrn="MRN-42", gender=Gender.FEMALE)

        await PatientService.update_patient(OWNER, str(patient.id), UpdatePatientRequest(name="  Jane Q. Doe "))

        stored = await PatientService.get_patient(OWNER, str(patient.id))
        assert stored.name == "Jane Q. Doe"
        assert stored.mrn == "MRN-42"
        assert stored.gender == Gender.FEMALE

    async def test_explicit_null_clears_field(self, db):
        patient = await create("Jane Doe", mrn="MRN-42", dob=date(1985, 3, 14), gender=Gender.FEMALE)

        request = UpdatePatientRequest.model_validate({"mrn": None, "dob": None, "gender": None})
        await PatientService.update_patient(OWNER, str(patient.id), request)

        stored = await PatientService.get_patient(OWNER, str(patient.id))
        assert stored.mrn is None
        assert stored.dob is None
        assert stored.gender is None
        assert stored.name == "Jane Doe"

    async def test_blank_mrn_clears_field(self, db):
        patient = await create("Jane Doe", mrn="MRN-42")

        updated = await PatientService.update_patient(OWNER, str(patient.id), UpdatePatientRequest(mrn="  "))

        assert updated.mrn is None

    @pytest.mark.parametrize("payload", [{"name": None}, {"name": "   "}])
    async def test_name_cannot_be_cleared(self, db, payload):
        patient = await create("Jane Doe")

        with pytest.raises(BadRequestException):
            await PatientService.update_patient(
                OWNER, str(patient.id), UpdatePatientRequest.model_validate(payload)
            )

    async def test_update_refreshes_modified_time(self, db):
        patient = await create("Jane Doe")
        original = patient.updated_at

        updated = await PatientService.update_patient(OWNER, str(patient.id), UpdatePatientRequest(mrn="MRN-1"))

        assert updated.updated_at >= original

    async def test_other_owner_cannot_update(self, db):
        patient = await create("Jane Doe", owner=OTHER_OWNER)

        with pytest.raises(NotFoundException):
            await PatientService.update_patient(OWNER, str(patient.id), UpdatePatientRequest(name="Hijacked"))

        stored = await PatientService.get_patient(OTHER_OWNER, str(patient.id))
        assert stored.name == "Jane Doe"


class TestLifecycle:

    async def test_deactivate_and_reactivate(self, db):
        patient = await create("Jane Doe")

        deactivated = await PatientService.deactivate_patient(OWNER, str(patient.id))
        assert deactivated.status == PatientStatus.INACTIVE

        reactivated = await PatientService.reactivate_patient(OWNER, str(patient.id))
        assert reactivated.status == PatientStatus.ACTIVE

        active = await PatientService.get_patients(OWNER, PatientSearchFilters(status=PatientStatus.ACTIVE))
        assert [p.id for p in active] == [patient.id]

    async def test_other_owner_cannot_deactivate(self, db):
        patient = await create("Jane Doe", owner=OTHER_OWNER)

        with pytest.raises(NotFoundException):
            await PatientService.deactivate_patient(OWNER, str(patient.id))


class TestSearchPatients:

    @pytest.mark.parametrize("term", ["", "   "])
    async def test_blank_term_returns_nothing(self, db, term):
        await create("Jane Doe")

        assert await PatientService.search_patients(OWNER, term) == []

    async def test_active_only_sorted_and_limited(self, db):
        for name in ["Dana Lee", "Ann Lee", "Cory Lee", "Bea Lee"]:
            await create(name)
        inactive = await create("Aaron Lee")
        await PatientService.deactivate_patient(OWNER, str(inactive.id))

        results = await PatientService.search_patients(OWNER, "lee", max_results=3)

        assert [p.name for p in results] == ["Ann Lee", "Bea Lee", "Cory Lee"]
