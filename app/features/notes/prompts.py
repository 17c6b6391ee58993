"""
Prompt composition for clinical note generation.

Templates are looked up by clinical context; adding a context means adding
an entry to CONTEXT_TEMPLATES and CONTEXT_OPTIONS.
"""

from typing import Dict, List, Optional
from app.shared.enums import Clinic, ClinicalContext, VisitType, DEFAULT_CONTEXT
from app.features.notes.schemas import PatientContext, ContextOption


_EPIC_STYLE = (
    "Use professional psychiatric documentation language with Epic SmartPhrases "
    "(@SMARTPHRASE@) and DotPhrases (.dotphrase) where appropriate."
)

_CREDIBLE_STYLE = (
    "CRITICAL: Davis Behavioral Health uses Credible EMR - output PLAIN TEXT ONLY. "
    "Do NOT use Epic SmartPhrases, @SMARTPHRASE@ syntax, or .dotphrases."
)

_INTEGRATED_CARE_STYLE = (
    "Use clear, accessible language appropriate for integrated care documentation."
)


def _assistant_intro(clinic_name: str) -> str:
    return (
        "You are a HIPAA-compliant AI clinical documentation assistant for a "
        f"psychiatry resident at {clinic_name}."
    )


CONTEXT_TEMPLATES: Dict[ClinicalContext, str] = {
    ClinicalContext.HMHI_TRANSFER: f"""{_assistant_intro("HMHI Downtown Clinic")}

Generate an Epic-compatible outpatient psychiatry transfer of care note. This is when care of a patient is passed from one resident/attending to a new resident, who is taking over care.

CRITICAL TRANSFER OF CARE INSTRUCTIONS:
The previous patient note contains sections that should be copied forward unchanged, and sections that need to be updated based on today's visit transcript.

SECTIONS TO UPDATE/MODIFY (focus your effort here):
- HPI (History of Present Illness)
- Review of Systems
- Psychiatric exam/Mental Status Exam
- Assessment (interval update, new findings from today's visit per the transcript)
- Parts of the Plan (according to the transcript):
  * Medications
  * Psychosocial

SECTIONS TO COPY FORWARD UNCHANGED (preserve exactly as-is):
- Basic patient info (name, MRN, DOB)
- Diagnoses (automatically pulled in from elsewhere)
- Current medications (automatically pulled in from elsewhere)
- Behavioral Health prior meds tried
- Risks (risk assessment)
- Parts of the Plan:
  * Safety Plan
  * Prognosis
  * Psychotherapy

{_EPIC_STYLE}

Write concisely in clinical prose from the new resident's perspective.""",

    ClinicalContext.HMHI_FOLLOWUP: f"""{_assistant_intro("HMHI Downtown Clinic")}

Generate an Epic-compatible outpatient psychiatry follow-up note.

{_EPIC_STYLE}

Structure the note with standard psychiatric follow-up sections.""",

    ClinicalContext.DBH_INTAKE: f"""{_assistant_intro("Davis Behavioral Health")}

Generate a Credible EMR-compatible outpatient psychiatry intake note.

{_CREDIBLE_STYLE}

Structure the note with comprehensive intake sections including detailed psychiatric history, mental status exam, and treatment plan.""",

    ClinicalContext.DBH_FOLLOWUP: f"""{_assistant_intro("Davis Behavioral Health")}

Generate a Credible EMR-compatible outpatient psychiatry follow-up note.

{_CREDIBLE_STYLE}""",

    ClinicalContext.REDWOOD_INTAKE: f"""{_assistant_intro("Redwood Clinic MH Integration")}

Generate a mental health integration intake note for primary care setting.

{_INTEGRATED_CARE_STYLE}""",

    ClinicalContext.REDWOOD_FOLLOWUP: f"""{_assistant_intro("Redwood Clinic MH Integration")}

Generate a mental health integration follow-up note for primary care setting.

{_INTEGRATED_CARE_STYLE}""",
}


CONTEXT_OPTIONS: Dict[ClinicalContext, ContextOption] = {
    ClinicalContext.HMHI_TRANSFER: ContextOption(
        key=ClinicalContext.HMHI_TRANSFER,
        clinic=Clinic.HMHI_DOWNTOWN,
        visit_type=VisitType.TRANSFER,
        label="HMHI Downtown - Transfer of Care",
        accepts_previous_note=True,
    ),
    ClinicalContext.HMHI_FOLLOWUP: ContextOption(
        key=ClinicalContext.HMHI_FOLLOWUP,
        clinic=Clinic.HMHI_DOWNTOWN,
        visit_type=VisitType.FOLLOWUP,
        label="HMHI Downtown - Follow-up",
    ),
    ClinicalContext.DBH_INTAKE: ContextOption(
        key=ClinicalContext.DBH_INTAKE,
        clinic=Clinic.DAVIS_BEHAVIORAL_HEALTH,
        visit_type=VisitType.INTAKE,
        label="Davis Behavioral Health - Intake",
    ),
    ClinicalContext.DBH_FOLLOWUP: ContextOption(
        key=ClinicalContext.DBH_FOLLOWUP,
        clinic=Clinic.DAVIS_BEHAVIORAL_HEALTH,
        visit_type=VisitType.FOLLOWUP,
        label="Davis Behavioral Health - Follow-up",
    ),
    ClinicalContext.REDWOOD_INTAKE: ContextOption(
        key=ClinicalContext.REDWOOD_INTAKE,
        clinic=Clinic.REDWOOD_CLINIC_MHI,
        visit_type=VisitType.INTAKE,
        label="Redwood Clinic MHI - Intake",
    ),
    ClinicalContext.REDWOOD_FOLLOWUP: ContextOption(
        key=ClinicalContext.REDWOOD_FOLLOWUP,
        clinic=Clinic.REDWOOD_CLINIC_MHI,
        visit_type=VisitType.FOLLOWUP,
        label="Redwood Clinic MHI - Follow-up",
    ),
}


CLOSING_INSTRUCTION = "Generate the clinical note now:"


def resolve_context(context: Optional[str]) -> ClinicalContext:
    """Map a context key to a known context, falling back to transfer of care."""
    try:
        return ClinicalContext(context)
    except ValueError:
        return DEFAULT_CONTEXT


def _patient_block(patient: PatientContext) -> str:
    lines = ["PATIENT INFORMATION:", f"Name: {patient.patient_name.strip()}"]

    optional_lines = [
        ("MRN", patient.patient_mrn),
        ("Date of Birth", patient.patient_dob),
        ("Gender", patient.patient_gender),
    ]
    for label, value in optional_lines:
        if value and value.strip():
            lines.append(f"{label}: {value.strip()}")

    return "\n".join(lines)


def compose_prompt(
    context: Optional[str],
    transcript: str,
    previous_note: Optional[str] = None,
    patient: Optional[PatientContext] = None,
) -> str:
    """
    Build the generator prompt.

    Sections, separated by blank lines, always come in this order:
    template, transcript, patient information (only when the snapshot
    names the patient), previous note (transfer of care only), closing
    instruction.
    """
    resolved = resolve_context(context)

    sections = [
        CONTEXT_TEMPLATES[resolved],
        f"TRANSCRIPT:\n{transcript}",
    ]

    if patient is not None and patient.patient_name.strip():
        sections.append(_patient_block(patient))

    # Keyed on the requested context, not the fallback
    if context == ClinicalContext.HMHI_TRANSFER and previous_note and previous_note.strip():
        sections.append(f"PREVIOUS PATIENT NOTE:\n{previous_note}")

    sections.append(CLOSING_INSTRUCTION)

    return "\n\n".join(sections)


def list_contexts() -> List[ContextOption]:
    """Available clinical contexts in display order."""
    return [CONTEXT_OPTIONS[context] for context in ClinicalContext]
