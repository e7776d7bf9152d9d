# backend/transcript_parser.py
"""
Transcript -> StructuredClinicalNote.

Each field is extracted independently; an unexpected error in one field is
logged and that field falls back to its sentinel, so parse() never raises.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from field_extractor import extract, extract_all, merge_unique, scan_all, split_list_items
from text_normalizer import normalize
from transcript_patterns import LAB_VALUE_PATTERNS, MEDICATION_NAME_PATTERNS
from transcript_types import (
    FieldId,
    PatientInfo,
    ProviderInfo,
    StructuredClinicalNote,
    VitalSigns,
    MEDICATIONS_PLACEHOLDER,
    sentinel_for,
    FIELD_PATIENT_NAME,
    FIELD_AGE,
    FIELD_GENDER,
    FIELD_TEMPERATURE,
    FIELD_PULSE,
    FIELD_BLOOD_PRESSURE,
    FIELD_RESPIRATORY_RATE,
    FIELD_GLUCOSE,
    FIELD_CHIEF_COMPLAINT,
    FIELD_HPI,
    FIELD_PMH,
    FIELD_MEDICATIONS,
    FIELD_ALLERGIES,
    FIELD_ROS,
    FIELD_PHYSICAL_EXAM,
    FIELD_INVESTIGATIONS,
    FIELD_ASSESSMENT,
    FIELD_PLAN,
    FIELD_DOCTOR_NAME,
    FIELD_VISIT_DATE,
    FIELD_VISIT_TIME,
)
from value_normalizer import (
    normalize_allergies,
    normalize_doctor_name,
    normalize_gender,
    normalize_medications,
    normalize_patient_name,
    normalize_vital,
)

logger = logging.getLogger("transcriptnlp.parser")


# =====================================================
# PER-FIELD EXTRACTORS
# =====================================================

def _first(field_id: FieldId, text: str) -> str:
    return extract(field_id, text).normalized_value


def _normalized_first(field_id: FieldId, text: str, normalizer: Callable[[str, str], str]) -> str:
    result = extract(field_id, text)
    if not result.found:
        return result.normalized_value
    return normalizer(result.raw_capture, text)


def _vital(field_id: FieldId, text: str) -> str:
    result = extract(field_id, text)
    if not result.found:
        return result.normalized_value
    return normalize_vital(field_id, result.raw_capture, text).normalized_value


def _joined(field_id: FieldId, items: List[str], separator: str) -> str:
    return separator.join(items) if items else sentinel_for(field_id)


def _past_medical_history(text: str) -> str:
    items: List[str] = []
    for clause in extract_all(FIELD_PMH, text):
        items = merge_unique(items, split_list_items(clause))
    return _joined(FIELD_PMH, items, "; ")


def _investigations(text: str) -> str:
    items = merge_unique(extract_all(FIELD_INVESTIGATIONS, text), scan_all(LAB_VALUE_PATTERNS, text))
    return _joined(FIELD_INVESTIGATIONS, items, "; ")


def _medications(text: str) -> List[str]:
    return normalize_medications(
        extract_all(FIELD_MEDICATIONS, text),
        scan_all(MEDICATION_NAME_PATTERNS, text),
    )


FIELD_EXTRACTORS: Dict[FieldId, Callable[[str], Any]] = {
    FIELD_PATIENT_NAME: lambda t: _normalized_first(FIELD_PATIENT_NAME, t, normalize_patient_name),
    FIELD_AGE: lambda t: _first(FIELD_AGE, t),
    FIELD_GENDER: lambda t: _normalized_first(FIELD_GENDER, t, normalize_gender),
    FIELD_TEMPERATURE: lambda t: _vital(FIELD_TEMPERATURE, t),
    FIELD_PULSE: lambda t: _vital(FIELD_PULSE, t),
    FIELD_BLOOD_PRESSURE: lambda t: _vital(FIELD_BLOOD_PRESSURE, t),
    FIELD_RESPIRATORY_RATE: lambda t: _vital(FIELD_RESPIRATORY_RATE, t),
    FIELD_GLUCOSE: lambda t: _vital(FIELD_GLUCOSE, t),
    FIELD_CHIEF_COMPLAINT: lambda t: _first(FIELD_CHIEF_COMPLAINT, t),
    FIELD_HPI: lambda t: _first(FIELD_HPI, t),
    FIELD_PMH: _past_medical_history,
    FIELD_MEDICATIONS: _medications,
    FIELD_ALLERGIES: lambda t: normalize_allergies(extract_all(FIELD_ALLERGIES, t), t),
    FIELD_ROS: lambda t: _first(FIELD_ROS, t),
    FIELD_PHYSICAL_EXAM: lambda t: _joined(FIELD_PHYSICAL_EXAM, extract_all(FIELD_PHYSICAL_EXAM, t), ". "),
    FIELD_INVESTIGATIONS: _investigations,
    FIELD_ASSESSMENT: lambda t: _joined(FIELD_ASSESSMENT, extract_all(FIELD_ASSESSMENT, t), "; "),
    FIELD_PLAN: lambda t: _joined(FIELD_PLAN, extract_all(FIELD_PLAN, t), "; "),
    FIELD_DOCTOR_NAME: lambda t: _normalized_first(FIELD_DOCTOR_NAME, t, normalize_doctor_name),
    FIELD_VISIT_DATE: lambda t: _first(FIELD_VISIT_DATE, t),
    FIELD_VISIT_TIME: lambda t: _first(FIELD_VISIT_TIME, t),
}


def _fallback(field_id: FieldId) -> Any:
    if field_id == FIELD_MEDICATIONS:
        return [MEDICATIONS_PLACEHOLDER]
    return sentinel_for(field_id)


def _is_found(field_id: FieldId, value: Any) -> bool:
    if field_id == FIELD_MEDICATIONS:
        return value != [MEDICATIONS_PLACEHOLDER]
    return value != sentinel_for(field_id)


# =====================================================
# ORCHESTRATION
# =====================================================

def extract_fields(text: str) -> Dict[FieldId, Any]:
    values: Dict[FieldId, Any] = {}
    for field_id, extractor in FIELD_EXTRACTORS.items():
        try:
            values[field_id] = extractor(text)
        except Exception as ex:
            logger.exception("extraction failed for field=%s: %s", field_id, ex)
            values[field_id] = _fallback(field_id)
    return values


def parse(transcript: Optional[str]) -> StructuredClinicalNote:
    # 1) normalize
    text = normalize(transcript)

    # 2) extract every field independently
    values = extract_fields(text)

    found = sum(1 for field_id, value in values.items() if _is_found(field_id, value))
    logger.info("Parsed transcript (len=%d): %d/%d fields found", len(text), found, len(values))

    # 3) assemble the note
    return StructuredClinicalNote(
        patientInfo=PatientInfo(
            name=values[FIELD_PATIENT_NAME],
            age=values[FIELD_AGE],
            gender=values[FIELD_GENDER],
        ),
        vitalSigns=VitalSigns(
            temperature=values[FIELD_TEMPERATURE],
            pulse=values[FIELD_PULSE],
            bloodPressure=values[FIELD_BLOOD_PRESSURE],
            respiratoryRate=values[FIELD_RESPIRATORY_RATE],
            glucose=values[FIELD_GLUCOSE],
        ),
        chiefComplaint=values[FIELD_CHIEF_COMPLAINT],
        historyOfPresentIllness=values[FIELD_HPI],
        pastMedicalHistory=values[FIELD_PMH],
        medications=tuple(values[FIELD_MEDICATIONS]),
        allergies=values[FIELD_ALLERGIES],
        reviewOfSystems=values[FIELD_ROS],
        physicalExamination=values[FIELD_PHYSICAL_EXAM],
        investigations=values[FIELD_INVESTIGATIONS],
        assessment=values[FIELD_ASSESSMENT],
        plan=values[FIELD_PLAN],
        providerInfo=ProviderInfo(
            doctorName=values[FIELD_DOCTOR_NAME],
            date=values[FIELD_VISIT_DATE],
            time=values[FIELD_VISIT_TIME],
        ),
    )


def parse_transcript(transcript: Optional[str]) -> Dict[str, Any]:
    return parse(transcript).to_dict()
