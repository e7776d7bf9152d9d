# backend/confidence_scorer.py
from typing import Any, Dict, Tuple, Union

from field_extractor import rule_matches
from transcript_patterns import rules_for
from transcript_types import (
    FieldId,
    StructuredClinicalNote,
    SENTINELS,
    sentinel_for,
    FIELD_PATIENT_NAME,
    FIELD_AGE,
    FIELD_GENDER,
    FIELD_TEMPERATURE,
    FIELD_PULSE,
    FIELD_BLOOD_PRESSURE,
    FIELD_CHIEF_COMPLAINT,
    FIELD_HPI,
    FIELD_ASSESSMENT,
    FIELD_PLAN,
)

# Fields that count towards the overall score, with their path in to_dict().
CONFIDENCE_FIELDS: Tuple[Tuple[FieldId, Tuple[str, ...]], ...] = (
    (FIELD_PATIENT_NAME, ("patientInfo", "name")),
    (FIELD_AGE, ("patientInfo", "age")),
    (FIELD_GENDER, ("patientInfo", "gender")),
    (FIELD_TEMPERATURE, ("vitalSigns", "temperature")),
    (FIELD_PULSE, ("vitalSigns", "pulse")),
    (FIELD_BLOOD_PRESSURE, ("vitalSigns", "bloodPressure")),
    (FIELD_CHIEF_COMPLAINT, ("chiefComplaint",)),
    (FIELD_HPI, ("historyOfPresentIllness",)),
    (FIELD_ASSESSMENT, ("assessment",)),
    (FIELD_PLAN, ("plan",)),
)

_SENTINEL_VALUES = frozenset(SENTINELS.values())


def _get(data: Dict[str, Any], path: Tuple[str, ...]) -> Any:
    cur: Any = data
    for key in path:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(key)
    return cur


def is_extracted(field_id: FieldId, value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (list, tuple)):
        return any(is_extracted(field_id, v) for v in value)
    text = str(value).strip()
    return bool(text) and text != sentinel_for(field_id) and text not in _SENTINEL_VALUES


def score(note: Union[StructuredClinicalNote, Dict[str, Any], None]) -> int:
    data = note.to_dict() if isinstance(note, StructuredClinicalNote) else (note or {})
    extracted = sum(1 for field_id, path in CONFIDENCE_FIELDS if is_extracted(field_id, _get(data, path)))
    return round(100 * extracted / len(CONFIDENCE_FIELDS))


calculate_overall_confidence = score


def field_confidence(field_id: FieldId, value: Any, text: str) -> int:
    matching_rules = sum(1 for rule in rules_for(field_id) if rule_matches(rule, text or ""))
    confidence = 20 * matching_rules
    if is_extracted(field_id, value):
        confidence += 30
    return min(confidence, 100)
