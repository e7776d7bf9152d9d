# backend/value_normalizer.py
"""
Field-specific canonicalization of raw captures.

Every normalizer is a pure function of (raw capture, full transcript text).
Numeric vitals are only accepted when they fall inside a plausible range;
anything else is kept as a descriptive phrase.
"""

import re
from typing import Iterable, List, Optional

from field_extractor import merge_unique, split_list_items
from text_normalizer import clean_extracted_text
from transcript_patterns import MEDICATION_LEAD_IN_PATTERN, NO_KNOWN_ALLERGY_PATTERN
from transcript_types import (
    FieldId,
    NumericReading,
    VitalSignValue,
    KIND_NUMERIC,
    KIND_DESCRIPTIVE,
    NKDA,
    NOT_EXTRACTED,
    NOT_MENTIONED,
    MEDICATIONS_PLACEHOLDER,
    FIELD_TEMPERATURE,
    FIELD_PULSE,
    FIELD_BLOOD_PRESSURE,
    FIELD_RESPIRATORY_RATE,
    FIELD_GLUCOSE,
)


_LEADING_NUMBER_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)")
_LEADING_INT_RE = re.compile(r"^\s*(\d+)")
_BP_READING_RE = re.compile(r"(\d+)\s*(?:/|over)\s*(\d+)", re.IGNORECASE)

_PATIENT_NAME_PREFIX_RE = re.compile(
    r"^(?:patient(?:'s)?\s+(?:name\s+is\s+)?|(?:mr|mrs|ms|miss)\.?\s+)", re.IGNORECASE
)
_DOCTOR_PREFIX_RE = re.compile(r"^(?:dr\.?|doctor)\s*", re.IGNORECASE)
# captures made only of these are a reference to the patient, not a name
_NON_NAME_WORDS = frozenset({"the", "this", "our", "patient", "patients", "he", "she", "mr", "mrs", "ms", "miss"})

_PULSE_EQUIPMENT_MARKERS = ("malfunction", "clear reading", "try again")
_BP_EQUIPMENT_MARKERS = ("malfunction", "cuff", "different", "clear reading", "try again")
_NO_ALLERGY_MARKERS = ("no known", "nkda", "none", "no allergies")

MALE_TERMS = frozenset({"man", "boy", "gentleman"})
FEMALE_TERMS = frozenset({"woman", "girl", "lady"})


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(float(value))


def _leading_number(raw: str) -> Optional[float]:
    m = _LEADING_NUMBER_RE.match(raw or "")
    return float(m.group(1)) if m else None


def _leading_int(raw: str) -> Optional[int]:
    m = _LEADING_INT_RE.match(raw or "")
    return int(m.group(1)) if m else None


def _numeric(field_id: FieldId, raw: str, value: str, reading: NumericReading) -> VitalSignValue:
    return VitalSignValue(
        field=field_id, raw_capture=raw, normalized_value=value, found=True,
        kind=KIND_NUMERIC, numeric=reading,
    )


def _descriptive(field_id: FieldId, raw: str, value: str) -> VitalSignValue:
    return VitalSignValue(
        field=field_id, raw_capture=raw, normalized_value=value, found=True,
        kind=KIND_DESCRIPTIVE,
    )


# =====================================================
# VITAL SIGNS
# =====================================================

def normalize_temperature(raw: str, text: str = "") -> VitalSignValue:
    value = _leading_number(raw)
    if value is not None:
        if 90 <= value <= 110:
            return _numeric(FIELD_TEMPERATURE, raw, f"{format_number(value)}°F", NumericReading(value, "°F"))
        if 30 <= value <= 45:
            return _numeric(FIELD_TEMPERATURE, raw, f"{format_number(value)}°C", NumericReading(value, "°C"))
        # implausible reading, keep the number with the default unit
        return _descriptive(FIELD_TEMPERATURE, raw, f"{format_number(value)}°F")

    low = raw.lower()
    if "normal" in low or "afebrile" in low:
        return _descriptive(FIELD_TEMPERATURE, raw, "Normal (afebrile)")
    return _descriptive(FIELD_TEMPERATURE, raw, clean_extracted_text(raw))


def normalize_pulse(raw: str, text: str = "") -> VitalSignValue:
    value = _leading_int(raw)
    if value is not None and 30 <= value <= 200:
        return _numeric(FIELD_PULSE, raw, f"{value} bpm", NumericReading(value, "bpm"))

    cleaned = clean_extracted_text(raw)
    if any(marker in raw.lower() for marker in _PULSE_EQUIPMENT_MARKERS):
        return _descriptive(FIELD_PULSE, raw, f"Equipment issue - {cleaned}")
    return _descriptive(FIELD_PULSE, raw, cleaned)


def normalize_blood_pressure(raw: str, text: str = "") -> VitalSignValue:
    m = _BP_READING_RE.search(raw)
    if m:
        systolic, diastolic = int(m.group(1)), int(m.group(2))
        return _numeric(
            FIELD_BLOOD_PRESSURE, raw, f"{systolic}/{diastolic} mmHg",
            NumericReading(systolic, "mmHg", secondary=diastolic),
        )

    cleaned = clean_extracted_text(raw)
    if any(marker in raw.lower() for marker in _BP_EQUIPMENT_MARKERS):
        return _descriptive(FIELD_BLOOD_PRESSURE, raw, f"Equipment issue - {cleaned}")
    return _descriptive(FIELD_BLOOD_PRESSURE, raw, cleaned)


def normalize_respiratory_rate(raw: str, text: str = "") -> VitalSignValue:
    value = _leading_int(raw)
    if value is not None and 5 <= value <= 50:
        return _numeric(FIELD_RESPIRATORY_RATE, raw, f"{value}/min", NumericReading(value, "/min"))

    low = raw.lower()
    cleaned = clean_extracted_text(raw)
    if "normal" in low:
        return _descriptive(FIELD_RESPIRATORY_RATE, raw, "Breathing normally")
    if "count" in low or "exact" in low:
        return _descriptive(FIELD_RESPIRATORY_RATE, raw, f"Rate not counted - {cleaned}")
    return _descriptive(FIELD_RESPIRATORY_RATE, raw, cleaned)


def normalize_glucose(raw: str, text: str = "") -> VitalSignValue:
    value = _leading_number(raw)
    if value is not None and 20 <= value <= 800:
        return _numeric(FIELD_GLUCOSE, raw, f"{format_number(value)} mg/dL", NumericReading(value, "mg/dL"))

    low = raw.lower()
    cleaned = clean_extracted_text(raw)
    if "check" in low or "needed" in low or "later" in low:
        return _descriptive(FIELD_GLUCOSE, raw, f"To be checked - {cleaned}")
    return _descriptive(FIELD_GLUCOSE, raw, cleaned)


VITAL_NORMALIZERS = {
    FIELD_TEMPERATURE: normalize_temperature,
    FIELD_PULSE: normalize_pulse,
    FIELD_BLOOD_PRESSURE: normalize_blood_pressure,
    FIELD_RESPIRATORY_RATE: normalize_respiratory_rate,
    FIELD_GLUCOSE: normalize_glucose,
}


def normalize_vital(field_id: FieldId, raw: str, text: str = "") -> VitalSignValue:
    normalizer = VITAL_NORMALIZERS.get(field_id)
    if normalizer is None:
        raise KeyError(f"no vital sign normalizer for field '{field_id}'")
    return normalizer(raw, text)


# =====================================================
# IDENTITY AND PROVIDER
# =====================================================

def normalize_gender(raw: str, text: str = "") -> str:
    g = (raw or "").strip().lower()
    if not g:
        return NOT_MENTIONED
    # "female" starts with "f", so the prefix test cannot confuse the two
    if g.startswith("m") or g in MALE_TERMS:
        return "Male"
    if g.startswith("f") or g in FEMALE_TERMS:
        return "Female"
    return NOT_MENTIONED


def normalize_patient_name(raw: str, text: str = "") -> str:
    name = clean_extracted_text(raw)
    name = _PATIENT_NAME_PREFIX_RE.sub("", name).strip()
    if not name or all(w in _NON_NAME_WORDS for w in name.lower().split()):
        return NOT_EXTRACTED
    return name


def normalize_doctor_name(raw: str, text: str = "") -> str:
    name = clean_extracted_text(raw)
    name = _DOCTOR_PREFIX_RE.sub("", name).strip()
    if not name:
        return NOT_MENTIONED
    return f"Dr. {name}"


# =====================================================
# LIST-VALUED FIELDS
# =====================================================

def normalize_allergies(captures: Iterable[str], text: str = "") -> str:
    captures = [c for c in captures if c]
    if any(m in c.lower() for c in captures for m in _NO_ALLERGY_MARKERS):
        return NKDA
    if NO_KNOWN_ALLERGY_PATTERN.search(text or ""):
        return NKDA

    items: List[str] = []
    for clause in captures:
        items = merge_unique(items, split_list_items(clause))
    return "; ".join(items) if items else NOT_MENTIONED


def normalize_medications(clauses: Iterable[str], scanned_names: Iterable[str] = ()) -> List[str]:
    """
    Split medication clauses into items, strip "patient is taking" style
    lead-ins, then fold in names found by the whole-text scan.
    """
    items: List[str] = []
    for clause in clauses:
        for item in split_list_items(clause):
            item = clean_extracted_text(MEDICATION_LEAD_IN_PATTERN.sub("", item))
            if len(item) >= 3:
                items = merge_unique(items, [item])
    items = merge_unique(items, scanned_names)
    return items or [MEDICATIONS_PLACEHOLDER]
