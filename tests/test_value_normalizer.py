"""Tests for field-specific value canonicalization."""

import pytest

from transcript_types import (
    FIELD_BLOOD_PRESSURE,
    FIELD_PULSE,
    KIND_DESCRIPTIVE,
    KIND_NUMERIC,
    MEDICATIONS_PLACEHOLDER,
    NKDA,
    NOT_EXTRACTED,
    NOT_MENTIONED,
)
from value_normalizer import (
    format_number,
    normalize_allergies,
    normalize_blood_pressure,
    normalize_doctor_name,
    normalize_gender,
    normalize_glucose,
    normalize_medications,
    normalize_patient_name,
    normalize_pulse,
    normalize_respiratory_rate,
    normalize_temperature,
    normalize_vital,
)


class TestTemperature:
    def test_fahrenheit_range(self):
        result = normalize_temperature("98.6")
        assert result.normalized_value == "98.6°F"
        assert result.kind == KIND_NUMERIC
        assert result.numeric.unit == "°F"

    def test_celsius_range(self):
        assert normalize_temperature("37").normalized_value == "37°C"

    def test_implausible_number_defaults_to_fahrenheit(self):
        result = normalize_temperature("120")
        assert result.normalized_value == "120°F"
        assert result.kind == KIND_DESCRIPTIVE
        assert result.numeric is None

    def test_normal_phrase(self):
        assert normalize_temperature("okay, that's reading normal").normalized_value == "Normal (afebrile)"

    def test_other_phrase_passes_through(self):
        assert normalize_temperature("felt warm to touch").normalized_value == "felt warm to touch"


class TestPulse:
    def test_in_range(self):
        result = normalize_pulse("45")
        assert result.normalized_value == "45 bpm"
        assert result.numeric.value == 45

    def test_out_of_range_kept_as_text(self):
        result = normalize_pulse("450")
        assert result.normalized_value == "450"
        assert result.kind == KIND_DESCRIPTIVE

    def test_equipment_issue(self):
        result = normalize_pulse("hmm, I'm not getting a clear reading here, let me try again")
        assert result.normalized_value == "Equipment issue - hmm, I'm not getting a clear reading here, let me try again"


class TestBloodPressure:
    @pytest.mark.parametrize("raw", ["120/80", "120 / 80", "120 over 80"])
    def test_canonical_form(self, raw):
        result = normalize_blood_pressure(raw)
        assert result.normalized_value == "120/80 mmHg"
        assert result.numeric.value == 120
        assert result.numeric.secondary == 80

    def test_equipment_issue(self):
        result = normalize_blood_pressure("the cuff seems to be malfunctioning")
        assert result.normalized_value == "Equipment issue - cuff seems to be malfunctioning"
        assert result.kind == KIND_DESCRIPTIVE


class TestRespiratoryRate:
    def test_in_range(self):
        assert normalize_respiratory_rate("18").normalized_value == "18/min"

    def test_breathing_normally(self):
        raw = ", you seem to be breathing normally, but I didn't count the exact rate"
        assert normalize_respiratory_rate(raw).normalized_value == "Breathing normally"

    def test_not_counted(self):
        assert normalize_respiratory_rate("did not count").normalized_value == "Rate not counted - did not count"


class TestGlucose:
    def test_in_range(self):
        assert normalize_glucose("95").normalized_value == "95 mg/dL"

    def test_decimal(self):
        assert normalize_glucose("110.5").normalized_value == "110.5 mg/dL"

    def test_to_be_checked(self):
        assert normalize_glucose("level if needed later").normalized_value == "To be checked - level if needed later"


def test_normalize_vital_dispatch():
    assert normalize_vital(FIELD_PULSE, "80").normalized_value == "80 bpm"
    assert normalize_vital(FIELD_BLOOD_PRESSURE, "130/85").normalized_value == "130/85 mmHg"


def test_normalize_vital_rejects_non_vital():
    with pytest.raises(KeyError):
        normalize_vital("allergies", "none")


def test_format_number():
    assert format_number(95.0) == "95"
    assert format_number(98.6) == "98.6"


class TestGender:
    @pytest.mark.parametrize("raw,expected", [
        ("male", "Male"),
        ("M", "Male"),
        ("gentleman", "Male"),
        ("female", "Female"),
        ("woman", "Female"),
        ("lady", "Female"),
        ("unknown", NOT_MENTIONED),
        ("", NOT_MENTIONED),
    ])
    def test_gender(self, raw, expected):
        assert normalize_gender(raw) == expected


class TestNames:
    def test_patient_prefix_removed(self):
        assert normalize_patient_name("Patient John Smith") == "John Smith"

    def test_title_removed(self):
        assert normalize_patient_name("Mrs. Alvarez") == "Alvarez"

    def test_empty_patient_name(self):
        assert normalize_patient_name("  ") == NOT_EXTRACTED

    @pytest.mark.parametrize("raw", ["The patient", "patient", "this patient"])
    def test_reference_to_patient_is_not_a_name(self, raw):
        assert normalize_patient_name(raw) == NOT_EXTRACTED

    def test_doctor_name(self):
        assert normalize_doctor_name("Gbenga Oluwadahunsi") == "Dr. Gbenga Oluwadahunsi"
        assert normalize_doctor_name("Dr. Patel") == "Dr. Patel"


class TestAllergies:
    def test_nkda_in_capture(self):
        assert normalize_allergies(["NKDA"]) == NKDA

    def test_nkda_anywhere_in_text_wins(self):
        text = "Allergies: penicillin. Later she said no known allergies."
        assert normalize_allergies(["penicillin"], text) == NKDA

    def test_items_joined(self):
        assert normalize_allergies(["penicillin and sulfa drugs"], "") == "penicillin; sulfa drugs"

    def test_nothing_captured(self):
        assert normalize_allergies([], "") == NOT_MENTIONED

    def test_not_allergic_to_anything(self):
        text = "She isn't allergic to anything."
        assert normalize_allergies(["anything"], text) == NKDA


class TestMedications:
    def test_lead_in_stripped_and_scan_merged(self):
        meds = normalize_medications(
            ["Patient is taking Lisinopril 10mg daily and aspirin 81mg daily"],
            ["Lisinopril 10mg", "aspirin 81mg", "ibuprofen 400mg"],
        )
        assert meds == ["Lisinopril 10mg daily", "aspirin 81mg daily", "ibuprofen 400mg"]

    def test_placeholder_when_empty(self):
        assert normalize_medications([], []) == [MEDICATIONS_PLACEHOLDER]
