"""End-to-end tests for transcript parsing."""

import logging
import time

import pytest

import transcript_parser
from transcript_parser import parse, parse_transcript
from transcript_types import (
    CHIEF_COMPLAINT_PLACEHOLDER,
    MEDICATIONS_PLACEHOLDER,
    NKDA,
    NO_PHYSICAL_EXAM,
    NOT_EXTRACTED,
    NOT_MENTIONED,
    TO_BE_DETERMINED,
    FIELD_PMH,
    StructuredClinicalNote,
)


class TestTotality:
    @pytest.mark.parametrize("transcript", ["", "   ", None, "Hello.", "!!!???...", "1234 5678"])
    def test_never_raises_and_returns_sentinels(self, transcript):
        note = parse(transcript)
        assert isinstance(note, StructuredClinicalNote)
        assert note.patientInfo.name == NOT_EXTRACTED

    def test_empty_transcript_is_all_sentinels(self):
        d = parse_transcript("")
        assert d["patientInfo"] == {"name": NOT_EXTRACTED, "age": NOT_MENTIONED, "gender": NOT_MENTIONED}
        assert set(d["vitalSigns"].values()) == {NOT_MENTIONED}
        assert d["chiefComplaint"] == CHIEF_COMPLAINT_PLACEHOLDER
        assert d["medications"] == [MEDICATIONS_PLACEHOLDER]
        assert d["physicalExamination"] == NO_PHYSICAL_EXAM
        assert d["assessment"] == TO_BE_DETERMINED
        assert d["plan"] == TO_BE_DETERMINED
        assert d["providerInfo"] == {"doctorName": NOT_MENTIONED, "date": NOT_MENTIONED, "time": NOT_MENTIONED}

    def test_failing_field_degrades_to_sentinel(self, monkeypatch, caplog):
        def boom(text):
            raise RuntimeError("broken rule")

        monkeypatch.setitem(transcript_parser.FIELD_EXTRACTORS, FIELD_PMH, boom)
        with caplog.at_level(logging.ERROR, logger="transcriptnlp.parser"):
            note = parse("Past medical history: asthma. Patient is a 30 year old.")
        assert note.pastMedicalHistory == NOT_MENTIONED
        assert note.patientInfo.age == "30"
        assert "past_medical_history" in caplog.text

    def test_note_is_immutable(self, chest_pain_note):
        with pytest.raises(AttributeError):
            chest_pain_note.chiefComplaint = "changed"


class TestNumericVitals:
    def test_numeric_vitals(self, chest_pain_note):
        vitals = chest_pain_note.vitalSigns
        assert vitals.temperature == "98.6°F"
        assert vitals.pulse == "80 bpm"
        assert vitals.bloodPressure == "120/80 mmHg"
        assert vitals.respiratoryRate == "18/min"
        assert vitals.glucose == "95 mg/dL"

    def test_identity(self, chest_pain_note):
        assert chest_pain_note.patientInfo.name == "John Smith"
        assert chest_pain_note.patientInfo.age == "45"
        assert chest_pain_note.patientInfo.gender == "Male"

    def test_sections(self, chest_pain_note):
        assert chest_pain_note.chiefComplaint == "Sharp chest pain for the past 2 hours"
        assert chest_pain_note.historyOfPresentIllness.startswith("Patient reports sudden onset")
        assert chest_pain_note.pastMedicalHistory == "Hypertension; controlled with medication"
        assert chest_pain_note.assessment == "Atypical chest pain, likely musculoskeletal in origin"
        assert chest_pain_note.plan.startswith("Recommend rest")
        assert chest_pain_note.reviewOfSystems.startswith("Patient denies fever")
        assert chest_pain_note.physicalExamination.startswith("Patient appears comfortable at rest")

    def test_labelled_section_stops_at_next_header(self, chest_pain_note):
        assert "Current medications" not in chest_pain_note.pastMedicalHistory
        assert "Plan" not in chest_pain_note.assessment

    def test_medications(self, chest_pain_note):
        assert chest_pain_note.medications == (
            "Lisinopril 10mg daily",
            "aspirin 81mg daily",
            "ibuprofen 400mg",
        )

    def test_second_structured_sample(self, heart_failure_note):
        note = heart_failure_note
        assert note.patientInfo.name == "Mary Johnson"
        assert note.patientInfo.age == "62"
        assert note.patientInfo.gender == "Female"
        assert note.vitalSigns.temperature == "99.2°F"
        assert note.vitalSigns.pulse == "95 bpm"
        assert note.vitalSigns.bloodPressure == "140/90 mmHg"
        assert note.vitalSigns.respiratoryRate == "22/min"
        assert note.vitalSigns.glucose == "180 mg/dL"
        assert note.pastMedicalHistory == "Type 2 diabetes mellitus; hypertension"
        assert list(note.medications) == [
            "metformin 500mg twice daily",
            "amlodipine 5mg once daily",
            "furosemide 40mg",
        ]


class TestEquipmentMalfunction:
    def test_identity_and_gender_inference(self, malfunction_note):
        assert malfunction_note.patientInfo.name == "James Bond"
        assert malfunction_note.patientInfo.age == "33"
        assert malfunction_note.patientInfo.gender == "Male"

    def test_descriptive_vitals(self, malfunction_note):
        vitals = malfunction_note.vitalSigns
        assert vitals.temperature == "Normal (afebrile)"
        assert vitals.pulse.startswith("Equipment issue - ")
        assert "clear reading" in vitals.pulse
        assert vitals.bloodPressure.startswith("Equipment issue - ")
        assert "malfunctioning" in vitals.bloodPressure
        assert vitals.respiratoryRate == "Breathing normally"
        assert vitals.glucose == "To be checked - level if needed later"

    def test_narrative_fields(self, malfunction_note):
        assert malfunction_note.chiefComplaint.startswith("weakness on the left side")
        assert malfunction_note.historyOfPresentIllness == "this morning when I woke up"
        assert malfunction_note.assessment == "stroke or cerebrovascular accident"
        assert malfunction_note.plan != TO_BE_DETERMINED
        assert malfunction_note.pastMedicalHistory == NOT_MENTIONED
        assert malfunction_note.medications == (MEDICATIONS_PLACEHOLDER,)

    def test_nkda(self, malfunction_note):
        assert malfunction_note.allergies == NKDA

    def test_provider_info(self, malfunction_note):
        provider = malfunction_note.providerInfo
        assert provider.doctorName == "Dr. Gbenga Oluwadahunsi"
        assert provider.date == "August 21st, 2025"
        assert provider.time == "9:42 AM"


class TestPrecedence:
    def test_direct_temperature_beats_narrative(self):
        note = parse("Temperature is 98.6. Earlier she was febrile at 101.")
        assert note.vitalSigns.temperature == "98.6°F"

    def test_numeric_pulse_beats_descriptive(self):
        note = parse("Pulse is hard to get a clear reading on. Pulse 72 on the monitor.")
        assert note.vitalSigns.pulse == "72 bpm"

    def test_pulse_range_gate(self):
        assert parse("Pulse 45.").vitalSigns.pulse == "45 bpm"
        assert parse("Pulse 450.").vitalSigns.pulse == "450"

    def test_nkda_wins_over_other_allergy_text(self):
        note = parse("Allergies: penicillin causes rash. NKDA per pharmacy record.")
        assert note.allergies == NKDA

    def test_allergy_list(self):
        note = parse("Allergies: penicillin, sulfa drugs. Plan: rest.")
        assert note.allergies == "penicillin; sulfa drugs"

    def test_investigations_collect_labs(self):
        note = parse("Chest x-ray shows clear lungs. Hemoglobin 13.5 and potassium 4.1.")
        assert note.investigations == "clear lungs; Hemoglobin 13.5; potassium 4.1"


def test_parse_transcript_shape(chest_pain_transcript):
    d = parse_transcript(chest_pain_transcript)
    assert set(d) == {
        "patientInfo", "vitalSigns", "chiefComplaint", "historyOfPresentIllness",
        "pastMedicalHistory", "medications", "allergies", "reviewOfSystems",
        "physicalExamination", "investigations", "assessment", "plan", "providerInfo",
    }
    assert isinstance(d["medications"], list)


def test_parse_logs_summary(caplog, chest_pain_transcript):
    with caplog.at_level(logging.INFO, logger="transcriptnlp.parser"):
        parse(chest_pain_transcript)
    assert "fields found" in caplog.text


class TestOrdinarySpeech:
    def test_contraction_is_not_a_temperature(self):
        note = parse("I can't 100 percent say. Pulse 80.")
        assert note.vitalSigns.temperature == NOT_MENTIONED
        assert note.vitalSigns.pulse == "80 bpm"

    def test_charted_temperature_shorthand(self):
        assert parse("BP 120/80, T: 98.6.").vitalSigns.temperature == "98.6°F"

    @pytest.mark.parametrize("text", ["BP 120 over 80.", "Blood pressure 120 over 80."])
    def test_blood_pressure_spoken_as_over(self, text):
        assert parse(text).vitalSigns.bloodPressure == "120/80 mmHg"

    def test_lab_readings_are_not_medications(self):
        note = parse("Glucose 180 mg/dL. Hemoglobin 13 g/dL.")
        assert note.medications == (MEDICATIONS_PLACEHOLDER,)
        assert note.vitalSigns.glucose == "180 mg/dL"

    def test_dosed_drug_still_listed_next_to_labs(self):
        note = parse("Glucose 180 mg/dL. Started Lasix 40 mg daily.")
        assert note.medications == ("Lasix 40 mg",)

    def test_the_patient_is_not_a_name(self):
        note = parse("The patient is a 70 year old woman.")
        assert note.patientInfo.name == NOT_EXTRACTED
        assert note.patientInfo.age == "70"
        assert note.patientInfo.gender == "Female"

    def test_not_allergic_to_anything_is_nkda(self):
        note = parse("Do you have any allergies? No, I'm not allergic to anything.")
        assert note.allergies == NKDA

    def test_unpunctuated_keyword_run_stays_fast(self):
        start = time.perf_counter()
        note = parse("pulse " * 5000)
        elapsed = time.perf_counter() - start
        assert note.vitalSigns.pulse == NOT_MENTIONED
        assert elapsed < 10
