from dataclasses import dataclass, field
from typing import Dict, Optional, Pattern, Tuple, Any


FieldId = str  # see FIELD_* constants below

FIELD_PATIENT_NAME = "patient_name"
FIELD_AGE = "age"
FIELD_GENDER = "gender"
FIELD_TEMPERATURE = "temperature"
FIELD_PULSE = "pulse"
FIELD_BLOOD_PRESSURE = "blood_pressure"
FIELD_RESPIRATORY_RATE = "respiratory_rate"
FIELD_GLUCOSE = "glucose"
FIELD_CHIEF_COMPLAINT = "chief_complaint"
FIELD_HPI = "history_of_present_illness"
FIELD_PMH = "past_medical_history"
FIELD_MEDICATIONS = "medications"
FIELD_ALLERGIES = "allergies"
FIELD_ROS = "review_of_systems"
FIELD_PHYSICAL_EXAM = "physical_examination"
FIELD_INVESTIGATIONS = "investigations"
FIELD_ASSESSMENT = "assessment"
FIELD_PLAN = "plan"
FIELD_DOCTOR_NAME = "doctor_name"
FIELD_VISIT_DATE = "visit_date"
FIELD_VISIT_TIME = "visit_time"

VITAL_FIELDS = (
    FIELD_TEMPERATURE,
    FIELD_PULSE,
    FIELD_BLOOD_PRESSURE,
    FIELD_RESPIRATORY_RATE,
    FIELD_GLUCOSE,
)

RuleKind = str  # "direct" | "narrative" | "descriptive"
RuleScope = str  # "text" | "sentence"
VitalKind = str  # "numeric-with-unit" | "descriptive"

KIND_NUMERIC = "numeric-with-unit"
KIND_DESCRIPTIVE = "descriptive"


# =====================================================
# SENTINELS
# =====================================================

NOT_EXTRACTED = "Not extracted"
NOT_MENTIONED = "Not mentioned"
CHIEF_COMPLAINT_PLACEHOLDER = "[To be extracted from transcript]"
TO_BE_DETERMINED = "To be determined"
NO_PHYSICAL_EXAM = "No physical examination was performed during this consultation."
MEDICATIONS_PLACEHOLDER = "[To be determined based on transcript analysis]"
NKDA = "No known drug allergies (NKDA)"

SENTINELS: Dict[FieldId, str] = {
    FIELD_PATIENT_NAME: NOT_EXTRACTED,
    FIELD_AGE: NOT_MENTIONED,
    FIELD_GENDER: NOT_MENTIONED,
    FIELD_TEMPERATURE: NOT_MENTIONED,
    FIELD_PULSE: NOT_MENTIONED,
    FIELD_BLOOD_PRESSURE: NOT_MENTIONED,
    FIELD_RESPIRATORY_RATE: NOT_MENTIONED,
    FIELD_GLUCOSE: NOT_MENTIONED,
    FIELD_CHIEF_COMPLAINT: CHIEF_COMPLAINT_PLACEHOLDER,
    FIELD_HPI: NOT_MENTIONED,
    FIELD_PMH: NOT_MENTIONED,
    FIELD_MEDICATIONS: MEDICATIONS_PLACEHOLDER,
    FIELD_ALLERGIES: NOT_MENTIONED,
    FIELD_ROS: NOT_MENTIONED,
    FIELD_PHYSICAL_EXAM: NO_PHYSICAL_EXAM,
    FIELD_INVESTIGATIONS: NOT_MENTIONED,
    FIELD_ASSESSMENT: TO_BE_DETERMINED,
    FIELD_PLAN: TO_BE_DETERMINED,
    FIELD_DOCTOR_NAME: NOT_MENTIONED,
    FIELD_VISIT_DATE: NOT_MENTIONED,
    FIELD_VISIT_TIME: NOT_MENTIONED,
}


def sentinel_for(field_id: FieldId) -> str:
    return SENTINELS.get(field_id, NOT_MENTIONED)


# =====================================================
# RULES AND EXTRACTED VALUES
# =====================================================

@dataclass(frozen=True)
class ExtractionRule:
    field: FieldId
    pattern: Pattern
    capture_index: int = 1
    kind: RuleKind = "direct"
    scope: RuleScope = "text"


@dataclass(frozen=True)
class ExtractedField:
    field: FieldId
    raw_capture: str
    normalized_value: str
    found: bool

    @classmethod
    def missing(cls, field_id: FieldId) -> "ExtractedField":
        return cls(field=field_id, raw_capture="", normalized_value=sentinel_for(field_id), found=False)


@dataclass(frozen=True)
class NumericReading:
    value: float
    unit: str
    secondary: Optional[float] = None  # diastolic for blood pressure


@dataclass(frozen=True)
class VitalSignValue(ExtractedField):
    kind: VitalKind = KIND_DESCRIPTIVE
    numeric: Optional[NumericReading] = None


# =====================================================
# STRUCTURED NOTE
# =====================================================

@dataclass(frozen=True)
class PatientInfo:
    name: str = NOT_EXTRACTED
    age: str = NOT_MENTIONED
    gender: str = NOT_MENTIONED


@dataclass(frozen=True)
class VitalSigns:
    temperature: str = NOT_MENTIONED
    pulse: str = NOT_MENTIONED
    bloodPressure: str = NOT_MENTIONED
    respiratoryRate: str = NOT_MENTIONED
    glucose: str = NOT_MENTIONED


@dataclass(frozen=True)
class ProviderInfo:
    doctorName: str = NOT_MENTIONED
    date: str = NOT_MENTIONED
    time: str = NOT_MENTIONED


@dataclass(frozen=True)
class StructuredClinicalNote:
    patientInfo: PatientInfo = field(default_factory=PatientInfo)
    vitalSigns: VitalSigns = field(default_factory=VitalSigns)
    chiefComplaint: str = CHIEF_COMPLAINT_PLACEHOLDER
    historyOfPresentIllness: str = NOT_MENTIONED
    pastMedicalHistory: str = NOT_MENTIONED
    medications: Tuple[str, ...] = (MEDICATIONS_PLACEHOLDER,)
    allergies: str = NOT_MENTIONED
    reviewOfSystems: str = NOT_MENTIONED
    physicalExamination: str = NO_PHYSICAL_EXAM
    investigations: str = NOT_MENTIONED
    assessment: str = TO_BE_DETERMINED
    plan: str = TO_BE_DETERMINED
    providerInfo: ProviderInfo = field(default_factory=ProviderInfo)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "patientInfo": {
                "name": self.patientInfo.name,
                "age": self.patientInfo.age,
                "gender": self.patientInfo.gender,
            },
            "vitalSigns": {
                "temperature": self.vitalSigns.temperature,
                "pulse": self.vitalSigns.pulse,
                "bloodPressure": self.vitalSigns.bloodPressure,
                "respiratoryRate": self.vitalSigns.respiratoryRate,
                "glucose": self.vitalSigns.glucose,
            },
            "chiefComplaint": self.chiefComplaint,
            "historyOfPresentIllness": self.historyOfPresentIllness,
            "pastMedicalHistory": self.pastMedicalHistory,
            "medications": list(self.medications),
            "allergies": self.allergies,
            "reviewOfSystems": self.reviewOfSystems,
            "physicalExamination": self.physicalExamination,
            "investigations": self.investigations,
            "assessment": self.assessment,
            "plan": self.plan,
            "providerInfo": {
                "doctorName": self.providerInfo.doctorName,
                "date": self.providerInfo.date,
                "time": self.providerInfo.time,
            },
        }


@dataclass
class VitalSignAssessment:
    value: str
    is_normal: bool
    message: str
    severity: Optional[str] = None  # "normal" | "mild" | "moderate" | "severe"
    not_mentioned: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "isNormal": self.is_normal,
            "message": self.message,
            "severity": self.severity,
            "isNotMentioned": self.not_mentioned,
        }
