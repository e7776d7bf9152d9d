"""
vital_signs_assessment.py

Age-aware interpretation of extracted vital sign strings.
Descriptive findings and sentinels are reported as not mentioned.
"""

import re
from typing import Any, Dict, Optional, Union

from transcript_types import VitalSigns, VitalSignAssessment


# =====================================================
# RANGES
# =====================================================

# Celsius, all ages
TEMPERATURE_RANGES = {
    "normal": (36.1, 37.2),
    "fever": (37.3, 38.0),
    "high_fever": (38.1, 40.0),
    "hyperthermia_min": 40.1,
}

HEART_RATE_RANGES = {
    "adult": {"min": 60, "max": 100, "bradycardia": 60, "tachycardia": 100},
    "newborn": {"min": 100, "max": 160, "bradycardia": 100, "tachycardia": 160},
    "infant": {"min": 100, "max": 160, "bradycardia": 100, "tachycardia": 160},
    "toddler": {"min": 100, "max": 140, "bradycardia": 90, "tachycardia": 160},
    "preschool": {"min": 80, "max": 120, "bradycardia": 80, "tachycardia": 130},
    "school": {"min": 75, "max": 120, "bradycardia": 70, "tachycardia": 140},
    "adolescent": {"min": 60, "max": 100, "bradycardia": 60, "tachycardia": 120},
}

RESPIRATORY_RATE_RANGES = {
    "adult": {"min": 12, "max": 20, "bradypnea": 12, "tachypnea": 20},
    "newborn": {"min": 40, "max": 60, "bradypnea": 30, "tachypnea": 60},
    "infant": {"min": 30, "max": 60, "bradypnea": 30, "tachypnea": 60},
    "toddler": {"min": 25, "max": 35, "bradypnea": 20, "tachypnea": 40},
    "preschool": {"min": 20, "max": 30, "bradypnea": 15, "tachypnea": 35},
    "school": {"min": 18, "max": 25, "bradypnea": 15, "tachypnea": 30},
    "adolescent": {"min": 12, "max": 20, "bradypnea": 10, "tachypnea": 25},
}

# (systolic min, systolic max, diastolic min, diastolic max)
BLOOD_PRESSURE_RANGES = {
    "adult": (90, 120, 60, 80),
    "newborn": (60, 90, 30, 60),
    "infant": (70, 105, 35, 70),
    "toddler": (80, 110, 50, 70),
    "preschool": (80, 110, 50, 70),
    "school": (90, 120, 60, 80),
    "adolescent": (90, 120, 60, 80),
}
ADULT_HYPERTENSION = (140, 90)
ADULT_HYPOTENSION = (90, 60)

# adult in mg/dL, newborn and infant in mmol/L
GLUCOSE_RANGES = {
    "fasting": (70, 99),
    "random": (70, 140),
    "diabetes": {"fasting": 126, "random": 200},
    "hypoglycemia": 70,
    "newborn": (2.6, 4.4),
    "infant": (3.3, 6.0),
}
MG_DL_PER_MMOL_L = 18.0

AGE_GROUP_DESCRIPTIONS = {
    "newborn": "Newborn (< 1 month)",
    "infant": "Infant (1 month - 1 year)",
    "toddler": "Toddler (1-2 years)",
    "preschool": "Preschool (3-5 years)",
    "school": "School Age (6-12 years)",
    "adolescent": "Adolescent (13-17 years)",
    "adult": "Adult (18+ years)",
}

_NUMBER_RE = re.compile(r"(\d+(?:\.\d+)?)")
_BP_RE = re.compile(r"(\d+)\s*/\s*(\d+)")


# =====================================================
# HELPERS
# =====================================================

def age_group(age: Optional[float]) -> str:
    if age is None or age >= 18:
        return "adult"
    if age < 1 / 12:
        return "newborn"
    if age < 1:
        return "infant"
    if age < 3:
        return "toddler"
    if age < 6:
        return "preschool"
    if age < 13:
        return "school"
    return "adolescent"


def age_group_description(age: Optional[float]) -> str:
    return AGE_GROUP_DESCRIPTIONS[age_group(age)]


def parse_age(age: Union[str, float, int, None]) -> Optional[float]:
    """Years as a float, or None when the age was not extracted."""
    if age is None:
        return None
    if isinstance(age, (int, float)):
        return float(age)
    m = _NUMBER_RE.search(str(age))
    return float(m.group(1)) if m else None


def _numeric_value(value: str) -> Optional[float]:
    m = _NUMBER_RE.search(value or "")
    return float(m.group(1)) if m else None


def _not_mentioned(value: str) -> VitalSignAssessment:
    return VitalSignAssessment(value=value, is_normal=False, message="", not_mentioned=True)


def _result(value: str, is_normal: bool, message: str, severity: str) -> VitalSignAssessment:
    return VitalSignAssessment(value=value, is_normal=is_normal, message=message, severity=severity)


# =====================================================
# PER-VITAL ASSESSMENT
# =====================================================

def assess_temperature(temp: str, age: Optional[float] = None) -> VitalSignAssessment:
    value = _numeric_value(temp)
    if value is None:
        return _not_mentioned(temp)

    # readings above 45 can only be Fahrenheit
    if "°f" in temp.lower() or value > 45:
        value = (value - 32) * 5 / 9

    normal_min, normal_max = TEMPERATURE_RANGES["normal"]
    fever_min, fever_max = TEMPERATURE_RANGES["fever"]
    high_min, high_max = TEMPERATURE_RANGES["high_fever"]

    value = round(value, 1)
    if normal_min <= value <= normal_max:
        return _result(temp, True, "Normal", "normal")
    if fever_min <= value <= fever_max:
        return _result(temp, False, "Fever", "mild")
    if high_min <= value <= high_max:
        return _result(temp, False, "High Fever", "moderate")
    if value >= TEMPERATURE_RANGES["hyperthermia_min"]:
        return _result(temp, False, "Hyperthermia", "severe")
    return _result(temp, False, "Hypothermia", "severe")


def assess_blood_pressure(bp: str, age: Optional[float] = None) -> VitalSignAssessment:
    m = _BP_RE.search(bp or "")
    if not m:
        return _not_mentioned(bp)
    systolic, diastolic = int(m.group(1)), int(m.group(2))

    group = age_group(age)
    if group == "adult":
        if systolic >= ADULT_HYPERTENSION[0] or diastolic >= ADULT_HYPERTENSION[1]:
            return _result(bp, False, "Hypertension", "moderate")
        if systolic <= ADULT_HYPOTENSION[0] or diastolic <= ADULT_HYPOTENSION[1]:
            return _result(bp, False, "Hypotension", "moderate")

    sys_min, sys_max, dia_min, dia_max = BLOOD_PRESSURE_RANGES[group]
    is_normal = sys_min <= systolic <= sys_max and dia_min <= diastolic <= dia_max
    if is_normal:
        return _result(bp, True, "Normal", "normal")
    return _result(bp, False, "Abnormal", "mild")


def assess_pulse(pulse: str, age: Optional[float] = None) -> VitalSignAssessment:
    value = _numeric_value(pulse)
    if value is None:
        return _not_mentioned(pulse)

    ranges = HEART_RATE_RANGES[age_group(age)]
    if value < ranges["bradycardia"]:
        return _result(pulse, False, "Bradycardia", "moderate")
    if value > ranges["tachycardia"]:
        return _result(pulse, False, "Tachycardia", "moderate")
    if ranges["min"] <= value <= ranges["max"]:
        return _result(pulse, True, "Normal", "normal")
    return _result(pulse, False, "Borderline", "mild")


def assess_respiratory_rate(rr: str, age: Optional[float] = None) -> VitalSignAssessment:
    value = _numeric_value(rr)
    if value is None:
        return _not_mentioned(rr)

    ranges = RESPIRATORY_RATE_RANGES[age_group(age)]
    if value < ranges["bradypnea"]:
        return _result(rr, False, "Bradypnea", "moderate")
    if value > ranges["tachypnea"]:
        return _result(rr, False, "Tachypnea", "moderate")
    if ranges["min"] <= value <= ranges["max"]:
        return _result(rr, True, "Normal", "normal")
    return _result(rr, False, "Borderline", "mild")


def assess_glucose(glucose: str, age: Optional[float] = None, test_type: str = "random") -> VitalSignAssessment:
    value = _numeric_value(glucose)
    if value is None:
        return _not_mentioned(glucose)

    group = age_group(age)
    if group in ("newborn", "infant"):
        if "mg/dl" in glucose.lower():
            value = value / MG_DL_PER_MMOL_L
        low, high = GLUCOSE_RANGES[group]
        if group == "newborn" and value < low:
            return _result(glucose, False, "Hypoglycemia", "severe")
        if low <= value <= high:
            return _result(glucose, True, "Normal", "normal")
        return _result(glucose, False, "Elevated" if group == "newborn" else "Abnormal", "mild")

    low, high = GLUCOSE_RANGES["fasting" if test_type == "fasting" else "random"]
    diabetes_threshold = GLUCOSE_RANGES["diabetes"]["fasting" if test_type == "fasting" else "random"]

    if value < GLUCOSE_RANGES["hypoglycemia"]:
        return _result(glucose, False, "Hypoglycemia", "severe")
    if value >= diabetes_threshold:
        return _result(glucose, False, "Diabetes Range", "severe")
    if low <= value <= high:
        return _result(glucose, True, "Normal", "normal")
    return _result(glucose, False, "Pre-diabetic Range", "moderate")


# =====================================================
# ALL VITALS
# =====================================================

def _vital_strings(vital_signs: Union[VitalSigns, Dict[str, Any], None]) -> Dict[str, str]:
    if isinstance(vital_signs, VitalSigns):
        return {
            "temperature": vital_signs.temperature,
            "pulse": vital_signs.pulse,
            "bloodPressure": vital_signs.bloodPressure,
            "respiratoryRate": vital_signs.respiratoryRate,
            "glucose": vital_signs.glucose,
        }
    vital_signs = vital_signs or {}
    return {
        key: str(vital_signs.get(key) or "")
        for key in ("temperature", "pulse", "bloodPressure", "respiratoryRate", "glucose")
    }


def assess_vital_signs(
    vital_signs: Union[VitalSigns, Dict[str, Any], None],
    age: Union[str, float, int, None] = None,
) -> Dict[str, VitalSignAssessment]:
    years = parse_age(age)
    values = _vital_strings(vital_signs)
    return {
        "temperature": assess_temperature(values["temperature"], years),
        "pulse": assess_pulse(values["pulse"], years),
        "bloodPressure": assess_blood_pressure(values["bloodPressure"], years),
        "respiratoryRate": assess_respiratory_rate(values["respiratoryRate"], years),
        "glucose": assess_glucose(values["glucose"], years),
    }
