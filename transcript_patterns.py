# backend/transcript_patterns.py
"""
Declarative extraction rules for conversational clinical transcripts.

Each field owns an ordered list of rule entries. "order" is precedence: direct
label rules ("temperature is 98.6") come first, narrative rules next, and
descriptive fallbacks ("that's reading normal") last, so a real reading always
wins over narration when both are present.
"""

import re
from typing import Dict, List, Pattern, Tuple, Any

from transcript_types import (
    ExtractionRule,
    FieldId,
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


# =====================================================
# SHARED FRAGMENTS
# =====================================================

# A labelled section ("Plan: ...") runs until the next labelled header.
SECTION_HEADER = (
    r"(?:chief\s+complaint|presenting\s+complaint|history\s+of\s+present\s+illness|hpi"
    r"|past\s+medical\s+history|pmh|current\s+medications?|medications?|allergies"
    r"|review\s+of\s+systems?|ros|physical\s+exam(?:ination)?|investigations?"
    r"|lab(?:oratory)?\s+results?|assessment|impression|diagnosis|treatment\s+plan|plan)\s*:"
)
SECTION_BODY = r"([^.]+(?:\.(?!\s*" + SECTION_HEADER + r")[^.]+)*)"

MONTHS = r"(?:january|february|march|april|may|june|july|august|september|october|november|december)"
DOSE = r"\d+(?:\.\d+)?\s*(?:mg|mcg|g|ml|units?)\b"
YEARS_OLD = r"\d{1,3}\s*-?\s*years?\s*-?\s*old"
NON_DRUG_NAMES = (
    r"(?:Glucose|Sugar|Hemoglobin|Hematocrit|Creatinine|Sodium|Potassium|Chloride"
    r"|Platelets?|Albumin|Cholesterol|Temperature|Weight)"
)


# =====================================================
# RULE TABLE
# =====================================================

# Open spans in front of a required keyword are capped at 200 characters.
PATTERN_TABLE: Dict[FieldId, List[Dict[str, Any]]] = {

    # ---------------- identity ----------------

    FIELD_PATIENT_NAME: [
        {"order": 1, "kind": "direct",
         "pattern": r"\bpatient(?:'s)?\s+name\s+is\s+([A-Za-z\s]+?)(?:\s*[,.?!]|$)"},
        {"order": 2, "kind": "direct",
         "pattern": r"\bmy\s+name\s+is\s+([A-Za-z\s]+?)(?:\s*[,.?!]|$)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bthis\s+is\s+(?!(?:dr|doctor|an?|the|my|what|not|very)\b)([A-Za-z\s]{1,60}?)(?:\s*[,.]|\s+who|\s+a\s+\d+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\b(?:mr|mrs|ms)\.?\s+([A-Za-z]+(?:\s+[A-Za-z]+)?)(?:\s*[,.?!]|$)"},
        {"order": 5, "kind": "narrative", "scope": "sentence",
         "pattern": r"^(?!(?:the\s+|this\s+|our\s+)?(?:patient|he|she)\b)([A-Za-z\s]+?)(?:\s+is\s+an?\s+\d+|\s*,\s*\d+|\s+age\s+\d+)"},
    ],

    FIELD_AGE: [
        {"order": 1, "kind": "direct",
         "pattern": r"\bage(?:d)?\s*:?\s*(\d{1,3})\b"},
        {"order": 2, "kind": "direct",
         "pattern": r"\b(\d{1,3})\s*-?\s*(?:years?\s*-?\s*old|y\.?\s?o\b|yrs?\b)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bpatient\s+is\s+(\d{1,3})\b"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\ba\s+(\d{1,3})\s*-?\s*year\s*-?\s*old"},
    ],

    FIELD_GENDER: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:gender|sex)\s*(?::|is)?\s*(male|female|m|f)\b"},
        {"order": 2, "kind": "direct",
         "pattern": r"\b(?:he\s+is|she\s+is|patient\s+is)\s+(?:an?\s+)?(?:" + YEARS_OLD + r",?\s+)?(male|female|man|woman)\b"},
        {"order": 3, "kind": "direct",
         "pattern": r"\b" + YEARS_OLD + r",?\s+(male|female|man|woman|boy|girl|gentleman|lady)\b"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\b(?:listed|registered|identified)\s+as\s+(?:an?\s+)?(male|female)\b"},
        {"order": 5, "kind": "narrative",
         "pattern": r"\b(?:i\s+am|i'm)\s+(?:an?\s+)?(male|female|man|woman)\b"},
        {"order": 6, "kind": "narrative",
         "pattern": r"\b(male|female|man|woman|boy|girl|gentleman|lady)(?:\s+patient|\s+who|\s*,)"},
    ],

    # ---------------- vitals ----------------

    FIELD_TEMPERATURE: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:temperature|temp)\b(?:\s*:|\s+is|\s+was|\s+reads?|\s+of)?\s*(\d+(?:\.\d+)?)\s*(?:degrees?|°)?\s*(?:f|fahrenheit|c|celsius)?"},
        # charted shorthand "T: 98.6"; a bare t is the tail of a contraction
        {"order": 2, "kind": "direct",
         "pattern": r"(?<!')\bt\s*[:=]\s*(\d+(?:\.\d+)?)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\b(?:febrile\s+at|fever\s+of)\s+(\d+(?:\.\d+)?)"},
        {"order": 4, "kind": "descriptive",
         "pattern": r"\b(?:temperature|temp)\b[\s.:]*([^.!?]{0,200}(?:normal|reading|afebrile|degrees?)\w*)"},
    ],

    FIELD_PULSE: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:pulse(?:\s+rate)?|heart\s*rate|hr)\b(?:\s*:|\s+is|\s+was|\s+at|\s+of)?\s*(\d+)\s*(?:bpm|beats?\s*(?:per\s*)?min(?:ute)?)?"},
        {"order": 2, "kind": "direct",
         "pattern": r"\bpulse\s+(\d+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bheart\s+beating\s+at\s+(\d+)"},
        {"order": 4, "kind": "descriptive",
         "pattern": r"\b(?:pulse\s+rate|heart\s+rate|pulse)\b[\s.:]*([^.!?]{0,200}(?:clear|reading|monitor|malfunction\w*|try\s+again))"},
    ],

    FIELD_BLOOD_PRESSURE: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:blood\s*pressure|bp|b\.p\.?)(?:\s*:|\s+is|\s+was|\s+reads?|\s+of)?\s*(\d{2,3}\s*(?:/|over)\s*\d{2,3})\s*(?:mmhg)?"},
        {"order": 2, "kind": "direct",
         "pattern": r"\bbp\s+(\d+\s*(?:/|over)\s*\d+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bpressure\s+(?:is\s+|was\s+|of\s+)?(\d+\s*over\s*\d+|\d+\s*/\s*\d+)"},
        {"order": 4, "kind": "descriptive",
         "pattern": r"\b(?:blood\s+pressure|bp)\b[\s.:]*([^.!?]{0,200}(?:cuff|malfunction\w*|different|need\w*))"},
    ],

    FIELD_RESPIRATORY_RATE: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:respiratory\s*rate|breathing\s*rate|respirations?|rr)\b(?:\s*:|\s+is|\s+was|\s+of)?\s*(\d+)\s*(?:per\s*min(?:ute)?|/\s*min|breaths)?"},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bbreathing\s+at\s+(\d+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bresp\s+(\d+)"},
        {"order": 4, "kind": "descriptive",
         "pattern": r"\b(?:respiratory\s+rate|breathing)\b[\s.:]*([^.!?]{0,200}(?:normally|count|exact|rate))"},
    ],

    FIELD_GLUCOSE: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:glucose|blood\s+sugar|bs)\b(?:\s*:|\s+is|\s+was|\s+level(?:\s+(?:is|was|of))?|\s+of)?\s*(\d+(?:\.\d+)?)\s*(?:mg/dl|mmol/l)?"},
        {"order": 2, "kind": "descriptive",
         "pattern": r"\b(?:glucose|blood\s+sugar)\b[\s.:]*([^.!?]{0,200}(?:level|check|needed|later))"},
    ],

    # ---------------- narrative sections ----------------

    FIELD_CHIEF_COMPLAINT: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:chief\s+complaint|cc|presenting\s+complaint)\b(?:\s*:|\s+is)?\s*([^.!?]+)"},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bpatient\s+(?:is\s+)?complain(?:s|ing)\s+(?:of|about)\s+([^.!?]+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bpresents?\s+(?:with|today\s+with)\s+([^.!?]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\bcame\s+in\s+(?:today\s+)?(?:with|for|because\s+of|complaining\s+of)\s+([^.!?]+)"},
        {"order": 5, "kind": "narrative",
         "pattern": r"\bhere\s+(?:for|with|because\s+of)\s+([^.!?]+)"},
        {"order": 6, "kind": "narrative",
         "pattern": r"\bmain\s+(?:problem|concern|issue)\s+(?:is|was)\s+([^.!?]+)"},
        {"order": 7, "kind": "narrative",
         "pattern": r"\bi'?ve\s+been\s+having\s+([^.!?]+)"},
    ],

    FIELD_HPI: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:history\s+of\s+present\s+illness|hpi)\b\s*:?\s*" + SECTION_BODY},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bpatient\s+(?:reports?|states?|says?)\s+(?:that\s+)?([^.]{0,200}?\b(?:started|began|occurred)\b[^.]*)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bsymptoms?\s+(?:started|began|occurred)\s+([^.]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\b(?:this|it)\s+(?:started|began)\s+([^.!?]+)"},
    ],

    FIELD_PMH: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:past\s+medical\s+history|pmh|medical\s+history)\b\s*:?\s*" + SECTION_BODY},
        {"order": 2, "kind": "direct",
         "pattern": r"\bprevious\s+(?:medical\s+)?(?:conditions?|problems?|illnesses?)\b\s*:?\s*([^.!?]+)"},
        {"order": 3, "kind": "narrative", "scope": "sentence",
         "pattern": r"(?<!day )(?<!week )(?<!month )(?<!year )(?<!family )\bhistory\s+of\s+(?!present\s+illness)([a-zA-Z\s,]+?)(?:\s*[,.]|$)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\bpatient\s+has\s+(?:a\s+)?(?:history\s+of\s+)?([^.!?]+)"},
    ],

    FIELD_MEDICATIONS: [
        {"order": 1, "kind": "direct",
         "pattern": r"\bcurrent\s+medications?\b\s*(?::|include|are)?\s*([^.!?]+)"},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bpatient\s+(?:is\s+)?(?:taking|takes|on)\s+([^.!?]+)"},
        {"order": 3, "kind": "direct",
         "pattern": r"\bmedications?\s+include\s+([^.!?]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\bprescribed\s+([^.!?]+)"},
    ],

    FIELD_ALLERGIES: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:drug\s+allergies|allergies|allergy|allergic\s+to)\b\s*:?\s*([^.!?]+)"},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bpatient\s+(?:is\s+)?allergic\s+to\s+([^.!?]+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bknown\s+(?:drug\s+)?allergies?\s+([^.!?]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\badverse\s+reactions?\s+to\s+([^.!?]+)"},
        {"order": 5, "kind": "narrative",
         "pattern": r"\b(?:cannot|can't|should\s+not)\s+take\s+([^.!?]+)"},
    ],

    FIELD_ROS: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:review\s+of\s+systems?|ros)\b\s*:?\s*" + SECTION_BODY},
        {"order": 2, "kind": "direct",
         "pattern": r"\bsystems?\s+review\s+([^.]+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bpatient\s+(?:denies|reports?)\s+([^.]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\bany\s+(?:headaches?|vision\s+changes?|speech\s+difficult(?:y|ies))[^?.]{0,200}\?\s*([^.!?]{0,200}\b(?:no|negative|denies|nothing)\b[^.!?]*)"},
        {"order": 5, "kind": "narrative",
         "pattern": r"\bany\s+(?:nausea|vomiting|dizziness)[^?.]{0,200}\?\s*([^.!?]{0,200}\b(?:no|negative|nothing)\b[^.!?]*)"},
        {"order": 6, "kind": "narrative",
         "pattern": r"\bany\s+(?:chest\s+pain|shortness\s+of\s+breath|heart\s+palpitations)[^?.]{0,200}\?\s*([^.!?]{0,200}\b(?:no|negative|nothing)\b[^.!?]*)"},
        {"order": 7, "kind": "narrative",
         "pattern": r"\bany\s+(?:urinary\s+problems?|bowel\s+changes?)[^?.]{0,200}\?\s*([^.!?]{0,200}\b(?:no|normal|everything)\b[^.!?]*)"},
        {"order": 8, "kind": "narrative",
         "pattern": r"\bany\s+(?:recent\s+)?weight\s+(?:loss|gain|changes?)[^?.]{0,200}\?\s*([^.!?]{0,200}\b(?:no|negative|significant)\b[^.!?]*)"},
        {"order": 9, "kind": "narrative",
         "pattern": r"\bany\s+(?:skin\s+changes?|joint\s+pain|other\s+symptoms?)[^?.]{0,200}\?\s*([^.!?]{0,200}\b(?:no|negative|just)\b[^.!?]*)"},
        {"order": 10, "kind": "descriptive",
         "pattern": r"\b(no\s+(?:headaches?|vision\s+\w+|nausea|chest\s+pain|weight\s+changes?))\b"},
    ],

    FIELD_PHYSICAL_EXAM: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:physical\s+(?:exam(?:ination)?|assessment)|on\s+(?:exam(?:ination)?|physical))\b\s*:?\s*" + SECTION_BODY},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bexamination\s+reveals?\s+([^.!?]+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bon\s+inspection\s+([^.!?]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\b(?:patient|you|he|she)\s+(?:appears?|looks?)\s+([^.!?]+)"},
        {"order": 5, "kind": "narrative",
         "pattern": r"\b(?:i\s+can\s+see|i\s+notice|there'?s?|there\s+is)\s+(?:some\s+)?(?:slight\s+)?([^.!?]{0,200}(?:asymmetry|weakness|droop\w*|closure|strength))"},
        {"order": 6, "kind": "narrative",
         "pattern": r"\b(?:facial|face)\s+([^.!?]{0,200}(?:asymmetry|droop\w*|weakness))"},
        {"order": 7, "kind": "narrative",
         "pattern": r"\b(?:left|right)\s+(?:arm|leg|side)\s+([^.!?]{0,200}(?:strength|weakness|decreased|has))"},
        {"order": 8, "kind": "narrative",
         "pattern": r"\b(?:mouth|eyelid|eye)\s+([^.!?]{0,200}(?:droop\w*|weakness|closure))"},
        {"order": 9, "kind": "narrative",
         "pattern": r"\b(?:heart\s+sounds?|lung\s+sounds?)\s+([^.!?]{0,200}(?:regular|clear|normal|abnormal))"},
        {"order": 10, "kind": "narrative",
         "pattern": r"\b(?:muscle\s+strength|reflexes|coordination)[\s:]+([^.!?]+)"},
        {"order": 11, "kind": "descriptive",
         "pattern": r"\b(?:temperature|temp)\b[\s.:]+([^.!?]{0,200}(?:normal|reading|degrees?))"},
        {"order": 12, "kind": "descriptive",
         "pattern": r"\b(?:pulse|heart\s+rate)\b[\s.:]+([^.!?]{0,200}(?:clear|reading|monitor|malfunction\w*))"},
        {"order": 13, "kind": "descriptive",
         "pattern": r"\b(?:blood\s+pressure|bp)\b[\s.:]+([^.!?]{0,200}(?:cuff|malfunction\w*|different))"},
        {"order": 14, "kind": "descriptive",
         "pattern": r"\b(?:respiratory\s+rate|breathing)\b[\s.:]+([^.!?]{0,200}(?:normally|count|exact))"},
    ],

    FIELD_INVESTIGATIONS: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:(?:investigations?|lab(?:oratory)?\s+(?:results?|work|findings))\b\s*:?|tests?\s+(?:ordered|performed|results?)\s*:)\s*" + SECTION_BODY},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bblood\s*(?:work|tests?)\s+(?:shows?|showed|reveals?|revealed|indicates?)\s+([^.!?]+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\b(?:x-?ray|ct\s*scan|mri|ultrasound|ecg|ekg)\s*(?:shows?|showed|reveals?|revealed|indicates?|demonstrates?|was|is|:)\s*([^.!?]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\b(?:lab|laboratory)\s+values?\s+(?:shows?|indicates?)\s+([^.!?]+)"},
        {"order": 5, "kind": "narrative",
         "pattern": r"\b(?:cbc|bmp|cmp|lipid\s+panel|liver\s+function|kidney\s+function)\s+(?:shows?|showed|reveals?|was|is|:)\s*([^.!?]+)"},
    ],

    FIELD_ASSESSMENT: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:clinical\s+impression|assessment|diagnosis|impression)\b\s*:?\s*" + SECTION_BODY},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bdiagnosed\s+with\s+([^.!?]+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bappears?\s+to\s+(?:have|be)\s+([^.!?]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\bconsistent\s+with\s+([^.!?]+)"},
        {"order": 5, "kind": "narrative", "scope": "sentence",
         "pattern": r"\blikely\s+(?!an?\b)([a-zA-Z\s]+?)(?:\s*[,.]|$)"},
        {"order": 6, "kind": "narrative",
         "pattern": r"\bconcerning\s+for\s+(?:a\s+)?(?:possible\s+)?([^.!?]+)"},
    ],

    FIELD_PLAN: [
        {"order": 1, "kind": "direct",
         "pattern": r"\b(?:treatment\s+plan|plan|management|recommendations?)\b\s*:?\s*" + SECTION_BODY},
        {"order": 2, "kind": "narrative",
         "pattern": r"\bwill\s+(?:start|begin|prescribe|recommend)\s+([^.!?]+)"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\bpatient\s+(?:should|will|to)\s+([^.!?]+)"},
        {"order": 4, "kind": "narrative",
         "pattern": r"\bfollow[\s-]*up\s+([^.!?]+)"},
        {"order": 5, "kind": "narrative",
         "pattern": r"\bdischarge\s+(?:home\s+)?(?:with|on)\s+([^.!?]+)"},
        {"order": 6, "kind": "narrative",
         "pattern": r"\bi'?m\s+(?:also\s+)?going\s+to\s+order\s+([^.!?]{0,200}\b(?:ct|scan|blood|tests?|mri|x-ray)\b[^.!?]*)"},
        {"order": 7, "kind": "narrative",
         "pattern": r"\bi'?m\s+(?:also\s+)?going\s+to\s+start\s+you\s+on\s+([^.!?]+)"},
        {"order": 8, "kind": "narrative",
         "pattern": r"\b(admit\s+you\s+to\s+the\s+hospital[^.!?]*)"},
        {"order": 9, "kind": "narrative",
         "pattern": r"\b((?:get\s+neurology\s+involved|neurology\s+consult)[^.!?]*)"},
        {"order": 10, "kind": "narrative",
         "pattern": r"\bthey'?ll\s+(?:probably\s+)?want\s+to\s+see\s+you\s+([^.!?]+)"},
        {"order": 11, "kind": "descriptive",
         "pattern": r"\b(?:we\s+need\s+to\s+do|here'?s\s+what\s+we\s+need\s+to\s+do)\s+([^.!?]+)"},
    ],

    # ---------------- provider ----------------

    FIELD_DOCTOR_NAME: [
        {"order": 1, "kind": "direct",
         "pattern": r"\bthis\s+is\s+(?:dr\.?|doctor)\s+([A-Za-z\s]+?)(?:\s+examining|\s*[,.]|$)"},
        {"order": 2, "kind": "direct",
         "pattern": r"\bfor\s+the\s+record,?\s+this\s+is\s+([A-Za-z\s.]{1,60}?)\s+examining"},
        {"order": 3, "kind": "narrative",
         "pattern": r"\b(?:examined\s+by|attending(?:\s+physician)?\s*:?)\s+(?:dr\.?\s+)?([A-Za-z]+(?:\s+[A-Za-z]+)?)"},
    ],

    FIELD_VISIT_DATE: [
        {"order": 1, "kind": "direct",
         "pattern": r"\btoday'?s\s+date\s+is\s+(" + MONTHS + r"\s+\d{1,2}(?:st|nd|rd|th)?(?:,?\s+\d{4})?)"},
        {"order": 2, "kind": "direct",
         "pattern": r"\b(?:date\s+of\s+(?:visit|service)|dated|date)\s*(?::|is)?\s*(\d{1,2}[/-]\d{1,2}[/-]\d{2,4})"},
        {"order": 3, "kind": "descriptive",
         "pattern": r"\btoday'?s\s+date\s+is\s+([^.!?]{0,200}?" + MONTHS + r"[^.!?,]*)"},
    ],

    FIELD_VISIT_TIME: [
        {"order": 1, "kind": "direct",
         "pattern": r"\btime\s+is\s+(?:approximately\s+|about\s+|now\s+)?(\d{1,2}(?::\d{2})?\s*(?:am|pm|a\.m\.|p\.m\.))"},
    ],
}


# =====================================================
# SUPPLEMENTARY SCAN TABLES
# =====================================================

# Whole-match scans: every occurrence is collected, not just the first.
MEDICATION_NAME_PATTERNS: Tuple[Pattern, ...] = (
    re.compile(r"\b[a-z]{3,}(?:cillin|mycin|pril|sartan|olol|statin|prazole)\b(?:\s*" + DOSE + r")?", re.IGNORECASE),
    re.compile(r"\b[a-z]{3,}(?:pine|ide|zole)\s*" + DOSE, re.IGNORECASE),
    re.compile(r"\b(?:aspirin|ibuprofen|acetaminophen|tylenol|advil|metformin|insulin|warfarin|prednisone)\b(?:\s*" + DOSE + r")?", re.IGNORECASE),
    # Capitalised brand/generic name followed by a dose (case-sensitive).
    # Lab and vital names and per-volume units (mg/dL, g/L) are readings, not doses.
    re.compile(
        r"\b(?!" + NON_DRUG_NAMES + r"\b)[A-Z][a-z]+\s+\d+(?:\.\d+)?\s*(?:mg|mcg|g|ml|units?)\b(?!\s*/\s*[dD]?[lL]\b)"
    ),
)

LAB_VALUE_PATTERNS: Tuple[Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE) for p in (
        r"\b(?:hemoglobin|hgb|hb)\b[\s:]*\d+(?:\.\d+)?",
        r"\b(?:hematocrit|hct)\b[\s:]*\d+(?:\.\d+)?",
        r"\b(?:white\s+(?:blood\s+)?cell\s+count|wbc)\b[\s:]*\d+(?:\.\d+)?",
        r"\b(?:platelet\s+count|plt)\b[\s:]*\d+(?:\.\d+)?",
        r"\bcreatinine\b[\s:]*\d+(?:\.\d+)?",
        r"\b(?:bun|blood\s+urea\s+nitrogen)\b[\s:]*\d+(?:\.\d+)?",
        r"\b(?:sodium|na)\b[\s:]*\d+(?:\.\d+)?",
        r"\b(?:potassium|k)\b[\s:]*\d+(?:\.\d+)?",
        r"\b(?:chloride|cl)\b[\s:]*\d+(?:\.\d+)?",
    )
)

NO_KNOWN_ALLERGY_PATTERN: Pattern = re.compile(
    r"\b(?:nkda|no\s+known\s+(?:drug\s+)?allergies?|no\s+allergies)\b"
    r"|(?:\bnot|n't)\s+allergic\s+to\s+(?:anything|any\s+(?:medications?|drugs?))\b"
    r"|\ballergic\s+to\s+nothing\b",
    re.IGNORECASE,
)

# Lead-ins removed from individual medication items ("Patient is taking X").
MEDICATION_LEAD_IN_PATTERN: Pattern = re.compile(
    r"^(?:patient\s+)?(?:is\s+)?(?:currently\s+)?(?:taking|takes|on)\s+", re.IGNORECASE
)


# =====================================================
# COMPILED LIBRARY
# =====================================================

_KIND_RANK = {"direct": 0, "narrative": 0, "descriptive": 1}


def _compile_table(table: Dict[FieldId, List[Dict[str, Any]]]) -> Dict[FieldId, Tuple[ExtractionRule, ...]]:
    library: Dict[FieldId, Tuple[ExtractionRule, ...]] = {}
    for field_id, entries in table.items():
        rules = []
        for entry in sorted(entries, key=lambda e: e["order"]):
            rules.append(ExtractionRule(
                field=field_id,
                pattern=re.compile(entry["pattern"], entry.get("flags", re.IGNORECASE)),
                capture_index=entry.get("group", 1),
                kind=entry.get("kind", "direct"),
                scope=entry.get("scope", "text"),
            ))
        library[field_id] = tuple(rules)
    return library


def validate_library(library: Dict[FieldId, Tuple[ExtractionRule, ...]]) -> None:
    """
    Raise ValueError if any field lists a descriptive fallback ahead of a
    direct or narrative rule, or a rule whose capture group does not exist.
    """
    for field_id, rules in library.items():
        ranks = [_KIND_RANK.get(r.kind, 0) for r in rules]
        if ranks != sorted(ranks):
            raise ValueError(f"descriptive rule ordered before a labelled rule for field '{field_id}'")
        for r in rules:
            if r.capture_index > r.pattern.groups:
                raise ValueError(f"rule for '{field_id}' has no capture group {r.capture_index}: {r.pattern.pattern}")


PATTERN_LIBRARY: Dict[FieldId, Tuple[ExtractionRule, ...]] = _compile_table(PATTERN_TABLE)
validate_library(PATTERN_LIBRARY)


def rules_for(field_id: FieldId) -> Tuple[ExtractionRule, ...]:
    return PATTERN_LIBRARY.get(field_id, ())
