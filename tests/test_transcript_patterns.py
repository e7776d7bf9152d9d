"""Tests for the compiled rule library."""

import re

import pytest

from transcript_patterns import (
    PATTERN_LIBRARY,
    PATTERN_TABLE,
    SECTION_BODY,
    rules_for,
    validate_library,
)
from transcript_types import SENTINELS, ExtractionRule, FIELD_TEMPERATURE


def test_every_field_has_rules():
    assert set(PATTERN_LIBRARY) == set(SENTINELS)
    assert all(PATTERN_LIBRARY[f] for f in PATTERN_LIBRARY)


def test_rules_keep_declared_order():
    for field_id, entries in PATTERN_TABLE.items():
        orders = [e["order"] for e in entries]
        assert len(rules_for(field_id)) == len(entries)
        assert len(set(orders)) == len(orders), field_id


def test_descriptive_rules_come_last():
    for rules in PATTERN_LIBRARY.values():
        kinds = [r.kind for r in rules]
        if "descriptive" in kinds:
            first = kinds.index("descriptive")
            assert all(k == "descriptive" for k in kinds[first:])


def test_rules_are_case_insensitive():
    assert all(r.pattern.flags & re.IGNORECASE for r in rules_for(FIELD_TEMPERATURE))


def test_rules_are_frozen():
    rule = rules_for(FIELD_TEMPERATURE)[0]
    with pytest.raises(AttributeError):
        rule.kind = "descriptive"


def test_unknown_field_has_no_rules():
    assert rules_for("blood_type") == ()


class TestValidateLibrary:
    def test_rejects_descriptive_before_direct(self):
        library = {
            FIELD_TEMPERATURE: (
                ExtractionRule(FIELD_TEMPERATURE, re.compile(r"temp (\w+)"), kind="descriptive"),
                ExtractionRule(FIELD_TEMPERATURE, re.compile(r"temperature (\d+)"), kind="direct"),
            )
        }
        with pytest.raises(ValueError, match="descriptive"):
            validate_library(library)

    def test_rejects_missing_capture_group(self):
        library = {FIELD_TEMPERATURE: (ExtractionRule(FIELD_TEMPERATURE, re.compile(r"temperature \d+")),)}
        with pytest.raises(ValueError, match="capture group"):
            validate_library(library)

    def test_accepts_shipped_library(self):
        validate_library(PATTERN_LIBRARY)


def test_section_body_stops_at_next_header():
    m = re.search(r"plan:\s*" + SECTION_BODY, "Plan: rest. Fluids. Assessment: viral.", re.IGNORECASE)
    assert m.group(1) == "rest. Fluids"
