"""Shared test fixtures for the transcript extraction tests."""

import pytest

from sample_transcripts import (
    EQUIPMENT_MALFUNCTION,
    STRUCTURED_CHEST_PAIN,
    STRUCTURED_HEART_FAILURE,
)
from transcript_parser import parse


@pytest.fixture
def chest_pain_transcript():
    return STRUCTURED_CHEST_PAIN


@pytest.fixture
def heart_failure_transcript():
    return STRUCTURED_HEART_FAILURE


@pytest.fixture
def malfunction_transcript():
    return EQUIPMENT_MALFUNCTION


@pytest.fixture
def chest_pain_note():
    return parse(STRUCTURED_CHEST_PAIN)


@pytest.fixture
def heart_failure_note():
    return parse(STRUCTURED_HEART_FAILURE)


@pytest.fixture
def malfunction_note():
    return parse(EQUIPMENT_MALFUNCTION)
