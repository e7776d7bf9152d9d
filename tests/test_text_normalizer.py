"""Tests for transcript normalization and capture cleanup."""

import pytest

from text_normalizer import clean_extracted_text, normalize, split_sentences


class TestNormalize:
    def test_collapses_newlines_and_whitespace(self):
        assert normalize("Temperature is 98.6\n\n  pulse   80\r\n") == "Temperature is 98.6 pulse 80"

    def test_replaces_curly_quotes(self):
        assert normalize("I’m fine, “no pain”") == "I'm fine, \"no pain\""

    @pytest.mark.parametrize("value", [None, "", "   ", "\n\n"])
    def test_empty_input(self, value):
        assert normalize(value) == ""

    def test_idempotent(self, malfunction_transcript):
        once = normalize(malfunction_transcript)
        assert normalize(once) == once


class TestCleanExtractedText:
    def test_strips_edge_punctuation(self):
        assert clean_extracted_text(" ...sharp chest pain, ") == "sharp chest pain"

    def test_drops_leading_article(self):
        assert clean_extracted_text("the cuff seems broken") == "cuff seems broken"

    def test_drops_trailing_conjunction(self):
        assert clean_extracted_text("fever and") == "fever"

    def test_keeps_inner_words(self):
        assert clean_extracted_text("shortness of breath and fatigue") == "shortness of breath and fatigue"

    def test_none(self):
        assert clean_extracted_text(None) == ""


def test_split_sentences():
    assert split_sentences("One. Two!  Three?") == ["One", "Two", "Three"]


def test_split_sentences_drops_empty_parts():
    assert split_sentences("...Wait... ok.") == ["Wait", "ok"]
