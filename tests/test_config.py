"""Tests for environment-driven settings."""

from config import TranscriptSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("TRANSCRIPT_LOG_LEVEL", raising=False)
    s = TranscriptSettings()
    assert s.LOG_LEVEL == "INFO"
    assert s.MAX_UPLOAD_BYTES == 5 * 1024 * 1024
    assert s.INCLUDE_CONFIDENCE is False
    assert "http://localhost:5173" in s.CORS_ORIGINS


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("TRANSCRIPT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TRANSCRIPT_ASSESS_VITALS", "true")
    monkeypatch.setenv("TRANSCRIPT_CORS_ORIGINS", '["https://clinic.example"]')
    s = TranscriptSettings()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.ASSESS_VITALS is True
    assert s.CORS_ORIGINS == ["https://clinic.example"]


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("TRANSCRIPT_LOG_LEVEL", "debug")
    assert TranscriptSettings().LOG_LEVEL == "DEBUG"
