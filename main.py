# backend/main.py
from fastapi import FastAPI, UploadFile, File, Form
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import logging
from typing import Dict, Any, Optional

from config import settings
from confidence_scorer import score
from sample_transcripts import SAMPLE_TRANSCRIPTS
from transcript_parser import parse
from transcript_types import StructuredClinicalNote
from transcript_upload import read_transcript_upload
from vital_signs_assessment import assess_vital_signs

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("transcriptnlp.backend")

app = FastAPI(title="Clinical Transcript Extraction Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class ParseRequest(BaseModel):
    transcript: str
    includeConfidence: Optional[bool] = None
    assessVitals: Optional[bool] = None

class ConfidenceRequest(BaseModel):
    note: Dict[str, Any]

def _error(status: int, error: str, message: str) -> Dict[str, Any]:
    return {"ok": False, "status": status, "error": error, "message": message}

def _parse_response(note: StructuredClinicalNote, include_confidence: Optional[bool], assess_vitals: Optional[bool]) -> Dict[str, Any]:
    """
    Shape a parsed note into the frontend payload; optional sections fall back to the configured defaults.
    """
    if include_confidence is None:
        include_confidence = settings.INCLUDE_CONFIDENCE
    if assess_vitals is None:
        assess_vitals = settings.ASSESS_VITALS

    payload: Dict[str, Any] = {"ok": True, "status": 200, "note": note.to_dict()}
    if include_confidence:
        payload["confidence"] = score(note)
    if assess_vitals:
        assessed = assess_vital_signs(note.vitalSigns, note.patientInfo.age)
        payload["vitalSignAssessment"] = {k: v.to_dict() for k, v in assessed.items()}
    return payload

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.post("/parse")
def parse_endpoint(data: ParseRequest) -> Dict[str, Any]:
    transcript = data.transcript or ""
    logger.info("Received /parse request (len=%d)", len(transcript))
    try:
        note = parse(transcript)
        return _parse_response(note, data.includeConfidence, data.assessVitals)
    except Exception as e:
        logger.exception("Error in /parse: %s", e)
        return _error(500, "internal_server_error", str(e))

@app.post("/parse-file")
async def parse_file(
    transcript: UploadFile = File(...),
    includeConfidence: Optional[bool] = Form(None),
    assessVitals: Optional[bool] = Form(None),
) -> Dict[str, Any]:
    """
    Multipart endpoint: a PDF or plain-text transcript file.
    """
    content = await transcript.read()
    logger.info("Received /parse-file (filename=%s, bytes=%d)", transcript.filename, len(content))
    if len(content) > settings.MAX_UPLOAD_BYTES:
        return _error(413, "payload_too_large", f"upload exceeds {settings.MAX_UPLOAD_BYTES} bytes")

    text = read_transcript_upload(transcript)
    try:
        note = parse(text)
        return _parse_response(note, includeConfidence, assessVitals)
    except Exception as e:
        logger.exception("Error in /parse-file: %s", e)
        return _error(500, "internal_server_error", str(e))

@app.post("/confidence")
def confidence(data: ConfidenceRequest) -> Dict[str, Any]:
    try:
        return {"ok": True, "status": 200, "confidence": score(data.note)}
    except Exception as e:
        logger.exception("Error in /confidence: %s", e)
        return _error(500, "internal_server_error", str(e))

@app.get("/samples")
async def samples() -> Dict[str, Any]:
    return {
        "ok": True,
        "status": 200,
        "samples": [{"name": name, "text": text} for name, text in SAMPLE_TRANSCRIPTS.items()],
    }
