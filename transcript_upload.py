# backend/transcript_upload.py
import logging
from typing import Optional

import pdfplumber
from fastapi import UploadFile

logger = logging.getLogger("transcriptnlp.upload")


def is_pdf(upload_file: UploadFile) -> bool:
    content_type = (upload_file.content_type or "").lower()
    filename = (upload_file.filename or "").lower()
    return content_type == "application/pdf" or filename.endswith(".pdf")


def read_pdf_text(upload_file: UploadFile) -> str:
    """
    Read an uploaded PDF using pdfplumber. Return text or empty string on any error.
    """
    try:
        upload_file.file.seek(0)
        pages = []
        with pdfplumber.open(upload_file.file) as pdf:
            for page in pdf.pages:
                text = page.extract_text()
                if text:
                    pages.append(text)
        return "\n".join(pages)
    except Exception as e:
        logger.exception("PDF parsing failed: %s", e)
        return ""


def read_transcript_upload(upload_file: Optional[UploadFile]) -> str:
    if upload_file is None:
        return ""
    if is_pdf(upload_file):
        return read_pdf_text(upload_file)
    try:
        upload_file.file.seek(0)
        return upload_file.file.read().decode("utf-8", errors="replace")
    except Exception as e:
        logger.exception("Transcript upload could not be read: %s", e)
        return ""
