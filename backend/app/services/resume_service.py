"""
Resume Service - PDF intake for candidate profiles

Handles:
- Upload validation (extension, size)
- Text extraction (pdfplumber first, PyPDF2 as fallback)
- Base64 storage encoding for the original file
"""

import base64
import binascii
import io
import re
from pathlib import Path
from typing import Optional

import pdfplumber
import PyPDF2

from app.core.config import settings
from app.core.exceptions import InvalidFileTypeError, FileTooLargeError, ResumeParseError, ValidationError
from app.core.logging_config import logger

# Null bytes and control characters except tab, newline and carriage return
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def sanitize_text(text: Optional[str]) -> str:
    return _CONTROL_CHARS.sub("", text or "")


def bytes_to_base64(content: bytes) -> str:
    return base64.b64encode(content).decode("ascii")


def base64_to_bytes(value: str) -> bytes:
    try:
        return base64.b64decode(value)
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Stored resume is not valid base64: {e}")
        return b""


def extract_text_from_pdf(content: bytes) -> str:
    """Extract text from PDF bytes, trying pdfplumber then PyPDF2"""
    text = ""

    try:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n\n"
        if text.strip():
            logger.info(f"Extracted {len(text)} chars using pdfplumber")
            return sanitize_text(text)
    except Exception as e:
        logger.warning(f"pdfplumber extraction failed: {e}")

    try:
        reader = PyPDF2.PdfReader(io.BytesIO(content))
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text += page_text + "\n\n"
        if text.strip():
            logger.info(f"Extracted {len(text)} chars using PyPDF2")
            return sanitize_text(text)
    except Exception as e:
        logger.warning(f"PyPDF2 extraction failed: {e}")

    raise ResumeParseError(
        "Failed to parse PDF. Please ensure the PDF contains readable text (not scanned images)."
    )


def validate_resume_upload(filename: Optional[str], size: int) -> str:
    """Check name and size of an uploaded resume; returns the file name"""
    if not filename:
        raise ValidationError("No file uploaded", field="resume_file")

    extension = Path(filename).suffix.lower()
    if extension not in settings.ALLOWED_RESUME_EXTENSIONS:
        raise InvalidFileTypeError(extension or filename, settings.ALLOWED_RESUME_EXTENSIONS)

    if size > settings.MAX_RESUME_UPLOAD_SIZE:
        raise FileTooLargeError(size, settings.MAX_RESUME_UPLOAD_SIZE)

    return Path(filename).name


def process_resume(filename: Optional[str], content: bytes) -> dict:
    """Validate, parse and encode an uploaded resume"""
    file_name = validate_resume_upload(filename, len(content))
    if not content:
        raise ValidationError("Uploaded file is empty", field="resume_file")

    resume_content = extract_text_from_pdf(content)
    logger.info(f"Processed resume {file_name} ({len(content)} bytes)")

    return {
        "resume_content": resume_content,
        "resume_file_name": file_name,
        "resume_buffer": bytes_to_base64(content),
    }
