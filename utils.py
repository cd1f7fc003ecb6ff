"""
Utility functions for the Legal Document Analyzer.
"""
import os
import re
import json
import logging
import uuid
from werkzeug.utils import secure_filename
from typing import Dict, Any, Tuple

from constants import SUPPORTED_FORMATS
from errors import AnalysisError, MissingInput, UnsupportedFormat, NoJsonFound, InvalidJsonFormat
from schemas import empty_analysis

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def validate_document_file(file):
    """
    Validate an uploaded document and resolve its format.

    Args:
        file: Uploaded file object (or None when the field is absent)

    Returns:
        str: The declared MIME type of the file

    Raises:
        MissingInput: If no file was supplied
        UnsupportedFormat: If the declared MIME type is not PDF or DOCX
    """
    if not file or not file.filename:
        raise MissingInput()

    if file.mimetype not in SUPPORTED_FORMATS:
        raise UnsupportedFormat(details={"filename": file.filename, "mimetype": file.mimetype})

    return file.mimetype


def safe_file_cleanup(filepath):
    """
    Safely remove a file with error handling.

    Args:
        filepath: Path to file to remove

    Returns:
        bool: True if successfully removed or file doesn't exist
    """
    try:
        if os.path.exists(filepath):
            os.remove(filepath)
            logger.info(f"Cleaned up temporary file: {filepath}")
        return True
    except OSError as e:
        logger.warning(f"Failed to cleanup file {filepath}: {str(e)}")
        return False


def get_upload_filename(original_filename):
    """
    Get a secure, per-request unique filename for an upload.

    Args:
        original_filename: Original filename from upload

    Returns:
        str: Secure filename prefixed with a random token
    """
    return f"{uuid.uuid4().hex}_{secure_filename(original_filename) or 'document'}"


def log_error_and_return(error: AnalysisError) -> Tuple[Dict[str, str], int]:
    """
    Log an analysis error and return the response shown to the caller.

    Only ``error.message`` leaves the service; details stay in the log.
    """
    if error.status_code >= 500:
        logger.error(str(error))
    else:
        logger.warning(str(error))
    return {"error": error.message}, error.status_code


def parse_json_response(response_content: str) -> Dict[str, Any]:
    """
    Turn a free-text model reply into a structured analysis.

    Code fences and any prose around the outermost ``{...}`` span are
    ignored. Missing or null top-level keys are filled with empty values;
    clause objects are passed through as-is.

    Raises:
        NoJsonFound: If the reply contains no ``{...}`` span
        InvalidJsonFormat: If the span is not a valid JSON object
    """
    cleaned = _CODE_FENCE_RE.sub("", response_content or "").strip()

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end < start:
        logger.error(f"No JSON object found in model response: {response_content!r}")
        raise NoJsonFound(details={"response_length": len(response_content or "")})

    try:
        parsed = json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON: {str(e)} | Raw response: {response_content!r}")
        raise InvalidJsonFormat(details={"reason": str(e)}) from e

    if not isinstance(parsed, dict):
        logger.error(f"Model response JSON is not an object: {response_content!r}")
        raise InvalidJsonFormat(details={"reason": f"expected object, got {type(parsed).__name__}"})

    analysis = dict(parsed)
    missing = []
    for key, default in empty_analysis().items():
        if analysis.get(key) is None:
            missing.append(key)
            analysis[key] = default
    if missing:
        logger.warning(f"Model response is missing keys {missing}, using empty values")

    return analysis
