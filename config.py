"""
Simple configuration for the Legal Document Analyzer.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuration class for the Legal Document Analyzer."""

    # Model Provider
    LLM_PROVIDER = os.environ.get("LLM_PROVIDER", "openai").strip().lower()
    OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")
    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY")

    # Model Settings
    DEFAULT_MODELS = {
        "openai": "gpt-4o-mini",
        "gemini": "gemini-2.5-flash",
    }
    ANALYSIS_MODEL = os.environ.get("ANALYSIS_MODEL") or DEFAULT_MODELS.get(LLM_PROVIDER, "gpt-4o-mini")
    ANALYSIS_TEMPERATURE = 0.3

    # Document Processing
    MAX_DOCUMENT_CHARS = int(os.environ.get("MAX_DOCUMENT_CHARS", 30000))

    # File Upload
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")
    MAX_FILE_SIZE = 16 * 1024 * 1024  # 16MB

    # API Settings
    API_HOST = os.environ.get("API_HOST", "0.0.0.0")
    API_PORT = int(os.environ.get("PORT", 3001))
    API_DEBUG = _env_flag("API_DEBUG")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


# Module-level shortcuts
LLM_PROVIDER = Config.LLM_PROVIDER
OPENAI_API_KEY = Config.OPENAI_API_KEY
GEMINI_API_KEY = Config.GEMINI_API_KEY
ANALYSIS_MODEL = Config.ANALYSIS_MODEL
ANALYSIS_TEMPERATURE = Config.ANALYSIS_TEMPERATURE
MAX_DOCUMENT_CHARS = Config.MAX_DOCUMENT_CHARS
UPLOAD_FOLDER = Config.UPLOAD_FOLDER
MAX_FILE_SIZE = Config.MAX_FILE_SIZE
API_HOST = Config.API_HOST
API_PORT = Config.API_PORT
API_DEBUG = Config.API_DEBUG
LOG_LEVEL = Config.LOG_LEVEL
