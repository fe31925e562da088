"""
Core utilities for the chat language backend: logging, errors and validation.
"""

from .exceptions import (
    ErrorCode,
    ChatLanguageException,
    UnsupportedLanguageError,
    InvalidMessageError,
    NoSpeechDetectedError,
)
from .logging import configure_logging, JsonFormatter
from .validation import validate_language_code, validate_text_length
