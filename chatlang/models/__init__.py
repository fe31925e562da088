"""
Models package for the chat language backend.

This package contains the API models shared with request handlers and the
internal models produced by detection and policy decisions.
"""

# API Models
from .api_models import (
    SupportedLanguage,
    DEFAULT_LANGUAGE,
    LanguageConfig,
    SUPPORTED_LANGUAGES,
    MessageRole,
    MessageType,
    ChatMessage,
    DetectLanguageResponse,
    TranscribeResponse,
)

# Internal Models
from .internal_models import (
    Script,
    LanguageDetectionResult,
    TranscriptionLanguage,
)

__all__ = [
    "SupportedLanguage",
    "DEFAULT_LANGUAGE",
    "LanguageConfig",
    "SUPPORTED_LANGUAGES",
    "MessageRole",
    "MessageType",
    "ChatMessage",
    "DetectLanguageResponse",
    "TranscribeResponse",
    "Script",
    "LanguageDetectionResult",
    "TranscriptionLanguage",
]
