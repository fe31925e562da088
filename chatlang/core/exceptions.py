"""
Custom exceptions for the chat language backend.

The language detector itself never raises; these cover the request-level
checks performed by the chat and transcription handlers.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""
    
    # Request errors
    INVALID_MESSAGE = "INVALID_MESSAGE"
    NO_SPEECH = "NO_SPEECH"
    
    # Language errors
    UNSUPPORTED_LANGUAGE = "UNSUPPORTED_LANGUAGE"
    
    # Generic errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ChatLanguageException(Exception):
    """Base exception for the chat language backend."""
    
    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
    
    def to_dict(self) -> Dict[str, Any]:
        """Error envelope in the shape handlers return to clients."""
        payload: Dict[str, Any] = {
            "error": self.message,
            "code": self.error_code.value,
        }
        if self.details:
            payload["details"] = self.details
        return payload


class UnsupportedLanguageError(ChatLanguageException):
    """Raised when a language code outside fr/km/en is supplied."""
    
    def __init__(self, language: str, supported_languages: Optional[list] = None):
        details = {"requested_language": language}
        if supported_languages:
            details["supported_languages"] = supported_languages
            
        super().__init__(
            message=f"Language '{language}' is not supported",
            error_code=ErrorCode.UNSUPPORTED_LANGUAGE,
            details=details,
            status_code=400
        )


class InvalidMessageError(ChatLanguageException):
    """Raised when a chat message is empty or too long."""
    
    def __init__(self, message: str = "Invalid message", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_MESSAGE,
            details=details,
            status_code=400
        )


class NoSpeechDetectedError(ChatLanguageException):
    """Raised when the speech-to-text engine returned an empty transcript."""
    
    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="No speech detected",
            error_code=ErrorCode.NO_SPEECH,
            details=details,
            status_code=400
        )
