"""
Internal data models and enums for the chat language backend.

This module contains the immutable results produced by the language
detector and the transcription language policy.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional
from enum import Enum

from .api_models import SupportedLanguage, DetectLanguageResponse


class Script(str, Enum):
    """Writing systems recognised by Unicode code-point range"""
    KHMER = "khmer"
    LATIN = "latin"


@dataclass(frozen=True)
class LanguageDetectionResult:
    """
    Result of lexical and script-based language detection.

    Attributes:
        language: Best-guess primary language
        confidence: Heuristic certainty in [0.1, 0.99]
        is_code_switching: True when the sample plausibly mixes two languages
        detected_scripts: Scripts physically present in the text
        secondary_language: Non-primary language involved in code-switching, if identifiable
    """
    language: SupportedLanguage
    confidence: float
    is_code_switching: bool = False
    detected_scripts: FrozenSet[Script] = field(default_factory=frozenset)
    secondary_language: Optional[SupportedLanguage] = None

    def to_response(self) -> DetectLanguageResponse:
        # Stable ordering for serialization
        scripts = [script.value for script in Script if script in self.detected_scripts]
        return DetectLanguageResponse(
            language=self.language,
            confidence=self.confidence,
            is_code_switching=self.is_code_switching,
            detected_scripts=scripts,
            secondary_language=self.secondary_language,
        )


@dataclass(frozen=True)
class TranscriptionLanguage:
    """Effective language of a transcript and the confidence attached to it"""
    language: SupportedLanguage
    confidence: float
