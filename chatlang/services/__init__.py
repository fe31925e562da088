# Business logic services

from .lang_detect import (
    detect,
    detect_async,
    detect_language,
    is_valid_language,
    FRENCH_WORDS,
    ENGLISH_WORDS,
)
from .language_policy import (
    resolve_chat_language,
    resolve_transcription_language,
    normalize_speech_language,
    speech_language_name,
)
from .prompt_hints import code_switching_hint, language_instruction
from .language_service import LanguageService

__all__ = [
    "detect",
    "detect_async",
    "detect_language",
    "is_valid_language",
    "FRENCH_WORDS",
    "ENGLISH_WORDS",
    "resolve_chat_language",
    "resolve_transcription_language",
    "normalize_speech_language",
    "speech_language_name",
    "code_switching_hint",
    "language_instruction",
    "LanguageService",
]
