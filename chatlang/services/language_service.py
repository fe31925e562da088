"""
Language service for the chat and transcription handlers.

This module ties the language detector to the effective-language policies
and applies the request-level checks the handlers need before a decision
is made: message validation, language code parsing and history trimming
for prompt building.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

from chatlang.config.settings import Settings, get_settings
from chatlang.core.exceptions import NoSpeechDetectedError
from chatlang.core.validation import validate_language_code, validate_text_length
from chatlang.models.api_models import ChatMessage, SupportedLanguage, TranscribeResponse
from chatlang.models.internal_models import LanguageDetectionResult
from chatlang.services import lang_detect
from chatlang.services.language_policy import (
    normalize_speech_language,
    resolve_chat_language,
    resolve_transcription_language,
    speech_language_name,
)
from chatlang.services.prompt_hints import code_switching_hint, language_instruction

LanguageInput = Union[SupportedLanguage, str, None]


class LanguageService:
    """
    Detection plus reply/transcript language decisions for a single request.

    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the language service.

        Args:
            settings: Application settings. If None, uses the global settings.
        """
        self.logger = logging.getLogger(__name__)
        self.settings = settings or get_settings()
        self.logger.info("LanguageService initialized")

    @staticmethod
    def _parse_language(language: LanguageInput) -> Optional[SupportedLanguage]:
        if language is None or language == "":
            return None
        return validate_language_code(language)

    async def detect(self, text: str) -> LanguageDetectionResult:
        """Run the language detector on text."""
        return await lang_detect.detect_async(text)

    def trim_history(self, history: Optional[Sequence[ChatMessage]]) -> List[ChatMessage]:
        """Keep only the most recent messages allowed by configuration, for prompt building."""
        if not history:
            return []
        limit = self.settings.chat.max_history_messages
        if limit == 0:
            return []
        return list(history)[-limit:]

    async def resolve_chat(
        self,
        message: str,
        user_language: LanguageInput = None,
        history: Optional[Sequence[ChatMessage]] = None,
    ) -> Tuple[SupportedLanguage, LanguageDetectionResult]:
        """
        Decide the reply language for an incoming chat message.

        Args:
            message: The user's message
            user_language: Language selected in the UI, as enum or code
            history: Prior conversation messages, oldest first, untrimmed

        Returns:
            Tuple of effective reply language and the detection it was based on

        Raises:
            InvalidMessageError: If the message is empty or too long
            UnsupportedLanguageError: If user_language is not fr, km or en
        """
        validate_text_length(message, self.settings.chat.max_message_length, field_name="Message")
        preference = self._parse_language(user_language)

        detection = await self.detect(message)
        policy = self.settings.language_policy
        language = resolve_chat_language(
            preference,
            detection,
            history,
            user_preference_max_confidence=policy.user_preference_max_confidence,
            detection_min_confidence=policy.detection_min_confidence,
        )

        self.logger.info(
            "Chat language resolved",
            extra={
                "language": language.value,
                "detected_language": detection.language.value,
                "confidence": round(detection.confidence, 3),
                "user_language": preference.value if preference else None,
                "code_switching": detection.is_code_switching,
            },
        )
        return language, detection

    async def resolve_transcription(
        self,
        text: str,
        speech_language: Optional[str] = None,
        language_hint: LanguageInput = None,
    ) -> TranscribeResponse:
        """
        Decide the language of a speech-to-text transcript.

        Args:
            text: Transcribed text
            speech_language: Language reported by the speech engine, raw ('french', 'fr', ...)
            language_hint: Caller-supplied hint, as enum or code

        Returns:
            TranscribeResponse with the trimmed text, language and confidence

        Raises:
            NoSpeechDetectedError: If the transcript is blank
            UnsupportedLanguageError: If language_hint is not fr, km or en
        """
        transcript = (text or "").strip()
        if not transcript:
            raise NoSpeechDetectedError()

        hint = self._parse_language(language_hint)
        engine_language = normalize_speech_language(speech_language)
        if speech_language and engine_language is None:
            self.logger.warning(f"Speech engine reported unsupported language '{speech_language}', ignoring it")

        detection = await self.detect(transcript)
        policy = self.settings.language_policy
        decision = resolve_transcription_language(
            engine_language,
            detection,
            hint,
            speech_override_max_confidence=policy.speech_override_max_confidence,
            hint_fallback_max_confidence=policy.hint_fallback_max_confidence,
        )

        self.logger.info(
            "Transcription language resolved",
            extra={
                "language": decision.language.value,
                "confidence": round(decision.confidence, 3),
                "speech_language": engine_language.value if engine_language else None,
                "detected_language": detection.language.value,
            },
        )
        return TranscribeResponse(
            text=transcript,
            detected_language=decision.language,
            confidence=decision.confidence,
        )

    def speech_engine_hint(self, language_hint: LanguageInput) -> Optional[str]:
        """Language name to pass to the speech engine for a caller hint."""
        hint = self._parse_language(language_hint)
        return speech_language_name(hint) if hint else None

    def build_system_prompt_header(
        self,
        language: SupportedLanguage,
        detection: Optional[LanguageDetectionResult] = None,
    ) -> str:
        """Reply-language instruction followed by the code-switching note, if any."""
        header = language_instruction(language)
        if detection is not None:
            hint = code_switching_hint(language, detection)
            if hint:
                header = f"{header}\n{hint}"
        return header
