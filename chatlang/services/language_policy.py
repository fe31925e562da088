"""
Effective-language policies for the chat and transcription handlers.

Both policies are ordered lists of guard rules evaluated top to bottom;
the first rule that returns a value decides. Neither re-runs detection:
they only combine a LanguageDetectionResult with what the caller knows
(user preference, conversation history, speech engine output, hint).
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from chatlang.models.api_models import ChatMessage, MessageRole, SupportedLanguage
from chatlang.models.internal_models import LanguageDetectionResult, TranscriptionLanguage

logger = logging.getLogger(__name__)

USER_PREFERENCE_MAX_CONFIDENCE = 0.8
DETECTION_MIN_CONFIDENCE = 0.7
SPEECH_OVERRIDE_MAX_CONFIDENCE = 0.7
HINT_FALLBACK_MAX_CONFIDENCE = 0.5

# Engines may report either full names or ISO codes
SPEECH_TO_SUPPORTED: Dict[str, SupportedLanguage] = {
    "french": SupportedLanguage.FRENCH,
    "khmer": SupportedLanguage.KHMER,
    "english": SupportedLanguage.ENGLISH,
    "fr": SupportedLanguage.FRENCH,
    "km": SupportedLanguage.KHMER,
    "en": SupportedLanguage.ENGLISH,
}

SUPPORTED_TO_SPEECH: Dict[SupportedLanguage, str] = {
    SupportedLanguage.FRENCH: "french",
    SupportedLanguage.KHMER: "khmer",
    SupportedLanguage.ENGLISH: "english",
}


def normalize_speech_language(raw: Optional[str]) -> Optional[SupportedLanguage]:
    """
    Map a speech engine's reported language to a supported language.

    Returns None for missing or unsupported values, which the
    transcription policy treats as "no usable language".
    """
    if not raw:
        return None
    return SPEECH_TO_SUPPORTED.get(raw.strip().lower())


def speech_language_name(language: SupportedLanguage) -> str:
    """Name the speech engine expects for a supported language."""
    return SUPPORTED_TO_SPEECH[language]


@dataclass(frozen=True)
class ChatPolicyInput:
    user_preference: Optional[SupportedLanguage]
    detection: LanguageDetectionResult
    history: Sequence[ChatMessage]
    user_preference_max_confidence: float = USER_PREFERENCE_MAX_CONFIDENCE
    detection_min_confidence: float = DETECTION_MIN_CONFIDENCE


@dataclass(frozen=True)
class TranscriptionPolicyInput:
    speech_language: Optional[SupportedLanguage]
    detection: LanguageDetectionResult
    hint: Optional[SupportedLanguage]
    speech_override_max_confidence: float = SPEECH_OVERRIDE_MAX_CONFIDENCE
    hint_fallback_max_confidence: float = HINT_FALLBACK_MAX_CONFIDENCE


ChatRule = Callable[[ChatPolicyInput], Optional[SupportedLanguage]]
TranscriptionRule = Callable[[TranscriptionPolicyInput], Optional[TranscriptionLanguage]]


def last_assistant_language(history: Sequence[ChatMessage]) -> Optional[SupportedLanguage]:
    """Language of the most recent assistant message, if any."""
    for message in reversed(history):
        if message.role == MessageRole.ASSISTANT:
            return message.language
    return None


# Chat rules

def prefer_user_choice_when_unsure(ctx: ChatPolicyInput) -> Optional[SupportedLanguage]:
    if ctx.user_preference and ctx.detection.confidence < ctx.user_preference_max_confidence:
        return ctx.user_preference
    return None


def accept_confident_detection(ctx: ChatPolicyInput) -> Optional[SupportedLanguage]:
    if ctx.detection.confidence >= ctx.detection_min_confidence:
        return ctx.detection.language
    return None


def continue_conversation_language(ctx: ChatPolicyInput) -> Optional[SupportedLanguage]:
    if not ctx.history:
        return None
    return last_assistant_language(ctx.history) or ctx.user_preference or ctx.detection.language


def fall_back_to_preference_or_detection(ctx: ChatPolicyInput) -> Optional[SupportedLanguage]:
    return ctx.user_preference or ctx.detection.language


# Rule 1 is checked before rule 2, so in [0.7, 0.8) a stated preference
# still beats detection.
CHAT_RULES: Tuple[ChatRule, ...] = (
    prefer_user_choice_when_unsure,
    accept_confident_detection,
    continue_conversation_language,
    fall_back_to_preference_or_detection,
)


def resolve_chat_language(
    user_preference: Optional[SupportedLanguage],
    detection: LanguageDetectionResult,
    history: Optional[Sequence[ChatMessage]] = None,
    *,
    user_preference_max_confidence: float = USER_PREFERENCE_MAX_CONFIDENCE,
    detection_min_confidence: float = DETECTION_MIN_CONFIDENCE,
) -> SupportedLanguage:
    """
    Decide the language the assistant replies in.

    Args:
        user_preference: Language explicitly selected by the user, if any
        detection: Detector output for the current message
        history: Prior conversation messages, oldest first
        user_preference_max_confidence: Preference wins below this confidence
        detection_min_confidence: Detection wins at or above this confidence

    Returns:
        Effective reply language
    """
    ctx = ChatPolicyInput(
        user_preference=user_preference,
        detection=detection,
        history=list(history or []),
        user_preference_max_confidence=user_preference_max_confidence,
        detection_min_confidence=detection_min_confidence,
    )
    for rule in CHAT_RULES:
        language = rule(ctx)
        if language is not None:
            logger.debug(f"Chat language '{language.value}' chosen by {rule.__name__}")
            return language
    # The last rule always answers
    return detection.language


# Transcription rules

def speech_and_text_agree(ctx: TranscriptionPolicyInput) -> Optional[TranscriptionLanguage]:
    if ctx.speech_language is not None and ctx.speech_language == ctx.detection.language:
        return TranscriptionLanguage(ctx.speech_language, max(0.95, ctx.detection.confidence))
    return None


def trust_speech_when_text_unsure(ctx: TranscriptionPolicyInput) -> Optional[TranscriptionLanguage]:
    if ctx.speech_language is not None and ctx.detection.confidence < ctx.speech_override_max_confidence:
        return TranscriptionLanguage(ctx.speech_language, 0.85)
    return None


def keep_text_language_when_mixed(ctx: TranscriptionPolicyInput) -> Optional[TranscriptionLanguage]:
    if ctx.speech_language is not None and ctx.detection.is_code_switching:
        return TranscriptionLanguage(ctx.detection.language, ctx.detection.confidence * 0.9)
    return None


def trust_speech_on_conflict(ctx: TranscriptionPolicyInput) -> Optional[TranscriptionLanguage]:
    if ctx.speech_language is not None:
        return TranscriptionLanguage(ctx.speech_language, 0.8)
    return None


def use_hint_when_text_unsure(ctx: TranscriptionPolicyInput) -> Optional[TranscriptionLanguage]:
    if ctx.hint and ctx.detection.confidence < ctx.hint_fallback_max_confidence:
        return TranscriptionLanguage(ctx.hint, 0.5)
    return None


def use_text_detection(ctx: TranscriptionPolicyInput) -> Optional[TranscriptionLanguage]:
    return TranscriptionLanguage(ctx.detection.language, ctx.detection.confidence)


TRANSCRIPTION_RULES: Tuple[TranscriptionRule, ...] = (
    speech_and_text_agree,
    trust_speech_when_text_unsure,
    keep_text_language_when_mixed,
    trust_speech_on_conflict,
    use_hint_when_text_unsure,
    use_text_detection,
)


def resolve_transcription_language(
    speech_language: Optional[SupportedLanguage],
    detection: LanguageDetectionResult,
    hint: Optional[SupportedLanguage] = None,
    *,
    speech_override_max_confidence: float = SPEECH_OVERRIDE_MAX_CONFIDENCE,
    hint_fallback_max_confidence: float = HINT_FALLBACK_MAX_CONFIDENCE,
) -> TranscriptionLanguage:
    """
    Decide the language of a speech-to-text transcript.

    Args:
        speech_language: Supported language reported by the speech engine, if any
        detection: Detector output for the transcribed text
        hint: Caller-supplied language hint, if any
        speech_override_max_confidence: On disagreement the engine wins below this
        hint_fallback_max_confidence: Without an engine language the hint wins below this

    Returns:
        TranscriptionLanguage with the effective language and its confidence
    """
    ctx = TranscriptionPolicyInput(
        speech_language=speech_language,
        detection=detection,
        hint=hint,
        speech_override_max_confidence=speech_override_max_confidence,
        hint_fallback_max_confidence=hint_fallback_max_confidence,
    )
    for rule in TRANSCRIPTION_RULES:
        decision = rule(ctx)
        if decision is not None:
            logger.debug(
                f"Transcription language '{decision.language.value}' ({decision.confidence:.2f}) "
                f"chosen by {rule.__name__}"
            )
            return decision
    return use_text_detection(ctx)


def describe_rules() -> Dict[str, List[str]]:
    """Rule names in evaluation order, for diagnostics."""
    return {
        "chat": [rule.__name__ for rule in CHAT_RULES],
        "transcription": [rule.__name__ for rule in TRANSCRIPTION_RULES],
    }
