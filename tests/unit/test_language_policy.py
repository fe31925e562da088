"""
Unit tests for the chat and transcription language policies
"""
import pytest

from chatlang.models.api_models import ChatMessage, MessageRole, SupportedLanguage
from chatlang.models.internal_models import LanguageDetectionResult, Script
from chatlang.services.language_policy import (
    CHAT_RULES,
    TRANSCRIPTION_RULES,
    ChatPolicyInput,
    accept_confident_detection,
    describe_rules,
    last_assistant_language,
    normalize_speech_language,
    prefer_user_choice_when_unsure,
    resolve_chat_language,
    resolve_transcription_language,
    speech_language_name,
)

FR = SupportedLanguage.FRENCH
KM = SupportedLanguage.KHMER
EN = SupportedLanguage.ENGLISH


def detection(language, confidence, code_switching=False):
    return LanguageDetectionResult(
        language=language,
        confidence=confidence,
        is_code_switching=code_switching,
        detected_scripts=frozenset({Script.LATIN}),
    )


def message(role, language, content="..."):
    return ChatMessage(role=role, content=content, language=language)


class TestChatPolicy:

    def test_user_preference_wins_when_detection_unsure(self):
        assert resolve_chat_language(EN, detection(FR, 0.6), []) == EN

    def test_confident_detection_without_preference(self):
        assert resolve_chat_language(None, detection(KM, 0.9), []) == KM

    def test_preference_still_wins_between_thresholds(self):
        # 0.75 satisfies both the first and second rule; the first is checked first
        assert resolve_chat_language(FR, detection(EN, 0.75), []) == FR

    def test_confident_detection_overrides_preference(self):
        assert resolve_chat_language(FR, detection(EN, 0.85), []) == EN

    def test_preference_boundary_is_exclusive(self):
        assert resolve_chat_language(FR, detection(EN, 0.8), []) == EN

    def test_detection_boundary_is_inclusive(self):
        assert resolve_chat_language(None, detection(EN, 0.7), [message(MessageRole.ASSISTANT, FR)]) == EN

    def test_history_uses_last_assistant_language(self):
        history = [
            message(MessageRole.USER, FR),
            message(MessageRole.ASSISTANT, KM),
            message(MessageRole.USER, EN),
        ]
        assert resolve_chat_language(None, detection(EN, 0.5), history) == KM

    def test_history_prefers_most_recent_assistant(self):
        history = [
            message(MessageRole.ASSISTANT, KM),
            message(MessageRole.ASSISTANT, EN),
        ]
        assert resolve_chat_language(None, detection(FR, 0.4), history) == EN

    def test_history_without_assistant_falls_back_to_detection(self):
        history = [message(MessageRole.USER, KM)]
        assert resolve_chat_language(None, detection(EN, 0.5), history) == EN

    def test_no_history_low_confidence_uses_detection(self):
        assert resolve_chat_language(None, detection(KM, 0.4), []) == KM
        assert resolve_chat_language(None, detection(KM, 0.4), None) == KM

    def test_custom_thresholds(self):
        result = resolve_chat_language(
            FR, detection(EN, 0.85), [], user_preference_max_confidence=0.9
        )
        assert result == FR

    def test_rules_in_isolation(self):
        ctx = ChatPolicyInput(user_preference=None, detection=detection(EN, 0.75), history=[])
        assert prefer_user_choice_when_unsure(ctx) is None
        assert accept_confident_detection(ctx) == EN

    def test_last_assistant_language(self):
        assert last_assistant_language([]) is None
        assert last_assistant_language([message(MessageRole.SYSTEM, FR)]) is None


class TestTranscriptionPolicy:

    def test_agreement_boosts_confidence(self):
        decision = resolve_transcription_language(FR, detection(FR, 0.6))
        assert decision.language == FR
        assert decision.confidence >= 0.95

    def test_agreement_keeps_higher_detector_confidence(self):
        decision = resolve_transcription_language(FR, detection(FR, 0.97))
        assert decision.confidence == pytest.approx(0.97)

    def test_uncertain_text_trusts_speech_engine(self):
        decision = resolve_transcription_language(KM, detection(FR, 0.5))
        assert decision.language == KM
        assert decision.confidence == pytest.approx(0.85)

    def test_code_switching_keeps_text_language(self):
        decision = resolve_transcription_language(KM, detection(EN, 0.8, code_switching=True))
        assert decision.language == EN
        assert decision.confidence == pytest.approx(0.72)

    def test_confident_conflict_trusts_speech_engine(self):
        decision = resolve_transcription_language(KM, detection(EN, 0.8))
        assert decision.language == KM
        assert decision.confidence == pytest.approx(0.8)

    def test_hint_used_without_speech_language(self):
        decision = resolve_transcription_language(None, detection(FR, 0.4), hint=KM)
        assert decision.language == KM
        assert decision.confidence == pytest.approx(0.5)

    def test_text_detection_without_hint(self):
        decision = resolve_transcription_language(None, detection(EN, 0.4))
        assert decision.language == EN
        assert decision.confidence == pytest.approx(0.4)

    def test_confident_text_ignores_hint(self):
        decision = resolve_transcription_language(None, detection(EN, 0.6), hint=KM)
        assert decision.language == EN
        assert decision.confidence == pytest.approx(0.6)


class TestSpeechLanguageMapping:

    @pytest.mark.parametrize("raw,expected", [
        ("french", FR),
        ("French", FR),
        (" khmer ", KM),
        ("english", EN),
        ("fr", FR),
        ("km", KM),
        ("EN", EN),
    ])
    def test_supported_values(self, raw, expected):
        assert normalize_speech_language(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "german", "zh"])
    def test_unusable_values(self, raw):
        assert normalize_speech_language(raw) is None

    def test_speech_language_name(self):
        assert speech_language_name(FR) == "french"
        assert speech_language_name(KM) == "khmer"
        assert speech_language_name(EN) == "english"


def test_rule_order():
    rules = describe_rules()
    assert rules["chat"][0] == "prefer_user_choice_when_unsure"
    assert rules["chat"][1] == "accept_confident_detection"
    assert len(rules["chat"]) == len(CHAT_RULES)
    assert rules["transcription"][0] == "speech_and_text_agree"
    assert rules["transcription"][-1] == "use_text_detection"
    assert len(rules["transcription"]) == len(TRANSCRIPTION_RULES)
