from chatlang.models.api_models import SupportedLanguage
from chatlang.models.internal_models import LanguageDetectionResult, Script
from chatlang.services.prompt_hints import code_switching_hint, language_instruction


def mixed(language, secondary):
    return LanguageDetectionResult(
        language=language,
        confidence=0.6,
        is_code_switching=True,
        detected_scripts=frozenset({Script.KHMER, Script.LATIN}),
        secondary_language=secondary,
    )


def test_no_hint_without_secondary_language():
    detection = LanguageDetectionResult(
        language=SupportedLanguage.FRENCH, confidence=0.4, is_code_switching=True
    )
    assert code_switching_hint(SupportedLanguage.FRENCH, detection) == ""


def test_french_hint_names_khmer_when_khmer_is_primary():
    hint = code_switching_hint(SupportedLanguage.FRENCH, mixed(SupportedLanguage.KHMER, SupportedLanguage.FRENCH))
    assert "mélange khmer et français" in hint


def test_english_hint_names_khmer_when_khmer_is_primary():
    hint = code_switching_hint(SupportedLanguage.ENGLISH, mixed(SupportedLanguage.KHMER, SupportedLanguage.ENGLISH))
    assert "mixing Khmer and English" in hint


def test_khmer_hint():
    hint = code_switching_hint(SupportedLanguage.KHMER, mixed(SupportedLanguage.ENGLISH, SupportedLanguage.KHMER))
    assert hint.startswith("ចំណាំ")


def test_every_language_has_an_instruction():
    for language in SupportedLanguage:
        assert "IFC" in language_instruction(language)
