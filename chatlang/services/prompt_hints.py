"""Localized system-prompt fragments that depend on the effective reply language."""

from typing import Dict

from chatlang.models.api_models import SupportedLanguage
from chatlang.models.internal_models import LanguageDetectionResult

LANGUAGE_INSTRUCTIONS: Dict[SupportedLanguage, str] = {
    SupportedLanguage.FRENCH: (
        "Tu es l'assistant virtuel de l'Institut Français du Cambodge (IFC). Réponds en français."
    ),
    SupportedLanguage.KHMER: (
        "អ្នកជាជំនួយការនិម្មិតរបស់វិទ្យាស្ថានបារាំងកម្ពុជា (IFC)។ ឆ្លើយតបជាភាសាខ្មែរ។"
    ),
    SupportedLanguage.ENGLISH: (
        "You are the virtual assistant of Institut Français du Cambodge (IFC). Respond in English."
    ),
}


def language_instruction(language: SupportedLanguage) -> str:
    return LANGUAGE_INSTRUCTIONS[language]


def code_switching_hint(reply_language: SupportedLanguage, detection: LanguageDetectionResult) -> str:
    """
    Note telling the assistant that the user mixes languages.

    Only produced when the detection flags code-switching and names a
    secondary language; otherwise an empty string.
    """
    if not (detection.is_code_switching and detection.secondary_language):
        return ""

    khmer_primary = detection.language == SupportedLanguage.KHMER
    if reply_language == SupportedLanguage.FRENCH:
        other = "khmer" if khmer_primary else "anglais"
        return (
            f"Note: L'utilisateur mélange {other} et français. "
            "Tu peux adapter ta réponse si nécessaire."
        )
    if reply_language == SupportedLanguage.ENGLISH:
        other = "Khmer" if khmer_primary else "French"
        return (
            f"Note: The user is mixing {other} and English. "
            "You may adapt your response if needed."
        )
    return "ចំណាំ៖ អ្នកប្រើប្រាស់កំពុងលាយភាសា។ អ្នកអាចសម្របសម្រួលចម្លើយរបស់អ្នកប្រសិនបើចាំបាច់។"
