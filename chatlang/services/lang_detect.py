"""Lexical and script-based language detection for short chat messages.

Scores French, Khmer and English from Khmer code points, hits against two
small lexicons of frequent words, French diacritics and a couple of French
contraction patterns. Returns the primary language, a heuristic confidence
and whether the sample mixes languages.
"""

import logging
import re
from typing import FrozenSet, List, Set

from chatlang.models.api_models import SupportedLanguage, DEFAULT_LANGUAGE
from chatlang.models.internal_models import LanguageDetectionResult, Script

logger = logging.getLogger(__name__)

# High frequency, distinctive French words
FRENCH_WORDS: FrozenSet[str] = frozenset({
    "je", "tu", "il", "elle", "nous", "vous", "ils", "elles", "on",
    "le", "la", "les", "un", "une", "des", "du", "de", "au", "aux",
    "est", "sont", "être", "avoir", "fait", "faire", "suis", "es", "sommes", "êtes",
    "et", "ou", "mais", "donc", "car", "ni", "que", "qui", "quoi",
    "bonjour", "salut", "merci", "comment", "pourquoi", "quand", "où", "combien",
    "quel", "quelle", "quels", "quelles", "votre", "vos", "notre", "nos",
    "avec", "pour", "dans", "sur", "sous", "par", "sans", "chez",
    "ce", "cette", "ces", "cet", "mon", "ma", "mes", "ton", "ta", "tes",
    "ne", "pas", "plus", "jamais", "rien", "personne",
    "oui", "non", "bien", "très", "aussi", "encore", "déjà", "toujours",
    "cours", "français", "apprendre", "parler", "inscription", "information",
    "voudrais", "veux", "peux", "dois", "faut", "peut", "doit",
})

# High frequency, distinctive English words. "do" is omitted: it is also French (the note)
ENGLISH_WORDS: FrozenSet[str] = frozenset({
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "the", "a", "an", "this", "that", "these", "those", "my", "your", "his", "its",
    "is", "are", "was", "were", "be", "been", "being", "am", "have", "has", "had",
    "does", "did", "will", "would", "could", "should", "can", "may", "might",
    "and", "or", "but", "so", "because", "if", "when", "where", "what", "who", "how",
    "hello", "hi", "please", "thank", "thanks", "sorry", "yes", "no", "okay", "ok",
    "with", "for", "in", "on", "at", "to", "from", "by", "about", "into",
    "want", "need", "like", "know", "think", "see", "get", "make", "go", "come",
    "class", "course", "learn", "study", "speak", "information", "register",
})

KHMER_CHAR = re.compile(r"[\u1780-\u17FF]")
LATIN_CHAR = re.compile(r"[a-zA-Z]")
LATIN_WORD = re.compile(r"[a-zA-ZàâäéèêëïîôùûüçœæÀÂÄÉÈÊËÏÎÔÙÛÜÇŒÆ]+")
FRENCH_ACCENTS = re.compile(r"[àâäéèêëïîôùûüçœæ]", re.IGNORECASE)

# l'école, qu'il, d'ouverture ... with straight or typographic apostrophe
FRENCH_ELISION = re.compile(r"\b(?:qu|l|d|c|j|n|s)['’]\w", re.IGNORECASE)
# le cours de, le théâtre des ...
FRENCH_ARTICLE = re.compile(r"\ble\s+\w+\s+(?:de|du|des)\b", re.IGNORECASE)

EMPTY_TEXT_CONFIDENCE = 0.3
MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.99


def count_khmer_chars(text: str) -> int:
    """Count characters in the Khmer block (U+1780 to U+17FF)."""
    return len(KHMER_CHAR.findall(text))


def count_latin_chars(text: str) -> int:
    """Count unaccented Latin letters, ignoring spaces, digits and punctuation."""
    return len(LATIN_CHAR.findall(text))


def extract_words(text: str) -> List[str]:
    """Lower-cased runs of Latin letters, French accented letters included."""
    return LATIN_WORD.findall(text.lower())


def count_word_matches(words: List[str], lexicon: FrozenSet[str]) -> int:
    return sum(1 for word in words if word in lexicon)


def _calculate_confidence(primary_score: float, secondary_score: float, sample_size: int) -> float:
    """
    Confidence from the score differential and sample size.

    Args:
        primary_score: Score of the winning language
        secondary_score: Combined score of the competing language(s)
        sample_size: Script characters for Khmer, word count for French/English

    Returns:
        Confidence clamped to [0.3, 0.95]
    """
    if primary_score == 0:
        return EMPTY_TEXT_CONFIDENCE

    diff_ratio = (primary_score - secondary_score) / max(primary_score, 1)
    confidence = 0.5 + diff_ratio * 0.4

    if sample_size < 3:
        confidence *= 0.6
    elif sample_size < 5:
        confidence *= 0.8
    elif sample_size >= 10:
        confidence *= 1.1

    return min(0.95, max(0.3, confidence))


def detect(text: str) -> LanguageDetectionResult:
    """
    Detect the language of a short chat message.

    Never raises: empty, numeric or emoji-only text falls back to French
    with low confidence.

    Args:
        text: Raw message or transcript

    Returns:
        LanguageDetectionResult with language, confidence, code-switching
        flag, scripts present and optional secondary language
    """
    trimmed = text.strip()

    if not trimmed:
        return LanguageDetectionResult(
            language=DEFAULT_LANGUAGE,
            confidence=EMPTY_TEXT_CONFIDENCE,
            is_code_switching=False,
            detected_scripts=frozenset(),
        )

    khmer_count = count_khmer_chars(trimmed)
    latin_count = count_latin_chars(trimmed)
    total_chars = khmer_count + latin_count
    has_khmer = khmer_count > 0

    scripts: Set[Script] = set()
    if has_khmer:
        scripts.add(Script.KHMER)
    if latin_count > 0:
        scripts.add(Script.LATIN)

    words = extract_words(trimmed)
    french_matches = count_word_matches(words, FRENCH_WORDS)
    english_matches = count_word_matches(words, ENGLISH_WORDS)
    has_french_accents = FRENCH_ACCENTS.search(trimmed) is not None

    is_code_switching = (
        (has_khmer and latin_count > 3)
        or (french_matches > 0 and english_matches > 0 and min(french_matches, english_matches) >= 2)
    )

    khmer_score = 0.0
    if has_khmer:
        khmer_ratio = khmer_count / total_chars
        khmer_score = khmer_ratio * 100
        if khmer_ratio > 0.7:
            khmer_score += 20
        elif khmer_ratio > 0.5:
            khmer_score += 10

    french_score = french_matches * 10
    if has_french_accents:
        french_score += 15
    if FRENCH_ELISION.search(trimmed):
        french_score += 10
    if FRENCH_ARTICLE.search(trimmed):
        french_score += 5

    english_score = english_matches * 10
    if has_french_accents and english_score > 0:
        english_score -= 5

    secondary = None
    max_score = max(khmer_score, french_score, english_score)

    if khmer_score == max_score and khmer_score > 0:
        language = SupportedLanguage.KHMER
        confidence = _calculate_confidence(khmer_score, french_score + english_score, total_chars)
        if is_code_switching:
            secondary = SupportedLanguage.FRENCH if french_score >= english_score else SupportedLanguage.ENGLISH
    elif french_score >= english_score:
        language = SupportedLanguage.FRENCH
        confidence = _calculate_confidence(french_score, english_score, len(words))
        if is_code_switching:
            if has_khmer:
                secondary = SupportedLanguage.KHMER
            elif english_matches > 2:
                secondary = SupportedLanguage.ENGLISH
    else:
        language = SupportedLanguage.ENGLISH
        confidence = _calculate_confidence(english_score, french_score, len(words))
        if is_code_switching:
            if has_khmer:
                secondary = SupportedLanguage.KHMER
            elif french_matches > 2:
                secondary = SupportedLanguage.FRENCH

    # Short samples are unreliable
    if len(trimmed) < 10:
        confidence *= 0.7
    elif len(trimmed) < 20:
        confidence *= 0.85

    confidence = min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, confidence))

    logger.debug(
        "Language scores km=%.1f fr=%d en=%d -> %s (%.2f)",
        khmer_score, french_score, english_score, language.value, confidence,
    )

    return LanguageDetectionResult(
        language=language,
        confidence=confidence,
        is_code_switching=is_code_switching,
        detected_scripts=frozenset(scripts),
        secondary_language=secondary,
    )


async def detect_async(text: str) -> LanguageDetectionResult:
    """Awaitable form of :func:`detect` for async request handlers."""
    return detect(text)


def detect_language(text: str) -> SupportedLanguage:
    """Detect only the primary language of text."""
    return detect(text).language


def is_valid_language(code: str) -> bool:
    """Check whether a language code is one of fr, km, en."""
    return code in {language.value for language in SupportedLanguage}
