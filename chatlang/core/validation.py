"""
Input validation utilities for chat and transcription requests
"""
from typing import Union

from chatlang.core.exceptions import InvalidMessageError, UnsupportedLanguageError
from chatlang.models.api_models import SupportedLanguage


def validate_language_code(lang: Union[str, SupportedLanguage]) -> SupportedLanguage:
    """
    Validate a language code against the supported set
    
    Args:
        lang: Language code ('fr', 'km' or 'en') or enum member
        
    Returns:
        Matching SupportedLanguage
        
    Raises:
        UnsupportedLanguageError: If the code is not fr, km or en
    """
    if isinstance(lang, SupportedLanguage):
        return lang
    
    code = lang.strip().lower()
    try:
        return SupportedLanguage(code)
    except ValueError:
        raise UnsupportedLanguageError(
            lang, supported_languages=[language.value for language in SupportedLanguage]
        ) from None


def validate_text_length(text: str, max_length: int, field_name: str = "Text") -> str:
    """
    Validate text length
    
    Args:
        text: Text to validate
        max_length: Maximum allowed length
        field_name: Name of field for error message
        
    Returns:
        Validated text
        
    Raises:
        InvalidMessageError: If text is too long or empty
    """
    if not text or not text.strip():
        raise InvalidMessageError(f"{field_name} cannot be empty")
    
    if len(text) > max_length:
        raise InvalidMessageError(
            f"{field_name} too long (max {max_length} characters)",
            details={"length": len(text), "max_length": max_length},
        )
    
    return text
