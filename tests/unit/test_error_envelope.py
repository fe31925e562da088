"""
Unit tests for error envelopes and structured logging
"""
import json
import logging

import pytest

from chatlang.core.exceptions import ErrorCode, InvalidMessageError, UnsupportedLanguageError
from chatlang.core.logging import JsonFormatter
from chatlang.core.validation import validate_language_code, validate_text_length
from chatlang.models.api_models import SupportedLanguage


def test_unsupported_language_envelope():
    err = UnsupportedLanguageError("de", supported_languages=["fr", "km", "en"])
    body = err.to_dict()
    assert body["code"] == ErrorCode.UNSUPPORTED_LANGUAGE.value
    assert body["error"] == "Language 'de' is not supported"
    assert body["details"]["supported_languages"] == ["fr", "km", "en"]
    assert err.status_code == 400


def test_validate_language_code():
    assert validate_language_code(" FR ") == SupportedLanguage.FRENCH
    assert validate_language_code(SupportedLanguage.KHMER) == SupportedLanguage.KHMER
    with pytest.raises(UnsupportedLanguageError):
        validate_language_code("vi")


def test_validate_text_length():
    assert validate_text_length("hello", 10) == "hello"
    with pytest.raises(InvalidMessageError, match="cannot be empty"):
        validate_text_length("", 10, field_name="Message")
    with pytest.raises(InvalidMessageError) as exc_info:
        validate_text_length("x" * 11, 10)
    assert exc_info.value.details == {"length": 11, "max_length": 10}


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord({
        "msg": "Chat language resolved",
        "levelname": "INFO",
        "name": "chatlang.services.language_service",
        "language": "km",
        "confidence": 0.62,
    })
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "Chat language resolved"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "chatlang.services.language_service"
    assert payload["language"] == "km"
    assert payload["confidence"] == 0.62
    assert "args" not in payload
