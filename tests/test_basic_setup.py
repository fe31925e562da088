"""
Basic test to verify the project setup is working correctly.
"""

import json

import pytest

import chatlang
from chatlang.models import SUPPORTED_LANGUAGES, SupportedLanguage, DEFAULT_LANGUAGE
from chatlang.services import LanguageService
from run import main


def test_package_version():
    assert chatlang.__version__ == "1.0.0"


def test_language_enumeration():
    assert {language.value for language in SupportedLanguage} == {"fr", "km", "en"}
    assert DEFAULT_LANGUAGE == SupportedLanguage.FRENCH
    assert SUPPORTED_LANGUAGES[SupportedLanguage.KHMER].native_name == "ភាសាខ្មែរ"


def test_service_creation():
    service = LanguageService()
    assert service.settings is not None


def test_cli_detect(capsys):
    exit_code = main(["detect", "Hello, what are your opening hours?"])
    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["language"] == "en"
    assert output["detected_scripts"] == ["latin"]


def test_cli_transcribe(capsys):
    exit_code = main(["transcribe", "Bonjour, quels sont vos horaires d'ouverture?", "--speech-language", "french"])
    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["detected_language"] == "fr"
    assert output["confidence"] >= 0.95


def test_cli_chat_rejects_unknown_language(capsys):
    exit_code = main(["chat", "Hello", "--user-language", "de"])
    assert exit_code == 2
    error = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert error["code"] == "UNSUPPORTED_LANGUAGE"


def test_cli_list_rules(capsys):
    assert main(["--list-rules"]) == 0
    rules = json.loads(capsys.readouterr().out)
    assert rules["chat"][0] == "prefer_user_choice_when_unsure"


if __name__ == "__main__":
    pytest.main([__file__])
