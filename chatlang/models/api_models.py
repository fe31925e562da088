"""
API request and response models for the chat language backend.

This module contains Pydantic models shared with the chat and transcription
handlers, including the closed set of supported languages and the message
shape carried in conversation history.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict
from enum import Enum


class SupportedLanguage(str, Enum):
    """Languages the chatbot answers in"""
    FRENCH = "fr"
    KHMER = "km"
    ENGLISH = "en"


# French is the institutional default language
DEFAULT_LANGUAGE = SupportedLanguage.FRENCH


class LanguageConfig(BaseModel):
    """Display metadata for a supported language"""
    code: SupportedLanguage
    name: str
    native_name: str
    direction: str = Field(default="ltr", pattern="^(ltr|rtl)$")


SUPPORTED_LANGUAGES: Dict[SupportedLanguage, LanguageConfig] = {
    SupportedLanguage.FRENCH: LanguageConfig(
        code=SupportedLanguage.FRENCH,
        name="French",
        native_name="Français",
    ),
    SupportedLanguage.KHMER: LanguageConfig(
        code=SupportedLanguage.KHMER,
        name="Khmer",
        native_name="ភាសាខ្មែរ",
    ),
    SupportedLanguage.ENGLISH: LanguageConfig(
        code=SupportedLanguage.ENGLISH,
        name="English",
        native_name="English",
    ),
}


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class MessageType(str, Enum):
    TEXT = "text"
    VOICE = "voice"


class ChatMessage(BaseModel):
    """A prior message in a conversation, tagged with the language it was sent or replied in"""
    role: MessageRole
    content: str
    language: SupportedLanguage
    type: MessageType = Field(default=MessageType.TEXT)
    id: Optional[str] = None
    timestamp: Optional[int] = Field(None, description="Epoch milliseconds")
    transcription: Optional[str] = Field(
        None, description="Original voice transcription if message was from voice input"
    )


class DetectLanguageResponse(BaseModel):
    """Serialized form of a language detection result"""
    language: SupportedLanguage
    confidence: float = Field(..., ge=0.0, le=1.0)
    is_code_switching: bool = False
    detected_scripts: List[str] = Field(default_factory=list)
    secondary_language: Optional[SupportedLanguage] = None


class TranscribeResponse(BaseModel):
    """Effective language decided for a speech-to-text transcript"""
    text: str
    detected_language: SupportedLanguage
    confidence: float = Field(..., ge=0.0, le=1.0)
