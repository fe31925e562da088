"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LanguagePolicySettings(BaseSettings):
    """Confidence thresholds used when picking the effective reply/transcript language"""
    
    # Chat policy
    user_preference_max_confidence: float = Field(
        default=0.8, ge=0.0, le=1.0,
        description="User preference wins while detection confidence is below this"
    )
    detection_min_confidence: float = Field(
        default=0.7, ge=0.0, le=1.0,
        description="Detected language is used at or above this confidence"
    )
    
    # Transcription policy
    speech_override_max_confidence: float = Field(
        default=0.7, ge=0.0, le=1.0,
        description="Speech engine language wins on disagreement below this text confidence"
    )
    hint_fallback_max_confidence: float = Field(
        default=0.5, ge=0.0, le=1.0,
        description="Caller hint is used below this text confidence when the engine reports nothing"
    )
    
    model_config = {"env_prefix": "LANGUAGE_", "extra": "ignore"}


class ChatSettings(BaseSettings):
    """Chat request limits"""
    
    max_message_length: int = Field(default=2000, ge=1, le=100000)
    max_history_messages: int = Field(default=20, ge=0, le=1000)
    
    model_config = {"env_prefix": "CHAT_", "extra": "ignore"}


class Settings(BaseSettings):
    """Main application settings"""
    
    # Application Configuration
    app_name: str = Field(default="IFC Chat Language")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)
    
    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", pattern="^(json|text)$")
    
    # Nested Settings
    language_policy: LanguagePolicySettings = Field(default_factory=LanguagePolicySettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
    
    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v
    
    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Accept log levels in any case"""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v
    
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION
    
    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
