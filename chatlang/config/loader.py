"""
Configuration loader utility for environment-specific settings.
"""

import logging
from pathlib import Path
from typing import Optional
import os

from .settings import Settings, Environment, LanguagePolicySettings, ChatSettings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""
    
    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.
        
        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development
        
        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")
        
        env = Environment(environment.lower())
        env_file_path = Path(f".env.{env.value}")
        
        if env_file_path.exists():
            env_file = str(env_file_path)
            # Nested settings only read os.environ on their own
            return Settings(
                _env_file=env_file,
                environment=env,
                language_policy=LanguagePolicySettings(_env_file=env_file),
                chat=ChatSettings(_env_file=env_file),
            )
        
        logger.warning(f"Environment file {env_file_path} not found, using default settings")
        return Settings(environment=env)
    
    @staticmethod
    def get_available_environments() -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(".").glob(".env.*"):
            env_name = env_file.name.replace(".env.", "")
            if env_name in {env.value for env in Environment}:
                env_files.append(env_name)
        return sorted(env_files)
    
    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Validate that an environment configuration exists and loads.
        
        Args:
            environment: Environment name to validate
            
        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            env = Environment(environment.lower())
        except ValueError:
            return False
        
        if not Path(f".env.{env.value}").exists():
            return False
        
        try:
            ConfigLoader.load_environment_config(env.value)
        except ValueError as e:
            # pydantic's ValidationError subclasses ValueError
            logger.error(f"Invalid configuration for environment '{env.value}': {e}")
            return False
        
        return True
    
    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.
        
        Args:
            environment: Target environment
            output_path: Optional custom output path
            
        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())
        
        if output_path is None:
            output_path = f".env.{env.value}.sample"
        
        default_settings = Settings()
        policy = default_settings.language_policy
        chat = default_settings.chat
        
        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={default_settings.app_name}
APP_VERSION={default_settings.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Logging Configuration
LOG_LEVEL={'DEBUG' if env == Environment.DEVELOPMENT else default_settings.log_level.value}
LOG_FORMAT={'text' if env == Environment.DEVELOPMENT else 'json'}

# Language Policy Configuration
LANGUAGE_USER_PREFERENCE_MAX_CONFIDENCE={policy.user_preference_max_confidence}
LANGUAGE_DETECTION_MIN_CONFIDENCE={policy.detection_min_confidence}
LANGUAGE_SPEECH_OVERRIDE_MAX_CONFIDENCE={policy.speech_override_max_confidence}
LANGUAGE_HINT_FALLBACK_MAX_CONFIDENCE={policy.hint_fallback_max_confidence}

# Chat Configuration
CHAT_MAX_MESSAGE_LENGTH={chat.max_message_length}
CHAT_MAX_HISTORY_MESSAGES={chat.max_history_messages}
"""
        
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(sample_content)
        
        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
