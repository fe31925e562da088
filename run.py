#!/usr/bin/env python3
"""
Command line entry point with environment configuration support.

Runs the language detector and the chat/transcription language policies
on a piece of text and prints the decision as JSON.
"""

import asyncio
import argparse
import json
import sys

from chatlang.config.loader import ConfigLoader, load_config_for_environment
from chatlang.config.settings import LogLevel
from chatlang.core.exceptions import ChatLanguageException
from chatlang.core.logging import configure_logging
from chatlang.services.language_policy import describe_rules
from chatlang.services.language_service import LanguageService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="French / Khmer / English chat language detection")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["detect", "chat", "transcribe"],
        default="detect",
        help="What to run on the text (default: detect)"
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to analyze (read from stdin when omitted)"
    )
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument(
        "--user-language",
        default=None,
        help="Language selected by the user (chat mode)"
    )
    parser.add_argument(
        "--speech-language",
        default=None,
        help="Language reported by the speech engine, e.g. 'french' (transcribe mode)"
    )
    parser.add_argument(
        "--hint",
        default=None,
        help="Caller language hint (transcribe mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (overrides config)"
    )
    parser.add_argument(
        "--list-envs",
        action="store_true",
        help="List available environment configurations"
    )
    parser.add_argument(
        "--validate-env",
        help="Validate a specific environment configuration"
    )
    parser.add_argument(
        "--create-sample",
        help="Create a sample .env file for the specified environment"
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="Print the policy rules in evaluation order"
    )
    return parser


async def run_mode(service: LanguageService, args: argparse.Namespace, text: str) -> dict:
    if args.mode == "chat":
        language, detection = await service.resolve_chat(text, user_language=args.user_language)
        return {
            "language": language.value,
            "detection": detection.to_response().model_dump(mode="json"),
        }
    if args.mode == "transcribe":
        response = await service.resolve_transcription(
            text, speech_language=args.speech_language, language_hint=args.hint
        )
        return response.model_dump(mode="json")
    detection = await service.detect(text)
    return detection.to_response().model_dump(mode="json")


def main(argv=None) -> int:
    """Main entry function with environment configuration"""
    args = build_parser().parse_args(argv)

    # Handle utility commands
    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Available environment configurations:")
        for env in envs:
            print(f"  - {env}")
        return 0

    if args.validate_env:
        if ConfigLoader.validate_environment_config(args.validate_env):
            print(f"✓ Environment '{args.validate_env}' configuration is valid")
            return 0
        print(f"✗ Environment '{args.validate_env}' configuration is invalid or missing")
        return 1

    if args.create_sample:
        try:
            sample_file = ConfigLoader.create_sample_env_file(args.create_sample)
        except (ValueError, OSError) as e:
            print(f"✗ Failed to create sample configuration: {e}")
            return 1
        print(f"✓ Sample configuration created: {sample_file}")
        return 0

    if args.list_rules:
        print(json.dumps(describe_rules(), indent=2))
        return 0

    try:
        settings = load_config_for_environment(args.env)
    except ValueError as e:
        print(f"✗ Failed to load configuration: {e}")
        return 1

    if args.debug:
        settings.debug = True
        settings.log_level = LogLevel.DEBUG

    # stdout carries the JSON result
    configure_logging(settings.log_level.value, settings.log_format, stream=sys.stderr)

    text = args.text if args.text is not None else sys.stdin.read()
    service = LanguageService(settings)

    try:
        result = asyncio.run(run_mode(service, args, text))
    except ChatLanguageException as e:
        print(json.dumps(e.to_dict(), ensure_ascii=False), file=sys.stderr)
        return 2

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
