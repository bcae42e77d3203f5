"""System prompts for the coach verification agent."""

from src.config.prompts.verification import (
    build_verification_system_prompt,
    build_verification_user_input,
)

__all__ = [
    "build_verification_system_prompt",
    "build_verification_user_input",
]
