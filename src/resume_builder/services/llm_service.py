"""LLM service: picks a provider from the environment and sends prompts to it.

Gemini is the only provider wired up.
"""

from __future__ import annotations

import os

from resume_builder.services.llm_providers import (
    GeminiProvider,
    LLMError,
    LLMProvider,
)

DEFAULT_TEMPERATURE = 0.7


class LLMService:
    def __init__(self, provider: LLMProvider | None = None) -> None:
        """Initialize LLM service with a specific provider.
        Args:
            provider: LLM provider instance
        """
        self.provider = provider or LLMService._get_default_llm_provider_from_env()

    @staticmethod
    def _get_default_llm_provider_from_env() -> LLMProvider:
        """Get the configured LLM provider.

        Returns:
            An instance of the configured LLM provider.
        """
        provider_name = os.environ.get("LLM_PROVIDER", "gemini").lower()

        if provider_name == "gemini":
            return GeminiProvider()
        raise LLMError(f"Unknown LLM provider: {provider_name}.")

    @staticmethod
    def default_temperature() -> float:
        """Return ``LLM_TEMPERATURE`` from the environment, or the default."""
        raw = os.environ.get("LLM_TEMPERATURE")
        if not raw:
            return DEFAULT_TEMPERATURE
        try:
            return float(raw)
        except ValueError:
            return DEFAULT_TEMPERATURE

    def build_prompt(self, system_instructions: str, user_content: str) -> str:
        """Construct a full prompt with system and user parts.

        Args:
            system_instructions: System-level instructions
            user_content: User-provided content

        Returns:
            The complete formatted prompt.
        """
        return f"System instruction:\n{system_instructions}\n\nUser content:\n{user_content}"

    def generate_llm_response(
        self,
        system_instructions: str,
        user_content: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
        seed: int | None = None,
    ) -> str:
        """Build a prompt and send it to the LLM in one step.

        Args:
            system_instructions: System-level instructions.
            user_content: User content.
            temperature: Controls randomness (0.0-2.0). None = ``LLM_TEMPERATURE``.
            max_tokens: Maximum response length. None = provider default.
            seed: Random seed for reproducibility (if supported by provider).

        Returns:
            The text response from the LLM.
        """
        if temperature is None:
            temperature = self.default_temperature()
        prompt = self.build_prompt(system_instructions, user_content)
        config = self.provider.generate_llm_config(temperature, max_tokens, seed)
        return self.provider.send_prompt(prompt, config)
