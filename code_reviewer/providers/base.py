"""
Completion provider capability shared by every LLM backend.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from code_reviewer.constants import NO_ANALYSIS_GENERATED


class ProviderError(Exception):
    """The upstream LLM call did not succeed. `detail` is for logs only."""

    def __init__(self, provider: str, detail: str):
        super().__init__(f"{provider} API error: {detail}")
        self.provider = provider
        self.detail = detail


class ProviderNotConfiguredError(Exception):
    """The credential for the selected provider is missing."""

    def __init__(self, provider: str):
        super().__init__(f"{provider} API key not configured")
        self.provider = provider


class UnsupportedProviderError(ValueError):
    pass


class CompletionProvider(ABC):
    """Turns a prompt into generated text using one LLM backend."""

    display_name = "LLM"
    requires_api_key = True

    def __init__(
        self,
        model: str,
        api_key: str = "",
        temperature: float = 0.3,
        max_output_tokens: int = 1500,
        base_url: Optional[str] = None,
    ):
        self.model = model
        self.api_key = api_key
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.base_url = base_url

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Send the prompt to the provider and return the first generated candidate.

        Raises:
            ProviderError: The provider returned a non-success response or
                could not be reached.
        """

    def _first_text(self, text: Optional[str]) -> str:
        if not text:
            logging.warning(f"{self.display_name} returned no text for model {self.model}")
            return NO_ANALYSIS_GENERATED
        return text
