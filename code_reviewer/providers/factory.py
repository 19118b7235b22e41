"""Selects and configures the completion provider named in the settings."""

import logging
from typing import Callable, Dict

from code_reviewer.config import Settings
from code_reviewer.providers.anthropic_provider import ClaudeProvider
from code_reviewer.providers.base import (
    CompletionProvider,
    ProviderNotConfiguredError,
    UnsupportedProviderError,
)
from code_reviewer.providers.gemini_provider import GeminiProvider
from code_reviewer.providers.llama_server_provider import LlamaServerProvider
from code_reviewer.providers.ollama_provider import OllamaProvider
from code_reviewer.providers.openai_provider import GrokProvider, OpenAIProvider


def _generation(settings: Settings) -> dict:
    return {"temperature": settings.TEMPERATURE, "max_output_tokens": settings.MAX_OUTPUT_TOKENS}


def _gemini(settings: Settings) -> CompletionProvider:
    return GeminiProvider(model=settings.GEMINI_MODEL, api_key=settings.GEMINI_API_KEY, **_generation(settings))

def _openai(settings: Settings) -> CompletionProvider:
    return OpenAIProvider(model=settings.OPENAI_MODEL, api_key=settings.OPENAI_API_KEY, **_generation(settings))

def _grok(settings: Settings) -> CompletionProvider:
    return GrokProvider(model=settings.GROK_MODEL, api_key=settings.GROK_API_KEY, **_generation(settings))

def _claude(settings: Settings) -> CompletionProvider:
    return ClaudeProvider(model=settings.CLAUDE_MODEL, api_key=settings.ANTHROPIC_API_KEY, **_generation(settings))

def _ollama(settings: Settings) -> CompletionProvider:
    return OllamaProvider(model=settings.OLLAMA_MODEL, base_url=settings.OLLAMA_URL, **_generation(settings))

def _srvllama(settings: Settings) -> CompletionProvider:
    return LlamaServerProvider(model=settings.LLAMA_MODEL, base_url=settings.LLAMA_SERVER_URL, **_generation(settings))


PROVIDER_MAP: Dict[str, Callable[[Settings], CompletionProvider]] = {
    "gemini": _gemini,
    "openai": _openai,
    "grok": _grok,
    "claude": _claude,
    "ollama": _ollama,
    "srvllama": _srvllama,
}


def get_provider(settings: Settings) -> CompletionProvider:
    """
    Build the provider selected by LLM_PROVIDER.

    Raises:
        UnsupportedProviderError: LLM_PROVIDER names no known provider.
        ProviderNotConfiguredError: The provider needs an API key and none is set.
    """
    name = settings.LLM_PROVIDER.strip().lower()
    if name not in PROVIDER_MAP:
        raise UnsupportedProviderError(
            f"Unknown LLM provider: {settings.LLM_PROVIDER}. "
            f"Supported providers: {', '.join(PROVIDER_MAP)}"
        )

    provider = PROVIDER_MAP[name](settings)
    if provider.requires_api_key and not provider.api_key:
        raise ProviderNotConfiguredError(provider.display_name)

    logging.debug(f"Using {provider.display_name} provider with model {provider.model}")
    return provider
