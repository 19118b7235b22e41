"""
LLM completion providers used by the analysis endpoint.
"""

from .base import (
    CompletionProvider,
    ProviderError,
    ProviderNotConfiguredError,
    UnsupportedProviderError,
)
from .factory import PROVIDER_MAP, get_provider

__all__ = [
    "CompletionProvider",
    "ProviderError",
    "ProviderNotConfiguredError",
    "UnsupportedProviderError",
    "PROVIDER_MAP",
    "get_provider",
]
