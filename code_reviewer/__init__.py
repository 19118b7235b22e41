"""AI code reviewer: analysis endpoint, LLM providers and review client."""

__version__ = "1.0.0"
