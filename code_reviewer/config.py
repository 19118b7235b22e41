from pydantic_settings import BaseSettings, SettingsConfigDict

from code_reviewer.constants import (
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_GROK_MODEL,
    DEFAULT_LLAMA_MODEL,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_OPENAI_MODEL,
    LLAMA_SERVER_URL,
    OLLAMA_URL,
)

class Settings(BaseSettings):
    LLM_PROVIDER: str = "gemini"

    GEMINI_API_KEY: str = ""
    OPENAI_API_KEY: str = ""
    ANTHROPIC_API_KEY: str = ""
    GROK_API_KEY: str = ""

    GEMINI_MODEL: str = DEFAULT_GEMINI_MODEL
    OPENAI_MODEL: str = DEFAULT_OPENAI_MODEL
    CLAUDE_MODEL: str = DEFAULT_CLAUDE_MODEL
    GROK_MODEL: str = DEFAULT_GROK_MODEL
    OLLAMA_MODEL: str = DEFAULT_OLLAMA_MODEL
    LLAMA_MODEL: str = DEFAULT_LLAMA_MODEL

    OLLAMA_URL: str = OLLAMA_URL
    LLAMA_SERVER_URL: str = LLAMA_SERVER_URL

    TEMPERATURE: float = 0.3
    MAX_OUTPUT_TOKENS: int = 1500

    # Reject unknown review types with a 400 instead of falling back to "review"
    STRICT_REVIEW_TYPES: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")
