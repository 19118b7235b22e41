from openai import AsyncOpenAI, APIError

from code_reviewer.constants import GROK_BASE_URL
from code_reviewer.providers.base import CompletionProvider, ProviderError


class OpenAIProvider(CompletionProvider):
    display_name = "OpenAI"

    def _client(self) -> AsyncOpenAI:
        if self.base_url:
            return AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        return AsyncOpenAI(api_key=self.api_key)

    async def complete(self, prompt: str) -> str:
        try:
            async with self._client() as client:
                completion = await client.chat.completions.create(
                    model=self.model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=self.temperature,
                    max_tokens=self.max_output_tokens,
                )
        except APIError as e:
            raise ProviderError(self.display_name, str(e)) from e

        if not completion.choices:
            return self._first_text(None)
        return self._first_text(completion.choices[0].message.content)


class GrokProvider(OpenAIProvider):
    """xAI Grok through its OpenAI-compatible API."""

    display_name = "Grok"

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("base_url", GROK_BASE_URL)
        super().__init__(*args, **kwargs)
