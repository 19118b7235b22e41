import httpx

from code_reviewer.providers.base import CompletionProvider, ProviderError


class LlamaServerProvider(CompletionProvider):
    """llama.cpp server speaking the OpenAI chat completions protocol."""

    display_name = "Llama server"
    requires_api_key = False

    async def complete(self, prompt: str) -> str:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "stream": False,
            "temperature": self.temperature,
            "max_tokens": self.max_output_tokens,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.base_url, json=payload)
        except httpx.HTTPError as e:
            raise ProviderError(self.display_name, str(e)) from e

        if response.status_code != 200:
            raise ProviderError(
                self.display_name, f"{response.status_code} {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(self.display_name, f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            return self._first_text(None)

        choices = data.get("choices") or [{}]
        first = choices[0] if isinstance(choices[0], dict) else {}
        message = first.get("message") or {}
        return self._first_text(message.get("content"))
