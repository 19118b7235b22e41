from anthropic import AsyncAnthropic, APIError

from code_reviewer.providers.base import CompletionProvider, ProviderError


class ClaudeProvider(CompletionProvider):
    display_name = "Claude"

    async def complete(self, prompt: str) -> str:
        try:
            async with AsyncAnthropic(api_key=self.api_key) as client:
                message = await client.messages.create(
                    model=self.model,
                    max_tokens=self.max_output_tokens,
                    temperature=self.temperature,
                    messages=[{"role": "user", "content": prompt}],
                )
        except APIError as e:
            raise ProviderError(self.display_name, str(e)) from e

        texts = [block.text for block in message.content if block.type == "text"]
        return self._first_text(texts[0] if texts else None)
