import httpx
import ollama

from code_reviewer.providers.base import CompletionProvider, ProviderError


class OllamaProvider(CompletionProvider):
    """Local models served by Ollama. No API key involved."""

    display_name = "Ollama"
    requires_api_key = False

    async def complete(self, prompt: str) -> str:
        try:
            client = ollama.AsyncClient(host=self.base_url)
            response = await client.generate(
                model=self.model,
                prompt=prompt,
                stream=False,
                options={
                    "temperature": self.temperature,
                    "num_predict": self.max_output_tokens,
                },
            )
        except ollama.ResponseError as e:
            raise ProviderError(self.display_name, f"{e.status_code} {e.error}") from e
        except (ConnectionError, httpx.HTTPError) as e:
            raise ProviderError(self.display_name, str(e)) from e

        return self._first_text(response["response"])
