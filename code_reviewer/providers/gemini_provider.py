import logging

import httpx
from google import genai
from google.genai.errors import APIError

from code_reviewer.providers.base import CompletionProvider, ProviderError


class GeminiProvider(CompletionProvider):
    display_name = "Gemini"

    async def complete(self, prompt: str) -> str:
        gclient = genai.Client(api_key=self.api_key)

        try:
            response = await gclient.aio.models.generate_content(
                model=self.model,
                contents=[prompt],
                config=genai.types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except (APIError, httpx.HTTPError) as e:
            raise ProviderError(self.display_name, str(e)) from e

        logging.debug(f"Gemini response received for model {self.model}")
        return self._first_text(response.text)
