"""OpenAI Chat Completions client for meal parsing."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from mindful_tracker.services.meal_parser import MealParserClient


@dataclass
class OpenAIMealParserClient(MealParserClient):
    """Meal parser client backed by OpenAI chat completions."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIMealParserClient":
        """Create an OpenAI meal parser client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(self, *, model: str, temperature: float, prompt: str) -> str:
        """Send the prompt as a single user message and return the reply text."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
        )
        if not response.choices:
            return "[]"
        return response.choices[0].message.content or "[]"
