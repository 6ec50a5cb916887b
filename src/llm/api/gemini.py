import os
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types

from llm.api.base import LLMProvider, LLMResponse, ProviderError


GEMINI_MODEL = "gemini-3-pro-preview"


def get_model() -> str:
    """Get model name from SITREP_MODEL, falling back to the default."""
    return os.environ.get("SITREP_MODEL", GEMINI_MODEL)


def _grounding_chunks(response: Any) -> List[Dict[str, Any]]:
    """Flatten grounding chunks of the first candidate into plain dicts."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    result = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None:
            result.append({})
            continue
        result.append({"web": {"title": getattr(web, "title", None), "uri": getattr(web, "uri", None)}})
    return result


class GeminiProvider(LLMProvider):
    """Gemini provider with Google Search grounding."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """
        Initialize Gemini provider.

        Args:
            api_key: API key. If None, reads GEMINI_API_KEY (or API_KEY) env var.
            model: Model name. If None, reads SITREP_MODEL.
        """
        self._api_key = api_key or os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
        self._model = model or get_model()
        self._client: Optional[genai.Client] = None

    @property
    def name(self) -> str:
        return "Gemini"

    @property
    def model(self) -> str:
        return self._model

    def is_available(self) -> bool:
        return bool(self._api_key)

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise ProviderError("GEMINI_API_KEY environment variable not set")
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(self, prompt: str, temperature: float = 0.1) -> LLMResponse:
        """Call Gemini with the Google Search tool enabled."""
        config = types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
            temperature=temperature,
        )
        response = await self.client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config=config,
        )

        text = response.text or ""

        usage = getattr(response, "usage_metadata", None)
        input_tokens = getattr(usage, "prompt_token_count", None) or 0
        output_tokens = getattr(usage, "candidates_token_count", None) or 0

        # Estimate if not provided
        if input_tokens == 0:
            input_tokens = len(prompt) // 4
        if output_tokens == 0:
            output_tokens = len(text) // 4

        return LLMResponse(
            text=text,
            grounding_chunks=_grounding_chunks(response),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )


# Singleton instance for convenience
_default_provider: Optional[GeminiProvider] = None


def get_default_provider() -> GeminiProvider:
    """Get or create the default Gemini provider instance."""
    global _default_provider
    if _default_provider is None:
        _default_provider = GeminiProvider()
    return _default_provider
