from llm.api.base import LLMProvider, LLMResponse, ProviderError
from llm.api.gemini import GeminiProvider

__all__ = ["LLMProvider", "LLMResponse", "ProviderError", "GeminiProvider"]
