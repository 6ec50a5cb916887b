"""
LLM infrastructure: provider, retry policy, response parsing and the region
analysis client.

Import specific modules directly to avoid circular imports:
  from llm.client import analyze_region, RegionAnalyzer
"""
from llm.api.base import LLMProvider, LLMResponse, ProviderError
from llm.api.gemini import GeminiProvider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "ProviderError",
    "GeminiProvider",
]
