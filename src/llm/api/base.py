from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class LLMResponse:
    """Standardized response from LLM provider."""

    text: str
    grounding_chunks: List[Dict[str, Any]] = field(default_factory=list)
    input_tokens: int = 0
    output_tokens: int = 0


class ProviderError(Exception):
    """
    Failure raised by provider code itself (configuration, missing SDK).

    Errors coming from the remote API are propagated as the SDK raised them.
    `status` and `code` mirror the attributes those SDK errors carry so that
    retry classification treats both alike.
    """

    def __init__(self, message: str, status: Optional[str] = None, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code


class LLMProvider(ABC):
    """Abstract base class for search-grounded LLM providers."""

    @abstractmethod
    async def generate(self, prompt: str, temperature: float = 0.1) -> LLMResponse:
        """
        Run a single search-grounded generation.

        Args:
            prompt: Full prompt text.
            temperature: Sampling temperature (0.0-1.0).

        Returns:
            LLMResponse with text and grounding chunks
            ([{"web": {"title": ..., "uri": ...}}, ...]).

        Raises:
            Whatever the underlying API raises; nothing is wrapped.
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is configured and available."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging/display."""
        pass
