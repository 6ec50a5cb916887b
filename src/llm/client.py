import asyncio
import hashlib
import os
from dataclasses import replace
from typing import Awaitable, Callable, Dict, Optional

from core.cache import CACHE_TTL, ResultCache
from core.utils import debug, error, info
from intel.models import AnalysisResult, EventType, Region, Severity
from intel.validation import validate_events
from llm.api.base import LLMProvider
from llm.api.gemini import get_default_provider
from llm.parse import parse_response
from llm.retry import DEFAULT_DELAY, DEFAULT_RETRIES, is_rate_limit_error, with_retry
from prompts import render as render_prompt

# Reporting window requested from the model
ANALYSIS_WINDOW_HOURS = 48

DEFAULT_TEMPERATURE = 0.1

RATE_LIMIT_MESSAGE = "API rate limit exceeded. The system is retrying or cooling down. Please wait a moment."
LINK_FAILED_MESSAGE = "Intelligence link failed. Check your network or API key permissions."


def is_nocache_enabled() -> bool:
    """Check if result cache bypass is enabled via SITREP_NOCACHE=1."""
    return os.environ.get("SITREP_NOCACHE", "0").lower() == "1"


def is_strict_events_enabled() -> bool:
    """Check if strict event validation is enabled via SITREP_STRICT_EVENTS=1."""
    return os.environ.get("SITREP_STRICT_EVENTS", "0").lower() == "1"


def is_print_full_prompt_enabled() -> bool:
    """Check if full prompt printing is enabled via SITREP_PRINT_FULL_PROMPT=1."""
    return os.environ.get("SITREP_PRINT_FULL_PROMPT", "0").lower() == "1"


def get_temperature() -> float:
    """Get sampling temperature from SITREP_TEMPERATURE."""
    raw = os.environ.get("SITREP_TEMPERATURE")
    if not raw:
        return DEFAULT_TEMPERATURE
    try:
        return float(raw)
    except ValueError:
        error(f"Invalid SITREP_TEMPERATURE={raw!r}, using {DEFAULT_TEMPERATURE}")
        return DEFAULT_TEMPERATURE


def _prompt_hash(prompt: str) -> str:
    return hashlib.sha256(prompt.encode()).hexdigest()[:12]


def build_prompt(region: Region) -> str:
    """Render the analysis prompt for region.

    Regions without monitored sources get an explicit instruction to leave the
    independent feed empty instead of the per-asset search protocol.
    """
    return render_prompt(
        "analysis/region.j2",
        region=region,
        window_hours=ANALYSIS_WINDOW_HOURS,
        event_types=[t.value for t in EventType],
        severities=[s.value for s in Severity],
    )


def describe_error(exc: BaseException) -> str:
    """User-facing guidance for a failed analysis."""
    if is_rate_limit_error(exc):
        return RATE_LIMIT_MESSAGE
    return LINK_FAILED_MESSAGE


class RegionAnalyzer:
    """
    Fetch-cache-retry-parse pipeline for region analyses.

    One instance owns one ResultCache. A fresh cache entry is returned as is;
    otherwise the provider is called under the retry policy and the parsed
    result is cached under the region id. Failed calls never touch the cache.
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        cache: Optional[ResultCache] = None,
        ttl: float = CACHE_TTL,
        retries: int = DEFAULT_RETRIES,
        delay: float = DEFAULT_DELAY,
        max_delay: Optional[float] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        temperature: Optional[float] = None,
        strict: Optional[bool] = None,
        single_flight: bool = False,
    ):
        """
        Args:
            provider: LLM provider. Defaults to the shared Gemini provider.
            cache: Result cache. Defaults to a new in-memory cache.
            ttl: Cache entry lifetime in seconds.
            retries: Retries allowed for rate-limit errors.
            delay: Initial backoff in seconds (doubles each retry).
            max_delay: Optional backoff ceiling in seconds.
            sleep: Awaitable sleep used for backoff.
            temperature: Sampling temperature. Defaults to SITREP_TEMPERATURE.
            strict: Validate events before caching. Defaults to SITREP_STRICT_EVENTS.
            single_flight: Share one outstanding request between concurrent
                misses for the same region.
        """
        self._provider = provider
        self.cache = cache if cache is not None else ResultCache()
        self.ttl = ttl
        self.retries = retries
        self.delay = delay
        self.max_delay = max_delay
        self._sleep = sleep
        self._temperature = temperature
        self._strict = strict
        self.single_flight = single_flight
        self._inflight: Dict[str, "asyncio.Future[AnalysisResult]"] = {}

    @property
    def provider(self) -> LLMProvider:
        if self._provider is None:
            self._provider = get_default_provider()
        return self._provider

    @property
    def temperature(self) -> float:
        return get_temperature() if self._temperature is None else self._temperature

    @property
    def strict(self) -> bool:
        return is_strict_events_enabled() if self._strict is None else self._strict

    def _check_cache(self, region_id: str) -> Optional[AnalysisResult]:
        if is_nocache_enabled():
            debug("[analyze] Cache bypass enabled (SITREP_NOCACHE=1)")
            return None
        cached = self.cache.get(region_id, self.ttl)
        if cached is not None:
            debug(f"[analyze] Cache HIT for {region_id}")
            return cached
        debug(f"[analyze] Cache MISS for {region_id}")
        return None

    async def analyze_region(self, region: Region) -> AnalysisResult:
        """
        Return the analysis for region, from cache when fresh.

        Raises:
            ValueError: if region has no id
            Exception: the provider's own error once retries are exhausted,
                or immediately for errors that are not rate limits
        """
        if not region.id:
            raise ValueError("Region id must not be empty")

        cached = self._check_cache(region.id)
        if cached is not None:
            return cached

        if not self.single_flight:
            return await self._fetch(region)

        pending = self._inflight.get(region.id)
        if pending is not None:
            debug(f"[analyze] Joining in-flight request for {region.id}")
            return await asyncio.shield(pending)

        task = asyncio.ensure_future(self._fetch(region))
        self._inflight[region.id] = task
        task.add_done_callback(lambda _: self._inflight.pop(region.id, None))
        return await asyncio.shield(task)

    async def _fetch(self, region: Region) -> AnalysisResult:
        prompt = build_prompt(region)
        label = f"[analyze:{region.id}]"
        if is_print_full_prompt_enabled():
            info(f"{label} Asking {self.provider.name} (hash={_prompt_hash(prompt)}):\n{prompt}")
        else:
            info(f"{label} Asking {self.provider.name} (hash={_prompt_hash(prompt)})")

        temperature = self.temperature

        async def execution():
            return await self.provider.generate(prompt, temperature=temperature)

        try:
            response = await with_retry(
                execution,
                retries=self.retries,
                delay=self.delay,
                max_delay=self.max_delay,
                sleep=self._sleep,
            )
        except Exception as e:
            error(f"{self.provider.name} API error after retries: {e}")
            raise

        result = parse_response(response.text, response.grounding_chunks)
        if self.strict:
            valid, _rejected = validate_events(result.events)
            result = replace(result, events=tuple(valid))

        info(f"{label} Got {len(result.events)} events, {len(result.sources)} sources")
        self.cache.put(region.id, result)
        return result


# Process-wide analyzer, built on first use
_default_analyzer: Optional[RegionAnalyzer] = None


def get_default_analyzer() -> RegionAnalyzer:
    """Get or create the process-wide analyzer (and its cache)."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = RegionAnalyzer()
    return _default_analyzer


def set_default_analyzer(analyzer: Optional[RegionAnalyzer]) -> None:
    """Replace the process-wide analyzer (None resets to lazy default)."""
    global _default_analyzer
    _default_analyzer = analyzer


async def analyze_region(region: Region) -> AnalysisResult:
    """Analyze region with the process-wide analyzer."""
    return await get_default_analyzer().analyze_region(region)
