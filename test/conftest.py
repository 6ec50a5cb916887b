import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest


# Ensure the project `src` directory is on sys.path so tests can import
# modules like `llm`, `intel`, `core`, etc.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from llm.api.base import LLMProvider, LLMResponse  # noqa: E402


class FakeProvider(LLMProvider):
    """Scripted provider: each call pops the next outcome (response or exception)."""

    def __init__(self, outcomes: Optional[List[Any]] = None):
        self.outcomes = list(outcomes or [])
        self.calls: List[Dict[str, Any]] = []

    @property
    def name(self) -> str:
        return "Fake"

    def is_available(self) -> bool:
        return True

    async def generate(self, prompt: str, temperature: float = 0.1) -> LLMResponse:
        self.calls.append({"prompt": prompt, "temperature": temperature})
        outcome = self.outcomes.pop(0) if self.outcomes else LLMResponse(text="")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FakeClock:
    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def isolated_env():
    """Drop SITREP_* switches and the shared analyzer so tests don't leak state."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("SITREP_")}
    for key in saved:
        os.environ.pop(key)

    import llm.client

    llm.client.set_default_analyzer(None)

    yield

    llm.client.set_default_analyzer(None)
    for key in [k for k in os.environ if k.startswith("SITREP_")]:
        os.environ.pop(key)
    os.environ.update(saved)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def fake_clock():
    return FakeClock()
