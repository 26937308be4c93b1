"""Shared fixtures for all tests."""

import random
from collections.abc import Iterable

import pytest
import structlog

from banditgen.config import get_settings


class ScriptedRandom:
    """Random source that replays queued values instead of drawing them."""

    def __init__(self, ints: Iterable[int] = (), floats: Iterable[float] = ()) -> None:
        self.ints = list(ints)
        self.floats = list(floats)

    def randint(self, a: int, b: int) -> int:
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def random(self) -> float:
        return self.floats.pop(0)


@pytest.fixture
def rng():
    """Seeded random source for reproducible sampling tests."""
    return random.Random(1234)


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Clear cached settings and logging config so each test sees a fresh environment."""
    for key in (
        "BANDITGEN_SEED",
        "BANDITGEN_PARTY_SIZE",
        "BANDITGEN_COLOR",
        "BANDITGEN_LOG_LEVEL",
        "BANDITGEN_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
