import random

import pytest

from sentinels_setup.calibration import CalibrationTable
from sentinels_setup.catalog import Catalog
from sentinels_setup.engine import SetupEngine
from sentinels_setup.models import CalibrationBreakpoint, CharacterRecord


class RecordedRng:
    """Replays a fixed sequence of randrange() results.

    Each value must be below the requested stop, so a test that drifts out of
    step with the sampler fails loudly instead of drawing something else.
    """

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        assert self._values, f"RecordedRng exhausted (randrange({stop}))"
        value = self._values.pop(0)
        assert 0 <= value < stop, f"recorded {value} out of range for randrange({stop})"
        self.calls.append(stop)
        return value


def _hero(name: str, points: int, base: str = "", pack: str = "baseset") -> CharacterRecord:
    return CharacterRecord(name=name, type="hero", points=points, base=base, pack=pack)


def _villain(name: str, points: int, pack: str = "baseset") -> CharacterRecord:
    return CharacterRecord(name=name, type="villain", points=points, pack=pack)


def _environment(name: str, points: int, pack: str = "baseset") -> CharacterRecord:
    return CharacterRecord(name=name, type="environment", points=points, pack=pack)


@pytest.fixture
def recorded_rng():
    """Factory: recorded_rng([0, 1, ...]) -> RecordedRng."""
    return RecordedRng


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def small_catalog() -> Catalog:
    """A: +10 (base A), B: -10, C: +5 (variant of A); one villain, one environment."""
    return Catalog([
        _hero("A", 10),
        _hero("B", -10),
        _hero("C", 5, base="A"),
        _villain("X", 20),
        _environment("E", 0),
    ])


@pytest.fixture
def small_table() -> CalibrationTable:
    return CalibrationTable([
        CalibrationBreakpoint(score=100, loss_pct=90),
        CalibrationBreakpoint(score=90, loss_pct=80),
        CalibrationBreakpoint(score=80, loss_pct=80),
        CalibrationBreakpoint(score=70, loss_pct=70),
    ])


@pytest.fixture
def small_engine(small_catalog, small_table) -> SetupEngine:
    return SetupEngine(small_catalog, small_table, offsets={2: 0, 3: 42}, max_trials=50)
