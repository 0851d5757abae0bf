import pytest
from loguru import logger

from taptempo.messages import ENGLISH, Messages

EPOCH = 1636224354.0


class StepClock:
    """Clock that advances by a fixed step every time it is read."""

    def __init__(self, start: float = EPOCH, step: float = 2.0):
        self.current = start
        self.step = step

    def now(self) -> float:
        result = self.current
        self.current += self.step
        return result


class ScriptedClock:
    """Clock returning a predefined sequence of timestamps."""

    def __init__(self, timestamps: list[float]):
        self._timestamps = iter(timestamps)

    def now(self) -> float:
        return next(self._timestamps)


@pytest.fixture(autouse=True)
def english_locale(monkeypatch):
    for var in ("LC_ALL", "LC_MESSAGES"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LANG", "en_US.UTF-8")
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()


@pytest.fixture
def messages() -> Messages:
    return ENGLISH


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock()
