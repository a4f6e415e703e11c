"""Pytest fixtures for DeepHook tests."""
import pytest

from deephook import logging as deephook_logging
from models.deephook import ChallengeDeck, TriviaQuestion
from games.DeepHook.settings import SimulationSettings


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedRandom:
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws):
        self._draws = list(draws)

    def random(self) -> float:
        return self._draws.pop(0)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence log output for a test, restore the configuration after."""
    saved_default = deephook_logging._config['default_level']
    saved_modules = dict(deephook_logging._config['module_levels'])
    deephook_logging.disable_logging()
    yield
    deephook_logging._config['default_level'] = saved_default
    deephook_logging._config['module_levels'].clear()
    deephook_logging._config['module_levels'].update(saved_modules)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def settings():
    """Empty ocean, no challenges, capture allowed during the descent."""
    return SimulationSettings(initial_fish=0, challenges_enabled=False, descent_grace=False)


@pytest.fixture
def graced_settings():
    """Default capture grace with an empty ocean and no challenges."""
    return SimulationSettings(initial_fish=0, challenges_enabled=False)


@pytest.fixture
def deck():
    return ChallengeDeck(
        id='test_deck',
        name='Test Deck',
        questions=[
            TriviaQuestion(prompt='2 + 2?', options=['3', '4', '5'], correct_index=1),
        ],
    )
