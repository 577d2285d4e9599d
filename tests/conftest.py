"""Shared fixtures for the pyrunner test suite."""
from __future__ import annotations

import pytest

from pyrunner.domain.game_state import GameState, Obstacle, Player, initial_state
from pyrunner.domain.settings import GameSettings
from pyrunner.domain.world import World


class ManualFrameSource:
    """Frame source driven by the test instead of a GUI clock."""

    def __init__(self) -> None:
        self.pending = []

    def request_frame(self, callback) -> None:
        self.pending.append(callback)

    def fire(self, timestamp_ms: float) -> None:
        callback = self.pending.pop(0)
        callback(timestamp_ms)


def make_state(*, y: float = 0.0, vy: float = 0.0, airborne: bool = False,
               offsets: tuple[float, ...] = (), score: int = 0,
               is_over: bool = False, last_spawn_ms: float = 0.0) -> GameState:
    return GameState(
        player=Player(y=y, vy=vy, airborne=airborne),
        obstacles=tuple(Obstacle(offset=o) for o in offsets),
        score=score,
        is_over=is_over,
        last_spawn_ms=last_spawn_ms,
    )


@pytest.fixture
def settings() -> GameSettings:
    return GameSettings()


@pytest.fixture
def world(settings) -> World:
    return World(settings)


@pytest.fixture
def fresh() -> GameState:
    return initial_state()


@pytest.fixture
def frames() -> ManualFrameSource:
    return ManualFrameSource()
