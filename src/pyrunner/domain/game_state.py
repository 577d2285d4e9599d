from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Player:
    y: float          # height above the ground, never negative
    vy: float
    airborne: bool


@dataclass(frozen=True)
class Obstacle:
    offset: float     # distance travelled from the right edge


@dataclass(frozen=True)
class GameState:
    player: Player
    obstacles: tuple[Obstacle, ...]  # spawn order
    score: int
    is_over: bool
    last_spawn_ms: float

    @property
    def phase(self) -> Phase:
        return Phase.GAME_OVER if self.is_over else Phase.PLAYING


def initial_state() -> GameState:
    return GameState(
        player=Player(y=0.0, vy=0.0, airborne=False),
        obstacles=(),
        score=0,
        is_over=False,
        last_spawn_ms=0.0,
    )
