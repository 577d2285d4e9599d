from __future__ import annotations

from dataclasses import dataclass

from pyrunner.domain.game_state import Obstacle, Player
from pyrunner.domain.settings import GameSettings


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned box in playfield coordinates.
    x grows to the right, y grows upward from the ground line.
    """
    left: float
    bottom: float
    right: float
    top: float


def player_rect(settings: GameSettings, p: Player) -> Rect:
    return Rect(
        left=settings.player_x,
        bottom=p.y,
        right=settings.player_x + settings.player_width,
        top=p.y + settings.player_height,
    )


def obstacle_rect(settings: GameSettings, o: Obstacle) -> Rect:
    # Obstacles are anchored by their right edge, which starts at the playfield edge.
    right = settings.playfield_width - o.offset
    return Rect(
        left=right - settings.obstacle_width,
        bottom=0.0,
        right=right,
        top=settings.obstacle_height,
    )


def overlaps(a: Rect, b: Rect) -> bool:
    # Strict: shared edges do not count as contact.
    return (a.left < b.right and a.right > b.left and a.bottom < b.top and a.top > b.bottom)
