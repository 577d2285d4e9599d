from __future__ import annotations

import math
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class GameSettings:
    # Physics (per frame)
    gravity: float = 0.5
    jump_velocity: float = 10.0
    scroll_speed: float = 4.0

    # Spawning (wall clock, ms)
    spawn_interval_ms: float = 1500.0

    # Playfield geometry (px)
    playfield_width: float = 600.0
    playfield_height: float = 200.0
    player_x: float = 50.0
    player_width: float = 40.0
    player_height: float = 40.0
    obstacle_width: float = 20.0
    obstacle_height: float = 40.0

    def __post_init__(self) -> None:
        for f in fields(self):
            if not math.isfinite(getattr(self, f.name)):
                raise ValueError(f"{f.name} must be finite")
            if f.name == "player_x":
                continue
            if getattr(self, f.name) <= 0:
                raise ValueError(f"{f.name} must be > 0")

        if self.player_x < 0 or self.player_x + self.player_width > self.playfield_width:
            raise ValueError("player must fit inside the playfield")
