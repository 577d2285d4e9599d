from __future__ import annotations

from pyrunner.domain.collision import obstacle_rect, overlaps, player_rect
from pyrunner.domain.game_state import GameState, Obstacle, Player, initial_state
from pyrunner.domain.settings import GameSettings
from pyrunner.log import get_logger

log = get_logger(__name__)


class World:
    def __init__(self, settings: GameSettings) -> None:
        self.settings = settings

    def new_session(self) -> GameState:
        return initial_state()

    def jump(self, state: GameState) -> GameState:
        p = state.player
        if state.is_over or p.airborne:
            return state
        return GameState(
            player=Player(y=p.y, vy=self.settings.jump_velocity, airborne=True),
            obstacles=state.obstacles,
            score=state.score,
            is_over=state.is_over,
            last_spawn_ms=state.last_spawn_ms,
        )

    def step(self, state: GameState, timestamp_ms: float) -> GameState:
        if state.is_over:
            return state
        cfg = self.settings

        # ----- Player: move with the current velocity, then apply gravity -----
        p = state.player
        y = p.y + p.vy
        vy = p.vy - cfg.gravity
        airborne = p.airborne

        if y <= 0.0:
            y = 0.0
            vy = 0.0
            airborne = False

        p2 = Player(y=y, vy=vy, airborne=airborne)

        # ----- Spawn (wall clock gated) -----
        obstacles = list(state.obstacles)
        last_spawn_ms = state.last_spawn_ms
        if timestamp_ms - last_spawn_ms > cfg.spawn_interval_ms:
            obstacles.append(Obstacle(offset=0.0))
            last_spawn_ms = timestamp_ms
            log.debug("spawned obstacle at t=%.1fms", timestamp_ms)

        # ----- Scroll, collide, clean up -----
        p_box = player_rect(cfg, p2)
        score = state.score
        is_over = False
        alive: list[Obstacle] = []
        for o in obstacles:
            moved = Obstacle(offset=o.offset + cfg.scroll_speed)

            if overlaps(p_box, obstacle_rect(cfg, moved)):
                is_over = True

            if moved.offset > cfg.playfield_width:
                score += 1
                log.debug("obstacle cleared, score=%d", score)
                continue
            alive.append(moved)

        return GameState(
            player=p2,
            obstacles=tuple(alive),
            score=score,
            is_over=is_over,
            last_spawn_ms=last_spawn_ms,
        )
