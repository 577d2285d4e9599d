from __future__ import annotations

from collections.abc import Callable

from pyrunner.app.frame_source import FrameSource
from pyrunner.domain.actions import Action, resolve_primary_action
from pyrunner.domain.game_state import GameState
from pyrunner.domain.world import World
from pyrunner.log import get_logger

log = get_logger(__name__)


class RunnerEngine:
    """
    Owns the one live GameState and drives it from a frame source.

    Every call is expected on the same thread (the GUI event loop); input
    handlers and frame callbacks never run concurrently.
    """

    def __init__(
        self,
        *,
        world: World,
        frames: FrameSource,
        render_fn: Callable[[GameState], None] | None = None,
    ) -> None:
        self.world = world
        self.state = world.new_session()
        self._frames = frames
        self._render_fn = render_fn
        self._frame_pending = False

    def start(self) -> None:
        log.info("engine started")
        self._render()
        self._request_frame()

    def advance(self, timestamp_ms: float) -> None:
        self._frame_pending = False
        if self.state.is_over:
            return

        self.state = self.world.step(self.state, timestamp_ms)
        self._render()

        if self.state.is_over:
            log.info("game over, score=%d", self.state.score)
            return
        self._request_frame()

    def primary_action(self) -> None:
        self.dispatch(resolve_primary_action(self.state))

    def dispatch(self, action: Action) -> None:
        if action is Action.JUMP:
            self.state = self.world.jump(self.state)
        elif action is Action.RESTART:
            self.restart()

    def restart(self) -> None:
        log.info("restarting run")
        self.state = self.world.new_session()
        self._render()
        self._request_frame()

    def _request_frame(self) -> None:
        # Only one advance may be outstanding at a time.
        if self._frame_pending:
            return
        self._frame_pending = True
        self._frames.request_frame(self.advance)

    def _render(self) -> None:
        if self._render_fn is not None:
            self._render_fn(self.state)
