from __future__ import annotations

import tkinter as tk

from pyrunner.app.engine import RunnerEngine
from pyrunner.app.game_loop import TkFrameSource
from pyrunner.domain.settings import GameSettings
from pyrunner.domain.world import World
from pyrunner.log import get_logger
from pyrunner.ui.input_mapper import TkInputMapper
from pyrunner.ui.tk_canvas_view import TkCanvasView

log = get_logger(__name__)


class GameApp:
    def __init__(self, settings: GameSettings | None = None) -> None:
        self.settings = settings or GameSettings()

        self.root = tk.Tk()
        self.root.title("pyrunner")
        self.root.resizable(False, False)

        self.view = TkCanvasView(self.root, settings=self.settings)
        self.frames = TkFrameSource(root=self.root, fps=60)

        self.engine = RunnerEngine(
            world=World(self.settings),
            frames=self.frames,
            render_fn=self.view.render_game,
        )
        self.input = TkInputMapper(self.root, on_primary=self.engine.primary_action)

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        # Start animating once the window has been laid out.
        self.root.after_idle(self.engine.start)
        self.root.mainloop()

    def _on_close(self) -> None:
        log.info("window closed, final score=%d", self.engine.state.score)
        self.frames.stop()
        self.root.destroy()
