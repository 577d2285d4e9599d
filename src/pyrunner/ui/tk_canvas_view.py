import tkinter as tk

from pyrunner.domain.collision import obstacle_rect, player_rect
from pyrunner.domain.game_state import GameState
from pyrunner.domain.settings import GameSettings


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, settings: GameSettings) -> None:
        self._settings = settings
        self._w = int(settings.playfield_width)
        self._h = int(settings.playfield_height)

        self.canvas = tk.Canvas(root, width=self._w, height=self._h, highlightthickness=0, bg="#eef")
        self.canvas.pack(fill="both", expand=True)

        self._ground_id = self.canvas.create_line(0, self._h, self._w, self._h, fill="#444", width=2)
        self._player_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill="#66f")
        self._score_id = self.canvas.create_text(10, 10, anchor="nw", text="0", font=("TkDefaultFont", 14))
        self._over_id = self.canvas.create_text(
            self._w / 2.0,
            self._h / 2.0,
            text="Game Over! Press Space or tap to restart",
            font=("TkDefaultFont", 16, "bold"),
            fill="#c22",
            state="hidden",
        )

    def render_game(self, state: GameState) -> None:
        cfg = self._settings

        r = player_rect(cfg, state.player)
        self.canvas.coords(self._player_id, *self._to_canvas(r.left, r.bottom, r.right, r.top))

        # Redraw obstacles (few of them; simpler than tracking ids)
        self.canvas.delete("obstacle")
        for o in state.obstacles:
            b = obstacle_rect(cfg, o)
            self.canvas.create_rectangle(
                *self._to_canvas(b.left, b.bottom, b.right, b.top),
                outline="",
                fill="#f44",
                tags=("obstacle",),
            )

        self.canvas.itemconfigure(self._score_id, text=str(state.score))
        self.canvas.itemconfigure(self._over_id, state="normal" if state.is_over else "hidden")
        self.canvas.tag_raise(self._over_id)

    def _to_canvas(self, left: float, bottom: float, right: float, top: float) -> tuple[float, float, float, float]:
        # Playfield y grows upward from the ground; canvas y grows downward.
        return (left, self._h - top, right, self._h - bottom)
