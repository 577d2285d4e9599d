from __future__ import annotations

import tkinter as tk
from collections.abc import Callable


class TkInputMapper:
    def __init__(self, root: tk.Tk, *, on_primary: Callable[[], None]) -> None:
        self._on_primary = on_primary
        self._space_down = False

        root.bind("<KeyPress-space>", self._on_space_down)
        root.bind("<KeyRelease-space>", self._on_space_up)
        # Click stands in for a touch tap.
        root.bind("<Button-1>", self._on_tap)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_space_down(self, _evt: tk.Event) -> None:
        # Key auto-repeat sends repeated presses; only the first one counts.
        if not self._space_down:
            self._on_primary()
        self._space_down = True

    def _on_space_up(self, _evt: tk.Event) -> None:
        self._space_down = False

    def _on_tap(self, _evt: tk.Event) -> None:
        self._on_primary()
