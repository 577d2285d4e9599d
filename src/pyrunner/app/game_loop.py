from __future__ import annotations

import time
import tkinter as tk

from pyrunner.app.frame_source import FrameCallback


class TkFrameSource:
    def __init__(self, *, root: tk.Tk, fps: int = 60) -> None:
        self._root = root
        self._target_ms = max(1, int(1000 / max(1, fps)))

        self._running = True
        self._after_id: str | None = None
        self._origin = time.monotonic()

    def now_ms(self) -> float:
        return (time.monotonic() - self._origin) * 1000.0

    def request_frame(self, callback: FrameCallback) -> None:
        if not self._running or self._after_id is not None:
            return
        self._after_id = self._root.after(self._target_ms, lambda: self._fire(callback))

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _fire(self, callback: FrameCallback) -> None:
        self._after_id = None
        if not self._running:
            return

        try:
            callback(self.now_ms())
        except Exception:
            # Fail fast rather than keep animating a corrupt state.
            self.stop()
            raise
