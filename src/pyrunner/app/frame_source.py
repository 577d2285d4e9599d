from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

FrameCallback = Callable[[float], None]


class FrameSource(Protocol):
    def request_frame(self, callback: FrameCallback) -> None:
        # Calls back at most once, later, with a non-decreasing timestamp in ms.
        ...
