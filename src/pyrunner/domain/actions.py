from __future__ import annotations

from enum import Enum

from pyrunner.domain.game_state import GameState, Phase


class Action(Enum):
    JUMP = "jump"
    RESTART = "restart"


def resolve_primary_action(state: GameState) -> Action:
    """Map the single input trigger onto the action valid in the current phase."""
    if state.phase is Phase.GAME_OVER:
        return Action.RESTART
    return Action.JUMP
