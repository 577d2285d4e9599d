"""Obstacle scrolling, removal and scoring."""
import pytest

from conftest import make_state
from pyrunner.domain.game_state import Obstacle


@pytest.mark.unit
def test_obstacle_leaving_the_playfield_scores(world):
    state = world.step(make_state(offsets=(598.0,)), 10.0)
    assert state.obstacles == ()
    assert state.score == 1


@pytest.mark.unit
def test_obstacle_at_the_edge_is_kept(world):
    # 596 + 4 == width, which is not past it yet.
    state = world.step(make_state(offsets=(596.0,)), 10.0)
    assert state.obstacles == (Obstacle(offset=600.0),)
    assert state.score == 0


@pytest.mark.unit
def test_each_cleared_obstacle_scores_exactly_one(world):
    state = world.step(make_state(offsets=(100.0, 597.0, 598.0), score=5), 10.0)
    assert state.score == 7
    assert state.obstacles == (Obstacle(offset=104.0),)


@pytest.mark.unit
def test_score_never_decreases(world):
    state = make_state(y=200.0, vy=0.0, airborne=True, offsets=(560.0, 580.0, 590.0))
    seen = [state.score]
    for t in range(1, 12):
        state = world.step(state, float(t))
        seen.append(state.score)
    assert seen == sorted(seen)
    assert seen[-1] == 3


@pytest.mark.unit
def test_obstacles_scroll_at_fixed_speed(world, settings):
    state = make_state(offsets=(0.0, 40.0))
    for t in range(1, 6):
        state = world.step(state, float(t))
    assert [o.offset for o in state.obstacles] == [5 * settings.scroll_speed, 40.0 + 5 * settings.scroll_speed]
