"""Wall-clock obstacle spawning and a full scripted run."""
import pytest

from pyrunner.domain.game_state import Obstacle


@pytest.mark.unit
def test_no_spawn_within_interval(world, fresh):
    state = fresh
    for t in range(0, 1501, 100):
        state = world.step(state, float(t))
    assert state.obstacles == ()
    assert state.last_spawn_ms == 0.0


@pytest.mark.unit
def test_interval_boundary_is_exclusive(world, fresh):
    assert world.step(fresh, 1500.0).obstacles == ()

    state = world.step(fresh, 1501.0)
    assert len(state.obstacles) == 1
    assert state.last_spawn_ms == 1501.0


@pytest.mark.unit
def test_new_obstacle_moves_in_its_spawn_frame(world, fresh, settings):
    state = world.step(fresh, 1600.0)
    assert state.obstacles == (Obstacle(offset=settings.scroll_speed),)


@pytest.mark.unit
def test_one_spawn_per_interval_crossed(world, fresh):
    state = fresh
    spawn_times = []
    for t in range(0, 5001, 100):
        before = state.last_spawn_ms
        state = world.step(state, float(t))
        if state.last_spawn_ms != before:
            spawn_times.append(t)
    assert spawn_times == [1600, 3200, 4800]
    assert len(state.obstacles) == 3


@pytest.mark.unit
def test_spawn_cadence_ignores_frame_rate(world, fresh):
    slow = fresh
    for t in range(0, 3301, 100):
        slow = world.step(slow, float(t))
    fast = fresh
    for t in range(0, 3301, 25):
        fast = world.step(fast, float(t))
    assert len(slow.obstacles) == len(fast.obstacles) == 2


def test_two_second_run(world, fresh, settings):
    """Jump once, then run 2000 ms of 16 ms frames without touching anything."""
    frame_ms = 16
    timestamps = range(0, 2001, frame_ms)

    state = world.jump(fresh)
    for t in timestamps:
        state = world.step(state, float(t))

    first_spawn = next(t for t in timestamps if t > settings.spawn_interval_ms)
    frames_moved = len([t for t in timestamps if t >= first_spawn])
    frames_to_exit = settings.playfield_width / settings.scroll_speed

    assert first_spawn == 1504
    assert frames_moved == 32
    assert state.is_over is False
    assert frames_moved < frames_to_exit
    assert state.score == 0
    assert state.obstacles == (Obstacle(offset=frames_moved * settings.scroll_speed),)
    assert state.player.y == 0.0
    assert state.player.airborne is False
