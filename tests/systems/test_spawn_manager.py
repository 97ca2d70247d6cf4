"""
test_spawn_manager.py
---------------------
Unit tests for the ObstacleSpawner.

Covers:
1. Threshold and size draws from the injected random source
2. Spawn gating on timer and minimum distance (retry without reset)
3. Scrolling and order-preserving culling
4. Long-run spacing and culling invariants with a seeded source
"""

import random

import pytest

from jumpgame.core.runtime.session_state import SessionState
from jumpgame.entities.obstacle import Obstacle
from jumpgame.systems.spawn_manager import ObstacleSpawner


@pytest.fixture
def make_spawner(scripted_random):
    def _make(*values):
        return ObstacleSpawner(rng=scripted_random(values), surface_width=800)
    return _make


# ===========================================================
# Draws
# ===========================================================

@pytest.mark.parametrize("roll, expected", [
    (0.0, 500),
    (0.5, 650),
    (0.999, 500 + 0.999 * 300),
])
def test_roll_threshold_range(make_spawner, roll, expected):
    assert make_spawner(roll).roll_threshold() == pytest.approx(expected)


def test_create_obstacle_at_right_edge_with_drawn_size(make_spawner):
    obstacle = make_spawner(0.0, 0.5).create_obstacle()

    assert obstacle.x == 800
    assert obstacle.width == 30
    assert obstacle.height == 75


def test_threshold_is_rerolled_each_check(make_spawner):
    spawner = make_spawner(0.9, 0.1, 0.0, 0.0)

    # threshold 770: no spawn at 600
    assert spawner.try_spawn([], 600) == 600
    # threshold 530: spawns, then width/height draws
    obstacles = []
    assert spawner.try_spawn(obstacles, 600) == 0.0
    assert len(obstacles) == 1


# ===========================================================
# Spawn Gating
# ===========================================================

def test_no_spawn_below_threshold(make_spawner):
    obstacles = []
    assert make_spawner(0.5).try_spawn(obstacles, 600) == 600
    assert obstacles == []


def test_timer_equal_to_threshold_does_not_spawn(make_spawner):
    obstacles = []
    assert make_spawner(0.0).try_spawn(obstacles, 500) == 500
    assert obstacles == []


def test_spawn_into_empty_sequence_resets_timer(make_spawner):
    obstacles = []
    assert make_spawner(0.0).try_spawn(obstacles, 501) == 0.0
    assert obstacles == [Obstacle(800, 30, 50)]


@pytest.mark.parametrize("last_x", [400, 500, 795])
def test_too_close_keeps_timer(make_spawner, last_x):
    obstacles = [Obstacle(last_x, 40, 60)]

    assert make_spawner(0.0).try_spawn(obstacles, 900) == 900
    assert len(obstacles) == 1


def test_spawn_retried_once_gap_opens(make_spawner):
    spawner = make_spawner(0.0)
    obstacles = [Obstacle(401, 40, 60)]

    timer = spawner.try_spawn(obstacles, 900)
    assert timer == 900

    obstacles[0].x = 399
    timer = spawner.try_spawn(obstacles, timer)

    assert timer == 0.0
    assert [o.x for o in obstacles] == [399, 800]
    assert spawner.get_stats()["deferred"] == 1


# ===========================================================
# Scrolling & Culling
# ===========================================================

def test_advance_scrolls_and_culls_in_order(make_spawner):
    obstacles = [
        Obstacle(-25, 30, 60),   # x + w == 0 after move -> culled
        Obstacle(-24, 30, 60),   # x + w == 1 after move -> kept
        Obstacle(300, 40, 80),
    ]

    survivors = make_spawner(0.0).advance(obstacles)

    assert survivors == [Obstacle(-29, 30, 60), Obstacle(295, 40, 80)]


def test_update_accumulates_timer_and_moves_new_obstacle(make_spawner):
    session = SessionState()
    spawner = make_spawner(0.0)

    spawner.update(session, 300)
    assert session.obstacle_spawn_timer == 300
    assert session.obstacles == []

    spawner.update(session, 300)
    assert session.obstacle_spawn_timer == 0.0
    assert session.obstacles == [Obstacle(795, 30, 50)]


# ===========================================================
# Long-run Invariants
# ===========================================================

@pytest.mark.parametrize("seed", [0, 7, 1234])
def test_spacing_and_culling_hold_over_long_run(seed):
    spawner = ObstacleSpawner(rng=random.Random(seed), surface_width=800)
    session = SessionState()
    culled = []
    spawned = 0

    for _ in range(3000):
        before = list(session.obstacles)
        spawner.update(session, 16)

        current = {id(o) for o in session.obstacles}
        culled.extend(o for o in before if id(o) not in current)
        spawned += len([o for o in session.obstacles if o.x == 795])

        for obstacle in session.obstacles:
            assert obstacle.x + obstacle.width > 0
        for prev, new in zip(session.obstacles, session.obstacles[1:]):
            assert new.x - prev.x >= 400
        assert not any(id(gone) in current for gone in culled)

    assert spawned > 10
    assert culled
