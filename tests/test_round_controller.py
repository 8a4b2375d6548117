from __future__ import annotations

import random

import pytest

from flappy_trials.constants import ACTOR_START_Y, FIELD_WIDTH, get_difficulty
from flappy_trials.data_models import Obstacle, RoundState
from flappy_trials.leaderboard import Leaderboard
from flappy_trials.round_controller import RoundController


def make_controller(seed: int = 1, **kwargs) -> RoundController:
    return RoundController(rng=random.Random(seed), **kwargs)


def begin(rc: RoundController) -> None:
    assert rc.start()
    for _ in range(3):
        rc.countdown_tick()
    assert rc.state is RoundState.ACTIVE


def fall_to_floor(rc: RoundController) -> int:
    begin(rc)
    ticks = 0
    while rc.state is RoundState.ACTIVE:
        rc.tick()
        ticks += 1
    return ticks


def test_start_enters_countdown() -> None:
    rc = make_controller()
    assert rc.state is RoundState.IDLE
    assert rc.start()
    assert rc.state is RoundState.COUNTDOWN
    assert rc.countdown == 3
    assert not rc.start()


def test_inputs_ignored_during_countdown() -> None:
    rc = make_controller()
    rc.start()
    assert not rc.tick()
    assert not rc.jump()
    assert not rc.reset_player()
    assert rc.actor.velocity == 0.0


def test_countdown_reaches_play_and_resets_round() -> None:
    rc = make_controller()
    rc.actor.y = 10.0
    rc.score = 5
    rc.start()
    rc.countdown_tick()
    rc.countdown_tick()
    assert rc.state is RoundState.COUNTDOWN
    assert rc.countdown == 1
    rc.countdown_tick()
    assert rc.state is RoundState.ACTIVE
    assert rc.actor.y == ACTOR_START_Y
    assert rc.score == 0
    assert rc.obstacles.obstacles == []
    assert not rc.countdown_tick()


def test_spawned_obstacle_advances_once_in_its_tick() -> None:
    rc = make_controller()
    begin(rc)
    rc.tick()
    assert len(rc.obstacles.obstacles) == 1
    assert rc.obstacles.obstacles[0].x == FIELD_WIDTH - 3


def test_jump_only_while_active() -> None:
    rc = make_controller()
    assert not rc.jump()
    begin(rc)
    assert rc.jump()
    assert rc.actor.velocity == -9.0


def test_floor_ends_round_once_and_freezes() -> None:
    rc = make_controller()
    ticks = fall_to_floor(rc)
    # y after n ticks is 300 + 0.25 * n * (n + 1); the floor is crossed at 570
    assert ticks == 33
    assert rc.session.scores == [0]
    assert rc.state is RoundState.IDLE
    assert rc.attempts_left == 2
    assert rc.last_round_score == 0

    y = rc.actor.y
    for _ in range(10):
        assert not rc.tick()
    assert rc.actor.y == y
    assert rc.session.scores == [0]


def test_actor_never_goes_above_ceiling() -> None:
    rc = make_controller()
    begin(rc)
    rc.actor.y = 5.0
    for _ in range(40):
        rc.jump()
        rc.tick()
        assert rc.actor.y >= 0


def test_score_counts_passed_obstacles() -> None:
    rc = make_controller(seed=11)
    begin(rc)
    seen = []
    for _ in range(600):
        # Hold the actor still in the middle of the next gap.
        upcoming = [o for o in rc.obstacles.obstacles if not o.passed]
        if upcoming:
            o = upcoming[0]
            rc.actor.y = o.gap_top + (o.gap_size - rc.actor.h) / 2
        rc.actor.velocity = -rc.physics.gravity
        rc.tick()
        assert rc.state is RoundState.ACTIVE
        for o in rc.obstacles.obstacles:
            if all(o is not s for s in seen):
                seen.append(o)
        assert rc.score == sum(o.passed for o in seen)
    assert rc.score >= 3


def test_session_over_waits_for_name_then_next_player() -> None:
    lb = Leaderboard()
    rc = make_controller(leaderboard=lb)
    for _ in range(3):
        fall_to_floor(rc)
    assert rc.state is RoundState.ENDED
    assert rc.attempts_left == 0
    assert rc.session.pending_total == 0
    assert not rc.start()

    entry = rc.submit_name(" Ann ")
    assert (entry.score, entry.name) == (0, "Ann")
    assert rc.reset_player()
    assert rc.state is RoundState.IDLE
    assert rc.attempts_left == 3
    assert rc.session.scores == []
    assert rc.start()


def test_reset_player_twice_is_same_as_once() -> None:
    rc = make_controller()
    fall_to_floor(rc)
    assert rc.reset_player()
    assert rc.reset_player()
    assert rc.attempts_left == 3
    assert rc.session.scores == []


def test_leaderboard_shared_between_controllers() -> None:
    lb = Leaderboard()
    for _ in range(2):
        rc = make_controller(leaderboard=lb, attempt_limit=1)
        fall_to_floor(rc)
        rc.submit_name(None)
    assert [(e.score, e.name) for e in lb.top_n()] == [(0, "Anonymous"), (0, "Anonymous")]


def test_snapshot_reflects_state() -> None:
    rc = make_controller()
    begin(rc)
    rc.tick()
    snap = rc.snapshot()
    assert snap.state is RoundState.ACTIVE
    assert snap.actor.y == rc.actor.y
    assert len(snap.obstacles) == 1
    assert snap.attempts_left == 3
    assert snap.pending_total is None
    with pytest.raises(AttributeError):
        snap.score = 10


def test_difficulty_by_name() -> None:
    rc = make_controller(difficulty="easy")
    assert rc.difficulty is get_difficulty("easy")
    begin(rc)
    rc.tick()
    assert rc.obstacles.obstacles[0].gap_size == 170
    assert rc.obstacles.obstacles[0].x == FIELD_WIDTH - 2
    with pytest.raises(ValueError):
        make_controller(difficulty="nightmare")


def test_obstacle_hit_ends_round_and_freezes() -> None:
    rc = make_controller()
    begin(rc)
    rc.obstacles.obstacles = [Obstacle(x=60, gap_top=0, gap_bottom=10, width=50)]
    assert rc.tick()
    assert rc.state is RoundState.IDLE
    assert rc.session.scores == [0]
    assert rc.last_round_score == 0
    assert not rc.tick()
    assert rc.session.scores == [0]


def test_obstacle_hit_on_last_attempt_ends_session() -> None:
    rc = make_controller(attempt_limit=1)
    begin(rc)
    rc.score = 4
    rc.obstacles.obstacles = [Obstacle(x=60, gap_top=0, gap_bottom=10, width=50)]
    rc.tick()
    assert rc.state is RoundState.ENDED
    assert rc.session.scores == [4]
    assert rc.session.pending_total == 4
    assert not rc.tick()
    assert not rc.start()


def test_field_too_small_for_difficulty() -> None:
    with pytest.raises(ValueError):
        make_controller(field_height=250)
