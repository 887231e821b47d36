"""
Tests for SimulationEngine.

Covers tick ordering, catch/miss scenarios, the game-over freeze,
restart semantics and determinism.
"""

import dataclasses

import pytest
from pydantic import ValidationError

from catcher.game_state import GameState
from games.CoffeeCatcher.engine import SimulationEngine
from games.CoffeeCatcher.snapshot import FrameSnapshot
from models import CatcherConfig


def play_until_game_over(engine, limit=50000):
    """Tick until the engine stops running; fail if it never does."""
    for _ in range(limit):
        if not engine.tick().running:
            return engine.snapshot()
    pytest.fail("game never ended")


class TestConstruction:
    """Fresh engine state."""

    def test_defaults(self):
        frame = SimulationEngine().snapshot()
        assert isinstance(frame, FrameSnapshot)
        assert frame.running
        assert frame.state == GameState.PLAYING
        assert frame.score == 0
        assert frame.misses == 0
        assert frame.miss_limit == 3
        assert frame.items == ()
        assert frame.tick == 0
        assert frame.spawn_interval == 60

    def test_invalid_config_rejected_eagerly(self):
        with pytest.raises(ValidationError):
            SimulationEngine(CatcherConfig(arena_width=0))

    def test_snapshot_is_immutable(self, low_engine):
        frame = low_engine.tick()
        with pytest.raises(dataclasses.FrozenInstanceError):
            frame.score = 10
        with pytest.raises(ValidationError):
            frame.player.x = 0.0

    def test_snapshot_does_not_alias_engine_state(self, low_engine):
        frame = low_engine.tick()
        y_before = frame.items[0].y
        low_engine.tick()
        assert frame.items[0].y == y_before


class TestSpawnScenario:
    """Arena 480x800, default config, no input."""

    def test_one_item_after_first_interval(self, config, run_ticks):
        engine = SimulationEngine(config)
        first = engine.tick()
        assert first.item_count == 1
        vy = first.items[0].y + 58.0

        frame = run_ticks(engine, 59)
        assert frame.tick == 60
        assert frame.item_count == 1
        assert frame.items[0].y == pytest.approx(-58.0 + 60 * vy)

    def test_second_item_spawns_on_tick_61(self, config, run_ticks):
        engine = SimulationEngine(config)
        run_ticks(engine, 60)
        assert engine.tick().item_count == 2
        assert engine.spawned_total == 2

    def test_uncaught_item_becomes_miss(self, low_engine, run_ticks):
        frame = run_ticks(low_engine, 302)
        assert frame.misses == 0
        assert frame.items[0].y == pytest.approx(-58.0 + 302 * 3.0)

        frame = low_engine.tick()
        assert frame.misses == 1
        assert frame.running


class TestCatchScenario:
    """Items dropped onto the centered player."""

    def test_first_catch_tick(self, mid_engine, run_ticks):
        assert run_ticks(mid_engine, 168).score == 0
        frame = mid_engine.tick()
        assert frame.score == 1
        assert frame.misses == 0

    def test_every_resolved_item_is_a_catch(self, mid_engine, run_ticks):
        frame = run_ticks(mid_engine, 1500)
        assert frame.misses == 0
        assert frame.score > 0
        assert frame.score == mid_engine.spawned_total - frame.item_count

    def test_score_is_monotonic(self, mid_engine):
        last = 0
        for _ in range(800):
            score = mid_engine.tick().score
            assert score >= last
            last = score


class TestGameOver:
    """Three misses end the game and freeze the world."""

    def test_third_miss_ends_game(self, low_engine, run_ticks):
        assert run_ticks(low_engine, 422).running
        frame = low_engine.tick()
        assert frame.misses == 3
        assert not frame.running
        assert frame.state == GameState.GAME_OVER
        assert frame.tick == 423

    def test_ticks_after_game_over_change_nothing(self, low_engine, run_ticks):
        frozen = run_ticks(low_engine, 423)
        low_engine.input.set_right(True)
        for _ in range(200):
            assert low_engine.tick() == frozen

    def test_misses_within_limit_while_running(self, config):
        engine = SimulationEngine(config)
        engine.input.set_right(True)
        for _ in range(20000):
            frame = engine.tick()
            if frame.running:
                assert frame.misses < 3
            else:
                assert frame.misses >= 3
                break


class TestRestart:
    """GAME_OVER -> PLAYING only via an explicit restart."""

    def test_restart_ignored_while_running(self, low_engine, run_ticks):
        run_ticks(low_engine, 100)
        before = low_engine.snapshot()
        assert low_engine.restart() is False
        assert low_engine.snapshot() == before

    def test_restart_request_ignored_while_running(self, low_engine, run_ticks):
        run_ticks(low_engine, 100)
        low_engine.input.request_restart()
        frame = low_engine.tick()
        assert frame.tick == 101
        assert not low_engine.input.restart_requested

    def test_restart_matches_fresh_engine(self, config, low_engine, run_ticks):
        run_ticks(low_engine, 423)
        assert low_engine.restart() is True

        fresh = SimulationEngine(config)
        assert low_engine.snapshot() == fresh.snapshot()

    def test_restart_via_input_request(self, low_engine, run_ticks):
        run_ticks(low_engine, 423)
        low_engine.input.request_restart()
        frame = low_engine.tick()
        assert frame.running
        assert frame.tick == 1
        assert frame.item_count == 1
        assert frame.misses == 0

    def test_restart_is_idempotent(self, low_engine, run_ticks):
        run_ticks(low_engine, 423)
        assert low_engine.restart() is True
        assert low_engine.restart() is False

    def test_seeded_restart_replays_fresh_game(self, config):
        engine = SimulationEngine(config)
        engine.input.set_right(True)
        play_until_game_over(engine)
        engine.restart()

        fresh = SimulationEngine(config)
        fresh.input.set_right(True)
        assert engine.snapshot() == fresh.snapshot()
        for _ in range(1000):
            assert engine.tick() == fresh.tick()

    def test_restart_resets_difficulty(self, config):
        engine = SimulationEngine(config)
        engine.input.set_right(True)
        frame = play_until_game_over(engine)
        engine.restart()
        assert engine.spawn_interval == 60
        assert engine.spawned_total == 0
        assert frame.tick > 0


class TestMovementScenarios:
    """Player movement through the full tick."""

    def test_hold_right_until_clamped(self, low_engine):
        low_engine.input.set_right(True)
        xs = [low_engine.tick().player.x for _ in range(100)]
        max_x = 335.0
        clamp_index = xs.index(max_x)
        for a, b in zip(xs[:clamp_index], xs[1:clamp_index + 1]):
            assert b > a
        assert all(x == max_x for x in xs[clamp_index:])

    def test_both_directions_hold_still(self, low_engine):
        low_engine.input.set_left(True)
        low_engine.input.set_right(True)
        for _ in range(200):
            assert low_engine.tick().player.x == pytest.approx(177.5)

    def test_player_stays_in_bounds(self, config):
        engine = SimulationEngine(config)
        pattern = [(True, False)] * 40 + [(False, True)] * 90 + [(True, True)] * 10 + [(False, False)] * 5
        for step in range(3000):
            left, right = pattern[step % len(pattern)]
            engine.input.set_left(left)
            engine.input.set_right(right)
            frame = engine.tick()
            assert 20.0 <= frame.player.x <= 335.0
            assert frame.player.y == pytest.approx(663.0)


class TestDifficulty:
    """Spawn interval ramp through the engine."""

    def test_interval_never_below_floor(self, mid_engine):
        for _ in range(6000):
            assert mid_engine.tick().spawn_interval >= 28

    def test_interval_drops_after_600_ticks(self, mid_engine, run_ticks):
        assert run_ticks(mid_engine, 599).spawn_interval == 60
        assert mid_engine.tick().spawn_interval == 56


class TestDeterminism:
    """Same seed and same input give the same snapshots."""

    def test_identical_runs(self, config):
        a, b = SimulationEngine(config), SimulationEngine(config)
        for step in range(3000):
            held_left = (step // 37) % 3 == 0
            held_right = (step // 53) % 2 == 0
            for engine in (a, b):
                engine.input.set_left(held_left)
                engine.input.set_right(held_right)
                if step == 2500:
                    engine.input.request_restart()
            assert a.tick() == b.tick()

    def test_different_seeds_diverge(self):
        a = SimulationEngine(CatcherConfig(seed=1))
        b = SimulationEngine(CatcherConfig(seed=2))
        assert a.tick() != b.tick()
