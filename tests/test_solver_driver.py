"""Tests for auto-solve playback: step-driven and asyncio-paced."""

import asyncio

import pytest

from hanoi_lite.driver import DriverState, SolverDriver
from hanoi_lite.solver import plan_hanoi, replay
from hanoi_lite.state import GameState


def make_driver(n, outcomes=None):
    state = GameState(n)
    on_finish = outcomes.append if outcomes is not None else None
    driver = SolverDriver(lambda m: state.try_move(m.source, m.target), delay=0, on_finish=on_finish)
    return state, driver


class TestStepPlayback:
    """Discrete playback, one move per step()."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4])
    def test_full_run_solves_puzzle(self, n):
        outcomes = []
        state, driver = make_driver(n, outcomes)
        driver.start(n)

        applied = 0
        while driver.step():
            applied += 1

        assert applied == (1 << n) - 1
        assert state.snapshot() == ((), (), tuple(range(n, 0, -1)))
        assert driver.state is DriverState.IDLE
        assert driver.last_outcome is DriverState.COMPLETED
        assert outcomes == [DriverState.COMPLETED]

    @pytest.mark.parametrize("k", range(0, 7))
    def test_cancel_after_k_moves_matches_prefix(self, k):
        state, driver = make_driver(3)
        driver.start(3)
        for _ in range(k):
            assert driver.step()

        assert driver.cancel() is True
        assert driver.step() is False

        assert state.snapshot() == replay(3, plan_hanoi(3)[:k]).snapshot()
        assert state.moves == k
        assert driver.last_outcome is DriverState.CANCELLED
        assert driver.state is DriverState.IDLE

    def test_cancel_when_idle_is_noop(self):
        _, driver = make_driver(3)

        assert driver.cancel() is False
        assert driver.last_outcome is None

    def test_start_cancels_previous_run(self):
        outcomes = []
        _, driver = make_driver(3, outcomes)
        first = driver.start(3)
        driver.step()

        second = driver.start(3)

        assert second > first
        assert outcomes == [DriverState.CANCELLED]
        assert driver.is_solving
        assert driver.applied == 0
        assert driver.remaining == 7

    def test_rejected_move_stops_run(self):
        driver = SolverDriver(lambda m: False, delay=0)
        driver.start(2)

        assert driver.step() is False
        assert driver.last_outcome is DriverState.CANCELLED
        assert not driver.is_solving

    def test_raising_callback_returns_driver_to_idle(self):
        def apply(move):
            raise KeyError("board gone")

        driver = SolverDriver(apply, delay=0)
        driver.start(2)

        with pytest.raises(KeyError):
            driver.step()
        assert driver.state is DriverState.IDLE
        assert driver.last_outcome is DriverState.CANCELLED
        assert driver.step() is False

    def test_zero_disks_completes_immediately(self):
        outcomes = []
        driver = SolverDriver(lambda m: True, delay=0, on_finish=outcomes.append)
        driver.start(0)

        assert driver.state is DriverState.IDLE
        assert driver.last_outcome is DriverState.COMPLETED
        assert outcomes == [DriverState.COMPLETED]
        assert driver.step() is False


class TestAsyncPlayback:
    """Paced playback on the event loop."""

    @pytest.mark.asyncio
    async def test_play_runs_to_completion(self):
        state, driver = make_driver(4)
        driver.start(4)

        outcome = await driver.play(0)

        assert outcome is DriverState.COMPLETED
        assert state.moves == 15
        assert state.is_goal()

    @pytest.mark.asyncio
    async def test_cancel_during_sleep_applies_nothing_more(self):
        state, driver = make_driver(3)
        driver.start(3)
        task = asyncio.ensure_future(driver.play(0.05))
        await asyncio.sleep(0)

        driver.cancel()
        outcome = await task

        assert outcome is DriverState.CANCELLED
        assert state.moves == 0

    @pytest.mark.asyncio
    async def test_superseded_run_reports_cancelled(self):
        state, driver = make_driver(3)
        driver.start(3)
        slow = asyncio.ensure_future(driver.play(0.05))
        await asyncio.sleep(0)

        driver.start(3)
        fast = asyncio.ensure_future(driver.play(0))

        assert await fast is DriverState.COMPLETED
        assert await slow is DriverState.CANCELLED
        assert state.moves == 7
        assert state.is_goal()

    @pytest.mark.asyncio
    async def test_play_without_run_reports_last_outcome(self):
        _, driver = make_driver(1)
        driver.start(1)
        driver.step()

        assert await driver.play(0) is DriverState.COMPLETED
