from __future__ import annotations

import pytest

from core.components import RefreshTimer, ScreenDiagsState


def test_repeating_timer_finishes_once_per_interval() -> None:
    timer = RefreshTimer(duration=0.5)
    fired = [timer.tick(0.25).just_finished for _ in range(6)]

    assert fired == [False, True, False, True, False, True]
    assert timer.elapsed == pytest.approx(0.0)


def test_single_long_tick_reports_one_finish_and_wraps() -> None:
    timer = RefreshTimer(duration=1.0)

    assert timer.tick(3.25).just_finished
    assert timer.elapsed == pytest.approx(0.25)
    assert not timer.tick(0.5).just_finished


def test_state_enable_controls() -> None:
    state = ScreenDiagsState()
    assert state.enabled

    state.pause()
    assert state.paused
    state.unpause()
    assert not state.paused
    state.toggle()
    assert not state.enabled
    state.set_enabled(True)
    assert state.enabled
