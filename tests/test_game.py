from __future__ import annotations

import argparse
import math

import pytest

import main as main_module
from core.components import ScreenDiagsState
from game import DiagsDemo, LoopTimers, _build_headless_stats
from main import RunConfig, _parse_args
from profiles import create_profile, list_available_profiles
from profiles.profile_ramp import RampProfile
from profiles.profile_steady import SteadyProfile
from profiles.profile_stutter import StutterProfile


def test_profile_registry_lists_and_creates_profiles() -> None:
    assert list_available_profiles() == ["profile_ramp", "profile_steady", "profile_stutter"]
    assert isinstance(create_profile("Profile-Stutter"), StutterProfile)
    assert isinstance(create_profile("profile_ramp"), RampProfile)
    with pytest.raises(ValueError, match="Unknown profile"):
        create_profile("")
    with pytest.raises(ValueError, match="profile_steady"):
        create_profile("profile_missing")


def test_profiles_produce_expected_frame_times() -> None:
    import random

    rng = random.Random(0)
    steady = SteadyProfile(jitter=0.0)
    assert steady.frame_dt(5, rng) == pytest.approx(1.0 / 60.0)

    stutter = StutterProfile(period=10, hitch=0.2)
    assert stutter.frame_dt(0, rng) == pytest.approx(stutter.budget)
    assert stutter.frame_dt(10, rng) == pytest.approx(0.2)
    assert stutter.load_fraction(0.2) == pytest.approx(12.0)

    ramp = RampProfile(start_fps=100.0, end_fps=50.0, ramp_frames=10)
    assert ramp.frame_dt(0, rng) == pytest.approx(0.01)
    assert ramp.frame_dt(50, rng) == pytest.approx(0.02)


def test_loop_timers_toggle_period() -> None:
    timers = LoopTimers(frame_dt=0.5, toggle_period=1.0)
    timers.advance_frame(0.5)
    assert not timers.should_toggle()
    timers.advance_frame(0.5)
    assert timers.should_toggle()
    timers.consume_toggle()
    assert not timers.should_toggle()

    never = LoopTimers(frame_dt=0.5)
    never.advance_frame(100.0)
    assert not never.should_toggle()


def test_headless_demo_shows_steady_rate() -> None:
    demo = DiagsDemo(SteadyProfile(jitter=0.0), seed=1, headless=True)
    result = demo.run(print_freq=0, max_steps=200)

    assert result["steps"] == 200
    assert result["visible"] is True
    assert result["displayed"] == "60"
    assert result["toggles"] == 0
    assert "plot_path" not in result


def test_headless_demo_auto_toggle_respawns_overlay() -> None:
    demo = DiagsDemo(SteadyProfile(jitter=0.0), seed=1, headless=True, toggle_every=1.0)
    result = demo.run(print_freq=0, max_time=2.5)

    assert result["toggles"] == 2
    assert result["visible"] is True
    assert result["displayed"] == "60"
    assert result["time"] >= 2.5


def test_headless_demo_ends_hidden_after_odd_toggles() -> None:
    demo = DiagsDemo(StutterProfile(), seed=3, headless=True, toggle_every=1.0)
    result = demo.run(print_freq=0, max_time=1.5)

    assert result["toggles"] == 1
    assert result["visible"] is False
    assert result["displayed"] is None
    _, state = demo.app.world.single(ScreenDiagsState)
    assert state.paused


def test_headless_stats_line_reports_overlay(capsys) -> None:
    demo = DiagsDemo(SteadyProfile(jitter=0.0), seed=1, headless=True)
    line = _build_headless_stats(0.0, demo.app, demo.metrics)
    assert "avg:   --" in line
    assert "overlay:..." in line

    demo.run(print_freq=60, max_steps=61)
    out = capsys.readouterr().out
    assert out.count("overlay:") == 2


def test_parse_args_defaults() -> None:
    args = argparse.Namespace(
        profile_name="profile_steady",
        headless=True,
        freq=None,
        steps=None,
        time=None,
        toggle_every=None,
        plot=False,
        seed=None,
        log_level="WARNING",
    )
    config = _parse_args(args)
    assert config == RunConfig(
        profile_name="profile_steady",
        headless=True,
        print_freq=60,
        max_time=30.0,
        max_steps=None,
        toggle_every=0.0,
        plot=False,
        seed=None,
        log_level="WARNING",
    )


def test_main_headless_prints_results(capsys) -> None:
    main_module.main(["profile_steady", "--headless", "--steps", "30", "--freq", "0", "--seed", "7"])
    out = capsys.readouterr().out
    assert "Using profile profile_steady" in out
    assert "FINAL RESULTS" in out
    assert any(line.split() == ["Steps", "30"] for line in out.splitlines())


def test_main_rejects_plot_without_headless() -> None:
    with pytest.raises(SystemExit):
        main_module.main(["--plot"])


def test_result_time_is_finite() -> None:
    demo = DiagsDemo(create_profile("profile_ramp"), seed=2, headless=True)
    result = demo.run(print_freq=0, max_steps=10)
    assert math.isfinite(result["time"])
