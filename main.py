"""Main entry point for the screen diagnostics demo (thin wrapper)."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from game import DiagsDemo
from profiles import create_profile, list_available_profiles

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class RunConfig:
    profile_name: str
    headless: bool
    print_freq: int
    max_time: float
    max_steps: int | None
    toggle_every: float
    plot: bool
    seed: int | None
    log_level: str


def _format_list(title: str, items: list[str]) -> str:
    if not items:
        return f"{title}:\n  (none)"
    joined = "\n  ".join(items)
    return f"{title}:\n  {joined}"


def _build_parser() -> argparse.ArgumentParser:
    profiles = list_available_profiles()

    parser = argparse.ArgumentParser(
        description="Screen diagnostics FPS overlay demo",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=_format_list("Available profiles", profiles),
    )
    parser.add_argument(
        "profile_name",
        nargs="?",
        default="profile_steady",
        choices=profiles,
        help="Frame-time workload profile",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without graphics using simulated frame times",
    )
    parser.add_argument(
        "--freq",
        type=int,
        default=None,
        help="Print stats every N frames (60=1/sec, 1=every frame, 0=off)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Limit the run to N frames",
    )
    parser.add_argument(
        "--time",
        type=float,
        default=None,
        help="Headless: limit the run to S seconds (default: 30)",
    )
    parser.add_argument(
        "--toggle-every",
        type=float,
        default=None,
        help="Toggle the overlay every S seconds (0=never)",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Headless: save a plot of the displayed value",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity",
    )
    return parser


def _parse_args(args: argparse.Namespace) -> RunConfig:
    print_freq = 60 if args.freq is None else args.freq
    max_time = 30.0 if args.time is None else args.time
    toggle_every = 0.0 if args.toggle_every is None else args.toggle_every

    return RunConfig(
        profile_name=args.profile_name,
        headless=args.headless,
        print_freq=print_freq,
        max_time=max_time,
        max_steps=args.steps,
        toggle_every=toggle_every,
        plot=args.plot,
        seed=args.seed,
        log_level=args.log_level,
    )


def _announce_config(config: RunConfig, args: argparse.Namespace) -> None:
    if config.headless:
        print("Running in headless mode")

    if args.freq is not None:
        if config.print_freq == 0:
            print("Stats output disabled")
        elif config.print_freq == 1:
            print("Printing stats every frame")
        else:
            print(
                f"Printing stats every {config.print_freq} frames ({config.print_freq / 60:.2f}s)"
            )

    if args.time is not None:
        print(f"Max time: {config.max_time}s (headless mode)")

    if config.toggle_every > 0.0:
        print(f"Toggling overlay every {config.toggle_every:.2f}s")

    if config.seed is not None:
        print(f"Using seed: {config.seed}")


def _print_headless_results(result: dict) -> None:
    print("\n" + "=" * 60)
    print("FINAL RESULTS")
    print("=" * 60)
    for key in ("time", "steps", "toggles", "visible", "displayed", "seed"):
        if key in result:
            val = result[key]
            if isinstance(val, float):
                print(f"{key.capitalize():<18}{val:.2f}")
            else:
                print(f"{key.capitalize():<18}{val}")
    print("=" * 60)
    if result.get("plot_path"):
        print(f"Plot:              {result['plot_path']}")
    if result.get("plot_error"):
        print(f"Plot error:        {result['plot_error']}")


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _parse_args(args)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if config.toggle_every < 0.0:
        parser.error("--toggle-every must be >= 0")
    if config.plot and not config.headless:
        parser.error("--plot requires --headless")

    _announce_config(config, args)

    profile = create_profile(config.profile_name)
    print(f"Using profile {config.profile_name}")

    demo = DiagsDemo(
        profile,
        seed=config.seed,
        headless=config.headless,
        toggle_every=config.toggle_every,
        plot=config.plot,
    )
    result = demo.run(
        print_freq=config.print_freq,
        max_time=config.max_time if config.headless else None,
        max_steps=config.max_steps,
    )

    if config.headless:
        _print_headless_results(result)


if __name__ == "__main__":
    main()
