"""Timer configuration and command-line parsing."""
from __future__ import annotations

import argparse
from dataclasses import dataclass

from tick_countdown.palette import SCHEMES
from tick_countdown.render import SIZES
from tick_countdown.types import InvalidConfiguration

DURATION_CHOICES = (15, 30, 45, 60)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class TimerConfig:
    """Immutable startup configuration for the countdown app.

    Attributes:
        total_seconds: Countdown duration, one of DURATION_CHOICES.
        danger_zone_seconds: Remaining seconds below which the alert palette is used.
        size: Ring size token, a key of render.SIZES.
        theme: Color scheme name, a key of palette.SCHEMES.
        fps: Frame rate cap for the render loop.
        autostart: Start counting as soon as the window opens.
    """

    total_seconds: int = 15
    danger_zone_seconds: int = 10
    size: str = "medium"
    theme: str = "dark"
    fps: int = 60
    autostart: bool = True

    def validate(self) -> None:
        if self.total_seconds not in DURATION_CHOICES:
            raise InvalidConfiguration(
                f"total_seconds must be one of {DURATION_CHOICES}: {self.total_seconds}"
            )
        if not 0 <= self.danger_zone_seconds < self.total_seconds:
            raise InvalidConfiguration(
                "danger_zone_seconds must be in [0, total_seconds): "
                f"{self.danger_zone_seconds} vs {self.total_seconds}"
            )
        if self.size not in SIZES:
            raise InvalidConfiguration(f"Unknown size {self.size!r}")
        if self.theme not in SCHEMES:
            raise InvalidConfiguration(f"Unknown theme {self.theme!r}")
        if self.fps <= 0:
            raise InvalidConfiguration(f"fps must be positive: {self.fps}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="tick-countdown - visual countdown timer")
    p.add_argument("--seconds", type=int, default=15, choices=DURATION_CHOICES,
                   help="Countdown duration in seconds (default: 15)")
    p.add_argument("--danger", type=int, default=10,
                   help="Danger zone threshold in seconds (default: 10)")
    p.add_argument("--size", default="medium", choices=list(SIZES),
                   help="Ring size (default: medium)")
    p.add_argument("--theme", default="dark", choices=list(SCHEMES),
                   help="Color theme (default: dark)")
    p.add_argument("--fps", type=int, default=60, help="Frame rate cap (default: 60)")
    p.add_argument("--paused", action="store_true",
                   help="Open with the timer paused instead of running")
    p.add_argument("--log-level", default="INFO", choices=LOG_LEVELS,
                   help="Logging level (default: INFO)")
    return p


def parse_args(argv: list[str] | None = None) -> tuple[TimerConfig, str]:
    """Parse CLI arguments into a validated TimerConfig and a log level name."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = TimerConfig(
        total_seconds=args.seconds,
        danger_zone_seconds=args.danger,
        size=args.size,
        theme=args.theme,
        fps=args.fps,
        autostart=not args.paused,
    )
    try:
        config.validate()
    except InvalidConfiguration as exc:
        parser.error(str(exc))
    return config, args.log_level
