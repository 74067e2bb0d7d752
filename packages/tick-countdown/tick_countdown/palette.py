"""Color schemes and the danger/filling ring palette."""
from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]


@dataclass(frozen=True)
class ColorScheme:
    """Named color roles used by the countdown widgets."""

    surface: Color
    on_surface: Color
    primary_container: Color
    on_primary_container: Color
    secondary_container: Color
    on_secondary_container: Color
    error_container: Color
    on_error_container: Color


@dataclass(frozen=True)
class RingColors:
    """Track/fill colors for the inner sector ring and the outer arc ring."""

    bg_track: Color
    bg_fill: Color
    fg_track: Color
    fg_fill: Color


class UnknownTheme(KeyError):
    """Raised when a theme name has no registered color scheme."""


# Teal-seeded schemes, dark and light.
TEAL_DARK = ColorScheme(
    surface=(14, 21, 20),
    on_surface=(221, 228, 226),
    primary_container=(0, 80, 74),
    on_primary_container=(156, 242, 232),
    secondary_container=(51, 75, 72),
    on_secondary_container=(204, 232, 228),
    error_container=(147, 0, 10),
    on_error_container=(255, 218, 214),
)

TEAL_LIGHT = ColorScheme(
    surface=(244, 251, 249),
    on_surface=(22, 29, 28),
    primary_container=(156, 242, 232),
    on_primary_container=(0, 32, 29),
    secondary_container=(204, 232, 228),
    on_secondary_container=(5, 31, 29),
    error_container=(255, 218, 214),
    on_error_container=(65, 0, 2),
)

SCHEMES: dict[str, ColorScheme] = {
    "dark": TEAL_DARK,
    "light": TEAL_LIGHT,
}


def scheme_for(theme: str) -> ColorScheme:
    """Look up a color scheme by theme name."""
    try:
        return SCHEMES[theme]
    except KeyError:
        raise UnknownTheme(theme) from None


# (danger, filling) -> role names for (bg_track, bg_fill, fg_track, fg_fill).
# While filling, the container color grows over the surface; otherwise the
# surface color grows over the container.
_RING_ROLES: dict[tuple[bool, bool], tuple[str, str, str, str]] = {
    (True, True): (
        "surface", "error_container", "surface", "on_error_container",
    ),
    (True, False): (
        "error_container", "surface", "on_error_container", "surface",
    ),
    (False, True): (
        "surface", "secondary_container", "surface", "on_secondary_container",
    ),
    (False, False): (
        "secondary_container", "surface", "on_secondary_container", "surface",
    ),
}


def ring_colors(scheme: ColorScheme, danger: bool, filling: bool) -> RingColors:
    """Select ring colors for one of the four danger/filling combinations."""
    roles = _RING_ROLES[(bool(danger), bool(filling))]
    return RingColors(*(getattr(scheme, role) for role in roles))


def label_color(scheme: ColorScheme, danger: bool) -> Color:
    """Label color: secondary tone inside the danger zone, error tone outside."""
    return scheme.on_secondary_container if danger else scheme.on_error_container
