"""Dirty-timer math: when to warn, what to say, and in which color."""

from __future__ import annotations

import math
from dataclasses import dataclass

from savereminder.config import ReminderSettings
from savereminder.core.color import RGBA, lerp

WARNING_TEMPLATE = "⚠ You haven't saved in {elapsed}! ⚠"


@dataclass(slots=True)
class TimerState:
    anchor: float | None = None

    @property
    def counting(self) -> bool:
        return self.anchor is not None


@dataclass(frozen=True, slots=True)
class TickResult:
    anchor: float | None
    display: bool
    elapsed: float = 0.0


@dataclass(frozen=True, slots=True)
class Banner:
    message: str
    color: RGBA
    font_size: int
    elapsed: float


def evaluate(
    now: float,
    anchor: float | None,
    dirty: bool,
    settings: ReminderSettings,
    simulating: bool = False,
) -> TickResult:
    """Advance the dirty timer by one tick.

    The tick that starts counting never displays, so a zero threshold does
    not flash a warning the instant a document is touched.
    """

    if not settings.enabled:
        return TickResult(anchor=None, display=False)
    if simulating:
        return TickResult(anchor=anchor, display=False)
    if not dirty:
        return TickResult(anchor=None, display=False)
    if anchor is None:
        return TickResult(anchor=now, display=False)

    elapsed = max(0.0, now - anchor)
    return TickResult(
        anchor=anchor,
        display=elapsed >= settings.warning_time_seconds,
        elapsed=elapsed,
    )


def format_elapsed(seconds: float) -> str:
    days = int(seconds // 86400)
    seconds %= 86400
    hours = int(seconds // 3600)
    seconds %= 3600
    minutes = int(seconds // 60)
    secs = int(seconds % 60)

    if days > 0:
        return f"{days}d {hours}h {minutes}m {secs}s"
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def warning_message(elapsed: float) -> str:
    return WARNING_TEMPLATE.format(elapsed=format_elapsed(elapsed))


def flashing_color(elapsed: float, settings: ReminderSettings) -> RGBA:
    color = settings.color()
    if not settings.flash or settings.flash_speed <= 0.0:
        return color

    t = abs(math.sin(elapsed * settings.flash_speed))
    return lerp(color.with_alpha(0.0), color, t)


def render(result: TickResult, settings: ReminderSettings) -> Banner | None:
    if not result.display:
        return None
    return Banner(
        message=warning_message(result.elapsed),
        color=flashing_color(result.elapsed, settings),
        font_size=settings.font_size,
        elapsed=result.elapsed,
    )
