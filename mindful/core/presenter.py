# mindful/core/presenter.py
from __future__ import annotations

import math
from dataclasses import dataclass

RING_RADIUS = 140
RING_CIRCUMFERENCE = 2 * math.pi * RING_RADIUS


@dataclass(frozen=True)
class TimerView:
    time_text: str
    fraction: float        # 0..1 elapsed
    ring_offset: float     # unfilled arc length
    status: str
    active: bool
    sound_enabled: bool
    sessions_completed: int
    minutes: int


def format_time(seconds: int) -> str:
    mins, secs = divmod(max(0, int(seconds)), 60)
    return f"{mins}:{secs:02d}"


def progress_fraction(elapsed: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return max(0.0, min(1.0, float(elapsed) / float(total)))


def ring_offset(fraction: float, circumference: float = RING_CIRCUMFERENCE) -> float:
    f = max(0.0, min(1.0, float(fraction)))
    return circumference * (1.0 - f)


def duration_label(minutes: int) -> str:
    if minutes >= 60:
        hours = minutes / 60
        return f"{hours:g}h"
    return f"{minutes}m"


def status_text(active: bool) -> str:
    return "Breathe..." if active else "Ready to begin"


def present(controller) -> TimerView:
    """Snapshot everything the screen renders from a CountdownController."""
    fraction = progress_fraction(controller.elapsed, controller.total_seconds)
    return TimerView(
        time_text=format_time(controller.remaining),
        fraction=fraction,
        ring_offset=ring_offset(fraction),
        status=status_text(controller.active),
        active=controller.active,
        sound_enabled=controller.sound_enabled,
        sessions_completed=controller.sessions_completed,
        minutes=controller.minutes,
    )
