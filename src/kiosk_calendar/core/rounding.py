from __future__ import annotations

from datetime import datetime, timedelta

from ..domain import TimeSlot

SLOT_MINUTES = 30


def round_to_next_slot(now: datetime, duration_minutes: int = 60) -> TimeSlot:
    """Snap ``now`` up to the next half hour and return a slot of ``duration_minutes``.

    ``10:00`` stays put, ``10:05`` becomes ``10:30`` and ``10:31`` rolls over
    to ``11:00``. The rollover uses ``timedelta`` arithmetic so it carries
    into the next day, month or year.
    """

    hour_start = now.replace(minute=0, second=0, microsecond=0)
    if now.minute == 0:
        start = hour_start
    elif now.minute <= SLOT_MINUTES:
        start = hour_start.replace(minute=SLOT_MINUTES)
    else:
        start = hour_start + timedelta(hours=1)
    return TimeSlot(start_time=start, end_time=start + timedelta(minutes=duration_minutes))
