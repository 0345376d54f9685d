"""Pure calendar layout algorithms: bucketing, overlap columns, slot rounding."""

from .bucketing import bucket_events, next_upcoming_event, sort_day_events, split_all_day
from .config import APP_NAME, LOG_DIR, LOG_FILE_NAME
from .formatting import format_time_label, format_time_range
from .overlap import cluster_events, layout_overlaps, peak_concurrency
from .placement import fixed_window, hour_marks, now_line_offset, place_in_window, place_on_time_grid, rolling_window
from .rounding import SLOT_MINUTES, round_to_next_slot
from .timeline import (
    day_bounds,
    day_key,
    effective_end,
    effective_span,
    effective_start,
    local_midnight,
    localize,
    parse_instant,
    to_instant,
    to_local,
)
from .windows import events_in_range, month_grid, next_week_range, start_of_week, week_days

__all__ = [
    "APP_NAME",
    "LOG_DIR",
    "LOG_FILE_NAME",
    "SLOT_MINUTES",
    "bucket_events",
    "cluster_events",
    "day_bounds",
    "day_key",
    "effective_end",
    "effective_span",
    "effective_start",
    "events_in_range",
    "fixed_window",
    "format_time_label",
    "format_time_range",
    "hour_marks",
    "layout_overlaps",
    "local_midnight",
    "localize",
    "month_grid",
    "next_upcoming_event",
    "next_week_range",
    "now_line_offset",
    "parse_instant",
    "peak_concurrency",
    "place_in_window",
    "place_on_time_grid",
    "rolling_window",
    "round_to_next_slot",
    "sort_day_events",
    "split_all_day",
    "start_of_week",
    "to_instant",
    "to_local",
    "week_days",
]
