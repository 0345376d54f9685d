from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Dict, Iterable, List, Optional, Tuple

from ..domain import CalendarEvent, ColumnAssignment
from .timeline import effective_span

_Span = Tuple[CalendarEvent, datetime, datetime]


def _ordered_spans(day_events: Iterable[CalendarEvent], tz: Optional[tzinfo]) -> List[_Span]:
    spans = [(event, *effective_span(event, tz)) for event in day_events if not event.is_all_day]
    # Start ascending; among equal starts the longer event goes first.
    spans.sort(key=lambda item: item[2], reverse=True)
    spans.sort(key=lambda item: item[1])
    return spans


def _clusters(spans: List[_Span]) -> List[List[_Span]]:
    clusters: list[list[_Span]] = []
    cluster_end: Optional[datetime] = None
    for span in spans:
        _, start, end = span
        if cluster_end is not None and start < cluster_end:
            clusters[-1].append(span)
            cluster_end = max(cluster_end, end)
        else:
            clusters.append([span])
            cluster_end = end
    return clusters


def cluster_events(day_events: Iterable[CalendarEvent], tz: Optional[tzinfo] = None) -> List[List[CalendarEvent]]:
    """Group timed events into maximal runs of transitively overlapping events."""

    return [[event for event, _, _ in cluster] for cluster in _clusters(_ordered_spans(day_events, tz))]


def layout_overlaps(
    day_events: Iterable[CalendarEvent],
    tz: Optional[tzinfo] = None,
) -> Dict[str, ColumnAssignment]:
    """Assign side-by-side columns to the timed events of a single day.

    Within each cluster an event takes the leftmost column whose previous
    occupant has ended by the time it starts, opening a new column otherwise.
    Every event in a cluster shares the cluster's column count so widths stay
    uniform. All-day events are ignored.
    """

    result: Dict[str, ColumnAssignment] = {}
    for cluster in _clusters(_ordered_spans(day_events, tz)):
        column_ends: list[datetime] = []
        columns: list[tuple[str, int]] = []
        for event, start, end in cluster:
            for index, occupied_until in enumerate(column_ends):
                if occupied_until <= start:
                    column_ends[index] = end
                    break
            else:
                index = len(column_ends)
                column_ends.append(end)
            columns.append((event.id, index))

        total = len(column_ends)
        for event_id, column in columns:
            result[event_id] = ColumnAssignment(column=column, total_columns=total)
    return result


def peak_concurrency(day_events: Iterable[CalendarEvent], tz: Optional[tzinfo] = None) -> int:
    """Maximum number of timed events open at the same instant.

    Intervals are half-open, so an event ending exactly when another starts
    does not count as simultaneous. Zero or negative length events never
    count as open.
    """

    boundaries: list[tuple[datetime, int]] = []
    for _, start, end in _ordered_spans(day_events, tz):
        if end <= start:
            continue
        boundaries.append((start, 1))
        boundaries.append((end, -1))
    # Ends sort before starts at the same instant.
    boundaries.sort()

    peak = current = 0
    for _, delta in boundaries:
        current += delta
        peak = max(peak, current)
    return peak
