from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

import orjson

from .api import api_state, call_api
from .bootstrap import configure_logging
from .core import format_time_label, format_time_range, parse_instant, to_local
from .domain import CalendarEvent

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kiosk calendar layout command line interface.")
    parser.add_argument("--log-level", default=None, help="Override KIOSK_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("tools", help="List registered layout functions.")

    call_parser = subparsers.add_parser("call", help="Invoke a registered function with JSON arguments.")
    call_parser.add_argument("name")
    call_parser.add_argument("--args", default="{}", help="JSON object of keyword arguments.")

    week_parser = subparsers.add_parser("week", help="Print the week agenda for an events JSON file.")
    week_parser.add_argument("events", type=Path, help="JSON file holding a list of event records.")
    week_parser.add_argument("--anchor", default=None, help="Day inside the week, YYYY-MM-DD (default: today).")

    slot_parser = subparsers.add_parser("slot", help="Print the default start and end for a new event.")
    slot_parser.add_argument("--now", default=None, help="ISO timestamp to round (default: current time).")
    slot_parser.add_argument("--duration", type=int, default=None, help="Event length in minutes.")

    return parser


def _dump(payload: object) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode() + "\n")


def _load_events(path: Path) -> List[CalendarEvent]:
    records = orjson.loads(path.read_bytes())
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON list of events")
    return [CalendarEvent.from_record(record) for record in records]


def _print_week(events: List[CalendarEvent], anchor: date) -> None:
    service = api_state.layout
    time_format = service.context.settings.calendar.time_format
    tz = service.context.timezone
    week = service.layout_week(events, anchor)
    for day_layout in week.days:
        print(day_layout.day.strftime("%A %d %B"))
        if not day_layout.events:
            print("  (no events)")
        for event in day_layout.all_day:
            print(f"  all day  {event.title}")
        for event in day_layout.timed:
            label = format_time_range(to_local(event.start_time, tz), to_local(event.end_time, tz), time_format)
            column = day_layout.columns[event.id]
            marker = " *" if event.id == week.next_event_id else ""
            print(f"  {label}  {event.title}  [{column.column + 1}/{column.total_columns}]{marker}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logger.debug("Kiosk calendar CLI starting: %s", args.command)

    try:
        if args.command == "tools":
            _dump(call_api("list_available_tools"))
        elif args.command == "call":
            arguments = orjson.loads(args.args)
            if not isinstance(arguments, dict):
                raise ValueError("--args must be a JSON object")
            _dump(call_api(args.name, **arguments))
        elif args.command == "week":
            anchor = date.fromisoformat(args.anchor) if args.anchor else api_state.layout.now().date()
            _print_week(_load_events(args.events), anchor)
        elif args.command == "slot":
            tz = api_state.context.timezone
            now = parse_instant(args.now, tz).astimezone(tz) if args.now else None
            slot = api_state.layout.default_event_times(now, args.duration)
            time_format = api_state.context.settings.calendar.time_format
            print(f"{slot.start_time.date().isoformat()} {format_time_label(slot.start_time, time_format)}"
                  f" - {format_time_label(slot.end_time, time_format)}")
        else:  # pragma: no cover - argparse enforces choices
            parser.print_help()
    except (KeyError, ValueError, OSError) as exc:
        logger.error("Command %s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
