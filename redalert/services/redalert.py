"""
Red-alert time calculation.

The red alert defaults to 20:00 on the requested day. An event that starts on
that day in the closing window and runs past 20:00 (or into the next day)
pulls the alert forward to 15 minutes before its start.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from ..schemas import EventTimes
from ..utils.time import day_prefix, parse_compact

logger = logging.getLogger(__name__)

CLOSING_TIME = time(20, 0, 0)
ALERT_LEAD = timedelta(minutes=15)


def default_red_alert(day: date) -> datetime:
    return datetime.combine(day, CLOSING_TIME)


def is_relevant(event: EventTimes, day: date) -> bool:
    return bool(event.start) and event.start.startswith(day_prefix(day))


def _in_closing_window(start: datetime) -> bool:
    return 14 < start.hour < 20 or (start.hour == 20 and start.minute == 0)


def _overruns_closing(start: datetime, end: datetime) -> bool:
    return end.date() != start.date() or end.hour >= 20


def alert_candidate(event: EventTimes, day: date) -> Optional[datetime]:
    """
    Alert time implied by a single event, or None if the event has no effect.

    Irrelevant events and events with a missing or malformed DTSTART/DTEND
    never raise; they just yield None.
    """
    if not is_relevant(event, day):
        return None
    start = parse_compact(event.start)
    end = parse_compact(event.end)
    if start is None or end is None:
        logger.debug("Skipping event with unusable times: %r / %r", event.start, event.end)
        return None
    if _in_closing_window(start) and _overruns_closing(start, end):
        return start - ALERT_LEAD
    return None


def compute_red_alert(day: date, events: Iterable[EventTimes]) -> datetime:
    red_alert = default_red_alert(day)
    for event in events:
        candidate = alert_candidate(event, day)
        if candidate is not None and candidate < red_alert:
            red_alert = candidate
    return red_alert
