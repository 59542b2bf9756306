import logging
from typing import Callable, List, Optional

import httpx
from ics.grammar.parse import Container, string_to_container

from ..config import settings
from ..errors import FeedError
from ..schemas import EventTimes

logger = logging.getLogger(__name__)

def fetch_feed(url: str, client: Optional[httpx.Client] = None, timeout: float | None = None) -> str:
    """Single GET of the iCal export; no retries."""
    timeout = settings.timeout if timeout is None else timeout
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as c:
                r = c.get(url)
        else:
            r = client.get(url)
        r.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FeedError(f"Could not fetch calendar from {url}: {e}") from e
    return r.text

def _event_times(vevent: Container) -> EventTimes:
    start = end = None
    for line in vevent:
        if isinstance(line, Container):
            # VALARM and friends
            continue
        name = line.name.upper()
        if name == "DTSTART" and line.value:
            start = line.value
        elif name == "DTEND" and line.value:
            end = line.value
    return EventTimes(start=start, end=end)

def parse_feed(text: str) -> List[EventTimes]:
    """
    Lex the feed and return the DTSTART/DTEND texts of every VEVENT in the
    last VCALENDAR of the document.
    """
    try:
        containers = list(string_to_container(text))
    except Exception as e:
        # the ics grammar surfaces both its own ParseError and tatsu failures
        raise FeedError(f"Parse error: {e}") from e

    calendars = [c for c in containers if c.name.upper() == "VCALENDAR"]
    if not calendars:
        raise FeedError("No calendar found!")

    cal = calendars[-1]
    return [
        _event_times(item)
        for item in cal
        if isinstance(item, Container) and item.name.upper() == "VEVENT"
    ]

def load_events(
    url: str,
    fetch: Callable[[str], str] = fetch_feed,
    parse: Callable[[str], List[EventTimes]] = parse_feed,
) -> List[EventTimes]:
    """Fetch and parse the feed. Failures are logged and yield no events."""
    logger.info("Fetching calendar…")
    try:
        events = parse(fetch(url))
    except FeedError as e:
        logger.error("%s", e)
        return []
    logger.info("Found %d events", len(events))
    return events
