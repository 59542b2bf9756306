from datetime import date, datetime
from typing import Optional

COMPACT_FORMAT = "%Y%m%dT%H%M%S"
COMPACT_WIDTH = 15

def parse_day(text: str) -> date:
    return datetime.strptime(text, "%Y-%m-%d").date()

def day_prefix(day: date) -> str:
    """'20240315T' for 2024-03-15; matches DTSTART values on that day."""
    # strftime("%Y") does not zero-pad years below 1000 on glibc
    return f"{day.year:04d}{day.month:02d}{day.day:02d}T"

def parse_compact(text: Optional[str]) -> Optional[datetime]:
    # strptime accepts short fields ("T1800"), so insist on the fixed width
    if not text or len(text) != COMPACT_WIDTH:
        return None
    try:
        return datetime.strptime(text, COMPACT_FORMAT)
    except ValueError:
        return None

def format_timestamp(dt: datetime) -> str:
    return dt.isoformat(timespec="seconds")
