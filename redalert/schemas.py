from pydantic import BaseModel
from typing import Optional

class EventTimes(BaseModel):
    # raw DTSTART / DTEND values, e.g. "20240315T180000"
    start: Optional[str] = None
    end: Optional[str] = None
