"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest

from redalert.schemas import EventTimes


@pytest.fixture
def day():
    """Target day used throughout the tests."""
    return date(2024, 3, 15)


@pytest.fixture
def make_event():
    """Build an EventTimes from raw DTSTART/DTEND texts."""
    def _make(start=None, end=None):
        return EventTimes(start=start, end=end)
    return _make


@pytest.fixture
def sample_feed():
    """Small iCal export with one qualifying event and a few distractors."""
    return "\r\n".join(
        [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "PRODID:-//metalab//calendar//EN",
            "BEGIN:VEVENT",
            "UID:late-workshop@metalab.at",
            "SUMMARY:Soldering workshop",
            "DTSTART;TZID=Europe/Vienna:20240315T180000",
            "DTEND;TZID=Europe/Vienna:20240315T220000",
            "END:VEVENT",
            "BEGIN:VEVENT",
            "UID:lunch@metalab.at",
            "SUMMARY:Lunch talk",
            "DTSTART:20240315T120000",
            "DTEND:20240315T130000",
            "END:VEVENT",
            "BEGIN:VEVENT",
            "UID:next-day@metalab.at",
            "SUMMARY:Tomorrow",
            "DTSTART:20240316T150000",
            "DTEND:20240316T230000",
            "BEGIN:VALARM",
            "ACTION:DISPLAY",
            "TRIGGER:-PT15M",
            "END:VALARM",
            "END:VEVENT",
            "END:VCALENDAR",
            "",
        ]
    )
