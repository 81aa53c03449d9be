"""
JSCalendar record types.

Each record is a dataclass with ``from_jscal()`` / ``to_jscal()`` for the
JSON-shaped dict form.
"""

from icaljscal.objects.calendar_object import CalendarObject
from icaljscal.objects.calendar_object import JSCalendarDateTime
from icaljscal.objects.link import Link
from icaljscal.objects.location import Location
from icaljscal.objects.location import VirtualLocation
from icaljscal.objects.participant import Participant

__all__ = [
    "CalendarObject",
    "JSCalendarDateTime",
    "Link",
    "Location",
    "Participant",
    "VirtualLocation",
]
