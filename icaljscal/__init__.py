#!/usr/bin/env python
"""
iCalendar (RFC 5545) ↔ JSCalendar (RFC 8984) event mapping.

Basic usage::

    import icalendar
    from icaljscal import event_to_jscal, jscal_to_event

    obj = event_to_jscal(some_icalendar_event)
    print(obj.to_json())
    event = jscal_to_event(obj)
"""
import logging

__version__ = "1.0.0"

from .convert import calendar_to_jscal
from .convert import event_to_jscal
from .convert import ical_to_jscal
from .convert import jscal_to_event
from .convert import jscal_to_ical
from .objects import CalendarObject

# Silence notification of no default logging handler
log = logging.getLogger("icaljscal")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "CalendarObject",
    "calendar_to_jscal",
    "event_to_jscal",
    "ical_to_jscal",
    "jscal_to_event",
    "jscal_to_ical",
]
