"""
JSCalendar ↔ iCalendar conversion.

Public API:
    event_to_jscal(event, prodid=None) -> CalendarObject
    jscal_to_event(obj, include_metadata=False) -> icalendar.Event
    calendar_to_jscal(cal) -> list[CalendarObject]
    ical_to_jscal(ical_str) -> list[dict]
    jscal_to_ical(objs, include_metadata=False) -> str
    add_jscal_metadata(event, obj) -> None

Field mappers:
    format_duration, parse_duration, is_virtual_meeting_url,
    infer_virtual_features, format_wire_datetime, parse_wire_datetime,
    resolve_time_zone
"""

from icaljscal.convert._utils import (
    format_duration,
    format_wire_datetime,
    infer_virtual_features,
    is_virtual_meeting_url,
    parse_duration,
    parse_wire_datetime,
    resolve_time_zone,
)
from icaljscal.convert.ical_to_jscal import (
    attendee_role_to_roles,
    calendar_to_jscal,
    event_to_jscal,
    ical_to_jscal,
    partstat_to_status,
)
from icaljscal.convert.jscal_to_ical import (
    jscal_to_event,
    jscal_to_ical,
    roles_to_attendee_role,
    status_to_partstat,
)
from icaljscal.convert.metadata import add_jscal_metadata

__all__ = [
    "add_jscal_metadata",
    "attendee_role_to_roles",
    "calendar_to_jscal",
    "event_to_jscal",
    "format_duration",
    "format_wire_datetime",
    "ical_to_jscal",
    "infer_virtual_features",
    "is_virtual_meeting_url",
    "jscal_to_event",
    "jscal_to_ical",
    "parse_duration",
    "parse_wire_datetime",
    "partstat_to_status",
    "resolve_time_zone",
    "roles_to_attendee_role",
    "status_to_partstat",
]
