"""
iCalendar → JSCalendar conversion (RFC 5545 → RFC 8984).

Public API:
    event_to_jscal(event, prodid=None) -> CalendarObject
    calendar_to_jscal(cal) -> list[CalendarObject]
    ical_to_jscal(ical_str) -> list[dict]

Participants, locations and links are keyed by generated ids
(``participant-0``, ``organizer``, ``location-1``, ``virtual-1``,
``attachment-0`` ...), inserted in a stable order.
"""

from __future__ import annotations

from datetime import timedelta, timezone

import icalendar

from icaljscal.constants import (
    ATTACHMENT_KEY,
    LOCATION_KEY,
    ORGANIZER_KEY,
    PARTICIPANT_KEY,
    TYPE_EVENT,
    VIRTUAL_LOCATION_KEY,
    VIRTUAL_MEETING_NAME,
)
from icaljscal.convert._utils import (
    as_aware_datetime,
    format_duration,
    format_wire_datetime,
    infer_virtual_features,
    is_virtual_meeting_url,
    time_zone_identifier,
)
from icaljscal.lib import vcal
from icaljscal.objects import (
    CalendarObject,
    JSCalendarDateTime,
    Link,
    Location,
    Participant,
    VirtualLocation,
)

_ROLE_MAP = {
    "CHAIR": ["chair"],
    "REQ-PARTICIPANT": ["attendee"],
    "OPT-PARTICIPANT": ["optional"],
    "NON-PARTICIPANT": ["informational"],
}

_PARTSTAT_MAP = {
    "NEEDS-ACTION": "needs-action",
    "ACCEPTED": "accepted",
    "DECLINED": "declined",
    "TENTATIVE": "tentative",
    "DELEGATED": "delegated",
}


def attendee_role_to_roles(role: str | None) -> list[str]:
    """Map an iCalendar ``ROLE`` to JSCalendar roles; ``attendee`` by default."""
    return list(_ROLE_MAP.get(str(role).upper() if role else "", ["attendee"]))


def partstat_to_status(partstat: str | None) -> str | None:
    """Map an iCalendar ``PARTSTAT``; unknown or missing values give ``None``."""
    if not partstat:
        return None
    return _PARTSTAT_MAP.get(str(partstat).upper())


def _as_list(value) -> list:
    """Properties that may repeat come back as a single value or a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _email(address) -> str:
    addr = str(address)
    if addr[:7].lower() == "mailto:":
        return addr[7:]
    return addr


def _cn(address) -> str | None:
    params = getattr(address, "params", {})
    cn = params.get("CN")
    return str(cn) if cn else None


def _attendee_to_participant(attendee) -> Participant:
    params = getattr(attendee, "params", {})
    rsvp = params.get("RSVP")
    expect_reply = None
    if rsvp is not None:
        expect_reply = str(rsvp).upper() == "TRUE"
    return Participant(
        name=_cn(attendee),
        email=_email(attendee),
        kind="individual",
        roles=attendee_role_to_roles(params.get("ROLE")),
        participation_status=partstat_to_status(params.get("PARTSTAT")),
        expect_reply=expect_reply,
    )


def _organizer_to_participant(organizer) -> Participant:
    return Participant(
        name=_cn(organizer),
        email=_email(organizer),
        kind="individual",
        roles=["owner", "chair"],
        participation_status="accepted",
        expect_reply=False,
    )


def _categories(categories_prop) -> list[str]:
    """Flatten a CATEGORIES property.

    icalendar returns one of three types depending on how CATEGORIES appears:
    - vCategory (single CATEGORIES line, possibly multi-value): access .cats
    - list of vCategory (multiple CATEGORIES lines): flatten .cats from each
    - vText (rare, single bare string value): str() and comma-split
    """
    values: list[str] = []
    for item in _as_list(categories_prop):
        if hasattr(item, "cats"):
            values.extend(str(c) for c in item.cats)
        else:
            values.extend(v.strip() for v in str(item).split(",") if v.strip())
    return values


def _event_duration(event: icalendar.Event) -> timedelta | None:
    """Seconds between DTSTART and DTEND (or DTSTART + DURATION)."""
    dtstart = event.get("DTSTART")
    if dtstart is None:
        return None
    dtend = event.get("DTEND")
    if dtend is not None:
        # elapsed time, so a DST switch in between counts
        end = as_aware_datetime(dtend.dt).astimezone(timezone.utc)
        return end - as_aware_datetime(dtstart.dt).astimezone(timezone.utc)
    duration = event.get("DURATION")
    if duration is not None and isinstance(duration.dt, timedelta):
        return duration.dt
    return None


def event_to_jscal(event: icalendar.Event, prodid: str | None = None) -> CalendarObject:
    """Convert an iCalendar VEVENT to a JSCalendar object.

    Args:
        event: The VEVENT component.
        prodid: Fallback product identifier, used when the event itself
            carries no ``PRODID`` property (normally it lives on the
            enclosing VCALENDAR).

    Returns:
        A :class:`CalendarObject` of type ``Event``.  This never raises for
        missing or odd property values; they are left out instead.
    """
    participants: dict = {}
    for index, attendee in enumerate(_as_list(event.get("ATTENDEE"))):
        participants[PARTICIPANT_KEY.format(index)] = _attendee_to_participant(attendee)

    organizer = event.get("ORGANIZER")
    if organizer is not None:
        participants[ORGANIZER_KEY] = _organizer_to_participant(organizer)

    locations: dict = {}
    location = event.get("LOCATION")
    if location:
        locations[LOCATION_KEY] = Location(name=str(location), location_types=["physical"])

    virtual_locations: dict = {}
    url = event.get("URL")
    if url and is_virtual_meeting_url(str(url)):
        virtual_locations[VIRTUAL_LOCATION_KEY] = VirtualLocation(
            name=VIRTUAL_MEETING_NAME,
            uri=str(url),
            features=infer_virtual_features(str(url)),
        )

    start = None
    time_zone = None
    dtstart = event.get("DTSTART")
    if dtstart is not None:
        time_zone = time_zone_identifier(dtstart)
        start = JSCalendarDateTime(
            date_time=format_wire_datetime(dtstart.dt), time_zone=time_zone
        )

    delta = _event_duration(event)
    duration = format_duration(delta) if delta is not None else None

    categories = {c: True for c in _categories(event.get("CATEGORIES"))}

    links = {
        ATTACHMENT_KEY.format(index): Link(href=str(attach))
        for index, attach in enumerate(_as_list(event.get("ATTACH")))
    }

    summary = event.get("SUMMARY")
    description = event.get("DESCRIPTION")
    event_prodid = event.get("PRODID")

    return CalendarObject(
        type=TYPE_EVENT,
        uid=str(event.get("UID", "")),
        title=str(summary) if summary is not None else None,
        description=str(description) if description is not None else None,
        start=start,
        duration=duration,
        time_zone=time_zone,
        participants=participants,
        locations=locations,
        virtual_locations=virtual_locations,
        categories=categories,
        links=links,
        prod_id=str(event_prodid) if event_prodid is not None else prodid,
    )


def calendar_to_jscal(cal: icalendar.Calendar) -> list[CalendarObject]:
    """Convert every VEVENT of a VCALENDAR, in document order.

    The calendar's ``PRODID`` is passed on to events that lack their own.
    """
    prodid = cal.get("PRODID")
    prodid = str(prodid) if prodid is not None else None
    return [
        event_to_jscal(component, prodid=prodid)
        for component in cal.subcomponents
        if isinstance(component, icalendar.Event)
    ]


def ical_to_jscal(ical_str: str | bytes) -> list[dict]:
    """Convert iCalendar text to a list of JSCalendar dicts.

    Args:
        ical_str: A VCALENDAR string, or a bare VEVENT (vcal.fix wraps it).

    Returns:
        One JSCalendar dict per VEVENT, ready for :func:`json.dumps`.

    Raises:
        InvalidObjectError: If the text cannot be parsed as iCalendar.
    """
    cal = vcal.parse_calendar(ical_str)
    return [obj.to_jscal() for obj in calendar_to_jscal(cal)]
