"""
JSCalendar → iCalendar conversion (RFC 8984 → RFC 5545).

Public API:
    jscal_to_event(obj, include_metadata=False) -> icalendar.Event
    jscal_to_ical(objs, include_metadata=False) -> str

Accepts CalendarObject dataclasses or raw JSCalendar dicts (as produced by
``CalendarObject.to_jscal()`` or ``ical_to_jscal``).
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import icalendar
from icalendar import vCalAddress, vText

from icaljscal.constants import DEFAULT_PRODID
from icaljscal.convert._utils import (
    parse_duration,
    parse_wire_datetime,
    resolve_time_zone,
)
from icaljscal.convert.metadata import add_jscal_metadata
from icaljscal.lib.python_utilities import to_normal_str
from icaljscal.objects import CalendarObject, Participant

log = logging.getLogger("icaljscal")

_ROLE_MAP = {
    "chair": "CHAIR",
    "attendee": "REQ-PARTICIPANT",
    "optional": "OPT-PARTICIPANT",
    "informational": "NON-PARTICIPANT",
}

_PARTSTAT_MAP = {
    "needs-action": "NEEDS-ACTION",
    "accepted": "ACCEPTED",
    "declined": "DECLINED",
    "tentative": "TENTATIVE",
    "delegated": "DELEGATED",
}


def roles_to_attendee_role(roles: list[str] | None) -> str:
    """Map the *first* JSCalendar role to an iCalendar ``ROLE``."""
    first = roles[0] if roles else None
    return _ROLE_MAP.get(first, "REQ-PARTICIPANT")


def status_to_partstat(status: str | None) -> str:
    return _PARTSTAT_MAP.get(status, "NEEDS-ACTION")


def _as_calendar_object(obj: CalendarObject | dict) -> CalendarObject:
    if isinstance(obj, CalendarObject):
        return obj
    return CalendarObject.from_jscal(obj)


def _pick_organizer(participants: dict) -> str | None:
    """Return the id of the participant that becomes the ORGANIZER.

    The first owner (in map order) wins; failing that, the first chair.
    """
    for role in ("owner", "chair"):
        for pid, p in participants.items():
            if role in p.roles:
                return pid
    return None


def _calendar_address(email: str | None, name: str | None) -> vCalAddress:
    addr = vCalAddress(f"mailto:{email}" if email else "")
    if name:
        addr.params["CN"] = vText(name)
    return addr


def _participant_to_organizer(p: Participant) -> vCalAddress:
    addr = _calendar_address(p.email or "", p.name)
    addr.params["ROLE"] = "CHAIR"
    return addr


def _participant_to_attendee(p: Participant) -> vCalAddress:
    addr = _calendar_address(p.email, p.name)
    addr.params["ROLE"] = roles_to_attendee_role(p.roles)
    addr.params["PARTSTAT"] = status_to_partstat(p.participation_status)
    addr.params["RSVP"] = "TRUE" if p.expect_reply else "FALSE"
    return addr


def _start_to_datetime(obj: CalendarObject) -> datetime | None:
    if obj.start is None:
        return None
    dt = parse_wire_datetime(obj.start.date_time)
    if dt is None:
        log.debug(
            f"Unparseable start {obj.start.date_time!r} in {obj.uid!r}, dropping DTSTART"
        )
        return None
    return dt.astimezone(resolve_time_zone(obj.start.time_zone or obj.time_zone))


def jscal_to_event(
    obj: CalendarObject | dict, include_metadata: bool = False
) -> icalendar.Event:
    """Convert a JSCalendar object to an iCalendar VEVENT.

    Malformed values never make this fail: an unparseable start simply
    gives no DTSTART (and hence no DTEND), a bad duration is scanned
    leniently, and an unknown time zone falls back to the local one.

    Args:
        obj: A :class:`CalendarObject` or a raw JSCalendar dict.
        include_metadata: Also store the JSCalendar-only details (type,
            locale, virtual location features, participant kinds and
            roles) as ``X-`` properties, see :func:`add_jscal_metadata`.

    Returns:
        An ``icalendar.Event``.

    Raises:
        InvalidObjectError: Only if a dict is passed that isn't a
            JSCalendar object at all.
    """
    obj = _as_calendar_object(obj)
    event = icalendar.Event()

    if obj.uid:
        event.add("uid", obj.uid)
    if obj.title is not None:
        event.add("summary", obj.title)
    if obj.description is not None:
        event.add("description", obj.description)

    start = _start_to_datetime(obj)
    if start is not None:
        event.add("dtstart", start)
        if obj.duration:
            elapsed = timedelta(seconds=parse_duration(obj.duration))
            end = (start.astimezone(timezone.utc) + elapsed).astimezone(start.tzinfo)
            event.add("dtend", end)

    organizer_id = _pick_organizer(obj.participants)
    for pid, p in obj.participants.items():
        if pid == organizer_id:
            event.add("organizer", _participant_to_organizer(p))
        elif p.has_role("owner", "chair"):
            log.debug(f"Dropping participant {pid!r}, {organizer_id!r} is the organizer")
        elif p.email:
            event.add("attendee", _participant_to_attendee(p))

    for location in obj.locations.values():
        if location.name:
            event.add("location", location.name)
        break

    for virtual_location in obj.virtual_locations.values():
        if virtual_location.uri:
            event.add("url", virtual_location.uri)
            break

    if obj.categories:
        event.add("categories", list(obj.categories))

    for link in obj.links.values():
        parameters = {"FMTTYPE": link.content_type} if link.content_type else None
        event.add("attach", link.href, parameters=parameters)

    if include_metadata:
        add_jscal_metadata(event, obj)

    return event


def jscal_to_ical(
    objs: CalendarObject | dict | list, include_metadata: bool = False
) -> str:
    """Convert one or more JSCalendar objects to a VCALENDAR string.

    Args:
        objs: A :class:`CalendarObject`, a JSCalendar dict, or a list of
            those.
        include_metadata: Passed on to :func:`jscal_to_event`.

    Returns:
        An iCalendar VCALENDAR string.  PRODID is taken from the first
        object's ``prodId`` when set.
    """
    if not isinstance(objs, list):
        objs = [objs]
    objs = [_as_calendar_object(o) for o in objs]

    cal = icalendar.Calendar()
    prodid = objs[0].prod_id if objs and objs[0].prod_id else DEFAULT_PRODID
    cal.add("prodid", prodid)
    cal.add("version", "2.0")

    for obj in objs:
        event = jscal_to_event(obj, include_metadata=include_metadata)
        ## DTSTAMP is mandatory according to RFC 5545
        if "DTSTAMP" not in event:
            event.add("dtstamp", datetime.now(tz=timezone.utc))
        cal.add_component(event)

    return to_normal_str(cal.to_ical())
