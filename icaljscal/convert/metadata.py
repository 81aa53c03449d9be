"""
Storage of JSCalendar-only details as iCalendar ``X-`` properties.

The plain conversion loses the object type, locale, virtual location
features and participant kinds and roles.  :func:`add_jscal_metadata`
writes them onto a VEVENT as opaque text properties:

    X-JSCALENDAR-TYPE
    X-JSCALENDAR-LOCALE
    X-VIRTUAL-LOCATION-<ID>-FEATURES
    X-PARTICIPANT-<ID>-KIND
    X-PARTICIPANT-<ID>-ROLES

``<ID>`` is the map key, upper-cased.  Lists are comma separated.
"""

from __future__ import annotations

import icalendar


def _set_property(event: icalendar.Event, name: str, value: str) -> None:
    if name in event:
        del event[name]
    event.add(name, value)


def add_jscal_metadata(event: icalendar.Event, obj) -> None:
    """Store JSCalendar metadata of ``obj`` on ``event``, replacing earlier values."""
    _set_property(event, "X-JSCALENDAR-TYPE", obj.type)

    if obj.locale is not None:
        _set_property(event, "X-JSCALENDAR-LOCALE", obj.locale)

    for vid, virtual_location in obj.virtual_locations.items():
        _set_property(
            event,
            f"X-VIRTUAL-LOCATION-{vid.upper()}-FEATURES",
            ",".join(virtual_location.features),
        )

    for pid, participant in obj.participants.items():
        if participant.kind is not None:
            _set_property(event, f"X-PARTICIPANT-{pid.upper()}-KIND", participant.kind)
        if participant.roles:
            _set_property(
                event, f"X-PARTICIPANT-{pid.upper()}-ROLES", ",".join(participant.roles)
            )
