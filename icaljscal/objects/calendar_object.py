"""
JSCalendar calendar object (RFC 8984, RFC 9253).

The top-level record produced from, and converted back into, an iCalendar
VEVENT.  The dict form uses the JSCalendar attribute names (``uid``,
``title``, ``virtualLocations``, ``prodId`` ...) and is what ``to_json()``
writes.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from icaljscal.constants import OBJECT_TYPES, TYPE_EVENT
from icaljscal.lib.error import InvalidObjectError
from icaljscal.objects.link import Link
from icaljscal.objects.location import Location, VirtualLocation
from icaljscal.objects.participant import Participant

log = logging.getLogger("icaljscal")


@dataclass
class JSCalendarDateTime:
    """A start instant on the wire.

    Attributes:
        date_time: Internet date-time with explicit offset or ``Z``,
            e.g. ``"2024-01-15T09:00:00Z"``.
        time_zone: IANA name of the zone the instant should be shown in.
    """

    date_time: str
    time_zone: str | None = None

    @classmethod
    def from_jscal(cls, data, time_zone: str | None = None) -> JSCalendarDateTime | None:
        """Accepts ``{"dateTime": ..., "timeZone": ...}`` or a bare string.

        Returns ``None`` when there is no usable ``dateTime``.
        """
        if isinstance(data, str):
            data = {"dateTime": data}
        date_time = data.get("dateTime") if isinstance(data, dict) else None
        if not date_time or not isinstance(date_time, str):
            log.debug(f"Dropping start without dateTime: {data!r}")
            return None
        return cls(date_time=date_time, time_zone=data.get("timeZone", time_zone))

    def to_jscal(self) -> dict:
        d: dict = {"dateTime": self.date_time}
        if self.time_zone is not None:
            d["timeZone"] = self.time_zone
        return d


def _records_from_jscal(data: dict, key: str, record_cls) -> dict:
    """Parse one id → record map, dropping entries that aren't records."""
    entries = data.get(key) or {}
    if not isinstance(entries, dict):
        log.debug(f"Dropping {key}: expected a map, got {type(entries).__name__}")
        return {}
    records = {}
    for k, v in entries.items():
        if not isinstance(v, dict):
            log.debug(f"Dropping {key} entry {k!r}: {v!r}")
            continue
        try:
            records[k] = record_cls.from_jscal(v)
        except InvalidObjectError as e:
            log.debug(f"Dropping {key} entry {k!r}: {e.reason}")
    return records


@dataclass
class CalendarObject:
    """A JSCalendar object.

    Attributes:
        type: ``Event``, ``Task``, ``Group`` or ``ParticipantReply``.
        uid: Globally unique identifier.  Mirrors the iCalendar ``UID``.
        title: Short summary.  Maps to iCalendar ``SUMMARY``.
        description: Plain-text description.
        start: Start instant, or ``None``.
        duration: Duration string such as ``"PT1H30M"``, or ``None`` when
            the event has no end.
        time_zone: IANA name of the start's zone.
        participants: Map of generated id → :class:`Participant`.
        locations: Map of generated id → :class:`Location`.
        virtual_locations: Map of generated id → :class:`VirtualLocation`.
        categories: Map of category name → ``True``.
        keywords: Map of keyword → ``True``.
        links: Map of generated id → :class:`Link`.
        locale: Language tag of the object's text.
        prod_id: Identifier of the product that created the object.

    All maps keep insertion order; the converters rely on it.
    """

    uid: str
    type: str = TYPE_EVENT
    title: str | None = None
    description: str | None = None
    start: JSCalendarDateTime | None = None
    duration: str | None = None
    time_zone: str | None = None
    participants: dict = field(default_factory=dict)
    locations: dict = field(default_factory=dict)
    virtual_locations: dict = field(default_factory=dict)
    categories: dict = field(default_factory=dict)
    keywords: dict = field(default_factory=dict)
    links: dict = field(default_factory=dict)
    locale: str | None = None
    prod_id: str | None = None

    @classmethod
    def from_jscal(cls, data: dict) -> CalendarObject:
        """Construct a CalendarObject from a JSCalendar dict.

        The type tag may be given as ``type`` or ``@type`` and defaults to
        ``Event``.  Unknown keys are silently ignored.

        Raises:
            InvalidObjectError: If ``data`` is not a dict, ``uid`` is
                missing, or the type tag is unknown.
        """
        if not isinstance(data, dict):
            raise InvalidObjectError(
                reason=f"Expected a JSCalendar object, got {type(data).__name__}"
            )
        uid = data.get("uid")
        if not uid:
            raise InvalidObjectError(reason="JSCalendar object without uid")
        obj_type = data.get("type", data.get("@type", TYPE_EVENT))
        if obj_type not in OBJECT_TYPES:
            raise InvalidObjectError(uid=uid, reason=f"Unknown type {obj_type!r}")

        start = data.get("start")
        time_zone = data.get("timeZone")
        return cls(
            uid=uid,
            type=obj_type,
            title=data.get("title"),
            description=data.get("description"),
            start=JSCalendarDateTime.from_jscal(start, time_zone) if start else None,
            duration=data.get("duration"),
            time_zone=time_zone,
            participants=_records_from_jscal(data, "participants", Participant),
            locations=_records_from_jscal(data, "locations", Location),
            virtual_locations=_records_from_jscal(data, "virtualLocations", VirtualLocation),
            categories=dict(data.get("categories") or {}),
            keywords=dict(data.get("keywords") or {}),
            links=_records_from_jscal(data, "links", Link),
            locale=data.get("locale"),
            prod_id=data.get("prodId"),
        )

    def to_jscal(self) -> dict:
        """Serialise to a JSCalendar dict.

        ``type`` and ``uid`` are always included.  Optional fields are
        included only when set, and maps only when non-empty.
        """
        d: dict = {"type": self.type, "uid": self.uid}
        if self.title is not None:
            d["title"] = self.title
        if self.description is not None:
            d["description"] = self.description
        if self.start is not None:
            d["start"] = self.start.to_jscal()
        if self.duration is not None:
            d["duration"] = self.duration
        if self.time_zone is not None:
            d["timeZone"] = self.time_zone
        if self.participants:
            d["participants"] = {k: p.to_jscal() for k, p in self.participants.items()}
        if self.locations:
            d["locations"] = {k: loc.to_jscal() for k, loc in self.locations.items()}
        if self.virtual_locations:
            d["virtualLocations"] = {
                k: vloc.to_jscal() for k, vloc in self.virtual_locations.items()
            }
        if self.categories:
            d["categories"] = dict(self.categories)
        if self.keywords:
            d["keywords"] = dict(self.keywords)
        if self.links:
            d["links"] = {k: link.to_jscal() for k, link in self.links.items()}
        if self.locale is not None:
            d["locale"] = self.locale
        if self.prod_id is not None:
            d["prodId"] = self.prod_id
        return d

    @classmethod
    def from_json(cls, text: str | bytes) -> CalendarObject:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidObjectError(reason=f"Invalid JSON: {e}") from e
        return cls.from_jscal(data)

    def to_json(self, **kwargs) -> str:
        """Encode as JSON text.  Keyword arguments go to :func:`json.dumps`."""
        return json.dumps(self.to_jscal(), **kwargs)
