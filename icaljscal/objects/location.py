"""
JSCalendar Location and VirtualLocation objects (RFC 8984 §4.2.5, §4.2.6).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from icaljscal.constants import LOCATION_TYPES, VIRTUAL_LOCATION_FEATURES
from icaljscal.objects._flags import flags_from_jscal, flags_to_jscal


@dataclass
class Location:
    """A physical place.

    Attributes:
        name: Human readable name.  Maps to iCalendar ``LOCATION``.
        description: Longer free-text description.
        location_types: ``physical`` and/or ``virtual``.
        coordinates: ``geo:`` URI.
        time_zone: IANA time zone name of the place.
    """

    name: str | None = None
    description: str | None = None
    location_types: list = field(default_factory=list)
    coordinates: str | None = None
    time_zone: str | None = None

    @classmethod
    def from_jscal(cls, data: dict) -> Location:
        return cls(
            name=data.get("name"),
            description=data.get("description"),
            location_types=flags_from_jscal(
                data.get("locationTypes"), LOCATION_TYPES, "location type"
            ),
            coordinates=data.get("coordinates"),
            time_zone=data.get("timeZone"),
        )

    def to_jscal(self) -> dict:
        d: dict = {"@type": "Location"}
        if self.name is not None:
            d["name"] = self.name
        if self.description is not None:
            d["description"] = self.description
        if self.location_types:
            d["locationTypes"] = flags_to_jscal(self.location_types)
        if self.coordinates is not None:
            d["coordinates"] = self.coordinates
        if self.time_zone is not None:
            d["timeZone"] = self.time_zone
        return d


@dataclass
class VirtualLocation:
    """An online meeting endpoint (video conference link etc.)."""

    name: str | None = None
    description: str | None = None
    uri: str | None = None
    features: list = field(default_factory=list)

    @classmethod
    def from_jscal(cls, data: dict) -> VirtualLocation:
        return cls(
            name=data.get("name"),
            description=data.get("description"),
            uri=data.get("uri"),
            features=flags_from_jscal(
                data.get("features"), VIRTUAL_LOCATION_FEATURES, "feature"
            ),
        )

    def to_jscal(self) -> dict:
        d: dict = {"@type": "VirtualLocation"}
        if self.name is not None:
            d["name"] = self.name
        if self.description is not None:
            d["description"] = self.description
        if self.uri is not None:
            d["uri"] = self.uri
        if self.features:
            d["features"] = flags_to_jscal(self.features)
        return d
