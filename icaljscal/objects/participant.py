"""
JSCalendar Participant object (RFC 8984 §4.4.6).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from icaljscal.constants import (
    PARTICIPANT_KINDS,
    PARTICIPANT_ROLES,
    PARTICIPATION_STATUSES,
)
from icaljscal.objects._flags import enum_from_jscal, flags_from_jscal, flags_to_jscal


@dataclass
class Participant:
    """An attendee or organizer of a calendar object.

    Attributes:
        name: Display name.  Maps to the iCalendar ``CN`` parameter.
        email: Plain email address, without any ``mailto:`` prefix.
        kind: ``individual``, ``group``, ``resource`` or ``location``.
        roles: Ordered list of roles (``owner``, ``attendee``,
            ``optional``, ``informational``, ``chair``).  The first role
            decides the iCalendar ``ROLE`` on the way back.
        participation_status: ``needs-action``, ``accepted``,
            ``declined``, ``tentative`` or ``delegated``.
        expect_reply: Whether a reply is expected.  Maps to ``RSVP``.
        language: Preferred language tag.
    """

    name: str | None = None
    email: str | None = None
    kind: str | None = None
    roles: list = field(default_factory=list)
    participation_status: str | None = None
    expect_reply: bool | None = None
    language: str | None = None

    def has_role(self, *roles: str) -> bool:
        return any(r in self.roles for r in roles)

    @classmethod
    def from_jscal(cls, data: dict) -> Participant:
        """Construct a Participant from a JSCalendar dict.

        Unknown keys and unknown enumeration values are silently ignored.
        """
        return cls(
            name=data.get("name"),
            email=data.get("email"),
            kind=enum_from_jscal(data.get("kind"), PARTICIPANT_KINDS, "participant kind"),
            roles=flags_from_jscal(data.get("roles"), PARTICIPANT_ROLES, "role"),
            participation_status=enum_from_jscal(
                data.get("participationStatus"),
                PARTICIPATION_STATUSES,
                "participation status",
            ),
            expect_reply=data.get("expectReply"),
            language=data.get("language"),
        )

    def to_jscal(self) -> dict:
        d: dict = {"@type": "Participant"}
        if self.name is not None:
            d["name"] = self.name
        if self.email is not None:
            d["email"] = self.email
        if self.kind is not None:
            d["kind"] = self.kind
        if self.roles:
            d["roles"] = flags_to_jscal(self.roles)
        if self.participation_status is not None:
            d["participationStatus"] = self.participation_status
        if self.expect_reply is not None:
            d["expectReply"] = self.expect_reply
        if self.language is not None:
            d["language"] = self.language
        return d
