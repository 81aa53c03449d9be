"""
JSCalendar vocabulary and fixed conversion constants.

All enumerations and generated-key conventions are defined here so they
are never duplicated across the package.
"""

#: Calendar object type tags (RFC 8984 ``@type``).
TYPE_EVENT = "Event"
TYPE_TASK = "Task"
TYPE_GROUP = "Group"
TYPE_PARTICIPANT_REPLY = "ParticipantReply"
OBJECT_TYPES = (TYPE_EVENT, TYPE_TASK, TYPE_GROUP, TYPE_PARTICIPANT_REPLY)

PARTICIPANT_KINDS = ("individual", "group", "resource", "location")
PARTICIPANT_ROLES = ("owner", "attendee", "optional", "informational", "chair")
PARTICIPATION_STATUSES = (
    "needs-action",
    "accepted",
    "declined",
    "tentative",
    "delegated",
)
LOCATION_TYPES = ("physical", "virtual")
VIRTUAL_LOCATION_FEATURES = (
    "audio",
    "chat",
    "feed",
    "moderator",
    "phone",
    "screen",
    "video",
)

#: Hosts whose URLs are treated as online meetings.
VIRTUAL_MEETING_PROVIDERS = (
    "zoom.us",
    "meet.google.com",
    "teams.microsoft.com",
    "webex.com",
    "gotomeeting.com",
    "bluejeans.com",
)

#: Providers that additionally support chat and screen sharing.
FULL_FEATURED_PROVIDERS = ("zoom.us", "meet.google.com", "teams.microsoft.com")

BASIC_MEETING_FEATURES = ("audio", "video")
EXTENDED_MEETING_FEATURES = ("chat", "screen")

VIRTUAL_MEETING_NAME = "Virtual Meeting"

#: Generated map keys.
PARTICIPANT_KEY = "participant-{}"
ORGANIZER_KEY = "organizer"
LOCATION_KEY = "location-1"
VIRTUAL_LOCATION_KEY = "virtual-1"
ATTACHMENT_KEY = "attachment-{}"

DEFAULT_PRODID = "-//icaljscal//icaljscal//EN"
