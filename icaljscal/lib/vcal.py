#!/usr/bin/env python
import difflib
import logging
import re

import icalendar

from icaljscal.lib.error import InvalidObjectError
from icaljscal.lib.python_utilities import to_normal_str

## Global counter.  We don't want to be too verbose on the users
fixup_error_loggings = 0


def fix(ical):
    """This function receives some ical text as it comes from an
    arbitrary producer, checks for breakages with the standard, and
    attempts to fix up known issues before it's handed to the icalendar
    library:

    1) Line endings are normalized and trailing white space on each
    line is removed.  X-APPLE-STRUCTURED-EVENT is known to come with
    trailing white space.

    2) A bare VEVENT (or VTODO) without the VCALENDAR wrapper is
    wrapped, so the result can always be parsed as a calendar.

    3) iCloud apparently duplicates the DTSTAMP property sometimes -
    keep the first DTSTAMP encountered.

    4) Some producers create events with both DTEND and DURATION set,
    which is forbidden according to the RFC.  We'll just drop
    DURATION or DTEND (whatever comes last).
    """
    ical = to_normal_str(ical)
    if not ical.endswith("\n"):
        ical = ical + "\n"

    ## 1) trailing whitespace probably never makes sense
    fixed = re.sub(" +$", "", ical, flags=re.MULTILINE)

    ## 2) wrap bare components
    if not fixed.strip().startswith("BEGIN:VCALENDAR"):
        fixed = "BEGIN:VCALENDAR\nVERSION:2.0\n" + fixed.strip() + "\nEND:VCALENDAR\n"

    ## 3 and 4
    fixed2 = (
        "\n".join(filter(LineFilterDiscardingDuplicates(), fixed.strip().split("\n")))
        + "\n"
    )

    if fixed2 != ical:
        ## Rate-limit the logging: only counts that are powers of two
        ## (1, 2, 4, 8, ...) are logged as warnings.
        global fixup_error_loggings
        fixup_error_loggings += 1
        is_power_of_two = lambda n: not (n & (n - 1))
        if is_power_of_two(fixup_error_loggings):
            log = logging.getLogger("icaljscal").warning
        else:
            log = logging.getLogger("icaljscal").debug

        log_message = [
            "Ical data was modified to avoid compatibility issues",
            "(The producer of the data breaks the icalendar standard)",
            f"(error count: {fixup_error_loggings} - this error is ratelimited)",
        ]
        diff = list(
            difflib.unified_diff(ical.split("\n"), fixed2.split("\n"), lineterm="")
        )
        log("\n".join(log_message + diff))

    return fixed2


class LineFilterDiscardingDuplicates:
    """Needs to be a class because it keeps track of whether a certain
    group of date line was already encountered within a vobject.
    This must be called line by line in order on the complete text, at
    least comprising the complete vobject.
    """

    def __init__(self) -> None:
        self.stamped = 0
        self.ended = 0

    def __call__(self, line):
        if line.startswith("BEGIN:V"):
            self.stamped = 0
            self.ended = 0

        elif re.match("(DURATION|DTEND|DUE)[:;]", line):
            if self.ended:
                return False
            self.ended += 1

        elif re.match("DTSTAMP[:;]", line):
            if self.stamped:
                return False
            self.stamped += 1

        return True


def parse_calendar(ical) -> icalendar.Calendar:
    """Fixes up and parses ical text into an icalendar.Calendar"""
    try:
        return icalendar.Calendar.from_ical(fix(ical))
    except ValueError as e:
        raise InvalidObjectError(reason=f"Unparseable icalendar data: {e}") from e
