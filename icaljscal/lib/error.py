#!/usr/bin/env python
import logging
import os
from typing import Optional

from icaljscal import __version__

## Environmental variables prepended with "PYTHON_ICALJSCAL" are used for debug purposes
## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_ICALJSCAL_DEBUGMODE")
if not debugmode:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("icaljscal")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons) -> None:
    reason = " : ".join([str(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class ConversionError(Exception):
    uid: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, uid: Optional[str] = None, reason: Optional[str] = None) -> None:
        if uid:
            self.uid = uid
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s for '%s', reason %s" % (
            self.__class__.__name__,
            self.uid,
            self.reason,
        )


class InvalidObjectError(ConversionError, ValueError):
    """
    The input is not a calendar object at all: a JSCalendar document
    without uid or with an unknown type tag, or iCalendar text that
    cannot be parsed.  Malformed *values* inside an otherwise valid
    object never raise, they are dropped.
    """

    pass
