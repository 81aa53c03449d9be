"""
Helpers for JSCalendar ``String[Boolean]`` sets (roles, features, ...).
"""

from __future__ import annotations

import logging

log = logging.getLogger("icaljscal")


def flags_from_jscal(value, allowed: tuple, what: str) -> list[str]:
    """Read a JSCalendar set into an ordered, duplicate-free list.

    Accepts the RFC 8984 map form (``{"owner": true}``) as well as a
    plain list.  Entries mapped to ``false`` and values outside
    ``allowed`` are dropped.
    """
    if not value:
        return []
    if isinstance(value, dict):
        candidates = [k for k, v in value.items() if v]
    else:
        candidates = list(value)

    flags: list[str] = []
    for candidate in candidates:
        if candidate not in allowed:
            log.debug(f"Dropping unknown {what} {candidate!r}")
            continue
        if candidate not in flags:
            flags.append(candidate)
    return flags


def flags_to_jscal(flags: list[str]) -> dict:
    return {flag: True for flag in flags}


def enum_from_jscal(value, allowed: tuple, what: str) -> str | None:
    """Return ``value`` if it's one of ``allowed``, otherwise ``None``."""
    if value is None:
        return None
    if value not in allowed:
        log.debug(f"Dropping unknown {what} {value!r}")
        return None
    return value
