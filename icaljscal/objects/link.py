"""
JSCalendar Link object (RFC 8984 §1.4.11).
"""

from __future__ import annotations

from dataclasses import dataclass

from icaljscal.lib.error import InvalidObjectError


@dataclass
class Link:
    """An external resource, typically an iCalendar ``ATTACH``.

    ``href`` is required; ``content_type`` maps to the ``FMTTYPE``
    parameter.
    """

    href: str
    cid: str | None = None
    content_type: str | None = None
    size: int | None = None
    rel: str | None = None
    display: str | None = None

    @classmethod
    def from_jscal(cls, data: dict) -> Link:
        """Construct a Link from a JSCalendar dict.

        Raises:
            InvalidObjectError: If ``href`` is missing.
        """
        if not data.get("href"):
            raise InvalidObjectError(reason="Link without href")
        return cls(
            href=data["href"],
            cid=data.get("cid"),
            content_type=data.get("contentType"),
            size=data.get("size"),
            rel=data.get("rel"),
            display=data.get("display"),
        )

    def to_jscal(self) -> dict:
        d: dict = {"@type": "Link", "href": self.href}
        if self.cid is not None:
            d["cid"] = self.cid
        if self.content_type is not None:
            d["contentType"] = self.content_type
        if self.size is not None:
            d["size"] = self.size
        if self.rel is not None:
            d["rel"] = self.rel
        if self.display is not None:
            d["display"] = self.display
        return d
