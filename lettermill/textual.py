"""Headers whose value is free text."""

from __future__ import annotations

from .headers import Header, HeaderName, HeaderValue


class TextHeader(Header):
    """A header carrying a text value, encoded with RFC 2047 where needed."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    @classmethod
    def header_name(cls) -> HeaderName:
        return HeaderName(cls.NAME)

    @classmethod
    def parse(cls, text: str) -> TextHeader:
        return cls(text)

    def display(self) -> HeaderValue:
        return HeaderValue(self.NAME, self.text)

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextHeader):
            return type(self) is type(other) and self.text == other.text
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"


class Subject(TextHeader):
    """``Subject`` of the message (RFC 5322)."""

    NAME = "Subject"


class Comments(TextHeader):
    """``Comments`` of the message (RFC 5322)."""

    NAME = "Comments"


class Keywords(TextHeader):
    """``Keywords``: comma-separated words or quoted strings (RFC 5322)."""

    NAME = "Keywords"


class InReplyTo(TextHeader):
    """``In-Reply-To``: one or more message identifiers (RFC 5322)."""

    NAME = "In-Reply-To"


class References(TextHeader):
    """``References``: one or more message identifiers (RFC 5322)."""

    NAME = "References"


class MessageId(TextHeader):
    """``Message-ID``: a unique message identifier (RFC 5322)."""

    NAME = "Message-ID"


class UserAgent(TextHeader):
    """``User-Agent``: information about the sending client."""

    NAME = "User-Agent"


class ContentId(TextHeader):
    """``Content-ID`` of a body part (RFC 2045)."""

    NAME = "Content-ID"


class ContentLocation(TextHeader):
    """``Content-Location`` of a body part (RFC 2110)."""

    NAME = "Content-Location"