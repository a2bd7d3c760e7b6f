"""The ``Content-Transfer-Encoding`` header."""

from __future__ import annotations

from enum import Enum

from .headers import HeaderName, HeaderValue

_HEADER_NAME = "Content-Transfer-Encoding"


class ContentTransferEncoding(Enum):
    """How a body is encoded for transport.

    Message builders pick the most efficient encoding for a body, so this
    header rarely needs to be set by hand.
    """

    SEVEN_BIT = "7bit"
    QUOTED_PRINTABLE = "quoted-printable"
    BASE64 = "base64"
    EIGHT_BIT = "8bit"
    BINARY = "binary"

    @classmethod
    def default(cls) -> ContentTransferEncoding:
        """The encoding used when none is chosen: base64."""
        return cls.BASE64

    @classmethod
    def header_name(cls) -> HeaderName:
        return HeaderName(_HEADER_NAME)

    @classmethod
    def parse(cls, text: str) -> ContentTransferEncoding:
        """Parse a header value such as ``7bit``; raise ValueError if unknown."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unknown Content-Transfer-Encoding: {text!r}") from None

    def display(self) -> HeaderValue:
        return HeaderValue.pre_encoded(_HEADER_NAME, self.value, self.value)

    def __str__(self) -> str:
        return self.value