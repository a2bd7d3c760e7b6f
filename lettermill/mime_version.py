"""The ``MIME-Version`` header."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .headers import Header, HeaderName, HeaderValue

_HEADER_NAME = "MIME-Version"
_U8 = re.compile(r"\+?[0-9]+")


def _parse_u8(text: str) -> int:
    if not _U8.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if value > 255:
        raise ValueError(f"number too large: {text!r}")
    return value


@dataclass(frozen=True)
class MimeVersion(Header):
    """Message format version, as defined in RFC 2045."""

    major: int
    minor: int

    NAME = _HEADER_NAME

    def __post_init__(self) -> None:
        for part in (self.major, self.minor):
            if not 0 <= part <= 255:
                raise ValueError("MIME version parts must be between 0 and 255")

    @classmethod
    def default(cls) -> MimeVersion:
        return MIME_VERSION_1_0

    @classmethod
    def header_name(cls) -> HeaderName:
        return HeaderName(_HEADER_NAME)

    @classmethod
    def parse(cls, text: str) -> MimeVersion:
        """Parse ``major.minor``; anything after a second dot is ignored."""
        parts = text.split(".")
        if len(parts) < 2:
            raise ValueError("MIME-Version header doesn't contain '.'")
        return cls(_parse_u8(parts[0]), _parse_u8(parts[1]))

    def display(self) -> HeaderValue:
        value = f"{self.major}.{self.minor}"
        return HeaderValue.pre_encoded(_HEADER_NAME, value, value)


MIME_VERSION_1_0 = MimeVersion(1, 0)