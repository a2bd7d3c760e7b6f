"""The ``Content-Disposition`` header of attachments."""

from __future__ import annotations

import string
from collections import deque

from .folding import MAX_LINE_LEN, EmailWriter
from .headers import Header, HeaderName, HeaderValue

_HEADER_NAME = "Content-Disposition"
_KINDS = ("inline", "attachment")
_ATTR_CHARS = frozenset(string.ascii_letters + string.digits + "!#$&+-.^_`|~")


def _is_printable_ascii(text: str) -> bool:
    return all(0x20 <= ord(char) <= 0x7E for char in text)


def _percent_pieces(value: str) -> deque[str]:
    pieces: deque[str] = deque()
    for char in value:
        if char in _ATTR_CHARS:
            pieces.append(char)
        else:
            pieces.append("".join(f"%{byte:02X}" for byte in char.encode("utf-8")))
    return pieces


def _encode_rfc2231(key: str, value: str, writer: EmailWriter) -> None:
    """Write ``key=value`` as a quoted parameter or as RFC 2231 continuations."""
    fits = writer.projected_line_len + len(key) + len('=""') + len(value) <= MAX_LINE_LEN
    if fits and _is_printable_ascii(value):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        writer.write_str(f'{key}="{escaped}"')
        return

    pieces = _percent_pieces(value)
    index = 0
    while pieces:
        if index:
            writer.write_str(";")
        writer.new_line()
        if not writer.spaces:
            writer.space()
        prefix = f"{key}*{index}*=" + ("utf-8''" if index == 0 else "")
        writer.write_str(prefix)
        wrote = False
        while pieces and (
            not wrote
            or writer.projected_line_len + len(pieces[0]) + len(";") <= MAX_LINE_LEN
        ):
            writer.write_str(pieces.popleft())
            wrote = True
        index += 1


class ContentDisposition(Header):
    """How an attachment is presented, as defined in RFC 2183."""

    NAME = _HEADER_NAME

    __slots__ = ("_value",)

    def __init__(self, value: HeaderValue) -> None:
        self._value = value

    @classmethod
    def inline(cls) -> ContentDisposition:
        """An attachment shown inline in the message."""
        return cls(HeaderValue.pre_encoded(_HEADER_NAME, "inline", "inline"))

    @classmethod
    def inline_with_name(cls, file_name: str) -> ContentDisposition:
        """An inline attachment that also names the file it would be saved as."""
        return cls._with_name("inline", file_name)

    @classmethod
    def attachment(cls, file_name: str) -> ContentDisposition:
        """An attachment kept apart from the body, to be downloaded separately."""
        return cls._with_name("attachment", file_name)

    @classmethod
    def _with_name(cls, kind: str, file_name: str) -> ContentDisposition:
        raw_value = f'{kind}; filename="{file_name}"'
        writer = EmailWriter(len(f"{_HEADER_NAME}: "), 0, False)
        writer.write_str(kind)
        writer.write_str(";")
        writer.space()
        _encode_rfc2231("filename", file_name, writer)
        return cls(HeaderValue.pre_encoded(_HEADER_NAME, raw_value, writer.getvalue()))

    @classmethod
    def header_name(cls) -> HeaderName:
        return HeaderName(_HEADER_NAME)

    @classmethod
    def parse(cls, text: str) -> ContentDisposition:
        """Parse ``inline`` or ``<kind>; filename="<name>"``."""
        if text == "inline":
            return cls.inline()
        kind, sep, rest = text.partition(";")
        if sep and kind in _KINDS:
            _, found, file_name = rest.partition(' filename="')
            if found and file_name.endswith('"'):
                return cls._with_name(kind, file_name[:-1])
        raise ValueError("Unsupported ContentDisposition value")

    def display(self) -> HeaderValue:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContentDisposition):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"ContentDisposition({self._value.raw_value!r})"