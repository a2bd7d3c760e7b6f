"""Message bodies, encoded and ready to be sent."""

from __future__ import annotations

import base64
import re
from itertools import zip_longest
from typing import Union

from .transfer_encoding import ContentTransferEncoding

MaybeString = Union[str, bytes, bytearray]

_LINE_LIMIT = 76
_QP_LINE_LIMIT = 76
_LONE_LF = re.compile(r"(?<!\r)\n")


class InvalidBodyEncoding(ValueError):
    """Raised when a body cannot be represented with the requested encoding.

    ``data`` holds the supplied content as bytes.
    """

    def __init__(self, data: bytes, encoding: ContentTransferEncoding) -> None:
        self.data = data
        self.encoding = encoding
        super().__init__(f"body cannot be encoded as {encoding.value}")


def _as_bytes(data: MaybeString) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    raise TypeError("body content must be str or bytes")


def _line_too_long(raw: bytes) -> bool:
    return any(len(line) > _LINE_LIMIT for line in raw.split(b"\n"))


def _is_qp_literal(byte: int) -> bool:
    return byte in (0x09, 0x0A, 0x0D, 0x20) or (33 <= byte <= 126 and byte != 0x3D)


def _qp_estimated_len(raw: bytes) -> int:
    return sum(1 if _is_qp_literal(byte) else 3 for byte in raw)


def _base64_len(length: int) -> int:
    encoded = 4 * ((length + 2) // 3)
    return encoded + 2 * max(0, (encoded - 1) // _LINE_LIMIT)


def choose_encoding(data: MaybeString, supports_utf8: bool) -> ContentTransferEncoding:
    """Suggest the most efficient encoding for ``data``; never ``binary``."""
    raw = _as_bytes(data)
    too_long = _line_too_long(raw)
    if isinstance(data, str):
        if not too_long and raw.isascii():
            return ContentTransferEncoding.SEVEN_BIT
        if not too_long and supports_utf8:
            return ContentTransferEncoding.EIGHT_BIT
        if _qp_estimated_len(raw) <= _base64_len(len(raw)):
            return ContentTransferEncoding.QUOTED_PRINTABLE
        return ContentTransferEncoding.BASE64
    if not too_long and raw.isascii():
        return ContentTransferEncoding.SEVEN_BIT
    return ContentTransferEncoding.BASE64


def to_crlf(text: str) -> str:
    """Turn every lone ``\\n`` into ``\\r\\n``."""
    return _LONE_LF.sub("\r\n", text)


def _prepare(data: MaybeString) -> bytes:
    if isinstance(data, str):
        return to_crlf(data).encode("utf-8")
    return _as_bytes(data)


def _qp_line(line: bytes) -> bytes:
    out = bytearray()
    on_line = 0
    backup = 0
    for byte, following in zip_longest(line, line[1:]):
        if byte in (0x20, 0x09):
            literal = following is not None and following != 0x0D
        else:
            literal = 33 <= byte <= 126 and byte != 0x3D
        chunk = bytes([byte]) if literal else b"=%02X" % byte
        if on_line + len(chunk) > _QP_LINE_LIMIT:
            if on_line == _QP_LINE_LIMIT:
                out[backup:backup] = b"=\r\n"
                on_line = len(out) - backup - 3
            else:
                out += b"=\r\n"
                on_line = 0
        out += chunk
        on_line += len(chunk)
        backup = len(out) - len(chunk)
    return bytes(out)


def _quoted_printable(raw: bytes) -> bytes:
    return b"\r\n".join(_qp_line(line) for line in raw.split(b"\r\n"))


def _wrapped_base64(raw: bytes) -> bytes:
    encoded = base64.b64encode(raw)
    lines = [
        encoded[start : start + _LINE_LIMIT]
        for start in range(0, len(encoded), _LINE_LIMIT)
    ]
    return b"\r\n".join(lines)


def _encode(raw: bytes, encoding: ContentTransferEncoding) -> bytes:
    if encoding is ContentTransferEncoding.QUOTED_PRINTABLE:
        return _quoted_printable(raw)
    if encoding is ContentTransferEncoding.BASE64:
        return _wrapped_base64(raw)
    return raw


class Body:
    """A message or part body that has already been encoded.

    A ``str`` gets its line endings turned into CRLF and may be sent as
    ``7bit`` or quoted-printable; ``bytes`` are sent as ``7bit`` or base64.
    """

    __slots__ = ("_buf", "_encoding")

    def __init__(self, data: MaybeString) -> None:
        encoding = choose_encoding(data, False)
        self._encoding = encoding
        self._buf = _encode(_prepare(data), encoding)

    @classmethod
    def with_encoding(
        cls, data: MaybeString, encoding: ContentTransferEncoding
    ) -> Body:
        """Encode ``data`` with ``encoding``.

        Raises :class:`InvalidBodyEncoding` if that encoding would produce
        an invalid body.
        """
        best = choose_encoding(data, True)
        if encoding is ContentTransferEncoding.SEVEN_BIT:
            ok = best is ContentTransferEncoding.SEVEN_BIT
        elif encoding is ContentTransferEncoding.EIGHT_BIT:
            ok = best in (
                ContentTransferEncoding.SEVEN_BIT,
                ContentTransferEncoding.EIGHT_BIT,
            )
        else:
            ok = True
        if not ok:
            raise InvalidBodyEncoding(_as_bytes(data), encoding)
        return cls.pre_encoded(_encode(_prepare(data), encoding), encoding)

    @classmethod
    def pre_encoded(cls, data: bytes, encoding: ContentTransferEncoding) -> Body:
        """Wrap bytes that are already encoded with ``encoding``, trusted as given."""
        obj = cls.__new__(cls)
        obj._buf = bytes(data)
        obj._encoding = encoding
        return obj

    @property
    def encoding(self) -> ContentTransferEncoding:
        return self._encoding

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return self._buf

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Body):
            return (self._buf, self._encoding) == (other._buf, other._encoding)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._buf, self._encoding))

    def __repr__(self) -> str:
        return f"Body(encoding={self._encoding.value!r}, len={len(self._buf)})"


def into_body(
    content: Body | MaybeString, encoding: ContentTransferEncoding | None = None
) -> Body:
    """Turn ``content`` into a :class:`Body`; a Body is returned unchanged.

    With no ``encoding`` the best one is chosen; otherwise the given one is
    used and :class:`InvalidBodyEncoding` is raised if it does not fit.
    """
    if isinstance(content, Body):
        return content
    if encoding is None:
        return Body(content)
    return Body.with_encoding(content, encoding)