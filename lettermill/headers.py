"""Header names, encoded header values and ordered header collections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, ClassVar

from .folding import EmailWriter, encode_rfc2047

_ASCII_LOWER = {code: code + 32 for code in range(ord("A"), ord("Z") + 1)}


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class InvalidHeaderName(ValueError):
    """Raised for a header name that is empty, too long, non-ASCII or holds ':' or ' '."""


class HeaderName:
    """A valid header name, compared without regard to ASCII case."""

    __slots__ = ("_name",)

    def __init__(self, name: str | HeaderName) -> None:
        if isinstance(name, HeaderName):
            name = name._name
        if not (
            name
            and len(name) <= 76
            and name.isascii()
            and ":" not in name
            and " " not in name
        ):
            raise InvalidHeaderName("invalid header name")
        self._name = name

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderName):
            other = other._name
        if isinstance(other, str):
            return _ascii_lower(self._name) == _ascii_lower(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(_ascii_lower(self._name))

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"HeaderName({self._name!r})"


def _allowed_char(char: str) -> bool:
    code = ord(char)
    return 1 <= code <= 9 or code in (11, 12) or 14 <= code <= 127


def _split_inclusive(value: str) -> list[str]:
    parts = value.split(" ")
    words = [part + " " for part in parts[:-1]]
    if parts[-1]:
        words.append(parts[-1])
    return words


def encode_header_value(name: str | HeaderName, value: str) -> str:
    """Encode ``value`` with RFC 2047 where needed and fold it into lines."""
    writer = EmailWriter(len(str(name)) + len(": "), 0, False)
    pending: list[str] = []

    def flush() -> None:
        if not pending:
            return
        buffered = "".join(pending)
        prefix = buffered.rstrip(" ")
        encode_rfc2047(prefix, writer)
        for _ in range(len(buffered) - len(prefix)):
            writer.space()
        pending.clear()

    for word in _split_inclusive(value):
        if all(map(_allowed_char, word)):
            flush()
            writer.write_folding(word)
        else:
            pending.append(word)
    flush()
    return writer.getvalue()


class HeaderValue:
    """A header's name with both its raw and its wire-ready value."""

    __slots__ = ("name", "raw_value", "encoded_value")

    def __init__(self, name: str | HeaderName, raw_value: str) -> None:
        self.name = HeaderName(name)
        self.raw_value = raw_value
        self.encoded_value = encode_header_value(self.name, raw_value)

    @classmethod
    def pre_encoded(
        cls, name: str | HeaderName, raw_value: str, encoded_value: str
    ) -> HeaderValue:
        """Build from an already encoded and folded value, trusted as given."""
        obj = cls.__new__(cls)
        obj.name = HeaderName(name)
        obj.raw_value = raw_value
        obj.encoded_value = encoded_value
        return obj

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderValue):
            return (self.name, self.raw_value, self.encoded_value) == (
                other.name,
                other.raw_value,
                other.encoded_value,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.name, self.raw_value, self.encoded_value))

    def __repr__(self) -> str:
        return f"HeaderValue({str(self.name)!r}, {self.raw_value!r})"


class Header(ABC):
    """A typed header; subclasses set ``NAME`` and implement parsing and display."""

    NAME: ClassVar[str]

    @classmethod
    def header_name(cls) -> HeaderName:
        return HeaderName(cls.NAME)

    @classmethod
    @abstractmethod
    def parse(cls, text: str) -> Any:
        """Build the header from its raw value, raising ValueError if invalid."""

    @abstractmethod
    def display(self) -> HeaderValue:
        """Return the header as a :class:`HeaderValue`."""


class Headers:
    """An ordered set of headers, at most one per case-insensitive name."""

    def __init__(self) -> None:
        self._headers: list[HeaderValue] = []

    def _index(self, name: str | HeaderName) -> int | None:
        return next(
            (i for i, value in enumerate(self._headers) if value.name == name), None
        )

    def get(self, header_type: Any) -> Any:
        """Return the parsed header of ``header_type``, or None if absent or unparsable."""
        raw = self.get_raw(header_type.header_name())
        if raw is None:
            return None
        try:
            return header_type.parse(raw)
        except (ValueError, TypeError):
            return None

    def set(self, header: Any) -> None:
        """Insert ``header``, replacing any header of the same name."""
        self.insert_raw(header.display())

    def remove(self, header_type: Any) -> Any:
        """Remove the header of ``header_type`` and return it parsed, or None."""
        value = self.remove_raw(header_type.header_name())
        if value is None:
            return None
        try:
            return header_type.parse(value.raw_value)
        except (ValueError, TypeError):
            return None

    def clear(self) -> None:
        self._headers.clear()

    def get_raw(self, name: str | HeaderName) -> str | None:
        """Return the raw value of header ``name``, or None."""
        index = self._index(name)
        return None if index is None else self._headers[index].raw_value

    def insert_raw(self, value: HeaderValue) -> None:
        """Insert ``value``, replacing in place a header of the same name."""
        index = self._index(value.name)
        if index is None:
            self._headers.append(value)
        else:
            self._headers[index] = value

    def remove_raw(self, name: str | HeaderName) -> HeaderValue | None:
        """Remove and return the header ``name``, or None."""
        index = self._index(name)
        return None if index is None else self._headers.pop(index)

    def __iter__(self) -> Iterator[HeaderValue]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __str__(self) -> str:
        return "".join(
            f"{value.name}: {value.encoded_value}\r\n" for value in self._headers
        )

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"