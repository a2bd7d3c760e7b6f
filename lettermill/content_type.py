"""The ``Content-Type`` header."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from .headers import Header, HeaderName, HeaderValue

_HEADER_NAME = "Content-Type"
_TSPECIALS = frozenset('()<>@,;:\\"/[]?=')
_PARAM = re.compile(r'[ \t]*;[ \t]*([^\s;=]+)=("(?:[^"\\]|\\.)*"|[^\s;"]+)', re.S)
_TRAILING = re.compile(r"[ \t]*")
_SUBTYPE = re.compile(r"[^\s;]*")


class ContentTypeError(ValueError):
    """Raised when a MIME type cannot be parsed."""


def _is_token(text: str) -> bool:
    return bool(text) and all(
        33 <= ord(char) <= 126 and char not in _TSPECIALS for char in text
    )


def _quote(value: str) -> str:
    if _is_token(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _unquote(value: str) -> str:
    if value.startswith('"'):
        return re.sub(r"\\(.)", r"\1", value[1:-1], flags=re.S)
    return value


def _normalize_params(
    params: Mapping[str, str] | Iterable[tuple[str, str]],
) -> tuple[tuple[str, str], ...]:
    items = params.items() if isinstance(params, Mapping) else params
    normalized = []
    for name, value in items:
        if not _is_token(name):
            raise ContentTypeError(f"invalid parameter name: {name!r}")
        name = name.lower()
        if name == "charset":
            value = value.lower()
        normalized.append((name, value))
    return tuple(normalized)


class ContentType(Header):
    """A MIME type such as ``text/plain; charset=utf-8`` (RFC 2045)."""

    NAME = _HEADER_NAME
    TEXT_PLAIN: ClassVar[ContentType]
    TEXT_HTML: ClassVar[ContentType]

    __slots__ = ("_type", "_subtype", "_params")

    def __init__(
        self,
        type_: str,
        subtype: str,
        params: Mapping[str, str] | Iterable[tuple[str, str]] = (),
    ) -> None:
        if not _is_token(type_):
            raise ContentTypeError(f"invalid type: {type_!r}")
        if not _is_token(subtype):
            raise ContentTypeError(f"invalid subtype: {subtype!r}")
        self._type = type_.lower()
        self._subtype = subtype.lower()
        self._params = _normalize_params(params)

    @property
    def type(self) -> str:
        return self._type

    @property
    def subtype(self) -> str:
        return self._subtype

    @property
    def params(self) -> tuple[tuple[str, str], ...]:
        return self._params

    @classmethod
    def from_str(cls, text: str) -> ContentType:
        """Parse a MIME type, raising :class:`ContentTypeError` if invalid."""
        type_, sep, rest = text.partition("/")
        if not sep:
            raise ContentTypeError(f"missing '/' in MIME type: {text!r}")
        match = _SUBTYPE.match(rest)
        subtype = match.group(0)
        pos = match.end()
        params = []
        while True:
            param = _PARAM.match(rest, pos)
            if param is None:
                break
            name, value = param.group(1), param.group(2)
            if not value.startswith('"') and not _is_token(value):
                raise ContentTypeError(f"invalid parameter value: {value!r}")
            params.append((name, _unquote(value)))
            pos = param.end()
        pos = _TRAILING.match(rest, pos).end()
        if pos != len(rest):
            raise ContentTypeError(f"invalid MIME type: {text!r}")
        return cls(type_, subtype, params)

    @classmethod
    def header_name(cls) -> HeaderName:
        return HeaderName(_HEADER_NAME)

    @classmethod
    def parse(cls, text: str) -> ContentType:
        return cls.from_str(text)

    def display(self) -> HeaderValue:
        return HeaderValue(_HEADER_NAME, str(self))

    def to_json(self) -> str:
        """Serialize as the MIME type string."""
        return str(self)

    @classmethod
    def from_json(cls, data: Any) -> ContentType:
        """Build from a MIME type string."""
        if not isinstance(data, str):
            raise TypeError("expected a ContentType string like `text/plain`")
        try:
            return cls.from_str(data)
        except ContentTypeError:
            raise ValueError(
                f"Couldn't parse the following MIME-Type: {data}"
            ) from None

    def __str__(self) -> str:
        params = "".join(f"; {name}={_quote(value)}" for name, value in self._params)
        return f"{self._type}/{self._subtype}{params}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContentType):
            return (self._type, self._subtype, self._params) == (
                other._type,
                other._subtype,
                other._params,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._type, self._subtype, self._params))

    def __repr__(self) -> str:
        return f"ContentType({str(self)!r})"


ContentType.TEXT_PLAIN = ContentType("text", "plain", [("charset", "utf-8")])
ContentType.TEXT_HTML = ContentType("text", "html", [("charset", "utf-8")])