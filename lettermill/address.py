"""E-mail addresses: validation, parsing and JSON conversion."""

from __future__ import annotations

import ipaddress
from enum import Enum
from functools import total_ordering
from typing import Any

import idna

_LOCAL_PART_MAX_LENGTH = 64
_DOMAIN_MAX_LENGTH = 254
_SUB_DOMAIN_MAX_LENGTH = 63
_ATEXT_SPECIALS = frozenset("!#$%&'*+-/=?^_`{|}~")


class AddressErrorKind(Enum):
    """The reasons an address can be rejected."""

    MISSING_PARTS = "Missing domain or user"
    UNBALANCED = "Unbalanced angle bracket"
    INVALID_USER = "Invalid email user"
    INVALID_DOMAIN = "Invalid email domain"
    INVALID_INPUT = "Invalid input"


class AddressError(ValueError):
    """Raised when an e-mail address is not valid."""

    def __init__(self, kind: AddressErrorKind) -> None:
        self.kind = kind
        super().__init__(kind)

    def __str__(self) -> str:
        return self.kind.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AddressError):
            return self.kind is other.kind
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _is_atext_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c in _ATEXT_SPECIALS or ord(c) >= 0x80


def _is_dot_atom_text(text: str) -> bool:
    return all(part and all(map(_is_atext_char, part)) for part in text.split("."))


def _is_vchar(c: str) -> bool:
    return 0x21 <= ord(c) <= 0x7E


def _is_wsp(c: str) -> bool:
    return c in " \t"


def _is_qtext_char(c: str) -> bool:
    o = ord(c)
    return o == 33 or 35 <= o <= 91 or 93 <= o <= 126 or o >= 0x80


def _is_dtext_char(c: str) -> bool:
    o = ord(c)
    return 33 <= o <= 90 or 94 <= o <= 126


def _is_qcontent(text: str) -> bool:
    chars = iter(text)
    for c in chars:
        if c == "\\":
            escaped = next(chars, None)
            if escaped is None or not _is_vchar(escaped):
                return False
        elif not (_is_wsp(c) or _is_qtext_char(c)):
            return False
    return True


def _is_valid_local_part(user: str) -> bool:
    if not user or _byte_len(user) > _LOCAL_PART_MAX_LENGTH:
        return False
    if len(user) >= 2 and user.startswith('"') and user.endswith('"'):
        if len(user) == 2:
            return False
        return _is_qcontent(user[1:-1])
    return _is_dot_atom_text(user)


def _is_valid_domain(domain: str) -> bool:
    if not domain or _byte_len(domain) > _DOMAIN_MAX_LENGTH:
        return False
    if len(domain) >= 2 and domain.startswith("[") and domain.endswith("]"):
        return all(map(_is_dtext_char, domain[1:-1]))
    if not _is_dot_atom_text(domain):
        return False
    return all(_byte_len(sub) <= _SUB_DOMAIN_MAX_LENGTH for sub in domain.split("."))


def _is_ip_address(text: str) -> bool:
    if "%" in text:
        return False
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def _check_domain_ascii(domain: str) -> None:
    if _is_valid_domain(domain):
        return
    ip = domain
    if domain.startswith("[") and domain.endswith("]"):
        ip = domain[1:-1]
    if _is_ip_address(ip):
        return
    raise AddressError(AddressErrorKind.INVALID_DOMAIN)


def check_user(user: str) -> None:
    """Raise :class:`AddressError` unless ``user`` is a valid local part."""
    if not _is_valid_local_part(user):
        raise AddressError(AddressErrorKind.INVALID_USER)


def check_domain(domain: str) -> None:
    """Raise :class:`AddressError` unless ``domain`` is a valid domain or IP literal."""
    try:
        _check_domain_ascii(domain)
        return
    except AddressError:
        pass
    try:
        ascii_domain = idna.encode(domain, uts46=True).decode("ascii")
    except (idna.IDNAError, UnicodeError, ValueError):
        raise AddressError(AddressErrorKind.INVALID_DOMAIN) from None
    _check_domain_ascii(ascii_domain)


def _check_address(text: str) -> int:
    user, sep, domain = text.rpartition("@")
    if not sep:
        raise AddressError(AddressErrorKind.MISSING_PARTS)
    check_user(user)
    check_domain(domain)
    return len(user)


@total_ordering
class Address:
    """An e-mail address made of a user and a domain, kept as written."""

    __slots__ = ("_serialized", "_at")

    _serialized: str
    _at: int

    @classmethod
    def _build(cls, serialized: str, at: int) -> Address:
        obj = object.__new__(cls)
        obj._serialized = serialized
        obj._at = at
        return obj

    @classmethod
    def new(cls, user: str, domain: str) -> Address:
        """Build an address from a user and a domain, validating both."""
        check_user(user)
        check_domain(domain)
        return cls._build(f"{user}@{domain}", len(user))

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse ``user@domain``, splitting at the last ``@``."""
        return cls._build(text, _check_address(text))

    @property
    def user(self) -> str:
        return self._serialized[: self._at]

    @property
    def domain(self) -> str:
        return self._serialized[self._at + 1 :]

    def is_ascii(self) -> bool:
        """Whether the whole address is plain ASCII."""
        return self._serialized.isascii()

    def to_json(self) -> str:
        """Serialize as the address string."""
        return self._serialized

    @classmethod
    def from_json(cls, data: Any) -> Address:
        """Build from an address string or a ``{"user", "domain"}`` mapping."""
        if isinstance(data, str):
            return cls.parse(data)
        if isinstance(data, dict):
            unknown = set(data) - {"user", "domain"}
            if unknown:
                field = sorted(unknown)[0]
                raise ValueError(
                    f"unknown field `{field}`, expected `user` or `domain`"
                )
            for field in ("user", "domain"):
                if field not in data:
                    raise ValueError(f"missing field `{field}`")
                if not isinstance(data[field], str):
                    raise TypeError(f"field `{field}` must be a string")
            user, domain = data["user"], data["domain"]
            check_user(user)
            check_domain(domain)
            return cls.new(user, domain)
        raise TypeError("expected email address string or object")

    def _key(self) -> tuple[str, int]:
        return (self._serialized, self._at)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Address):
            return self._key() == other._key()
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Address):
            return self._key() < other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self._serialized

    def __repr__(self) -> str:
        return f"Address({self._serialized!r})"