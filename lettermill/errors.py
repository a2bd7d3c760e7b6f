"""Errors raised while building envelopes and messages."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The kinds of failure an :class:`EmailError` can report."""

    MISSING_FROM = "missing source address, invalid envelope"
    MISSING_TO = "missing destination address, invalid envelope"
    TOO_MANY_FROM = "there can only be one source address"
    EMAIL_MISSING_AT = "missing @ in email address"
    EMAIL_MISSING_LOCAL_PART = "missing local part in email address"
    EMAIL_MISSING_DOMAIN = "missing domain in email address"
    CANNOT_PARSE_FILENAME = "could not parse attachment filename"
    IO = "i/o error"
    NON_ASCII_CHARS = "contains non-ASCII chars"

    @property
    def message(self) -> str:
        return self.value


class EmailError(Exception):
    """Error raised for invalid envelopes and message content.

    ``kind`` is an :class:`ErrorKind`, or an :class:`OSError`, which is
    recorded as an ``ErrorKind.IO`` failure caused by that error.
    """

    def __init__(self, kind: ErrorKind | OSError) -> None:
        if isinstance(kind, OSError):
            self.io_error: OSError | None = kind
            self.kind = ErrorKind.IO
            self.__cause__ = kind
        else:
            self.io_error = None
            self.kind = kind
        super().__init__(self.kind)

    def __str__(self) -> str:
        if self.io_error is not None:
            return str(self.io_error)
        return self.kind.value

    def __repr__(self) -> str:
        if self.io_error is not None:
            return f"EmailError({self.io_error!r})"
        return f"EmailError({self.kind})"