"""The SMTP envelope: sender and recipients of a message."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .address import Address
from .errors import EmailError, ErrorKind


class Envelope:
    """A sender (reverse path) and a non-empty list of recipients (forward path)."""

    __slots__ = ("_forward_path", "_reverse_path")

    def __init__(self, sender: Address | None, recipients: Iterable[Address]) -> None:
        forward_path = tuple(recipients)
        if not forward_path:
            raise EmailError(ErrorKind.MISSING_TO)
        self._forward_path = forward_path
        self._reverse_path = sender

    @property
    def to(self) -> tuple[Address, ...]:
        """The recipient addresses."""
        return self._forward_path

    @property
    def sender(self) -> Address | None:
        """The sender address, if any."""
        return self._reverse_path

    def has_non_ascii_addresses(self) -> bool:
        """Whether any address in the envelope holds non-ASCII characters."""
        addresses = list(self._forward_path)
        if self._reverse_path is not None:
            addresses.append(self._reverse_path)
        return any(not address.is_ascii() for address in addresses)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the envelope."""
        return {
            "forward_path": [address.to_json() for address in self._forward_path],
            "reverse_path": (
                None if self._reverse_path is None else self._reverse_path.to_json()
            ),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Envelope:
        """Build from a mapping as produced by :meth:`to_dict`."""
        if not isinstance(data, dict):
            raise TypeError("expected an envelope object")
        if "forward_path" not in data:
            raise ValueError("missing field `forward_path`")
        forward = data["forward_path"]
        if not isinstance(forward, list):
            raise TypeError("`forward_path` must be a list of recipient addresses")
        if not forward:
            raise ValueError(
                "invalid length 0, expected a non-empty list of recipient addresses"
            )
        recipients = [Address.from_json(item) for item in forward]
        reverse = data.get("reverse_path")
        sender = None if reverse is None else Address.from_json(reverse)
        return cls(sender, recipients)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Envelope):
            return (self._forward_path, self._reverse_path) == (
                other._forward_path,
                other._reverse_path,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._forward_path, self._reverse_path))

    def __repr__(self) -> str:
        return f"Envelope(sender={self._reverse_path!r}, to={list(self._forward_path)!r})"