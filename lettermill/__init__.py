"""Email addresses, envelopes, typed headers and body encoding for composing messages."""

__version__ = "0.1.0"