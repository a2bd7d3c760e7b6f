"""Line folding and RFC 2047 encoded-word output for header values."""

from __future__ import annotations

import base64

MAX_LINE_LEN = 76
_ENCODING_START_PREFIX = "=?utf-8?b?"
_ENCODING_END_SUFFIX = "?="


class EmailWriter:
    """Accumulates a header value while tracking the current line length.

    Trailing spaces are held back until more text is written, so a line
    can be broken at them without leaving whitespace at the end of a line.
    """

    def __init__(
        self,
        line_len: int = 0,
        spaces: int = 0,
        can_go_to_new_line_now: bool = False,
    ) -> None:
        self._parts: list[str] = []
        self.line_len = line_len
        self.spaces = spaces
        self.can_go_to_new_line_now = can_go_to_new_line_now

    @property
    def projected_line_len(self) -> int:
        """Line length once the pending spaces are written."""
        return self.line_len + self.spaces

    def _write_spaces(self) -> None:
        if self.spaces:
            self._parts.append(" " * self.spaces)
            self.line_len += self.spaces
            self.spaces = 0

    def write_str(self, text: str) -> None:
        """Write ``text`` as is, holding back its trailing spaces."""
        if not text:
            return
        self._write_spaces()
        body = text.rstrip(" ")
        self.spaces += len(text) - len(body)
        if body:
            self._parts.append(body)
            self.line_len += len(body.encode("utf-8"))
            self.can_go_to_new_line_now = True

    def write_folding(self, text: str) -> None:
        """Write ``text``, breaking the line at spaces when it grows too long."""
        while text:
            if text.startswith(" "):
                self.space()
                text = text[1:]
                continue
            index = text.find(" ")
            if index < 0:
                start, text = text, ""
            else:
                start, text = text[:index], text[index:]
            if (
                self.can_go_to_new_line_now
                and self.spaces >= 1
                and self.projected_line_len + len(start.encode("utf-8")) > MAX_LINE_LEN
            ):
                self.new_line()
            self.write_str(start)

    def space(self) -> None:
        """Queue one space to be written before the next text."""
        self.spaces += 1

    def new_line(self) -> None:
        """Start a new line; queued spaces carry over to it."""
        self._parts.append("\r\n")
        self.line_len = 0
        self.can_go_to_new_line_now = False

    def getvalue(self) -> str:
        """Return everything written, pending spaces included."""
        return "".join(self._parts) + " " * self.spaces


def _truncate_to_char_boundary(text: str, max_bytes: int) -> str:
    used = 0
    for index, char in enumerate(text):
        used += len(char.encode("utf-8"))
        if used > max_bytes:
            return text[:index]
    return text


def encode_rfc2047(text: str, writer: EmailWriter) -> None:
    """Write ``text`` as one or more base64 UTF-8 encoded words."""
    wrote = False
    while text:
        remaining = max(
            0,
            MAX_LINE_LEN
            - (
                len(_ENCODING_START_PREFIX)
                + len(_ENCODING_END_SUFFIX)
                + writer.projected_line_len
            ),
        )
        word = _truncate_to_char_boundary(text, remaining // 4 * 3)
        if not word:
            if wrote or writer.spaces:
                writer.new_line()
                if not writer.spaces:
                    writer.space()
                continue
            word = text[0]
        writer.write_str(_ENCODING_START_PREFIX)
        writer.write_str(base64.b64encode(word.encode("utf-8")).decode("ascii"))
        writer.write_str(_ENCODING_END_SUFFIX)
        text = text[len(word):]
        wrote = True