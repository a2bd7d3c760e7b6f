import base64
import re

import pytest

from lettermill.folding import MAX_LINE_LEN, EmailWriter, encode_rfc2047


def _decode_words(value):
    words = re.findall(r"=\?utf-8\?b\?([^?]*)\?=", value)
    return b"".join(base64.b64decode(w) for w in words).decode("utf-8")


def test_write_str_holds_back_trailing_spaces():
    w = EmailWriter(0, 0, False)
    w.write_str("ab  ")
    assert w.line_len == 2
    assert w.spaces == 2
    w.write_str("c")
    assert w.getvalue() == "ab  c"
    assert w.line_len == 5


def test_new_line_resets_length_and_keeps_spaces():
    w = EmailWriter(10, 0, True)
    w.write_str("x ")
    w.new_line()
    assert w.line_len == 0
    assert w.can_go_to_new_line_now is False
    w.write_str("y")
    assert w.getvalue() == "x\r\n y"


def test_folding_keeps_lines_short():
    w = EmailWriter(9, 0, False)
    w.write_folding("word " * 40)
    lines = w.getvalue().split("\r\n")
    assert len(lines) > 1
    assert all(len(line) <= MAX_LINE_LEN for line in lines[:-1])
    assert w.getvalue().replace("\r\n", "") .split() == ["word"] * 40


def test_folding_never_breaks_a_single_giant_word():
    giant = "a" * 150
    w = EmailWriter(9, 0, False)
    w.write_folding(giant)
    assert w.getvalue() == giant


def test_encode_short_word():
    w = EmailWriter(4, 0, False)
    encode_rfc2047("Seán", w)
    assert w.getvalue() == "=?utf-8?b?U2XDoW4=?="


def test_encode_long_text_splits_lines():
    w = EmailWriter(len("Subject: "), 0, False)
    text = "🥳" * 60
    encode_rfc2047(text, w)
    assert w.getvalue() == (
        "=?utf-8?b?8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz?=\r\n"
        " =?utf-8?b?8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbM=?=\r\n"
        " =?utf-8?b?8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbM=?=\r\n"
        " =?utf-8?b?8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbM=?=\r\n"
        " =?utf-8?b?8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+ls/CfpbM=?=\r\n"
        " =?utf-8?b?8J+ls/CfpbPwn6Wz8J+ls/CfpbPwn6Wz8J+lsw==?="
    )


@pytest.mark.parametrize(
    "text", ["Иванов Иван Иванович", "＋仮名", "\r\n", "Jānis Bērziņš" * 10]
)
def test_encode_round_trip(text):
    w = EmailWriter(20, 1, True)
    encode_rfc2047(text, w)
    assert _decode_words(w.getvalue()) == text


def test_encode_without_room_writes_one_char():
    w = EmailWriter(MAX_LINE_LEN, 0, False)
    encode_rfc2047("é", w)
    assert w.getvalue() == "=?utf-8?b?w6k=?="