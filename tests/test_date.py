from datetime import datetime, timezone

import pytest

from lettermill.date import Date
from lettermill.headers import HeaderName, HeaderValue, Headers


def test_format_date():
    headers = Headers()
    headers.set(Date(784887151))
    assert str(headers) == "Date: Tue, 15 Nov 1994 08:12:31 +0000\r\n"

    headers.set(Date(784887152))
    assert str(headers) == "Date: Tue, 15 Nov 1994 08:12:32 +0000\r\n"


def test_parse_date():
    headers = Headers()
    headers.insert_raw(
        HeaderValue(HeaderName("Date"), "Tue, 15 Nov 1994 08:12:31 +0000")
    )
    assert headers.get(Date) == Date(784887151)

    headers.insert_raw(
        HeaderValue(HeaderName("Date"), "Tue, 15 Nov 1994 08:12:32 +0000")
    )
    assert headers.get(Date) == Date(784887152)


def test_datetime_matches_timestamp():
    moment = datetime(1994, 11, 15, 8, 12, 31, tzinfo=timezone.utc)
    assert Date(moment) == Date(784887151)
    assert Date(784887151).to_datetime() == moment


def test_sub_second_precision_is_dropped():
    assert Date(784887151.9) == Date(784887151)


def test_parse_gmt_suffix():
    assert Date.parse("Tue, 15 Nov 1994 08:12:31 GMT") == Date(784887151)


def test_parse_rfc850_and_asctime():
    assert Date.parse("Tuesday, 15-Nov-94 08:12:31 GMT") == Date(784887151)
    assert Date.parse("Tue Nov 15 08:12:31 1994") == Date(784887151)


@pytest.mark.parametrize(
    "text",
    [
        "yesterday",
        "Wed, 15 Nov 1994 08:12:31 +0000",
        "Tue, 32 Nov 1994 08:12:31 +0000",
        "Tue, 15 Nov 1994 08:12:31 +0100",
    ],
)
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        Date.parse(text)


def test_headers_get_invalid_is_none():
    headers = Headers()
    headers.insert_raw(HeaderValue(HeaderName("Date"), "not a date"))
    assert headers.get(Date) is None


def test_round_trip_now():
    now = Date.now()
    assert Date.parse(now.display().raw_value) == now


def test_before_epoch_rejected():
    with pytest.raises(ValueError):
        Date(datetime(1960, 1, 1, tzinfo=timezone.utc))