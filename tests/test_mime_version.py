import pytest

from lettermill.headers import HeaderName, HeaderValue, Headers
from lettermill.mime_version import MIME_VERSION_1_0, MimeVersion


def test_format_mime_version():
    headers = Headers()
    headers.set(MIME_VERSION_1_0)
    assert str(headers) == "MIME-Version: 1.0\r\n"

    headers.set(MimeVersion(0, 1))
    assert str(headers) == "MIME-Version: 0.1\r\n"


def test_parse_mime_version():
    headers = Headers()
    headers.insert_raw(HeaderValue(HeaderName("MIME-Version"), "1.0"))
    assert headers.get(MimeVersion) == MIME_VERSION_1_0

    headers.insert_raw(HeaderValue(HeaderName("MIME-Version"), "0.1"))
    assert headers.get(MimeVersion) == MimeVersion(0, 1)


def test_default_is_1_0():
    assert MimeVersion.default() == MimeVersion(1, 0)


def test_missing_dot():
    with pytest.raises(ValueError, match="doesn't contain '.'"):
        MimeVersion.parse("1")


@pytest.mark.parametrize("text", ["a.0", "1.", "256.0", "-1.0", " 1.0"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        MimeVersion.parse(text)


def test_extra_parts_ignored():
    assert MimeVersion.parse("1.0.5") == MimeVersion(1, 0)


def test_out_of_range_constructor():
    with pytest.raises(ValueError):
        MimeVersion(1, 300)


def test_parts():
    version = MimeVersion(2, 3)
    assert (version.major, version.minor) == (2, 3)