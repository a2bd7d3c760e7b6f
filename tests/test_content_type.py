import pytest

from lettermill.content_type import ContentType, ContentTypeError
from lettermill.headers import HeaderName, HeaderValue, Headers


def test_format_content_type():
    headers = Headers()
    headers.set(ContentType.TEXT_PLAIN)
    assert str(headers) == "Content-Type: text/plain; charset=utf-8\r\n"

    headers.set(ContentType.TEXT_HTML)
    assert str(headers) == "Content-Type: text/html; charset=utf-8\r\n"


def test_parse_content_type():
    headers = Headers()
    headers.insert_raw(
        HeaderValue(HeaderName("Content-Type"), "text/plain; charset=utf-8")
    )
    assert headers.get(ContentType) == ContentType.TEXT_PLAIN

    headers.insert_raw(
        HeaderValue(HeaderName("Content-Type"), "text/html; charset=utf-8")
    )
    assert headers.get(ContentType) == ContentType.TEXT_HTML


def test_parse_simple():
    content_type = ContentType.from_str("application/pdf")
    assert content_type.type == "application"
    assert content_type.subtype == "pdf"
    assert content_type.params == ()
    assert str(content_type) == "application/pdf"


def test_charset_is_case_insensitive():
    assert ContentType.from_str("Text/Plain; Charset=UTF-8") == ContentType.TEXT_PLAIN


def test_quoted_parameter():
    content_type = ContentType.parse('multipart/mixed; boundary="a b"')
    assert content_type.params == (("boundary", "a b"),)
    assert str(content_type) == 'multipart/mixed; boundary="a b"'


@pytest.mark.parametrize(
    "text", ["", "text", "text/", "/plain", "text/plain; charset", "text/plain extra"]
)
def test_invalid(text):
    with pytest.raises(ContentTypeError):
        ContentType.from_str(text)


def test_headers_get_invalid_is_none():
    headers = Headers()
    headers.insert_raw(HeaderValue(HeaderName("Content-Type"), "not a mime"))
    assert headers.get(ContentType) is None


def test_json_round_trip():
    assert ContentType.TEXT_HTML.to_json() == "text/html; charset=utf-8"
    assert ContentType.from_json(ContentType.TEXT_HTML.to_json()) == ContentType.TEXT_HTML


def test_from_json_error_message():
    with pytest.raises(ValueError, match="Couldn't parse the following MIME-Type: bad"):
        ContentType.from_json("bad")


def test_from_json_wrong_type():
    with pytest.raises(TypeError):
        ContentType.from_json(42)


def test_display_value():
    assert ContentType.TEXT_PLAIN.display().raw_value == "text/plain; charset=utf-8"