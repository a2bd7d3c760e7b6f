import pytest

from lettermill.content_disposition import ContentDisposition
from lettermill.headers import HeaderName, HeaderValue, Headers


def test_format_content_disposition():
    headers = Headers()
    headers.set(ContentDisposition.inline())
    assert str(headers) == "Content-Disposition: inline\r\n"

    headers.set(ContentDisposition.attachment("something.txt"))
    assert (
        str(headers)
        == 'Content-Disposition: attachment; filename="something.txt"\r\n'
    )


def test_parse_content_disposition():
    headers = Headers()
    headers.insert_raw(HeaderValue(HeaderName("Content-Disposition"), "inline"))
    assert headers.get(ContentDisposition) == ContentDisposition.inline()

    headers.insert_raw(
        HeaderValue(
            HeaderName("Content-Disposition"), 'attachment; filename="something.txt"'
        )
    )
    assert headers.get(ContentDisposition) == ContentDisposition.attachment(
        "something.txt"
    )


def test_inline_with_name_display():
    value = ContentDisposition.inline_with_name("image.png").display()
    assert value.raw_value == 'inline; filename="image.png"'
    assert value.encoded_value == 'inline; filename="image.png"'


def test_parse_inline_with_name_round_trip():
    original = ContentDisposition.inline_with_name("image.png")
    assert ContentDisposition.parse(original.display().raw_value) == original


@pytest.mark.parametrize(
    "text",
    ["bogus", "attachment", "attachment; name=x", 'other; filename="a.txt"', 'attachment; filename="a.txt'],
)
def test_parse_unsupported(text):
    with pytest.raises(ValueError):
        ContentDisposition.parse(text)


def test_headers_get_unsupported_is_none():
    headers = Headers()
    headers.insert_raw(HeaderValue(HeaderName("Content-Disposition"), "bogus"))
    assert headers.get(ContentDisposition) is None


def test_non_ascii_file_name_is_percent_encoded():
    value = ContentDisposition.attachment("résumé.pdf").display()
    assert value.raw_value == 'attachment; filename="résumé.pdf"'
    encoded = value.encoded_value
    assert encoded.startswith("attachment;")
    assert "filename*0*=utf-8''" in encoded
    assert "%C3%A9" in encoded
    assert encoded.isascii()


def test_long_file_name_lines_stay_short():
    name = "a-very-long-file-name-" * 8 + ".txt"
    value = ContentDisposition.attachment(name).display()
    lines = ("Content-Disposition: " + value.encoded_value).split("\r\n")
    assert len(lines) > 1
    assert all(len(line) <= 76 for line in lines)
    assert ContentDisposition.parse(value.raw_value) == ContentDisposition.attachment(name)


def test_header_name():
    assert ContentDisposition.header_name() == "content-disposition"