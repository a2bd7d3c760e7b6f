# lettermill

Building blocks for composing email messages: validated addresses, SMTP
envelopes, typed headers with RFC 2047 encoding and line folding, and message
bodies that get a compact `Content-Transfer-Encoding` chosen for them.

## Installation

```
pip install lettermill
```

## Addresses and envelopes

```python
from lettermill.address import Address, AddressError
from lettermill.envelope import Envelope

sender = Address.parse("alice@example.com")
recipient = Address.new("bob", "example.com")

print(recipient.user, recipient.domain)   # bob example.com

envelope = Envelope(sender, [recipient])
print(envelope.to, envelope.sender)
```

`Address.parse` splits at the last `@`; the domain may be a host name, an
internationalized name (checked through IDNA), or an IP address, optionally
in square brackets. An invalid address raises `AddressError`, whose `kind`
is an `AddressErrorKind`. An envelope with no recipients raises `EmailError`
from `lettermill.errors`, with `kind` set to `ErrorKind.MISSING_TO`.

Addresses and envelopes turn into JSON-ready data and back:

```python
data = envelope.to_dict()
# {'forward_path': ['bob@example.com'], 'reverse_path': 'alice@example.com'}
assert Envelope.from_dict(data) == envelope

Address.from_json({"user": "carol", "domain": "example.com"})
```

`Address.from_json` takes either an address string or a mapping with `user`
and `domain`. `Envelope.from_dict` rejects an empty `forward_path`.

## Headers

```python
from lettermill.headers import Headers, HeaderName, HeaderValue
from lettermill.textual import Subject
from lettermill.content_type import ContentType

headers = Headers()
headers.set(Subject("Тема сообщения"))
headers.set(ContentType.from_str("text/plain; charset=utf-8"))
headers.insert_raw(HeaderValue(HeaderName("X-Mailer"), "lettermill"))

print(str(headers))
# Subject: =?utf-8?b?0KLQtdC80LAg0YHQvtC+0LHRidC10L3QuNGP?=
# Content-Type: text/plain; charset=utf-8
# X-Mailer: lettermill

subject = headers.get(Subject)
```

`Headers` keeps at most one header per name, in insertion order; setting a
header again replaces it in place. Header names compare without regard to
ASCII case, and `HeaderName` raises `InvalidHeaderName` for names that are
empty, longer than 76 characters, non-ASCII or contain `:` or a space.
`Headers.get` and `Headers.remove` return `None` when the header is missing
or its value cannot be parsed.

`HeaderValue` encodes words with characters outside the allowed set as
RFC 2047 base64 words and folds long values at spaces.
`HeaderValue.pre_encoded` takes a value that is already encoded and folded.

The typed headers are:

- `Subject`, `Comments`, `Keywords`, `InReplyTo`, `References`, `MessageId`,
  `UserAgent`, `ContentId`, `ContentLocation` in `lettermill.textual`
- `ContentType` in `lettermill.content_type`, with `ContentType.TEXT_PLAIN`
  and `ContentType.TEXT_HTML`; bad input raises `ContentTypeError`
- `ContentDisposition` in `lettermill.content_disposition`, built with
  `inline()`, `inline_with_name(name)` or `attachment(name)`
- `ContentTransferEncoding` in `lettermill.transfer_encoding`
- `Date` in `lettermill.date`, from a `datetime` or a Unix timestamp,
  written as `Tue, 15 Nov 1994 08:12:31 +0000`
- `MimeVersion` in `lettermill.mime_version`, with `MIME_VERSION_1_0`

```python
from lettermill.content_disposition import ContentDisposition
from lettermill.date import Date

headers.set(ContentDisposition.attachment("report.txt"))
headers.set(Date(784887151))
```

## Bodies

```python
from lettermill.body import Body, InvalidBodyEncoding, into_body
from lettermill.transfer_encoding import ContentTransferEncoding

body = Body("Questo messaggio è corto")
print(body.encoding)   # ContentTransferEncoding.QUOTED_PRINTABLE
print(bytes(body))     # b'Questo messaggio =C3=A8 corto'

Body.with_encoding(b"\x00" * 80, ContentTransferEncoding.BASE64)
```

Text bodies get CRLF line endings and are sent as `7bit` or
quoted-printable; byte bodies are sent as `7bit` or base64.
`Body.with_encoding` raises `InvalidBodyEncoding` when the requested
encoding cannot carry the data, for example non-ASCII text as `7bit`.
`into_body` returns a `Body` unchanged and encodes anything else.

## What this package does not do

It has no message builder that assembles headers and bodies into a full
message, no multipart bodies or attachment builder, no `From`/`To`/`Cc`
mailbox headers, and no way to send mail: there is no SMTP client, no
file output and no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```