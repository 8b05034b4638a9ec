"""The WARC record produced by a successful parse.

WARC Format Specification References:
- WARC 1.1 Annotated (primary): https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/
- ClueWeb09 uses the older WARC/0.18 draft and adds the WARC-TREC-ID field.
"""

import re
import sys
from types import MappingProxyType

strip = re.compile(rb"[^\w\t \|\\\/]")


def add_headers(**kwargs):
    """Decorator helper for defining header name constants on a record class.

    Sets a class attribute for each header and keeps the list of names in
    ``_HEADERS``. Values are the lowercased field names used as keys in
    ``WarcRecord.fields``.

    Example:
        @add_headers(
            TYPE="warc-type",
            URL="warc-target-uri",
        )
        class WarcRecord:
            pass
    """

    def _add_headers(cls):
        for k, v in kwargs.items():
            setattr(cls, k, v)
        cls._HEADERS = list(kwargs.keys())
        return cls

    return _add_headers


# WARC Named Fields - See WARC 1.1 Section 5 "Named fields"
# https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/#named-fields
@add_headers(
    TYPE="warc-type",  # Section 5.4 (mandatory)
    CONTENT_LENGTH="content-length",  # Section 5.5 (mandatory)
    DATE="warc-date",  # Section 5.3
    ID="warc-record-id",  # Section 5.2
    CONTENT_TYPE="content-type",  # Section 5.6
    URL="warc-target-uri",  # Section 5.13
    TREC_ID="warc-trec-id",  # ClueWeb extension
)
class WarcRecord:
    """A parsed WARC record: version, header fields and raw content.

    ``fields`` maps lowercased header names to trimmed values. ``content``
    is the block exactly as read, ``Content-Length`` bytes, never decoded.
    Records are built once by the parser and not modified afterwards.
    """

    # pylint: disable=no-member

    # WARC Record Types - See WARC 1.1 Section 6 "WARC Record Types"
    WARCINFO = "warcinfo"
    RESPONSE = "response"
    RESOURCE = "resource"
    REQUEST = "request"
    METADATA = "metadata"
    REVISIT = "revisit"
    CONVERSION = "conversion"
    CONTINUATION = "continuation"

    def __init__(self, version, fields=None, content=b""):
        self._version = version
        self._fields = {k.lower(): v for k, v in (fields or {}).items()}
        self._content = bytes(content)

    @property
    def version(self):
        """The text following ``WARC/`` on the version line."""
        return self._version

    @property
    def fields(self):
        return MappingProxyType(self._fields)

    @property
    def content(self):
        return self._content

    def field(self, name):
        """Value of the named field, case insensitively, or None."""
        return self._fields.get(name.lower())

    def has(self, name):
        return name.lower() in self._fields

    @property
    def type(self):
        return self.field(self.TYPE)

    @property
    def url(self):
        return self.field(self.URL)

    @property
    def trecid(self):
        return self.field(self.TREC_ID)

    @property
    def date(self):
        return self.field(self.DATE)

    @property
    def id(self):
        return self.field(self.ID)

    @property
    def content_type(self):
        return self.field(self.CONTENT_TYPE)

    @property
    def content_length(self):
        """Declared Content-Length as an int, or None if absent.

        The parser only builds records whose length is a valid decimal
        number, so this never fails for parsed records.
        """
        value = self.field(self.CONTENT_LENGTH)
        if value is None:
            return None
        return int(value)

    def valid(self):
        """True if the mandatory WARC-Type and Content-Length are present."""
        return self.has(self.TYPE) and self.has(self.CONTENT_LENGTH)

    def valid_response(self):
        """True for a valid ``response`` record carrying a target URI and TREC-ID."""
        return (
            self.valid()
            and self.has(self.URL)
            and self.has(self.TREC_ID)
            and self.type == self.RESPONSE
        )

    def __eq__(self, other):
        if not isinstance(other, WarcRecord):
            return NotImplemented
        return (
            self._version == other._version
            and self._fields == other._fields
            and self._content == other._content
        )

    def __hash__(self):
        return hash((self._version, self._content))

    def __repr__(self):
        return (
            f"WarcRecord(version={self._version!r}, type={self.type!r}, "
            f"content_length={len(self._content)})"
        )

    def dump(self, out=None, content=True):
        """Write a human readable rendering of the record to ``out``."""
        if out is None:
            out = sys.stdout
        print(f"Version: WARC/{self._version}", file=out)
        print("Headers:", file=out)
        for h, v in self._fields.items():
            print(f"\t{h}:{v}", file=out)
        if content and self._content:
            print("Content:", file=out)
            ln = min(1024, len(self._content))
            abbr_strp_content = strip.sub(
                lambda x: (f"\\x{ord(x.group()):0X}").encode("ascii"),
                self._content[:ln],
            )
            print("\t" + abbr_strp_content.decode("ascii", errors="replace"), file=out)
            if ln < len(self._content):
                print("\t...", file=out)
            print(file=out)
        else:
            print("Content: none", file=out)
            print(file=out)
