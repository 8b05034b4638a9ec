"""Read WARC records, one parse attempt at a time.

A parse attempt runs the stages in order and stops at the first failure:

    version line -> header fields -> mandatory field check -> content -> trailer

Each stage returns either its value or a WarcError. The two entry points
differ only in how the version line is located: read_record() expects it
next (after optional blank lines), read_subsequent_record() skips any
lines until one turns up, which is how a caller resynchronizes after an
error.

WARC Format Specification References:
- WARC 1.1 Annotated (primary): https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/
- WARC 0.18 (ClueWeb09): http://www.archive.org/documents/WarcFileFormat-0.18.html
"""

import re

from clueweb.warctools.errors import (
    IncompleteRecord,
    InvalidContentLength,
    InvalidField,
    InvalidVersion,
    MissingMandatoryFields,
    is_error,
)
from clueweb.warctools.record import WarcRecord
from clueweb.warctools.stream import open_record_stream

VERSION_PREFIX = "WARC/"
# ASCII whitespace only, matching the C locale isspace()
WHITESPACE = " \t\n\r\f\v"

# Content-Length per WARC 1.1 Section 5.5: "Content-Length" ":" 1*DIGIT
length_rx = re.compile(r"[0-9]+")


def _text(line):
    return line.decode("utf-8", errors="replace")


def _is_blank(line):
    return line == b"" or line == b"\r"


def read_version(stream, recover=False):
    """Locate the ``WARC/<version>`` line and return the version text.

    Lines are trimmed before the prefix test and blank lines are always
    skipped. When ``recover`` is false the first non-blank line must be a
    version line. When true, non-matching lines are discarded until one
    is found. Either way end of stream gives InvalidVersion carrying the
    last offending line, or "" if there was none.
    """
    last = ""
    line = stream.readline()
    while line is not None:
        text = _text(line)
        trimmed = text.strip(WHITESPACE)
        if trimmed.startswith(VERSION_PREFIX) and len(trimmed) > len(VERSION_PREFIX):
            return trimmed[len(VERSION_PREFIX) :]
        if trimmed:
            if not recover:
                return InvalidVersion(text)
            last = text
        line = stream.readline()
    return InvalidVersion(last)


def read_fields(stream):
    """Read header lines up to a blank line or end of stream.

    Returns a dict of lowercased, trimmed names to trimmed values, later
    duplicates overwriting earlier ones, or InvalidField for the first
    line that has no name, or nothing at all after its first colon.
    """
    fields = {}
    line = stream.readline()
    while line is not None and not _is_blank(line):
        text = _text(line)
        name, _, value = text.partition(":")
        name = name.strip(WHITESPACE)
        # a whitespace-only value is legal, e.g. ClueWeb09's
        # "WARC-Identified-Payload-Type: ", but the \r of a CRLF is not a value
        if not name or not value.removesuffix("\r"):
            return InvalidField(text)
        fields[name.lower()] = value.strip(WHITESPACE)
        line = stream.readline()
    return fields


def read_content(stream, fields):
    """Read exactly Content-Length bytes of record block.

    Returns the bytes, InvalidContentLength if the header is not a
    decimal number, or IncompleteRecord if the stream ends early.
    """
    raw_value = fields.get(WarcRecord.CONTENT_LENGTH, "")
    if not length_rx.fullmatch(raw_value):
        return InvalidContentLength(raw_value)

    length = int(raw_value)
    if length == 0:
        return b""

    content = stream.read(length)
    if len(content) < length:
        return IncompleteRecord(expected=length, received=len(content))
    return content


def skip_trailer(stream):
    """Skip the CR/LF bytes separating a record from the next one."""
    while stream.peek() in (b"\r", b"\n"):
        stream.skip()


def _read_record(stream, recover):
    version = read_version(stream, recover=recover)
    if is_error(version):
        return version

    fields = read_fields(stream)
    if is_error(fields):
        return fields

    # The body is left unread here: after this error the stream sits
    # inside the record and only read_subsequent_record() can continue.
    if not WarcRecord(version, fields).valid():
        return MissingMandatoryFields()

    content = read_content(stream, fields)
    if is_error(content):
        return content

    skip_trailer(stream)
    return WarcRecord(version, fields, content)


def read_record(stream):
    """Parse the record starting at the current position.

    Returns a WarcRecord or a WarcError. Blank lines before the version
    line are skipped, anything else there is an InvalidVersion.
    """
    return _read_record(stream, recover=False)


def read_subsequent_record(stream):
    """Parse the next record after discarding anything before its version line.

    Use after an error to get back in step with the stream. Returns
    InvalidVersion only once the stream is exhausted.
    """
    return _read_record(stream, recover=True)


class WarcParser:
    """Parser for WARC records, used by RecordStream to read records.

    See:
        WARC 1.1 Section 4: https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/#file-and-record-model
    """

    is_error = staticmethod(is_error)

    def parse(self, stream, recover=False):
        """Read one record, strictly or resynchronizing.

        Returns:
            WarcRecord or WarcError
        """
        if recover:
            return read_subsequent_record(stream)
        return read_record(stream)

    def is_tail(self, result, recover):
        """True if ``result`` only says there are no more records.

        That is the case for a resynchronizing scan that hit end of stream,
        and for a strict one that found nothing but blank lines.
        """
        if not isinstance(result, InvalidVersion):
            return False
        return recover or not result.raw_line.strip(WHITESPACE)


def open_archive(filename=None, file_handle=None):
    """Open an uncompressed WARC file (``-`` for stdin) for reading records."""
    return open_record_stream(filename, file_handle, record_parser=WarcParser())
