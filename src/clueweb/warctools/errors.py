"""Parse errors returned by the WARC record reader.

A parse attempt never raises for malformed input. It returns either a
:class:`~clueweb.warctools.record.WarcRecord` or one of the error variants
below, and the caller decides whether to stop or resynchronize.
"""

from dataclasses import dataclass


class WarcError:
    """Base of the closed set of parse errors. Not an exception."""

    __slots__ = ()

    def message(self):
        raise NotImplementedError

    def __str__(self):
        return self.message()


@dataclass(frozen=True)
class InvalidVersion(WarcError):
    """No ``WARC/<version>`` line was found before the end of the stream."""

    raw_line: str = ""

    def message(self):
        return f"invalid version line: {self.raw_line!r}"


@dataclass(frozen=True)
class InvalidField(WarcError):
    """A header line had no usable ``name:value`` split."""

    raw_line: str

    def message(self):
        return f"could not parse field: {self.raw_line!r}"


@dataclass(frozen=True)
class MissingMandatoryFields(WarcError):
    """Header block lacks ``WARC-Type`` or ``Content-Length``.

    The declared body has not been consumed, so the stream is no longer
    aligned on a record boundary.
    """

    def message(self):
        return "missing mandatory fields (WARC-Type, Content-Length)"


@dataclass(frozen=True)
class IncompleteRecord(WarcError):
    """Stream ended before ``Content-Length`` bytes of body could be read."""

    expected: int = 0
    received: int = 0

    def message(self):
        return f"incomplete record: expected {self.expected} bytes, got {self.received}"


@dataclass(frozen=True)
class InvalidContentLength(WarcError):
    """``Content-Length`` is not a non-negative decimal integer."""

    raw_value: str

    def message(self):
        return f"could not parse content length: {self.raw_value!r}"


ERROR_TYPES = (
    InvalidVersion,
    InvalidField,
    MissingMandatoryFields,
    IncompleteRecord,
    InvalidContentLength,
)


def is_error(result):
    """True if a parse result is an error rather than a record."""
    return isinstance(result, WarcError)


def match_result(result, on_record, on_error):
    """Dispatch a parse result to ``on_record`` or ``on_error``.

    Returns whatever the chosen callback returns.
    """
    if isinstance(result, ERROR_TYPES):
        return on_error(result)
    if isinstance(result, WarcError):
        raise TypeError(f"unknown error variant {type(result).__name__}")
    return on_record(result)
