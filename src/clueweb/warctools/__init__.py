"""Main warctools package - reads ClueWeb style WARC records.

WARC Format Specification References:
- WARC 1.1 Annotated (primary): https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/
"""

from . import errors, output, record, stream, warc
from .errors import (
    IncompleteRecord,
    InvalidContentLength,
    InvalidField,
    InvalidVersion,
    MissingMandatoryFields,
    WarcError,
    is_error,
    match_result,
)
from .record import WarcRecord
from .stream import RecordStream, open_record_stream
from .warc import WarcParser, open_archive, read_record, read_subsequent_record

__all__ = [
    "WarcRecord",
    "WarcError",
    "InvalidVersion",
    "InvalidField",
    "MissingMandatoryFields",
    "IncompleteRecord",
    "InvalidContentLength",
    "RecordStream",
    "WarcParser",
    "is_error",
    "match_result",
    "open_archive",
    "open_record_stream",
    "read_record",
    "read_subsequent_record",
    "errors",
    "output",
    "record",
    "stream",
    "warc",
]
