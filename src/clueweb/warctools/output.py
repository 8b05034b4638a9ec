"""Text serializations of response records, one record per output line.

Only records passing ``valid_response()`` are written; anything else is
silently dropped.
"""

import json

# Lines delimit records, so newlines in content are written as this escape.
NEWLINE_ESCAPE = "\\u000A"


def _decode(content):
    return content.decode("utf-8", errors="replace")


class RecordWriter:
    """Base class for the serializers in FORMATS."""

    def __init__(self, out):
        self.out = out
        self.written = 0

    def write(self, record):
        """Write ``record`` if it is a valid response; return True if written."""
        if not record.valid_response():
            return False
        self._write(record)
        self.written += 1
        return True

    def _write(self, record):
        raise NotImplementedError


class TsvWriter(RecordWriter):
    """``trecid<TAB>url<TAB>content`` with newlines escaped."""

    def _write(self, record):
        content = _decode(record.content).replace("\n", NEWLINE_ESCAPE)
        self.out.write(f"{record.trecid}\t{record.url}\t{content}\n")


class JsonWriter(RecordWriter):
    """JSON lines with ``title``, ``url`` and ``body`` keys."""

    def _write(self, record):
        doc = {
            "title": record.trecid,
            "url": record.url,
            "body": _decode(record.content),
        }
        self.out.write(json.dumps(doc, ensure_ascii=False))
        self.out.write("\n")


FORMATS = {
    "tsv": TsvWriter,
    "json": JsonWriter,
}


def make_writer(fmt, out):
    """Return the writer registered for ``fmt``, writing text to ``out``."""
    try:
        writer_class = FORMATS[fmt]
    except KeyError:
        raise ValueError(f"unknown output format {fmt!r}, expected one of {sorted(FORMATS)}") from None
    return writer_class(out)
