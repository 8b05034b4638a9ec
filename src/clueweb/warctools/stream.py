"""Read records sequentially from a byte stream.

The RecordStream is the single cursor shared by every parsing stage. It
supports line reads, exact-length reads, a one byte peek and an end of
stream test, and nothing else: no seeking and no decompression.
"""

import logging
import sys


def open_record_stream(filename=None, file_handle=None, record_parser=None):
    """Open a WARC file and return a RecordStream for reading records.

    Args:
        filename: Path to an uncompressed WARC file, or ``-`` for stdin
        file_handle: Optional binary file-like object (takes precedence over filename)
        record_parser: Parser whose ``parse(stream, recover)`` reads one record
            (default: WarcParser)

    Returns:
        RecordStream: Stream for reading records

    Example:
        >>> stream = open_record_stream(filename="00.warc")
        >>> for record in stream:
        ...     print(record.trecid)
    """
    if file_handle is None:
        if filename == "-":
            file_handle = sys.stdin.buffer
        else:
            file_handle = open(filename, mode="rb")

    if record_parser is None:
        from .warc import WarcParser

        record_parser = WarcParser()

    return RecordStream(file_handle, record_parser)


class RecordStream:
    """A readable stream of WARC records. Can be iterated over, or
    read_records can give more control, errors and offset information.
    """

    def __init__(self, file_handle, record_parser):
        self.fh = file_handle
        self.record_parser = record_parser

        # Number of bytes consumed from fh so far.
        self.offset = 0
        # A byte read by peek() and not yet handed out.
        self._pushback = b""

    def peek(self):
        """Return the next byte without consuming it, b"" at end of stream."""
        if not self._pushback:
            self._pushback = self.fh.read(1)
        return self._pushback

    def at_eof(self):
        return self.peek() == b""

    def readline(self):
        """Read one line and return it with the trailing ``\\n`` removed.

        A ``\\r`` before the newline is kept. Returns None once the stream is
        exhausted.
        """
        line = self._pushback
        self._pushback = b""
        if line != b"\n":
            line += self.fh.readline()
        if not line:
            return None
        self.offset += len(line)
        if line.endswith(b"\n"):
            line = line[:-1]
        return line

    def read(self, count):
        """Read up to ``count`` bytes. Short only at end of stream."""
        if count <= 0:
            return b""
        chunks = [self._pushback[:count]]
        self._pushback = self._pushback[count:]
        remaining = count - len(chunks[0])
        while remaining > 0:
            buf = self.fh.read(min(CHUNK_SIZE, remaining))
            if not buf:
                break
            chunks.append(buf)
            remaining -= len(buf)
        result = b"".join(chunks)
        self.offset += len(result)
        return result

    def skip(self):
        """Consume the byte returned by peek()."""
        if self.peek():
            self._pushback = b""
            self.offset += 1

    def read_records(self, limit=None):
        """Yield ``(offset, result)`` tuples where result is a WarcRecord
        or a WarcError and offset is where the parse attempt started.

        The first attempt is strict. After an error the next attempt
        resynchronizes by scanning for the next version line; after a
        record it is strict again. Iteration ends when the stream is
        exhausted.
        """
        nrecords = 0
        recover = False
        while (limit is None or nrecords < limit) and not self.at_eof():
            offset = self.offset
            result = self.record_parser.parse(self, recover=recover)
            if self.record_parser.is_tail(result, recover):
                break
            nrecords += 1
            yield (offset, result)
            recover = self.record_parser.is_error(result)

    def __iter__(self):
        for offset, result in self.read_records():
            if self.record_parser.is_error(result):
                logging.warning(f"skipping warc error at offset {offset}: {result}")
            else:
                yield result

    def close(self):
        """Close the underlying file handle."""
        self.fh.close()


CHUNK_SIZE = 8192  # the size to read in, make this bigger things go faster.
