"""Shared WARC samples for the test suite."""

import pytest

WARCINFO_CONTENT = (
    b"software: Nutch 1.0-dev (modified for clueweb09)\n"
    b"isPartOf: clueweb09-en\n"
    b"description: clueweb09 crawl with WARC output\n"
    b"format: WARC file version 0.18\n"
    b"conformsTo: http://www.archive.org/documents/WarcFileFormat-0.18.html\n"
)

RESPONSE_CONTENT = (
    b"HTTP/1.1 200 OK\r\n"
    b"Server: lumanau.web.id\r\n"
    b"Date: Fri, 10 Feb 2012 22:27:52 GMT\r\n"
    b"Content-Type: text/plain\r\n"
    b"Connection: close\r\n"
    b"X-Powered-By: PHP/5.3.8\r\n"
    b"Cluster: vm-2\r\n"
    b"\r\n"
    b"XML-RPC server accepts POST requests only."
)


def make_warc(version, headers, content, nl=b"\n", trailer=None):
    """Build raw record bytes; Content-Length is appended from ``content``."""
    lines = [b"WARC/" + version]
    lines.extend(name + b": " + value for name, value in headers)
    lines.append(b"Content-Length: " + str(len(content)).encode("ascii"))
    head = nl.join(lines) + nl + nl
    if trailer is None:
        trailer = nl + nl
    return head + content + trailer


def warcinfo_record():
    return make_warc(
        b"0.18",
        [
            (b"WARC-Type", b"warcinfo"),
            (b"WARC-Date", b"2009-03-65T08:43:19-0800"),
            (b"WARC-Record-ID", b"<urn:uuid:993d3969-9643-4934-b1c6-68d4dbe55b83>"),
            (b"Content-Type", b"application/warc-fields"),
        ],
        WARCINFO_CONTENT,
    )


def response_record(trecid=b"clueweb12-0000tw-00-00055", content=RESPONSE_CONTENT):
    return make_warc(
        b"1.0",
        [
            (b"WARC-Type", b"response"),
            (b"WARC-Date", b"2012-02-10T22:27:49Z"),
            (b"WARC-TREC-ID", trecid),
            (b"WARC-Target-URI", b"http://rajakarcis.com/cms/xmlrpc.php"),
            (b"WARC-IP-Address", b"103.246.184.36"),
            (b"WARC-Record-ID", b"<urn:uuid:5262e3ba-a830-45f2-85ad-cc5c90a213d9>"),
            (b"Content-Type", b"application/http; msgtype=response"),
        ],
        content,
        nl=b"\r\n",
    )


def untyped_record():
    """A record without WARC-Type, so it fails the mandatory field check."""
    return make_warc(
        b"0.18",
        [(b"WARC-Date", b"2009-03-65T08:43:19-0800")],
        b"HTTP/1.1 200 OK\nContent-Length: 10\n\nbody text\n",
    )


@pytest.fixture
def sample_warc_file(tmp_path):
    """A WARC file holding a warcinfo record and two responses."""
    warc_file = tmp_path / "test.warc"
    warc_file.write_bytes(
        warcinfo_record()
        + response_record()
        + response_record(trecid=b"clueweb12-0000tw-00-00056", content=b"line one\nline two")
    )
    return warc_file


@pytest.fixture
def corrupt_warc_file(tmp_path):
    """A WARC file with a broken record between two good responses."""
    warc_file = tmp_path / "corrupt.warc"
    warc_file.write_bytes(
        response_record() + untyped_record() + response_record(trecid=b"clueweb12-0000tw-00-00057")
    )
    return warc_file
