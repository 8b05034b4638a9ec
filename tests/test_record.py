"""Tests for WarcRecord and the parse error variants."""

from io import StringIO

import pytest

from clueweb.warctools import (
    IncompleteRecord,
    InvalidContentLength,
    InvalidField,
    InvalidVersion,
    MissingMandatoryFields,
    WarcRecord,
    is_error,
    match_result,
)


def response(**extra):
    fields = {
        "WARC-Type": "response",
        "Content-Length": "5",
        "WARC-Target-URI": "http://example.com/",
        "WARC-TREC-ID": "clueweb09-en0000-00-00000",
    }
    fields.update(extra)
    return WarcRecord("0.18", fields, b"hello")


def test_fields_are_lowercased():
    record = response()
    assert set(record.fields) == {
        "warc-type",
        "content-length",
        "warc-target-uri",
        "warc-trec-id",
    }


def test_field_lookup_is_case_insensitive():
    record = response()
    assert record.field("WARC-TREC-ID") == "clueweb09-en0000-00-00000"
    assert record.field("warc-trec-id") == "clueweb09-en0000-00-00000"
    assert record.field("WARC-Date") is None
    assert record.has("Content-Length")
    assert not record.has("WARC-Date")


def test_accessors():
    record = response(**{"WARC-Date": "2009-03-65T08:43:19-0800", "Content-Type": "text/html"})
    assert record.type == WarcRecord.RESPONSE
    assert record.url == "http://example.com/"
    assert record.trecid == "clueweb09-en0000-00-00000"
    assert record.date == "2009-03-65T08:43:19-0800"
    assert record.content_type == "text/html"
    assert record.content_length == 5
    assert record.id is None


def test_fields_are_read_only():
    record = response()
    with pytest.raises(TypeError):
        record.fields["warc-type"] = "request"


def test_valid():
    assert WarcRecord("1.0", {"warc-type": "warcinfo", "content-length": "0"}).valid()
    assert not WarcRecord("1.0", {"warc-type": "warcinfo"}).valid()
    assert not WarcRecord("1.0", {"content-length": "0"}).valid()


def test_valid_response():
    assert response().valid_response()
    assert not response(**{"WARC-Type": "request"}).valid_response()
    record = WarcRecord("0.18", {"warc-type": "response", "content-length": "0"})
    assert record.valid()
    assert not record.valid_response()


def test_equality():
    assert response() == response()
    assert response() != response(**{"WARC-Type": "request"})
    assert response() != WarcRecord("0.18", dict(response().fields), b"other")


def test_dump():
    out = StringIO()
    response().dump(out)
    text = out.getvalue()
    assert "Version: WARC/0.18" in text
    assert "\twarc-trec-id:clueweb09-en0000-00-00000" in text
    assert "\thello" in text


def test_dump_escapes_content():
    out = StringIO()
    WarcRecord("1.0", {"warc-type": "resource"}, b"a\r\nb").dump(out)
    assert "a\\xD\\xAb" in out.getvalue()


def test_dump_without_content():
    out = StringIO()
    WarcRecord("1.0", {"warc-type": "resource"}).dump(out)
    assert "Content: none" in out.getvalue()


@pytest.mark.parametrize(
    "error,text",
    [
        (InvalidVersion("garbage"), "invalid version line: 'garbage'"),
        (InvalidField("broken"), "could not parse field: 'broken'"),
        (MissingMandatoryFields(), "missing mandatory fields (WARC-Type, Content-Length)"),
        (IncompleteRecord(10, 4), "incomplete record: expected 10 bytes, got 4"),
        (InvalidContentLength("x"), "could not parse content length: 'x'"),
    ],
)
def test_error_messages(error, text):
    assert str(error) == text
    assert is_error(error)


def test_errors_are_values():
    assert InvalidField("a") == InvalidField("a")
    assert InvalidField("a") != InvalidVersion("a")
    assert not isinstance(MissingMandatoryFields(), Exception)


def test_match_result():
    on_record = lambda record: ("record", record.type)  # noqa: E731
    on_error = lambda error: ("error", type(error).__name__)  # noqa: E731
    assert match_result(response(), on_record, on_error) == ("record", "response")
    assert match_result(MissingMandatoryFields(), on_record, on_error) == (
        "error",
        "MissingMandatoryFields",
    )
    assert not is_error(response())
