# tests/test_content_sync.py
"""Tests for text/binary content synchronization on views."""
import io
from types import SimpleNamespace

import pytest

from viewkit.core.views import (
    Binary, Empty, StreamRef, Text, View,
    buffer_stream, classify_content, has_view, is_stream, is_view, sync_contents,
)


@pytest.fixture
def view() -> View:
    return View(path="pages/home.hbs")


class TestSyncContents:
    def test_text_sets_both_fields(self, view):
        sync_contents(view, "hello")
        assert view.content == "hello"
        assert view.contents == b"hello"

    def test_binary_keeps_bytes_and_decodes_text(self, view):
        data = b"hello"
        sync_contents(view, data)
        assert view.contents is data
        assert view.content == "hello"

    def test_none_clears_both_fields(self, view):
        sync_contents(view, "something")
        sync_contents(view, None)
        assert view.content is None
        assert view.contents is None

    def test_non_ascii_text_is_utf8_encoded(self, view):
        sync_contents(view, "café")
        assert view.contents == "café".encode("utf-8")

    def test_undecodable_bytes_are_replaced(self, view):
        sync_contents(view, b"ok\xff")
        assert view.content == "ok\ufffd"

    def test_unknown_kind_is_a_silent_no_op(self, view):
        sync_contents(view, "before")
        sync_contents(view, {"not": "content"})
        assert view.content == "before"
        assert view.contents == b"before"

    def test_stream_is_held_without_text(self, view):
        stream = io.BytesIO(b"streamed")
        sync_contents(view, stream)
        assert view.contents is stream
        assert view.content is None

    def test_buffer_stream_reads_and_resyncs(self, view):
        sync_contents(view, io.BytesIO(b"streamed"))
        buffer_stream(view)
        assert view.contents == b"streamed"
        assert view.content == "streamed"

    def test_buffer_stream_on_plain_view_does_nothing(self, view):
        sync_contents(view, "text")
        buffer_stream(view)
        assert view.content == "text"


class TestSyncContentsOnOtherRecords:
    def test_mapping_view_gets_public_keys(self):
        record = {"path": "a.hbs"}
        sync_contents(record, "hello")
        assert record["content"] == "hello"
        assert record["contents"] == b"hello"
        assert "_content" not in record

    def test_plain_object_gets_public_attributes(self):
        record = SimpleNamespace(path="a.hbs")
        sync_contents(record, b"bytes")
        assert record.content == "bytes"
        assert record.contents == b"bytes"
        assert not hasattr(record, "_contents")

    def test_buffer_stream_on_mapping_view(self):
        record = {"path": "a.hbs"}
        sync_contents(record, io.BytesIO(b"streamed"))
        assert record["content"] is None
        buffer_stream(record)
        assert record["content"] == "streamed"
        assert record["contents"] == b"streamed"


class TestViewProperties:
    def test_assigning_content_updates_contents(self):
        v = View(path="a.hbs")
        v.content = "x"
        assert v.contents == b"x"

    def test_assigning_contents_updates_content(self):
        v = View(path="a.hbs")
        v.contents = b"y"
        assert v.content == "y"

    def test_constructor_prefers_binary_when_both_given(self):
        v = View(path="a.hbs", content="text", contents=b"binary")
        assert v.content == "binary"


def test_classify_content_variants():
    stream = io.StringIO("s")
    assert classify_content(None) == Empty()
    assert classify_content("t") == Text("t")
    assert classify_content(b"b") == Binary(b"b")
    assert classify_content(stream) == StreamRef(stream)
    assert classify_content(12) is None


def test_is_stream():
    assert is_stream(io.BytesIO())
    assert not is_stream(b"bytes")
    assert not is_stream("text")
    assert not is_stream(None)


class TestViewPredicates:
    def test_is_view_accepts_view_like_values(self):
        assert is_view(View())
        assert is_view({"path": "a.hbs"})
        assert is_view({"content": "x"})

    def test_is_view_rejects_other_values(self):
        assert not is_view({"title": "x"})
        assert not is_view(None)

    def test_has_view_requires_single_entry(self):
        assert has_view({"home": {"path": "home.hbs"}})
        assert not has_view({"a": {"path": "a"}, "b": {"path": "b"}})
        assert not has_view({})
