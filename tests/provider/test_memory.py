"""Tests for MemoryContentProvider and MemoryCursor."""

import pytest

from doctree_core.provider import ContentProvider, Cursor
from doctree_core.provider.memory import MemoryContentProvider, MemoryCursor


class TestProtocolCompliance:
    def test_provider_satisfies_protocol(self):
        assert isinstance(MemoryContentProvider("com.example.docs"), ContentProvider)

    def test_cursor_satisfies_protocol(self):
        assert isinstance(MemoryCursor([]), Cursor)


class TestMemoryCursor:
    """Test cursor positioning and reads."""

    def test_iterate_rows(self):
        cursor = MemoryCursor([("a", 1), ("b", 2)])
        assert cursor.move_to_first()
        assert cursor.get_string(0) == "a"
        assert cursor.move_to_next()
        assert cursor.get_int(1) == 2
        assert not cursor.move_to_next()
        assert not cursor.move_to_next()

    def test_empty(self):
        cursor = MemoryCursor([])
        assert not cursor.move_to_first()
        assert cursor.get_count() == 0

    def test_read_before_first_row(self):
        with pytest.raises(IndexError):
            MemoryCursor([("a",)]).get_string(0)

    def test_read_after_close(self):
        cursor = MemoryCursor([("a",)])
        cursor.move_to_first()
        cursor.close()
        with pytest.raises(RuntimeError, match="closed"):
            cursor.get_string(0)

    def test_close_count(self):
        cursor = MemoryCursor([])
        assert not cursor.closed
        cursor.close()
        cursor.close()
        assert cursor.close_count == 2

    def test_null_int_reads_as_zero(self):
        cursor = MemoryCursor([("a", None)])
        cursor.move_to_first()
        assert cursor.get_int(1) == 0
        assert cursor.get_string(1) is None


class TestMemoryContentProvider:
    """Test query answers."""

    def test_single_document(self, provider: MemoryContentProvider):
        uri = provider.document_uri("root", "root/work.ics")
        cursor = provider.query(str(uri), ["mime_type", "flags", "_display_name"], "", [], "")
        assert cursor is not None
        assert cursor.move_to_first()
        assert cursor.get_string(0) == "text/calendar"
        assert cursor.get_int(1) == 0x6
        assert cursor.get_string(2) == "work.ics"

    def test_children(self, provider: MemoryContentProvider):
        uri = provider.document_uri("root", "root/sub")
        cursor = provider.query(f"{uri}/children", ["document_id"], "", [], "")
        assert cursor is not None
        assert cursor.get_count() == 1

    def test_single_document_uri_without_tree(self, provider: MemoryContentProvider):
        cursor = provider.query("content://com.example.docs/document/root%2Fwork.ics", ["mime_type"], "", [], "")
        assert cursor is not None

    def test_unknown_document(self, provider: MemoryContentProvider):
        uri = provider.document_uri("root", "root/missing")
        assert provider.query(str(uri), ["mime_type"], "", [], "") is None

    def test_other_authority(self, provider: MemoryContentProvider):
        assert provider.query("content://other/tree/root/document/root", ["mime_type"], "", [], "") is None

    def test_unparseable_uri(self, provider: MemoryContentProvider):
        assert provider.query("not a uri", ["mime_type"], "", [], "") is None

    def test_joined_uri_is_unknown(self, provider: MemoryContentProvider):
        uri = provider.document_uri("root", "root")
        assert provider.query(f"{uri}/work.ics", ["mime_type"], "", [], "") is None

    def test_unknown_column(self, provider: MemoryContentProvider):
        uri = provider.document_uri("root", "root")
        with pytest.raises(ValueError, match="Unknown column"):
            provider.query(str(uri), ["size"], "", [], "")

    def test_queries_recorded(self, provider: MemoryContentProvider):
        provider.query("not a uri", [], "", [], "")
        assert provider.queries == ["not a uri"]

    def test_table_selection(self):
        provider = MemoryContentProvider("com.android.calendar")
        provider.add_table("content://com.android.calendar/calendars", [{"name": "a"}, {"name": "b"}])
        cursor = provider.query("content://com.android.calendar/calendars", ["name"], "name = ?", ["b"], "")
        assert cursor is not None
        assert cursor.get_count() == 1

    def test_table_unsupported_selection(self):
        provider = MemoryContentProvider("com.android.calendar")
        provider.add_table("content://com.android.calendar/calendars", [])
        with pytest.raises(ValueError, match="Unsupported selection"):
            provider.query("content://com.android.calendar/calendars", ["name"], "name LIKE ?", ["b"], "")
