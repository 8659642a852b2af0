"""
Unit tests for path expressions.
"""

import pytest
from toolprobe.validation.paths import MISSING, has_path, parse_path, resolve_path


class TestParsePath:
    """Test path normalization."""

    @pytest.mark.parametrize("path,expected", [
        ("a.b.c", ["a", "b", "c"]),
        ("a.b[0].c", ["a", "b", "0", "c"]),
        ("items[12]", ["items", "12"]),
        ("a[key].b", ["a", "key", "b"]),
        (".a..b.", ["a", "b"]),
        ("", []),
    ])
    def test_parse_path(self, path, expected):
        assert parse_path(path) == expected

    def test_bracket_and_dot_forms_equivalent(self):
        assert parse_path("a.b[0].c") == parse_path("a.b.0.c")


class TestResolvePath:
    """Test lenient traversal."""

    DATA = {
        "user": {
            "name": "Alice",
            "tags": ["a", "b"],
            "address": {"zip": None},
        },
        "matrix": [[1, 2], [3, 4]],
    }

    def test_empty_path_returns_root(self):
        assert resolve_path(self.DATA, None) is self.DATA
        assert resolve_path(self.DATA, "") is self.DATA

    def test_nested_lookup(self):
        assert resolve_path(self.DATA, "user.name") == "Alice"
        assert resolve_path(self.DATA, "user.tags[1]") == "b"
        assert resolve_path(self.DATA, "matrix[1][0]") == 3

    def test_missing_key(self):
        assert resolve_path(self.DATA, "user.phone") is MISSING

    def test_out_of_range_index(self):
        assert resolve_path(self.DATA, "user.tags[5]") is MISSING

    def test_non_canonical_index(self):
        assert resolve_path(self.DATA, "user.tags.01") is MISSING
        assert resolve_path(self.DATA, "user.tags.-1") is MISSING

    def test_stops_at_null(self):
        assert resolve_path(self.DATA, "user.address.zip") is None
        assert resolve_path(self.DATA, "user.address.zip.code") is MISSING

    def test_stops_at_scalar(self):
        # strings are not indexable
        assert resolve_path(self.DATA, "user.name.0") is MISSING
        assert resolve_path(42, "a") is MISSING

    def test_missing_is_falsy(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"


class TestHasPath:
    """Test strict existence traversal."""

    def test_key_absent(self):
        assert has_path({"user": {"address": {}}}, "user.address.zip") is False

    def test_key_present_with_null(self):
        assert has_path({"user": {"address": {"zip": None}}}, "user.address.zip") is True

    def test_array_index(self):
        data = {"items": [{"id": 1}]}
        assert has_path(data, "items[0].id") is True
        assert has_path(data, "items[1]") is False

    def test_through_null_fails(self):
        assert has_path({"a": None}, "a.b") is False

    def test_through_scalar_fails(self):
        assert has_path({"a": "text"}, "a.length") is False

    def test_empty_path_is_not_a_property(self):
        assert has_path({"a": 1}, None) is False
        assert has_path({"a": 1}, "") is False

    def test_unicode_digits_are_not_indices(self):
        data = {"items": [1, 2]}
        assert has_path(data, "items.١") is False
        assert has_path(data, "items.²") is False


class TestNonAsciiSegments:
    """Unicode digits name properties, never list indices."""

    DATA = {"items": [1, 2], "counts": {"²": "squared"}}

    @pytest.mark.parametrize("path", ["items.²", "items.١", "items[²]", "items[١]"])
    def test_unicode_digit_on_list_is_missing(self, path):
        assert resolve_path(self.DATA, path) is MISSING

    def test_unicode_digit_is_a_dict_key(self):
        assert resolve_path(self.DATA, "counts.²") == "squared"

    def test_bracket_index_is_ascii_only(self):
        assert parse_path("items[١]") == ["items[١]"]
        assert parse_path("items[1]") == ["items", "1"]
