# tests/test_util.py
import pytest

from viewkit.exceptions import InvalidArgumentError, ViewkitError
from viewkit.util import arrayify, basename_without_ext, format_error, format_ext, has, identity, is_object, strip_dot


class TestFormatExt:
    def test_adds_leading_dot(self):
        assert format_ext("hbs") == ".hbs"

    def test_keeps_existing_dot(self):
        assert format_ext(".hbs") == ".hbs"

    def test_rejects_non_string(self):
        with pytest.raises(InvalidArgumentError, match="format_ext"):
            format_ext(3)


class TestStripDot:
    def test_removes_leading_dot(self):
        assert strip_dot(".hbs") == "hbs"

    def test_leaves_bare_extension(self):
        assert strip_dot("hbs") == "hbs"

    def test_rejects_non_string(self):
        with pytest.raises(InvalidArgumentError, match="strip_dot"):
            strip_dot(None)


def test_arrayify():
    assert arrayify(None) == []
    assert arrayify("a") == ["a"]
    assert arrayify(["a", "b"]) == ["a", "b"]
    assert arrayify(("a",)) == ["a"]


def test_identity_and_has():
    marker = object()
    assert identity(marker) is marker
    assert has(["a", "b"], "b")
    assert not has(["a"], "z")


def test_is_object():
    assert is_object({})
    assert is_object(object.__new__(type("Thing", (), {})))
    assert not is_object([1])
    assert not is_object(None)
    assert not is_object(3)


@pytest.mark.parametrize("path,expected", [
    ("/tmp/foo/bar.hbs", "bar"),
    ("bar.hbs", "bar"),
    ("bar", "bar"),
    ("a/b/archive.tar.gz", "archive.tar"),
    ("C:\\views\\home.html", "home"),
])
def test_basename_without_ext(path, expected):
    assert basename_without_ext(path) == expected


def test_format_error_appends_json_value():
    err = format_error("invalid layout: ", {"name": "x"})
    assert isinstance(err, ViewkitError)
    assert str(err) == 'invalid layout: {"name": "x"}'


def test_format_error_falls_back_to_repr():
    err = format_error("bad: ", {1, 2})
    assert str(err).startswith("bad: {")
