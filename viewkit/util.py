import json
import posixpath
from collections.abc import Mapping
from typing import Any, List
import structlog

from viewkit.exceptions import InvalidArgumentError, ViewkitError

log = structlog.get_logger(__name__)

def identity(value: Any) -> Any:
    # returns the given value as-is.
    return value

def arrayify(value: Any) -> List[Any]:
    # casts a value to a list. falsy values become an empty list.
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]

def has(items, item) -> bool:
    # true if the sequence contains the given element.
    return item in items

def is_object(value: Any) -> bool:
    # true for mappings and plain objects; false for None, scalars and sequences.
    if value is None or isinstance(value, (str, bytes, bytearray, int, float, bool, list, tuple)):
        return False
    return isinstance(value, Mapping) or hasattr(value, "__dict__")

def format_ext(ext: str) -> str:
    """
    Ensures a file extension is formatted for lookups.

    >>> format_ext("hbs")
    '.hbs'
    >>> format_ext(".hbs")
    '.hbs'
    """
    if not isinstance(ext, str):
        raise InvalidArgumentError(f"format_ext() expects `ext` to be a string, got {type(ext).__name__}.")
    if not ext.startswith("."):
        return "." + ext
    return ext

def strip_dot(ext: str) -> str:
    """
    Strips the leading dot from a file extension.

    >>> strip_dot(".hbs")
    'hbs'
    """
    if not isinstance(ext, str):
        raise InvalidArgumentError(f"strip_dot() expects `ext` to be a string, got {type(ext).__name__}.")
    if ext.startswith("."):
        return ext[1:]
    return ext

def basename_without_ext(file_path: str) -> str:
    # "/tmp/foo/bar.hbs" -> "bar". windows separators are treated as "/".
    base = posixpath.basename(str(file_path).replace("\\", "/"))
    stem, _ = posixpath.splitext(base)
    return stem

def format_error(message: str, value: Any) -> ViewkitError:
    # builds (does not raise) an error with the offending value appended as json.
    try:
        rendered = json.dumps(value)
    except (TypeError, ValueError):
        rendered = repr(value)
    return ViewkitError(message + rendered)
