# viewkit/core/views/content.py
"""
Classifies raw view content into one of four kinds and keeps a view's
textual (`content`) and binary (`contents`) fields describing the same data.
"""
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Optional, Union
import structlog

from viewkit.config.settings import DEFAULT_ENCODING

log = structlog.get_logger(__name__)

@dataclass(frozen=True)
class Empty:
    pass

@dataclass(frozen=True)
class Text:
    value: str

@dataclass(frozen=True)
class Binary:
    value: Union[bytes, bytearray, memoryview]

@dataclass(frozen=True)
class StreamRef:
    handle: Any

ContentValue = Union[Empty, Text, Binary, StreamRef]

def is_buffer(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))

def is_stream(value: Any) -> bool:
    # anything file-like with a callable read() that is not already text or bytes.
    if value is None or isinstance(value, (str, bytes, bytearray, memoryview)):
        return False
    return callable(getattr(value, "read", None))

def classify_content(value: Any) -> Optional[ContentValue]:
    """Returns the content variant for `value`, or None for an unrecognized kind."""
    if value is None:
        return Empty()
    if isinstance(value, str):
        return Text(value)
    if is_buffer(value):
        return Binary(value)
    if is_stream(value):
        return StreamRef(value)
    return None

def _has_synced_properties(view: Any) -> bool:
    # records like View route `content`/`contents` through properties that call back here.
    return isinstance(getattr(type(view), "content", None), property)

def _assign(view: Any, text: Optional[str], binary: Any) -> None:
    if _has_synced_properties(view):
        view._content = text
        view._contents = binary
    elif isinstance(view, MutableMapping):
        view["content"] = text
        view["contents"] = binary
    else:
        view.content = text
        view.contents = binary

def _read_contents(view: Any) -> Any:
    if isinstance(view, Mapping):
        return view.get("contents")
    return getattr(view, "contents", None)

def sync_contents(view: Any, contents: Any, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Sets both content fields on `view` from a single value.

    | kind    | contents          | content                 |
    |---------|-------------------|-------------------------|
    | None    | None              | None                    |
    | str     | encoded bytes     | the string              |
    | bytes   | unchanged         | decoded string          |
    | stream  | the stream handle | None until buffered     |

    Values of any other kind leave the view untouched.
    """
    value = classify_content(contents)
    if value is None:
        log.debug("sync_contents_ignored_unknown_kind", value_type=type(contents).__name__)
        return

    if isinstance(value, Empty):
        _assign(view, None, None)
    elif isinstance(value, Text):
        _assign(view, value.value, value.value.encode(encoding))
    elif isinstance(value, Binary):
        _assign(view, bytes(value.value).decode(encoding, errors="replace"), value.value)
    elif isinstance(value, StreamRef):
        # a stream has no inspectable text until it has been read.
        _assign(view, None, value.handle)

def buffer_stream(view: Any, encoding: str = DEFAULT_ENCODING) -> None:
    # drains a stream held in `contents` and resynchronizes both fields.
    handle = _read_contents(view)
    if not is_stream(handle):
        return
    data = handle.read()
    log.debug("view_stream_buffered", size=len(data))
    sync_contents(view, data, encoding=encoding)
