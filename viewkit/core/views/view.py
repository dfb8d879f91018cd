# viewkit/core/views/view.py
from collections.abc import Mapping
from typing import Any, Optional

from viewkit.config.settings import DEFAULT_ENCODING
from .content import sync_contents

VIEW_FIELDS = ("content", "contents", "path")

class View:
    """
    Minimal rendering unit: an identifying path plus text and binary content.

    Assigning either `content` or `contents` updates both.
    """
    __slots__ = ("path", "encoding", "_content", "_contents")

    def __init__(self, path: Optional[str] = None, content: Any = None, contents: Any = None,
                 encoding: str = DEFAULT_ENCODING):
        self.path = path
        self.encoding = encoding
        self._content = None
        self._contents = None
        # binary wins when both are given.
        sync_contents(self, contents if contents is not None else content, encoding=encoding)

    @property
    def content(self) -> Optional[str]:
        return self._content

    @content.setter
    def content(self, value: Any) -> None:
        sync_contents(self, value, encoding=self.encoding)

    @property
    def contents(self) -> Any:
        return self._contents

    @contents.setter
    def contents(self, value: Any) -> None:
        sync_contents(self, value, encoding=self.encoding)

    def __repr__(self) -> str:
        return f"View(path={self.path!r}, content={self._content!r})"

def is_view(value: Any) -> bool:
    # true if the value carries any of content, contents or path.
    if value is None:
        return False
    if isinstance(value, Mapping):
        return any(field in value for field in VIEW_FIELDS)
    return any(hasattr(value, field) for field in VIEW_FIELDS)

def has_view(value: Any) -> bool:
    # true for a single-entry mapping whose only value is a view.
    if not isinstance(value, Mapping) or len(value) != 1:
        return False
    return is_view(next(iter(value.values())))
