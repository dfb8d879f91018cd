# viewkit/core/views/__init__.py
"""
View records and the text/binary content synchronization they rely on.
"""
from .content import (
    ContentValue, Empty, Text, Binary, StreamRef,
    classify_content, sync_contents, buffer_stream, is_stream, is_buffer,
)
from .view import View, is_view, has_view

__all__ = [
    "ContentValue", "Empty", "Text", "Binary", "StreamRef",
    "classify_content", "sync_contents", "buffer_stream", "is_stream", "is_buffer",
    "View", "is_view", "has_view",
]
