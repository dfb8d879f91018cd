# viewkit/core/templating/__init__.py
"""
Helpers for building render contexts.

Provides `get_locals` for merging explicit locals with helper invocation
options, and `bind_all` for binding a context object into helper functions.
"""
from .locals_resolver import Plain, WithHash, ContextSource, to_context_source, resolve_context, get_locals
from .helpers import bind_all

__all__ = [
    "Plain",
    "WithHash",
    "ContextSource",
    "to_context_source",
    "resolve_context",
    "get_locals",
    "bind_all",
]
