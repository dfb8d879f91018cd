# viewkit/core/discovery/__init__.py
"""
File globbing and loading of data files into path-keyed mappings.
"""
from .globbing import resolve_glob, require_glob, try_require, DEFAULT_LOADERS

__all__ = ["resolve_glob", "require_glob", "try_require", "DEFAULT_LOADERS"]
