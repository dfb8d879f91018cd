# viewkit/core/matching/__init__.py
"""
Glob-based key matching over plain mappings.

`match_key` picks a single candidate (e.g. a layout), `match_keys` collects
a deterministic, key-sorted subset.
"""
from .key_matcher import match_key, match_keys, matching_keys, MatchOptions
from .pattern_matching import compile_key_patterns

__all__ = ["match_key", "match_keys", "matching_keys", "MatchOptions", "compile_key_patterns"]
