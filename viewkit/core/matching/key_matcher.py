# viewkit/core/matching/key_matcher.py
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import structlog

from .pattern_matching import Patterns, compile_key_patterns

log = structlog.get_logger(__name__)

@dataclass(frozen=True)
class MatchOptions:
    # ignore_case: compare keys and patterns case-insensitively.
    # basename: match against the last "/" segment of each key only.
    ignore_case: bool = False
    basename: bool = False

    @classmethod
    def coerce(cls, options: Any) -> "MatchOptions":
        if options is None:
            return cls()
        if isinstance(options, MatchOptions):
            return options
        if isinstance(options, Mapping):
            return cls(**{k: bool(v) for k, v in options.items() if k in ("ignore_case", "basename")})
        raise TypeError(f"expected MatchOptions or a mapping, got {type(options).__name__}")

def _candidate(key: str, options: MatchOptions) -> str:
    candidate = key.rsplit("/", 1)[-1] if options.basename else key
    return candidate.lower() if options.ignore_case else candidate

def matching_keys(keys, patterns: Patterns, options: Any = None) -> List[str]:
    """
    Returns the keys that satisfy the glob patterns, in the order they were given.
    Non-string keys never match.
    """
    opts = MatchOptions.coerce(options)
    spec = compile_key_patterns(patterns, ignore_case=opts.ignore_case)
    return [k for k in keys if isinstance(k, str) and spec.match_file(_candidate(k, opts))]

def match_key(mapping: Any, patterns: Patterns, options: Any = None, default: Any = None) -> Any:
    """
    Returns the value of the first key in `mapping` that matches `patterns`.
    "First" follows the mapping's iteration order, not the order of the patterns.

    Returns `default` (None unless given) when nothing matches or when
    `mapping` is not a mapping at all.
    """
    if not isinstance(mapping, Mapping):
        log.debug("match_key_skipped_non_mapping", value_type=type(mapping).__name__)
        return default
    keys = matching_keys(mapping.keys(), patterns, options)
    if not keys:
        log.debug("match_key_no_match", patterns=patterns)
        return default
    return mapping[keys[0]]

def match_keys(mapping: Mapping, patterns: Patterns, options: Any = None) -> Dict[str, Any]:
    """
    Returns a new dict holding every entry whose key matches `patterns`,
    in ascending key order. Empty when nothing matches.
    """
    if not isinstance(mapping, Mapping):
        return {}
    keys = sorted(matching_keys(mapping.keys(), patterns, options))
    log.debug("match_keys_resolved", patterns=patterns, count=len(keys))
    return {k: mapping[k] for k in keys}
