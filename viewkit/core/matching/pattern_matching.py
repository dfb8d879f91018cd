# viewkit/core/matching/pattern_matching.py
from typing import Iterable, List, Union
import pathspec
import structlog

from viewkit.exceptions import DiscoveryError, InvalidArgumentError

log = structlog.get_logger(__name__)

Patterns = Union[str, Iterable[str]]

def normalize_patterns(patterns: Patterns) -> List[str]:
    # accepts one glob string or a sequence of them.
    if isinstance(patterns, str):
        return [patterns]
    if patterns is None:
        return []
    try:
        pattern_list = list(patterns)
    except TypeError:
        raise InvalidArgumentError(f"expected a glob string or a sequence of glob strings, got {patterns!r}")
    for p in pattern_list:
        if not isinstance(p, str):
            raise InvalidArgumentError(f"glob patterns must be strings, got {p!r}")
    return pattern_list

def is_negation(pattern: str) -> bool:
    return pattern.startswith("!")

def anchor_pattern(pattern: str) -> str:
    # patterns are matched from the start of the key, never at any depth.
    return pattern if pattern.startswith("/") else "/" + pattern

def normalize_key(key: str) -> str:
    if key.startswith("/"):
        return key[1:]
    if key.startswith("./"):
        return key[2:]
    return key

def _compile_spec(pattern_list: List[str]) -> pathspec.GitIgnoreSpec:
    try:
        return pathspec.GitIgnoreSpec.from_lines([anchor_pattern(p) for p in pattern_list])
    except ValueError as e:
        raise DiscoveryError(f"error compiling glob patterns {pattern_list}: {e}") from e

def _matches_exactly(spec: pathspec.GitIgnoreSpec, key: str) -> bool:
    # gitignore patterns also match everything below a matching directory;
    # such matches set the "ps_d" directory marker group and are skipped here.
    for pattern in spec.patterns:
        result = pattern.match_file(key)
        if result is not None and not result.match.groupdict().get("ps_d"):
            return True
    return False

class KeyPatternSet:
    """
    Shell-style glob patterns over keys: "*" stops at "/", "**" crosses it,
    and a key is kept when any plain pattern matches it and no "!" pattern
    does, whatever the order of the patterns.
    """

    def __init__(self, positive: List[str], negative: List[str]):
        self.positive = _compile_spec(positive)
        self.negative = _compile_spec(negative)

    def match_file(self, key: str) -> bool:
        key = normalize_key(key)
        if not _matches_exactly(self.positive, key):
            return False
        return not _matches_exactly(self.negative, key)

def compile_key_patterns(patterns: Patterns, ignore_case: bool = False) -> KeyPatternSet:
    pattern_list = normalize_patterns(patterns)
    if ignore_case:
        pattern_list = [p.lower() for p in pattern_list]

    positive = [p for p in pattern_list if not is_negation(p)]
    negative = [p[1:] for p in pattern_list if is_negation(p)]
    # a list made only of negations means "everything except ...".
    if negative and not positive:
        positive = ["**"]
    log.debug("key_patterns_compiled", positive=positive, negative=negative)
    return KeyPatternSet(positive, negative)
