# viewkit/core/templating/locals_resolver.py
"""
Merges explicit locals and helper invocation options into one render context.

A `hash` entry carries the keyword arguments given at the template call site.
Precedence, first matching rule wins:

1. options has a hash: locals, then options["hash"] over it.
2. locals has a hash: locals["hash"] alone; options are ignored.
3. neither: options, then locals over it.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Union
import structlog

log = structlog.get_logger(__name__)

HASH_KEY = "hash"

@dataclass(frozen=True)
class Plain:
    values: Mapping = field(default_factory=dict)

@dataclass(frozen=True)
class WithHash:
    values: Mapping
    hash: Any

ContextSource = Union[Plain, WithHash]

def to_context_source(value: Any) -> ContextSource:
    # None, empty and non-mapping values become an empty Plain source.
    if not value:
        return Plain({})
    if not isinstance(value, Mapping):
        log.debug("locals_ignored_non_mapping", value_type=type(value).__name__)
        return Plain({})
    if HASH_KEY in value:
        return WithHash(value, value[HASH_KEY])
    return Plain(value)

def _extend(target: Dict[str, Any], source: Any) -> None:
    # shallow merge; non-mapping sources contribute nothing.
    if isinstance(source, Mapping):
        target.update(source)

def resolve_context(locals_source: ContextSource, options_source: ContextSource) -> Dict[str, Any]:
    context: Dict[str, Any] = {}
    if isinstance(options_source, WithHash):
        _extend(context, locals_source.values)
        _extend(context, options_source.hash)
    elif isinstance(locals_source, WithHash):
        _extend(context, locals_source.hash)
    else:
        _extend(context, options_source.values)
        _extend(context, locals_source.values)
    return context

def get_locals(locals: Any = None, options: Any = None) -> Dict[str, Any]:
    """Returns a fresh context dict built from helper `locals` and invocation `options`."""
    context = resolve_context(to_context_source(locals), to_context_source(options))
    log.debug("helper_locals_resolved", keys=list(context.keys()))
    return context
