# viewkit/core/templating/helpers.py
"""
Binding of a shared `this` object into collections of template helpers.
"""
import functools
from collections.abc import Mapping
from typing import Any, Callable, Dict

def _bind(fn: Callable, this_arg: Any) -> Callable:
    bound = functools.partial(fn, this_arg)
    # carry over flags set on the helper (e.g. `is_async`) and its name.
    return functools.update_wrapper(bound, fn)

def bind_all(target: Mapping, this_arg: Any) -> Dict[str, Any]:
    """
    Returns a copy of `target` with every helper callable bound to `this_arg`
    as its first argument. Nested mappings are bound recursively; other
    values are dropped.
    """
    bound: Dict[str, Any] = {}
    for key, value in target.items():
        if isinstance(value, Mapping):
            bound[key] = bind_all(value, this_arg)
        elif callable(value):
            bound[key] = _bind(value, this_arg)
    return bound
