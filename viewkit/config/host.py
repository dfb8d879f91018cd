# viewkit/config/host.py
"""
Stock option host: a nested dict addressed by dot paths plus a small
synchronous event emitter.
"""
import copy
from collections import defaultdict
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional
import structlog

from .key_renamer import KeyRenamer
from .option_store import OptionStore
from .settings import DEFAULT_OPTIONS, OPTIONS_PATH

log = structlog.get_logger(__name__)

class OptionsHost:
    def __init__(self, options: Optional[Mapping] = None):
        self.cache: Dict[str, Any] = {OPTIONS_PATH: copy.deepcopy(DEFAULT_OPTIONS)}
        self._listeners: Dict[str, List[Callable[..., Any]]] = defaultdict(list)
        self._option_store = OptionStore(self)
        self._key_renamer = KeyRenamer(self, self._option_store)
        if options:
            self.option(options)

    @property
    def options(self) -> Dict[str, Any]:
        return self.cache[OPTIONS_PATH]

    def get(self, path: str, default: Any = None) -> Any:
        current: Any = self.cache
        for part in path.split("."):
            if not isinstance(current, Mapping) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, path: str, value: Any) -> "OptionsHost":
        *parents, leaf = path.split(".")
        current = self.cache
        for part in parents:
            child = current.get(part)
            if not isinstance(child, dict):
                child = current[part] = {}
            current = child
        current[leaf] = value
        return self

    def on(self, event: str, listener: Callable[..., Any]) -> "OptionsHost":
        self._listeners[event].append(listener)
        return self

    def emit(self, event: str, *args: Any) -> "OptionsHost":
        for listener in list(self._listeners.get(event, ())):
            listener(*args)
        return self

    def visit(self, method: str, mapping: Mapping) -> "OptionsHost":
        # calls self.<method>(key, value) for every entry.
        fn = getattr(self, method)
        for key, value in mapping.items():
            fn(key, value)
        return self

    def option(self, key: Any, *args: Any) -> Any:
        return self._option_store.option(key, *args)

    def rename_key(self, key: Any = None, fn: Optional[Callable[[str], str]] = None) -> Any:
        return self._key_renamer.rename_key(key, fn)
