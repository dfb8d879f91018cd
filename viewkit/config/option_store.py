# viewkit/config/option_store.py
"""
Hierarchical option access layered over a `Configurable` host.

The store never adds attributes to the host; it only calls the host's
get/set/emit (and visit, where available).
"""
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable
import structlog

from viewkit.exceptions import ConfigError, InvalidArgumentError
from .settings import OPTIONS_PATH, OPTION_EVENT

log = structlog.get_logger(__name__)

_MISSING = object()

@runtime_checkable
class Configurable(Protocol):
    def get(self, path: str) -> Any: ...
    def set(self, path: str, value: Any) -> Any: ...
    def emit(self, event: str, *args: Any) -> Any: ...

class OptionStore:
    """Reads and writes `options.<key>` on a host, emitting an event per write."""

    REQUIRED_CAPABILITIES = ("get", "set", "emit")

    def __init__(self, host: Configurable):
        missing = [name for name in self.REQUIRED_CAPABILITIES if not callable(getattr(host, name, None))]
        if missing:
            raise ConfigError(f"{type(host).__name__} cannot hold options; missing: {', '.join(missing)}")
        self.host = host

    @staticmethod
    def option_path(key: str) -> str:
        return f"{OPTIONS_PATH}.{key}"

    def option(self, key: Any, value: Any = _MISSING) -> Any:
        """
        option("a.b")        -> value stored at options.a.b
        option("a.b", 5)     -> stores 5, emits ("option", "a.b", 5), returns the host
        option({"a": 1})     -> applies option(k, v) per entry, returns the host
        """
        if isinstance(key, str):
            if value is _MISSING:
                return self.host.get(self.option_path(key))
            self.host.set(self.option_path(key), value)
            log.debug("option_set", key=key)
            self.host.emit(OPTION_EVENT, key, value)
            return self.host

        if isinstance(key, Mapping):
            self._visit(key)
            return self.host

        raise InvalidArgumentError(f"expected a string or mapping, got {type(key).__name__}.")

    def _visit(self, options: Mapping) -> None:
        visit = getattr(self.host, "visit", None)
        if callable(visit) and callable(getattr(self.host, "option", None)):
            visit("option", options)
            return
        for k, v in options.items():
            self.option(k, v)

def install_option(host: Configurable) -> OptionStore:
    # returns an option store bound to `host`; the host itself is left unchanged.
    return OptionStore(host)
