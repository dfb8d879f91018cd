# viewkit/config/key_renamer.py
from typing import Any, Callable, Optional
import structlog

from viewkit.exceptions import InvalidArgumentError
from viewkit.util import identity, basename_without_ext
from .option_store import Configurable, OptionStore
from .settings import RENAME_KEY_OPTION

log = structlog.get_logger(__name__)

default_rename = basename_without_ext

class KeyRenamer:
    """Holds the path -> key transform for a host in its `rename_key` option."""

    def __init__(self, host: Configurable, option_store: Optional[OptionStore] = None):
        self.options = option_store or OptionStore(host)

    def rename_key(self, key: Any = None, fn: Optional[Callable[[str], str]] = None) -> Any:
        """
        rename_key(fn)        stores `fn` as the transform and returns it.
        rename_key("a/b.hbs") applies the stored transform (identity if unset).
        rename_key()          returns the stored transform.
        """
        if callable(key):
            fn, key = key, None

        if fn is not None:
            if not callable(fn):
                raise InvalidArgumentError(f"rename_key() expects a callable transform, got {type(fn).__name__}.")
            self.options.option(RENAME_KEY_OPTION, fn)
        else:
            fn = self.options.option(RENAME_KEY_OPTION)
            if not callable(fn):
                fn = identity

        if isinstance(key, str):
            renamed = fn(key)
            log.debug("key_renamed", key=key, renamed=renamed)
            return renamed
        return fn

def install_rename_key(host: Configurable) -> KeyRenamer:
    return KeyRenamer(host)
