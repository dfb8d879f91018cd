# viewkit/config/settings.py
from typing import Any, Dict, Tuple

from viewkit.util import basename_without_ext

DEFAULT_ENCODING = "utf-8"

# all host options live under this path prefix.
OPTIONS_PATH = "options"

# option key holding the path -> key transform.
RENAME_KEY_OPTION = "rename_key"

# event emitted after every option write.
OPTION_EVENT = "option"

# default router hooks, in the order a view moves through them.
ROUTER_METHODS: Tuple[str, ...] = (
    "onLoad",
    "preCompile",
    "preLayout",
    "onLayout",
    "postLayout",
    "onMerge",
    "postCompile",
    "preRender",
    "postRender",
)

DEFAULT_OPTIONS: Dict[str, Any] = {
    RENAME_KEY_OPTION: basename_without_ext,
    "encoding": DEFAULT_ENCODING,
    "router_methods": list(ROUTER_METHODS),
}
