# viewkit/__init__.py
"""
viewkit: key resolution, option storage and context merging for
template rendering pipelines.
"""
__version__ = "0.3.0"

from viewkit.exceptions import ViewkitError, InvalidArgumentError, ConfigError, DiscoveryError
from viewkit.util import format_ext, strip_dot
from viewkit.core.matching import match_key, match_keys, MatchOptions
from viewkit.core.views import View, sync_contents, is_view
from viewkit.core.templating import get_locals
from viewkit.core.naming import single, plural
from viewkit.config import OptionsHost, OptionStore, KeyRenamer, install_option, install_rename_key

__all__ = [
    "__version__",
    "ViewkitError",
    "InvalidArgumentError",
    "ConfigError",
    "DiscoveryError",
    "format_ext",
    "strip_dot",
    "match_key",
    "match_keys",
    "MatchOptions",
    "View",
    "sync_contents",
    "is_view",
    "get_locals",
    "single",
    "plural",
    "OptionsHost",
    "OptionStore",
    "KeyRenamer",
    "install_option",
    "install_rename_key",
]
