# viewkit/config/__init__.py
"""
Option storage for host objects: dot-path options, the key rename hook,
the stock host implementation and TOML loading.
"""
from .option_store import Configurable, OptionStore, install_option
from .key_renamer import KeyRenamer, install_rename_key, default_rename
from .host import OptionsHost
from .loader import load_and_merge_configs, select_profile, apply_config

__all__ = [
    "Configurable",
    "OptionStore",
    "install_option",
    "KeyRenamer",
    "install_rename_key",
    "default_rename",
    "OptionsHost",
    "load_and_merge_configs",
    "select_profile",
    "apply_config",
]
