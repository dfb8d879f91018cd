# viewkit/config/loader.py
"""
Loads option defaults from TOML files and applies them to a host.
"""
import toml
from pathlib import Path
from typing import Any, Dict, Optional
import structlog

from viewkit.exceptions import ConfigError

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".viewkit.toml", "viewkit.toml", "pyproject.toml"]
USER_CONFIG_DIR = Path.home() / ".config" / "viewkit"
USER_CONFIG_FILE = USER_CONFIG_DIR / "config.toml"
PROFILES_KEY = "profiles"

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    # settings sit under [tool.viewkit] in pyproject.toml, top-level elsewhere.
    if not file_path.is_file():
        return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(file_path)
    except (toml.TomlDecodeError, OSError) as e:
        log.error("config_file_load_error", path=str(file_path), error=str(e))
        return {}
    if file_path.name == "pyproject.toml":
        return data.get("tool", {}).get("viewkit", {})
    return data

def _merge_profiles(merged: Dict[str, Any], project_settings: Dict[str, Any]) -> None:
    # project profiles override user profiles by name.
    project_profiles = project_settings.pop(PROFILES_KEY, None)
    if not isinstance(project_profiles, dict):
        return
    user_profiles = merged.get(PROFILES_KEY)
    if isinstance(user_profiles, dict):
        user_profiles.update(project_profiles)
    else:
        merged[PROFILES_KEY] = project_profiles

def load_and_merge_configs(cwd: Optional[Path] = None, user_config_file: Optional[Path] = None) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    user_file = user_config_file or USER_CONFIG_FILE
    if user_file.is_file():
        log.info("loading_user_global_config", path=str(user_file))
        merged.update(_load_toml_file_data(user_file))

    project_dir = Path(cwd or Path.cwd())
    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = project_dir / filename
        if not candidate.is_file():
            continue
        project_settings = _load_toml_file_data(candidate)
        if project_settings:
            log.info("loading_project_local_config", path=str(candidate))
            _merge_profiles(merged, project_settings)
            merged.update(project_settings)
            break

    if not merged:
        log.debug("no_configuration_files_loaded")
    return merged

def select_profile(config_data: Dict[str, Any], profile_name: Optional[str]) -> Dict[str, Any]:
    # top-level keys overlaid with the named profile; the profile table itself is dropped.
    base = {k: v for k, v in config_data.items() if k != PROFILES_KEY}
    if not profile_name:
        return base
    profiles = config_data.get(PROFILES_KEY, {})
    if not isinstance(profiles, dict) or profile_name not in profiles:
        raise ConfigError(f"Profile '{profile_name}' not found in configuration files.")
    profile = profiles[profile_name]
    if not isinstance(profile, dict):
        raise ConfigError(f"Profile '{profile_name}' must be a table, got {type(profile).__name__}.")
    log.info("config_profile_selected", profile=profile_name)
    base.update(profile)
    return base

def apply_config(host: Any, config_data: Dict[str, Any]) -> Any:
    # feeds every entry through host.option(); returns the host.
    if not config_data:
        return host
    option = getattr(host, "option", None)
    if not callable(option):
        raise ConfigError(f"{type(host).__name__} does not expose option().")
    option(config_data)
    log.debug("config_applied_to_host", keys=sorted(config_data.keys()))
    return host
