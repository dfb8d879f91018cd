# viewkit/core/discovery/globbing.py
import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional
import structlog
import toml

from viewkit.core.matching.pattern_matching import Patterns, compile_key_patterns, normalize_patterns
from viewkit.util import basename_without_ext

log = structlog.get_logger(__name__)

def _load_json(file_path: Path) -> Any:
    with file_path.open("r", encoding="utf-8") as f_obj:
        return json.load(f_obj)

def _load_toml(file_path: Path) -> Any:
    return toml.load(file_path)

# maps a lowercase file extension to the callable that loads it.
DEFAULT_LOADERS: Dict[str, Callable[[Path], Any]] = {
    ".json": _load_json,
    ".toml": _load_toml,
}

def resolve_glob(patterns: Patterns, cwd: Optional[Path] = None) -> List[Path]:
    """Returns sorted absolute paths of files under `cwd` matching `patterns`."""
    base_dir = Path(cwd or Path.cwd()).resolve()
    if not normalize_patterns(patterns):
        return []
    spec = compile_key_patterns(patterns)

    matched: List[Path] = []
    for root, dirs, files in os.walk(str(base_dir), topdown=True):
        dirs.sort()
        for file_name in files:
            file_path = Path(root, file_name)
            rel_path_str = file_path.relative_to(base_dir).as_posix()
            if spec.match_file(rel_path_str):
                matched.append(file_path)

    log.debug("glob_resolved", base_dir=str(base_dir), patterns=patterns, count=len(matched))
    return sorted(matched)

def try_require(file_path: Path, loader: Optional[Callable[[Path], Any]] = None) -> Any:
    # loads one data file, returning None on any failure.
    file_path = Path(file_path)
    if loader is None:
        loader = DEFAULT_LOADERS.get(file_path.suffix.lower())
    if loader is None:
        log.debug("no_loader_for_file", path=str(file_path))
        return None
    try:
        return loader(file_path)
    except Exception as e:
        log.warning("data_file_load_failed", path=str(file_path), error=str(e))
        return None

def require_glob(
    patterns: Patterns,
    cwd: Optional[Path] = None,
    rename: Callable[[str], str] = basename_without_ext,
    loaders: Optional[Mapping[str, Callable[[Path], Any]]] = None,
) -> Dict[str, Any]:
    """
    Loads every matched file that has a loader into a dict keyed by
    `rename(path)`. Files without a loader are skipped.
    """
    active_loaders = dict(DEFAULT_LOADERS)
    if loaders:
        active_loaders.update({k.lower(): v for k, v in loaders.items()})

    loaded: Dict[str, Any] = {}
    for file_path in resolve_glob(patterns, cwd=cwd):
        loader = active_loaders.get(file_path.suffix.lower())
        if loader is None:
            continue
        loaded[rename(str(file_path))] = try_require(file_path, loader)
    log.info("glob_required", count=len(loaded))
    return loaded
