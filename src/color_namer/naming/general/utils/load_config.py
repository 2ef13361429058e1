# src/color_namer/naming/general/utils/load_config.py

"""Load JSON reference tables from a <data/> directory with caching.

Modes:
- "raw"      -> return parsed JSON as-is
- "records"  -> return tuple[dict[str, Any], ...] (list of JSON objects, non-objects rejected)

Used by the palette store and by tests that point the loader at a scratch data dir.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, overload

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "records"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DATA_DIR_ENV_VARS",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

# Only the package-specific override is read; a bare DATA_DIR is ignored
DATA_DIR_ENV_VARS: tuple[str, ...] = ("COLOR_NAMER_DATA_DIR",)


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails for a data file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the structure the mode expects."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: resolved path, mtime, mode, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


# ── Data dir resolution ──────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """'data' directories walking up from start (the package ships color_namer/data)."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in start.parents]


def _default_data_dir(start: Path | None = None) -> Path:
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve_file(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """Map a bare table name to <data>/<name>.json, refusing paths outside <data>."""
    data_dir = (base_dir or _env_data_dir() or _default_data_dir()).resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _as_records(path: Path, data: Any) -> tuple[dict[str, Any], ...]:
    if not isinstance(data, list):
        raise ConfigTypeError(
            f"{path.name}: expected list for mode 'records', got {type(data).__name__}"
        )
    bad = [type(x).__name__ for x in data if not isinstance(x, dict)]
    if bad:
        raise ConfigTypeError(
            f"{path.name}: 'records' needs a list of objects (first bad types: {', '.join(bad[:3])})"
        )
    return tuple(dict(x) for x in data)


# ── Loader ───────────────────────────────────────────────────────────────────
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["records"],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> tuple[dict[str, Any], ...]: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> Any:
    """Load <data>/<file>.json, coerce by mode, and cache by file mtime."""
    if mode not in ("raw", "records"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _resolve_file(file, base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    result = _as_records(path, data) if mode == "records" else data

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Point the loader at another data directory for the duration of the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV_VARS[0])
        os.environ[DATA_DIR_ENV_VARS[0]] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV_VARS[0], None)
        else:
            os.environ[DATA_DIR_ENV_VARS[0]] = self._old
        clear_config_cache()
