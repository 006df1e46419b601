"""Centralized configuration and resource resolution for unitexpr.

This module exposes :func:`get_settings` returning the locations of the unit
and prefix catalogs together with logging preferences. Values can be
customized via environment variables or by pointing ``UNITEXPR_CONFIG_FILE``
to a TOML/YAML document with ``[paths]`` and ``[logging]`` sections.
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

__all__ = ["Settings", "get_settings", "reset_settings"]

_PACKAGE_ROOT = Path(__file__).resolve().parent
_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None


@dataclass(frozen=True)
class Settings:
    """Resolved locations and logging preferences."""

    project_root: Path
    resources_dir: Path
    units_path: Path
    prefixes_path: Path
    log_path: Optional[Path] = None
    log_level: int = logging.WARNING

    def as_dict(self) -> Dict[str, str | None]:
        """Expose the settings as plain strings (useful for logging)."""

        return {
            "project_root": str(self.project_root),
            "resources_dir": str(self.resources_dir),
            "units_path": str(self.units_path),
            "prefixes_path": str(self.prefixes_path),
            "log_path": str(self.log_path) if self.log_path is not None else None,
            "log_level": logging.getLevelName(self.log_level),
        }


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _parse_level(value: Any) -> int:
    if value is None or value == "":
        return logging.WARNING
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _build_settings(config_file: Optional[Path]) -> Settings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = _normalize_path(config_file, base=Path.cwd())
        if config_file is not None:
            config_data = _load_config_file(config_file)
            config_dir = config_file.parent

    paths_section = _coalesce_mapping(config_data.get("paths"))
    logging_section = _coalesce_mapping(config_data.get("logging"))

    env = os.environ

    resources_dir = _normalize_path(
        env.get("UNITEXPR_RESOURCES_DIR") or paths_section.get("resources"),
        base=config_dir,
    ) or (_PACKAGE_ROOT / "resources").resolve()

    units_path = _normalize_path(
        env.get("UNITEXPR_UNITS_PATH") or paths_section.get("units"),
        base=config_dir,
    ) or (resources_dir / "units.json").resolve()

    prefixes_path = _normalize_path(
        env.get("UNITEXPR_PREFIXES_PATH") or paths_section.get("prefixes"),
        base=config_dir,
    ) or (resources_dir / "prefixes.json").resolve()

    log_path = _normalize_path(
        env.get("UNITEXPR_LOG_PATH") or logging_section.get("path"),
        base=config_dir,
    )
    log_level = _parse_level(env.get("UNITEXPR_LOG_LEVEL") or logging_section.get("level"))

    return Settings(
        project_root=_PACKAGE_ROOT.parents[1],
        resources_dir=resources_dir,
        units_path=units_path,
        prefixes_path=prefixes_path,
        log_path=log_path,
        log_level=log_level,
    )


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings` configuration.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    explicit_path = Path(config_file).expanduser() if config_file is not None else None

    if explicit_path is not None:
        return _build_settings(explicit_path)

    env_path = os.getenv("UNITEXPR_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
