"""
config.py

Responsibility: Load the optional tagger configuration file into a typed model.

This implementation intentionally stays conservative:
- The file is plain YAML with a mapping at the top level.
- A missing default file means "use defaults"; an explicitly requested file must exist.
- Unknown keys are rejected so typos do not silently fall back to defaults.

The release workflow and CLI should treat the parsed result as the single source of truth.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_FILENAME = ".release-tagger.yml"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class TaggerConfig:
    """Settings for resolving and creating release tags."""

    remote: str = "origin"
    tag_prefix: str = "v"
    fetch: bool = True
    snapshot_suffix: str = "SNAPSHOT"
    build_number_env: str | None = None
    message_template: str | None = None

    @property
    def tag_pattern(self) -> str:
        """Glob (relative to refs/tags/) matching release tags, e.g. `v[0-9]*.[0-9]*.[0-9]*`."""
        return f"{self.tag_prefix}[0-9]*.[0-9]*.[0-9]*"

    def tag_name(self, version_name: str) -> str:
        return f"{self.tag_prefix}{version_name}"

    def with_overrides(self, **overrides: Any) -> TaggerConfig:
        # None means "not given on the command line".
        given = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **given) if given else self

    def build_number_override(self, environ: Mapping[str, str] | None = None) -> int | None:
        """
        Return the build number from the configured environment variable, if any.
        """
        if not self.build_number_env:
            return None
        env = os.environ if environ is None else environ
        raw = env.get(self.build_number_env)
        if raw is None or not raw.strip():
            return None
        value = raw.strip()
        if not value.isdecimal():
            raise ConfigError(f"{self.build_number_env} must be a non-negative integer, got {raw!r}")
        return int(value)


_STR_KEYS = ("remote", "tag_prefix", "snapshot_suffix")
_OPTIONAL_STR_KEYS = ("build_number_env", "message_template")
_BOOL_KEYS = ("fetch",)
_KNOWN_KEYS = frozenset(_STR_KEYS + _OPTIONAL_STR_KEYS + _BOOL_KEYS)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {path}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping/object at the top level.")
    return data


def parse_config(data: Mapping[str, Any]) -> TaggerConfig:
    unknown = sorted(str(k) for k in data if k not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key in _STR_KEYS:
        if key in data:
            value = str(data[key] if data[key] is not None else "").strip()
            # An empty tag prefix is allowed; an empty remote or suffix is not.
            if not value and key != "tag_prefix":
                raise ConfigError(f"`{key}` must be a non-empty string when provided.")
            values[key] = value

    for key in _OPTIONAL_STR_KEYS:
        if key in data:
            raw = data[key]
            values[key] = None if raw is None else str(raw)

    for key in _BOOL_KEYS:
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigError(f"`{key}` must be true or false.")
            values[key] = data[key]

    if values.get("build_number_env") is not None:
        values["build_number_env"] = values["build_number_env"].strip() or None

    return TaggerConfig(**values)


def load_config(config_path: str | Path | None = None, *, repo_dir: str | Path = ".") -> TaggerConfig:
    """
    Load configuration.

    - `config_path` given: the file must exist.
    - Otherwise `<repo_dir>/.release-tagger.yml` is used when present, defaults when not.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file does not exist: {path}")
    else:
        path = Path(repo_dir) / DEFAULT_CONFIG_FILENAME
        if not path.exists():
            return TaggerConfig()

    return parse_config(_load_yaml(path))
