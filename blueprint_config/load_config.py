"""Logic for loading the harness configuration file."""

import copy
from pathlib import Path
from typing import Any

import yaml

from blueprint_config.errors import ConfigError
from blueprint_config.filtering_json_printer import DEFAULT_INDENT
from blueprint_config.simulation_coordinates import (
    COORDINATES_PROPERTY_KEY,
    SITE_DEFAULT,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "resolution": {
        "root_dir": "environments",
        "file_name": "environment.properties",
    },
    "coordinates": {
        "default_site": SITE_DEFAULT,
        "property_key": COORDINATES_PROPERTY_KEY,
    },
    "output": {
        "sort_keys": False,
        "indent": DEFAULT_INDENT,
        "skipped_keys": [],
    },
}

# Expected type of every setting; skipped_keys is checked separately
SETTING_TYPES: dict[str, type] = {
    "root_dir": str,
    "file_name": str,
    "default_site": str,
    "property_key": str,
    "sort_keys": bool,
    "indent": int,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Each section of the file overrides the matching defaults key by key.
    ``skipped_keys`` lists are added to the default list rather than
    replacing it. Unknown sections or settings and values of the wrong type
    raise ``ConfigError``.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                msg = f"Invalid YAML in {p}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"Configuration in {p} must be a mapping"
                raise ConfigError(msg)
            for section, values in user_config.items():
                _merge_section(config, section, values, p)
    return config


def _merge_section(
    config: dict[str, Any], section: object, values: object, source: Path
) -> None:
    if section not in config:
        msg = f"Unknown section {section!r} in {source}"
        raise ConfigError(msg)
    if values is None:
        return
    if not isinstance(values, dict):
        msg = f"Section {section!r} in {source} must be a mapping"
        raise ConfigError(msg)

    target = config[section]
    for key, value in values.items():
        if key not in target:
            msg = f"Unknown setting {section}.{key} in {source}"
            raise ConfigError(msg)
        if key == "skipped_keys":
            target[key] = sorted(set(target[key]) | set(_key_list(value, source)))
        else:
            target[key] = _typed(section, key, value, source)


def _typed(section: str, key: str, value: object, source: Path) -> Any:
    expected = SETTING_TYPES[key]
    # bool is an int subclass; an indent of True is not meant
    if not isinstance(value, expected) or (
        expected is int and isinstance(value, bool)
    ):
        msg = (
            f"Setting {section}.{key} in {source} must be of type "
            f"{expected.__name__}, got {value!r}"
        )
        raise ConfigError(msg)
    if expected is str and not value.strip():
        msg = f"Setting {section}.{key} in {source} must not be blank"
        raise ConfigError(msg)
    if key == "indent" and value < 0:
        msg = f"Setting {section}.{key} in {source} must not be negative"
        raise ConfigError(msg)
    return value


def _key_list(value: object, source: Path) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"Setting output.skipped_keys in {source} must be a list of strings"
        raise ConfigError(msg)
    return value
