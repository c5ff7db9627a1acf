"""Gateway: YAML configuration loader — reads raw config for the composition root."""

from __future__ import annotations

from pathlib import Path

import yaml

from viral_trance_creator.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads YAML config files into plain dicts. Validation happens in L4 after defaults are merged."""

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the YAML data merged with *overrides* (before Pydantic validation).

        Without *config_path*, the first existing default location is used;
        with none present the result is just the overrides.
        """
        data: dict = {}
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            data = _read_mapping(path)
        else:
            for default_path in DEFAULT_CONFIG_PATHS:
                if default_path.exists():
                    data = _read_mapping(default_path)
                    break
        if overrides:
            deep_merge(data, overrides)
        return data


def _read_mapping(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file must contain a mapping: {path}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
