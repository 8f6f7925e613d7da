"""Configuration loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/ulid/ulid.yaml
4) Built-in defaults

Environment variable format:
- Prefix: ``ULID_``
- Nested keys: ``__`` separator
- Example: ``ULID_GENERATOR__STRATEGY=default`` -> ``generator.strategy = "default"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import _CONFIG_PATH, DEFAULT_CONFIG_PATH, UlidSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> UlidSettings:
    """Load settings by applying the standard precedence cascade.

    A missing YAML file is treated as empty.
    """
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    token = _CONFIG_PATH.set(resolved)
    try:
        return UlidSettings(**dict(cli_params or {}))
    finally:
        _CONFIG_PATH.reset(token)
