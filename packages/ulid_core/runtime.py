"""Application entry point: settings, then logging, then a ULID factory."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping

from packages.ulid_core.config import UlidSettings, load_settings
from packages.ulid_core.entropy import RandomSource
from packages.ulid_core.generation import UlidFactory, build_factory
from packages.ulid_core.logging import configure_logging_from_settings


def bootstrap(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
    settings: UlidSettings | None = None,
    random: RandomSource | None = None,
    clock: Callable[[], int] | None = None,
) -> UlidFactory:
    """Load settings, install logging from them, and build the configured factory.

    Logging is configured before the factory is built so the strategy's
    creation event goes through the configured handler. Pass ``settings`` to
    skip loading.
    """
    if settings is None:
        settings = load_settings(cli_params=cli_params, config_path=config_path)
    configure_logging_from_settings(settings.logging)
    return build_factory(settings.generator, random=random, clock=clock)
