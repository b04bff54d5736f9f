"""Run-loop configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

ENV_PREFIX = "TESSERA_"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ApplicationConfig:
    """Settings for ``Application``.

    ``redraw_interval`` is the period, in seconds, of the unconditional
    redraw tick; ``clear_always`` clears the screen before every redraw
    instead of only after a resize or root change.
    """

    redraw_interval: float = 60.0
    clear_always: bool = False
    queue_size: int = 255
    enable_mouse: bool = True
    enable_paste: bool = True
    debug_log: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ApplicationConfig:
        """Build a config from ``TESSERA_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        config = cls()

        value = env.get(ENV_PREFIX + "REDRAW_INTERVAL")
        if value:
            config.redraw_interval = float(value)
        value = env.get(ENV_PREFIX + "CLEAR_ALWAYS")
        if value:
            config.clear_always = _env_bool(value)
        value = env.get(ENV_PREFIX + "QUEUE_SIZE")
        if value:
            config.queue_size = int(value)
        value = env.get(ENV_PREFIX + "MOUSE")
        if value:
            config.enable_mouse = _env_bool(value)
        value = env.get(ENV_PREFIX + "PASTE")
        if value:
            config.enable_paste = _env_bool(value)
        config.debug_log = env.get(ENV_PREFIX + "DEBUG_LOG", config.debug_log)
        return config
