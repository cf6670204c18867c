"""Configuration management for statewalk."""

from statewalk.config.settings import DEFAULT_STEP_LIMIT, WalkConfig, load_config

__all__ = [
    "DEFAULT_STEP_LIMIT",
    "WalkConfig",
    "load_config",
]
