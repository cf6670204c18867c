"""Configuration settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from statewalk.errors import ConfigValidationError, ErrorContext

DEFAULT_STEP_LIMIT = 20
GRAPH_TYPES = ("digraph", "graph")


class WalkConfig(BaseSettings):
    """Configuration for statewalk."""

    model_config = SettingsConfigDict(
        env_prefix="STATEWALK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    step_limit: int = DEFAULT_STEP_LIMIT
    seed: int | None = Field(default=None, description="Seed for reproducible random walks")
    debug: bool = False
    graph_name: str = "State_Model"
    graph_type: str = "digraph"
    node_shape: str = "ellipse"
    guard_prefix: str = "Guard/"

    @field_validator("step_limit", mode="after")
    @classmethod
    def validate_step_limit(cls, v: int) -> int:
        if v <= 2:
            raise ConfigValidationError(
                message=f"step_limit must be greater than 2, got {v}",
                field="step_limit",
                value=v,
            )
        return v

    @field_validator("graph_type", mode="before")
    @classmethod
    def validate_graph_type(cls, v: str) -> str:
        if v not in GRAPH_TYPES:
            raise ConfigValidationError(
                message=f"Invalid graph type: {v}. Valid: {list(GRAPH_TYPES)}",
                field="graph_type",
                value=v,
                context=ErrorContext(extra={"valid_types": list(GRAPH_TYPES)}),
            )
        return v


def load_config(config_path: str | Path | None = None) -> WalkConfig:
    """Load configuration from file and environment.

    Priority: env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                loaded = yaml.safe_load(f)
            if loaded is not None and not isinstance(loaded, dict):
                raise ConfigValidationError(
                    message=f"Configuration must be a YAML mapping, got {type(loaded).__name__}",
                    context=ErrorContext(source=str(config_path)),
                )
            config_data = loaded or {}

    config_data.update(_get_env_overrides())

    return WalkConfig(**config_data)


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "STATEWALK_STEP_LIMIT": ("step_limit", int),
        "STATEWALK_SEED": ("seed", int),
        "STATEWALK_DEBUG": ("debug", lambda x: x.lower() in ("true", "1", "yes")),
        "STATEWALK_GRAPH_NAME": "graph_name",
        "STATEWALK_GRAPH_TYPE": "graph_type",
        "STATEWALK_NODE_SHAPE": "node_shape",
        "STATEWALK_GUARD_PREFIX": "guard_prefix",
    }

    for env_key, config_key in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            if isinstance(config_key, tuple):
                key, converter = config_key
                overrides[key] = converter(value)
            else:
                overrides[config_key] = value

    return overrides
