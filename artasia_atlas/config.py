"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the values the atlas
needs at runtime: where the site dataset lives, the visual constants of
the graph layout, how the network is rendered and how logs are emitted.

Configuration can be overridden via environment variables:
- ATLAS_DATA_DATA_DIR=/path/to/data
- ATLAS_LAYOUT_SIZE_CEILING=40
- ATLAS_RENDER_DARK_MODE=true
- ATLAS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatasetConfig(BaseSettings):
    """Site dataset location.

    Environment variables prefixed with ATLAS_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="ATLAS_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    sites_file: str = "sites.csv"
    encoding: str = "utf-8-sig"

    @property
    def sites_path(self) -> Path:
        """Full path to the sites CSV file."""
        return self.data_dir / self.sites_file


class LayoutConfig(BaseSettings):
    """Visual constants used while building the graph.

    Environment variables prefixed with ATLAS_LAYOUT_.
    """

    model_config = SettingsConfigDict(env_prefix="ATLAS_LAYOUT_")

    size_floor: int = 12
    size_ceiling: int = 36
    size_midpoint: int = 24

    edge_length_base: float = 30.0
    edge_length_per_km: float = 8.0
    edge_length_fallback: float = 80.0
    unavailable_edge_value: float = 1.0
    distance_decimals: int = 3

    representative_border_width: int = 3


class RenderingConfig(BaseSettings):
    """Network rendering configuration.

    Environment variables prefixed with ATLAS_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="ATLAS_RENDER_")

    height: str = "750px"
    width: str = "100%"
    dark_mode: bool = False
    default_group_by: str = "Partner Org"
    show_edge_labels: bool = False
    output_file: str = "atlas.html"
    cdn_resources: Literal["remote", "in_line"] = "remote"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with ATLAS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ATLAS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.dataset.sites_path)
        print(config.layout.size_ceiling)

    Environment variables prefixed with ATLAS_.
    """

    model_config = SettingsConfigDict(env_prefix="ATLAS_")

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent

    @property
    def output_path(self) -> Path:
        """Default destination for the rendered network."""
        return self.output_dir / self.rendering.output_file


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
