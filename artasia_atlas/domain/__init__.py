"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import AtlasError, ConfigurationError, DatasetError, RenderingError
from .models import (
    UNKNOWN,
    EdgeKind,
    GraphEdge,
    GraphNode,
    GroupKey,
    RawRecord,
    SiteGraph,
    SiteRecord,
)

__all__ = [
    # Models
    "RawRecord",
    "SiteRecord",
    "GraphNode",
    "GraphEdge",
    "SiteGraph",
    "GroupKey",
    "EdgeKind",
    "UNKNOWN",
    # Errors
    "AtlasError",
    "DatasetError",
    "RenderingError",
    "ConfigurationError",
]
