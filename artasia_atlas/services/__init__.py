"""Services layer - Application orchestration.

Available services:
- AtlasService: Builds the site network and renders it
"""

from .atlas_service import AtlasService

__all__ = ["AtlasService"]
