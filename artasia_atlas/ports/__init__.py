"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .dataset import SiteDatasetPort
from .rendering import NetworkRendererPort

__all__ = [
    "SiteDatasetPort",
    "NetworkRendererPort",
]
