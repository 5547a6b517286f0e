"""Rendering adapters - Implementations of NetworkRendererPort.

Available implementations:
- PyvisNetworkRenderer: vis-network rendering through pyvis
"""

from .pyvis_adapter import PyvisNetworkRenderer

__all__ = ["PyvisNetworkRenderer"]
