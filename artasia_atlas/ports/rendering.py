"""Rendering port - Abstraction for drawing the site network.

This protocol defines the contract for network rendering, allowing
different force-directed renderers to consume the same atlas state.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..state import AtlasState


class NetworkRendererPort(Protocol):
    """Port for network rendering.

    Implementation: adapters/rendering/pyvis_adapter.py
    """

    def render_html(self, state: AtlasState) -> str:
        """Render the network as a standalone HTML document.

        Args:
            state: Graph and display choices to render.

        Returns:
            The HTML document.
        """
        ...

    def render(self, state: AtlasState, output_path: Path) -> Path:
        """Render the network and save it to a file.

        Args:
            state: Graph and display choices to render.
            output_path: Where to save the rendered network.

        Returns:
            Path to the generated file.
        """
        ...
