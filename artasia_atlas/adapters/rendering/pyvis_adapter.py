"""Pyvis network renderer adapter.

Draws the atlas with vis-network through pyvis and saves it as a
standalone HTML page:
- Node and edge attributes from the presentation adapter
- Network options (force-directed physics, theme colors)
- Rendering configuration injection
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...presentation.vis import Theme, network_options
from ...state import AtlasState


@dataclass
class PyvisNetworkRenderer:
    """Pyvis-based interactive network renderer.

    This adapter implements NetworkRendererPort.

    Attributes:
        config: Rendering configuration (size, theme, CDN mode)
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def theme(self) -> Theme:
        return Theme.for_mode(self.config.dark_mode)

    def render_html(self, state: AtlasState) -> str:
        """Render the network as a standalone HTML document.

        Raises:
            RenderingError: If pyvis is missing or rendering fails.
        """
        self._logger.debug(
            "Rendering network",
            extra={
                "nodes": len(state.graph.nodes),
                "edges": len(state.graph.edges),
                "group_by": state.group_by,
            },
        )

        try:
            from pyvis.network import Network
        except ImportError as e:
            raise RenderingError(
                "pyvis not installed",
                renderer_type="pyvis",
                cause=e,
            )

        theme = self.theme
        try:
            net = Network(
                height=self.config.height,
                width=self.config.width,
                bgcolor=theme.background,
                font_color=theme.text,
                cdn_resources=self.config.cdn_resources,
            )
            net.set_options(json.dumps(network_options(theme)))

            for attrs in state.nodes():
                node_id = attrs.pop("id")
                net.add_node(node_id, **attrs)

            for attrs in state.edges():
                source = attrs.pop("from")
                target = attrs.pop("to")
                net.add_edge(source, target, **attrs)

            return net.generate_html(notebook=False)
        except Exception as e:
            self._logger.error("Network rendering failed", extra={"error": str(e)})
            raise RenderingError(
                f"Network rendering failed: {e}",
                renderer_type="pyvis",
                cause=e,
            )

    def render(self, state: AtlasState, output_path: Path) -> Path:
        """Render the network and save it to ``output_path``.

        Raises:
            RenderingError: If rendering or writing the file fails.
        """
        document = self.render_html(state)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise RenderingError(
                f"Could not write network: {e}",
                output_path=str(output_path),
                renderer_type="pyvis",
                cause=e,
            )

        self._logger.info(
            "Network rendered",
            extra={"output_path": str(output_path)},
        )
        return output_path
