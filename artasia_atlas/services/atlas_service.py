"""Atlas service - Main orchestrator.

Loads the site dataset, builds the network, and hands the resulting
state to the renderer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..config import LayoutConfig, get_config
from ..domain.errors import DatasetError, RenderingError
from ..domain.models import GroupKey, SiteGraph
from ..graph.builder import build_graph
from ..graph.normalize import normalize_rows
from ..ports.dataset import SiteDatasetPort
from ..ports.rendering import NetworkRendererPort
from ..state import AtlasState


@dataclass
class AtlasService:
    """Main service for building and rendering the atlas.

    This service orchestrates the full pipeline:
    1. Dataset loading
    2. Row normalization
    3. Graph construction
    4. Optional rendering

    Attributes:
        dataset: Source of raw site rows
        renderer: Optional network renderer
        layout: Visual constants used by the graph builder
    """

    dataset: SiteDatasetPort
    renderer: Optional[NetworkRendererPort] = None
    layout: LayoutConfig = field(default_factory=lambda: get_config().layout)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_graph(self, strict: bool = False) -> SiteGraph:
        """Load the dataset and build the site network.

        Args:
            strict: Raise instead of returning an empty graph when the
                dataset cannot be read.

        Returns:
            The network, empty when the dataset is empty or absent.

        Raises:
            DatasetError: If ``strict`` and the dataset cannot be read.
        """
        try:
            rows = self.dataset.load()
        except DatasetError as e:
            if strict:
                raise
            self._logger.warning(
                "Dataset unavailable, building empty graph",
                extra={"error": str(e), "file_path": e.file_path},
            )
            rows = []

        records = normalize_rows(rows)
        graph = build_graph(records, self.layout)

        if graph.is_empty:
            self._logger.warning("No sites to display")
        return graph

    def initial_state(
        self,
        group_by: Union[GroupKey, str, None] = None,
        show_edge_labels: bool = False,
        strict: bool = False,
    ) -> AtlasState:
        """Build the graph and wrap it with the initial display choices."""
        graph = self.load_graph(strict=strict)
        return AtlasState.create(graph, group_by, show_edge_labels)

    def render(self, state: AtlasState, output_path: Path) -> Path:
        """Render ``state`` to ``output_path``.

        Raises:
            RenderingError: If no renderer is configured or rendering fails.
        """
        if self.renderer is None:
            raise RenderingError(
                "No renderer configured",
                output_path=str(output_path),
            )
        path = self.renderer.render(state, output_path)
        self._logger.info(
            "Atlas rendered",
            extra={
                "output_path": str(path),
                "group_by": state.group_by,
                "edge_labels": state.show_edge_labels,
            },
        )
        return path
