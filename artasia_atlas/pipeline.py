"""High-level entry points for the Artasia Atlas.

The pipeline is organized in several stages:

1. Dataset loading (CSV export of the site list).
2. Row normalization.
3. Graph construction (sizes, representatives, distance edges).
4. Rendering (standalone vis-network HTML page).

This module wires these stages together through the default container.
Each step delegates work to dedicated, testable modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .config import get_config
from .container import Container
from .domain.models import GroupKey, SiteGraph
from .observability import configure_logging
from .services import AtlasService

PathLike = Union[str, Path]


def _service(csv_path: Optional[PathLike]) -> AtlasService:
    container = Container.create_default(
        csv_path=Path(csv_path) if csv_path is not None else None
    )
    return container.resolve(AtlasService)


def build_atlas(csv_path: Optional[PathLike] = None) -> SiteGraph:
    """Build the site network from ``csv_path`` or the configured dataset."""
    return _service(csv_path).load_graph()


def render_atlas(
    csv_path: Optional[PathLike] = None,
    output_html: Optional[PathLike] = None,
    *,
    group_by: Union[GroupKey, str, None] = None,
    show_edge_labels: Optional[bool] = None,
) -> Path:
    """Build the network and save it as an HTML page.

    Display choices default to the rendering configuration.
    """
    config = get_config()
    service = _service(csv_path)

    state = service.initial_state(
        group_by=group_by or config.rendering.default_group_by,
        show_edge_labels=(
            config.rendering.show_edge_labels
            if show_edge_labels is None
            else show_edge_labels
        ),
    )
    output_path = Path(output_html) if output_html is not None else config.output_path
    return service.render(state, output_path)


def run_pipeline() -> None:
    """Render the configured dataset with the configured display choices."""
    configure_logging()
    output_path = render_atlas()
    print(f"Atlas saved to: {output_path}")


if __name__ == "__main__":
    run_pipeline()
