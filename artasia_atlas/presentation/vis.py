"""Presentation adapter for the vis-network renderer.

Translates domain nodes and edges into the attribute dictionaries
vis-network consumes, and holds the network options (physics,
interaction, default styling) the atlas is displayed with.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..domain.models import GraphEdge, GraphNode
from .tooltips import format_number

FONT_FACE = "Inter, system-ui, sans-serif"


@dataclass(frozen=True)
class Theme:
    """Colors that depend on the page background."""

    background: str
    text: str
    edge: str

    @classmethod
    def for_mode(cls, dark_mode: bool) -> Theme:
        if dark_mode:
            return cls(background="#1e1e1e", text="#ffffff", edge="#666666")
        return cls(background="#ffffff", text="#000000", edge="#848484")


def _coordinate(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def node_attributes(node: GraphNode) -> Dict[str, Any]:
    """Attributes of one vis-network node."""
    return {
        "id": node.id,
        "label": node.label,
        "group": node.group,
        "size": node.size,
        "title": node.title,
        "borderWidth": node.border_width,
        "participation": node.participation,
        "lat": _coordinate(node.lat),
        "lng": _coordinate(node.lng),
    }


def edge_label(edge: GraphEdge, show: bool) -> Optional[str]:
    """Display text of an edge, None when hidden or without a distance."""
    # Unavailable edges carry a placeholder value; never show it as a distance.
    if not show or edge.distance_km is None:
        return None
    return f"{format_number(edge.value)} km"


def edge_attributes(edge: GraphEdge, show_label: bool = False) -> Dict[str, Any]:
    """Attributes of one vis-network edge."""
    attrs: Dict[str, Any] = {
        "id": edge.id,
        "from": edge.from_id,
        "to": edge.to_id,
        "value": edge.value,
        "length": edge.length,
        "title": edge.title,
    }
    label = edge_label(edge, show_label)
    if label is not None:
        attrs["label"] = label
    return attrs


def edge_labels(edges: Iterable[GraphEdge], show: bool) -> Dict[str, Optional[str]]:
    """Whole-batch label update for every edge."""
    return {edge.id: edge_label(edge, show) for edge in edges}


def nodes_payload(nodes: Iterable[GraphNode]) -> List[Dict[str, Any]]:
    return [node_attributes(node) for node in nodes]


def edges_payload(edges: Iterable[GraphEdge], show_labels: bool = False) -> List[Dict[str, Any]]:
    return [edge_attributes(edge, show_labels) for edge in edges]


def network_options(theme: Theme) -> Dict[str, Any]:
    """vis-network options: force-directed physics and default styling.

    Edge widths scale with ``value``, which is the distance in km.
    """
    return {
        "autoResize": True,
        "physics": {
            "solver": "forceAtlas2Based",
            "forceAtlas2Based": {
                "gravitationalConstant": -30,
                "springLength": 80,
                "springConstant": 0.08,
            },
            "stabilization": {"iterations": 150},
        },
        "interaction": {"hover": True, "tooltipDelay": 120},
        "nodes": {
            "shape": "dot",
            "size": 12,
            "font": {"size": 12, "face": FONT_FACE, "color": theme.text},
            "borderWidth": 1,
        },
        "edges": {
            "smooth": {"type": "dynamic"},
            "scaling": {"min": 1, "max": 6},
            "color": {"color": theme.edge, "opacity": 0.7},
            "font": {"color": theme.text, "size": 11},
        },
    }
