"""Presentation layer - tooltips and renderer attribute shapes."""

from .tooltips import distance_title, format_number, representative_tooltip, site_tooltip
from .vis import (
    Theme,
    edge_attributes,
    edge_label,
    edge_labels,
    edges_payload,
    network_options,
    node_attributes,
    nodes_payload,
)

__all__ = [
    "site_tooltip",
    "representative_tooltip",
    "distance_title",
    "format_number",
    "Theme",
    "node_attributes",
    "edge_attributes",
    "edge_label",
    "edge_labels",
    "nodes_payload",
    "edges_payload",
    "network_options",
]
