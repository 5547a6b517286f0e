"""Build the site network from normalized records.

The network is hierarchical: sites are grouped by partner organization,
the site with the highest participation in each group becomes the
group's representative, representatives connect to every other member
of their group, and representatives connect to each other.

For N sites in G partner groups the network has ``(N - G) + G*(G-1)/2``
edges.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import LayoutConfig, get_config
from ..domain.models import EdgeKind, GraphEdge, GraphNode, SiteGraph, SiteRecord
from ..geo import distance_km
from ..presentation.tooltips import distance_title, representative_tooltip, site_tooltip
from .sizing import SizeMapper

logger = logging.getLogger(__name__)


def build_nodes(
    records: Sequence[SiteRecord],
    layout: Optional[LayoutConfig] = None,
) -> List[GraphNode]:
    """Create one node per record, ids following row order from 1."""
    layout = layout or get_config().layout
    size_for = SizeMapper.from_values((r.participation for r in records), layout)

    return [
        GraphNode(
            id=index + 1,
            label=record.site,
            group=record.partner,
            size=size_for(record.participation),
            lat=record.lat,
            lng=record.lng,
            participation=record.participation,
            title=site_tooltip(record),
            record=record,
        )
        for index, record in enumerate(records)
    ]


def partner_groups(nodes: Sequence[GraphNode]) -> Dict[str, List[GraphNode]]:
    """Group nodes by their ``group`` label.

    Groups keep the order in which each label first appears; members keep
    row order.
    """
    groups: Dict[str, List[GraphNode]] = {}
    for node in nodes:
        groups.setdefault(node.group, []).append(node)
    return groups


def select_representative(group: Sequence[GraphNode]) -> GraphNode:
    """Return the node with the highest participation.

    Only a strictly greater participation replaces the current best, so
    the first node in row order wins ties.

    Raises:
        ValueError: If the group is empty.
    """
    if not group:
        raise ValueError("cannot select a representative of an empty group")

    best = group[0]
    for node in group[1:]:
        if node.participation > best.participation:
            best = node
    return best


def connect(
    a: GraphNode,
    b: GraphNode,
    kind: EdgeKind,
    layout: Optional[LayoutConfig] = None,
) -> GraphEdge:
    """Create the edge ``a -> b`` weighted by their distance."""
    layout = layout or get_config().layout

    distance: Optional[float] = None
    if a.has_location and b.has_location:
        raw = distance_km(a.lat, a.lng, b.lat, b.lng)
        distance = round(raw, layout.distance_decimals)

    if distance is None:
        value = layout.unavailable_edge_value
        length = layout.edge_length_fallback
    else:
        value = distance
        # Layout length uses the unrounded distance.
        length = layout.edge_length_base + raw * layout.edge_length_per_km

    return GraphEdge(
        id=f"{a.id}-{b.id}",
        from_id=a.id,
        to_id=b.id,
        distance_km=distance,
        value=value,
        length=length,
        title=distance_title(distance),
        kind=kind,
    )


def build_graph(
    records: Sequence[SiteRecord],
    layout: Optional[LayoutConfig] = None,
) -> SiteGraph:
    """Build the hierarchical site network.

    Args:
        records: Normalized site records in input row order.
        layout: Visual constants, the configured ones by default.

    Returns:
        The network; empty when there are no records.
    """
    layout = layout or get_config().layout
    nodes = build_nodes(records, layout)
    groups = partner_groups(nodes)

    representatives: Dict[str, GraphNode] = {
        partner: select_representative(members) for partner, members in groups.items()
    }

    edges: List[GraphEdge] = []
    for partner, members in groups.items():
        hub = representatives[partner]
        for node in members:
            if node.id != hub.id:
                edges.append(connect(hub, node, EdgeKind.MEMBER, layout))

    hubs = list(representatives.values())
    for i, a in enumerate(hubs):
        for b in hubs[i + 1:]:
            edges.append(connect(a, b, EdgeKind.REPRESENTATIVE, layout))

    hub_ids = {hub.id for hub in hubs}
    marked: Tuple[GraphNode, ...] = tuple(
        replace(
            node,
            is_representative=True,
            border_width=layout.representative_border_width,
            title=representative_tooltip(node.label, node.title),
        )
        if node.id in hub_ids
        else node
        for node in nodes
    )

    missing = sum(1 for node in marked if not node.has_location)
    if missing:
        logger.debug("Sites without coordinates", extra={"count": missing})

    logger.info(
        "Site graph built",
        extra={"nodes": len(marked), "edges": len(edges), "groups": len(groups)},
    )

    return SiteGraph(
        nodes=marked,
        edges=tuple(edges),
        groups={partner: tuple(n.id for n in members) for partner, members in groups.items()},
        representatives={partner: hub.id for partner, hub in representatives.items()},
    )
