"""Recompute display groups under another grouping key.

Regrouping only rewrites the ``group`` label used for visual clustering.
Records, representatives and edges stay as they were built.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, Union

from ..domain.models import UNKNOWN, GraphNode, GroupKey, SiteGraph, SiteRecord

EARLY_ON_GROUP = "EarlyON"
NOT_EARLY_ON_GROUP = "Not EarlyON"


def compute_group(
    item: Union[GraphNode, SiteRecord], key: Union[GroupKey, str, None] = None
) -> str:
    """Return the group label of a node or record under ``key``.

    Any key other than the educator or EarlyON key groups by partner.
    """
    record = item.record if isinstance(item, GraphNode) else item
    key_value = key.value if isinstance(key, GroupKey) else key

    if key_value == GroupKey.EDUCATOR.value:
        return record.educator or UNKNOWN
    if key_value == GroupKey.EARLY_ON.value:
        return EARLY_ON_GROUP if record.early_on else NOT_EARLY_ON_GROUP
    return record.partner or UNKNOWN


def group_assignment(
    nodes: Iterable[GraphNode], key: Union[GroupKey, str, None] = None
) -> Dict[int, str]:
    """Map every node id to its group label under ``key``."""
    return {node.id: compute_group(node, key) for node in nodes}


def regroup(graph: SiteGraph, key: Union[GroupKey, str, None] = None) -> SiteGraph:
    """Return ``graph`` with every node's group recomputed under ``key``."""
    assignment = group_assignment(graph.nodes, key)
    return replace(
        graph,
        nodes=tuple(replace(node, group=assignment[node.id]) for node in graph.nodes),
    )
