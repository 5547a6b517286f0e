"""Explicit view state of the atlas.

UI callers hold an ``AtlasState`` and replace it through the pure
transitions below whenever the group-by selector or the edge-label toggle
changes. Each transition replaces the whole grouping or the whole label
set at once.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Union

from .domain.models import GroupKey, SiteGraph
from .graph.regroup import group_assignment, regroup
from .presentation.vis import edge_labels, edges_payload, nodes_payload


@dataclass(frozen=True)
class AtlasState:
    """Graph plus the current display choices.

    Attributes:
        graph: The network, with node groups matching ``group_by``
        group_by: Current grouping key
        show_edge_labels: Whether edges display their distance
    """

    graph: SiteGraph
    group_by: str = GroupKey.PARTNER.value
    show_edge_labels: bool = False

    @classmethod
    def create(
        cls,
        graph: SiteGraph,
        group_by: Union[GroupKey, str, None] = None,
        show_edge_labels: bool = False,
    ) -> AtlasState:
        """Build a state whose node groups already follow ``group_by``."""
        key = _key_value(group_by)
        return cls(graph=regroup(graph, key), group_by=key, show_edge_labels=show_edge_labels)

    def with_grouping(self, key: Union[GroupKey, str, None]) -> AtlasState:
        key_value = _key_value(key)
        return replace(self, graph=regroup(self.graph, key_value), group_by=key_value)

    def with_edge_labels(self, show: bool) -> AtlasState:
        return replace(self, show_edge_labels=bool(show))

    def group_updates(self) -> Dict[int, str]:
        """Node id -> group label for the current grouping."""
        return group_assignment(self.graph.nodes, self.group_by)

    def label_updates(self) -> Dict[str, Optional[str]]:
        """Edge id -> display label for the current toggle."""
        return edge_labels(self.graph.edges, self.show_edge_labels)

    def nodes(self) -> List[Dict[str, Any]]:
        return nodes_payload(self.graph.nodes)

    def edges(self) -> List[Dict[str, Any]]:
        return edges_payload(self.graph.edges, self.show_edge_labels)


def _key_value(key: Union[GroupKey, str, None]) -> str:
    if isinstance(key, GroupKey):
        return key.value
    if key is None:
        return GroupKey.PARTNER.value
    return key
