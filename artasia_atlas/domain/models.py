"""Immutable domain models for the Artasia Atlas.

All models are frozen dataclasses with slots. A site dataset enters the
system as loosely-typed ``RawRecord`` mappings and leaves the row
normalizer as closed ``SiteRecord`` values; everything downstream works on
the records, nodes and edges defined here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional

# One input row: column name -> cell text. Only the row normalizer reads it.
RawRecord = Mapping[str, Optional[str]]

UNKNOWN = "Unknown"


class GroupKey(str, Enum):
    """Attribute used to cluster nodes for display.

    The values are the labels offered by the group-by selector.
    """

    PARTNER = "Partner Org"
    EDUCATOR = "Artist Educator"
    EARLY_ON = "EarlyON"


class EdgeKind(Enum):
    """Relationship an edge encodes."""

    MEMBER = auto()
    REPRESENTATIVE = auto()


@dataclass(frozen=True, slots=True)
class SiteRecord:
    """A normalized community art site.

    Attributes:
        site: Site name, also used as the node label
        educator: Artist educator leading the project
        partner: Partner organization, ``"Unknown"`` when not given
        address: Street address
        title: Project title
        photo_url: Link to a project photo
        link: Link to the project page
        early_on: Whether the site is part of the EarlyON program
        participation: Engagement metric, 0 when not given
        lat: Latitude in degrees, NaN when unknown
        lng: Longitude in degrees, NaN when unknown
    """

    site: str = ""
    educator: str = ""
    partner: str = UNKNOWN
    address: str = ""
    title: str = ""
    photo_url: str = ""
    link: str = ""
    early_on: bool = False
    participation: float = 0.0
    lat: float = math.nan
    lng: float = math.nan

    @property
    def has_location(self) -> bool:
        """Check if both coordinates are usable."""
        return math.isfinite(self.lat) and math.isfinite(self.lng)


@dataclass(frozen=True, slots=True)
class GraphNode:
    """A site placed in the network.

    Attributes:
        id: 1-based position of the site in the input rows
        label: Display label (the site name)
        group: Current cluster label, the partner until regrouped
        size: Visual size derived from participation
        lat: Latitude in degrees, NaN when unknown
        lng: Longitude in degrees, NaN when unknown
        participation: Engagement metric of the site
        is_representative: Whether the node is its partner group's hub
        title: Tooltip markup
        border_width: Border emphasis, wider for representatives
        record: The normalized record the node was built from
    """

    id: int
    label: str
    group: str
    size: int
    lat: float
    lng: float
    participation: float
    title: str
    is_representative: bool = False
    border_width: int = 1
    record: SiteRecord = field(default_factory=SiteRecord, repr=False, compare=False)

    @property
    def has_location(self) -> bool:
        """Check if both coordinates are usable."""
        return math.isfinite(self.lat) and math.isfinite(self.lng)


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """A weighted link between two nodes.

    Attributes:
        id: Edge identifier, ``"<from>-<to>"``
        from_id: Node the edge was built from (always a representative)
        to_id: Node the edge points to
        distance_km: Rounded great-circle distance, None when unavailable
        value: Edge weight, the rounded distance or a fixed fallback
        length: Spring length hint for the layout engine
        title: Tooltip text
        kind: Member link or representative-to-representative link
    """

    id: str
    from_id: int
    to_id: int
    distance_km: Optional[float]
    value: float
    length: float
    title: str
    kind: EdgeKind = EdgeKind.MEMBER

    @property
    def has_distance(self) -> bool:
        """Check if the distance could be computed."""
        return self.distance_km is not None


@dataclass(frozen=True, slots=True)
class SiteGraph:
    """The network handed to the presentation layer.

    Attributes:
        nodes: Nodes in input row order
        edges: Edges in construction order
        groups: Partner -> node ids, in order of first appearance
        representatives: Partner -> id of the representative node
    """

    nodes: tuple[GraphNode, ...] = field(default_factory=tuple)
    edges: tuple[GraphEdge, ...] = field(default_factory=tuple)
    groups: Mapping[str, tuple[int, ...]] = field(default_factory=dict)
    representatives: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copies; regrouped graphs share them.
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))
        object.__setattr__(self, "representatives", MappingProxyType(dict(self.representatives)))

    @property
    def is_empty(self) -> bool:
        """Check if the graph has no nodes."""
        return len(self.nodes) == 0

    @property
    def representative_ids(self) -> frozenset[int]:
        """Ids of every representative node."""
        return frozenset(self.representatives.values())

    def node(self, node_id: int) -> GraphNode:
        """Return the node with the given id.

        Raises:
            KeyError: If no node carries that id.
        """
        if 1 <= node_id <= len(self.nodes):
            candidate = self.nodes[node_id - 1]
            if candidate.id == node_id:
                return candidate
        for candidate in self.nodes:
            if candidate.id == node_id:
                return candidate
        raise KeyError(node_id)
