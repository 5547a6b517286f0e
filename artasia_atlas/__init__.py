"""Top-level package for the Artasia Atlas.

The atlas shows community art sites as a force-directed network: sites
are grouped by partner organization, each group is organized around its
highest-participation site, and edges carry the distance between sites.
"""

from .geo import distance_km
from .graph import build_graph, normalize, regroup
from .state import AtlasState

__all__ = ["distance_km", "normalize", "build_graph", "regroup", "AtlasState"]
