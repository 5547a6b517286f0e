"""Site network construction.

This subpackage turns raw dataset rows into the weighted network handed
to the renderer: row normalization, node sizing, representative selection,
distance edges and regrouping.
"""

from .builder import build_graph, partner_groups, select_representative
from .normalize import normalize, normalize_rows
from .regroup import compute_group, group_assignment, regroup
from .sizing import SizeMapper

__all__ = [
    "normalize",
    "normalize_rows",
    "SizeMapper",
    "build_graph",
    "partner_groups",
    "select_representative",
    "compute_group",
    "group_assignment",
    "regroup",
]
