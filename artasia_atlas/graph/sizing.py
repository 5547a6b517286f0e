"""Map participation to a bounded node size."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from ..config import LayoutConfig, get_config


@dataclass(frozen=True)
class SizeMapper:
    """Linear participation -> size mapping over a fixed dataset.

    Attributes:
        minimum: Smallest finite participation, None without finite values
        maximum: Largest finite participation, None without finite values
        floor: Size for the smallest participation and for unknown values
        ceiling: Size for the largest participation
        midpoint: Size used when every participation is the same
    """

    minimum: Optional[float]
    maximum: Optional[float]
    floor: int = 12
    ceiling: int = 36
    midpoint: int = 24

    @classmethod
    def from_values(
        cls,
        participations: Iterable[float],
        layout: Optional[LayoutConfig] = None,
    ) -> SizeMapper:
        """Build a mapper from the participation of every record."""
        layout = layout or get_config().layout
        finite = [p for p in participations if math.isfinite(p)]
        return cls(
            minimum=min(finite) if finite else None,
            maximum=max(finite) if finite else None,
            floor=layout.size_floor,
            ceiling=layout.size_ceiling,
            midpoint=layout.size_midpoint,
        )

    def __call__(self, participation: float) -> int:
        if (
            not math.isfinite(participation)
            or self.minimum is None
            or self.maximum is None
        ):
            return self.floor
        if self.minimum == self.maximum:
            return self.midpoint

        normalized = (participation - self.minimum) / (self.maximum - self.minimum)
        # Half-up, not banker's rounding.
        return math.floor(self.floor + normalized * (self.ceiling - self.floor) + 0.5)

    map_size = __call__
