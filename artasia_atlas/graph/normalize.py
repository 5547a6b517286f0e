"""Row normalization: raw dataset rows to closed site records.

``normalize`` is total. Every malformed cell degrades to a default or a
sentinel (empty string, 0, NaN, ``"Unknown"``) so that no input row can
stop the graph from being built.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, List, Optional, Tuple

from ..domain.models import UNKNOWN, RawRecord, SiteRecord

SITE = "Site"
EDUCATOR = "Artist Educator"
PARTNER = "Partner Org"
ADDRESS = "Address"
TITLE = "Title"
PHOTO = "Photo link"
LINK = "Link"
EARLY_ON = "EarlyON"
PARTICIPATION = "Participation"
GPS = "GPS"

COLUMNS = (
    SITE,
    EDUCATOR,
    PARTNER,
    ADDRESS,
    TITLE,
    PHOTO,
    LINK,
    EARLY_ON,
    PARTICIPATION,
    GPS,
)

# Longest leading float literal, the way spreadsheet exports are read by
# browsers: "12 people" -> 12.0, "Infinity" -> inf, "abc" -> no match.
_LEADING_FLOAT = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def tidy(value: Optional[object]) -> str:
    """Convert a cell to a trimmed string, ``None`` becoming ``""``."""
    if value is None:
        return ""
    return str(value).strip()


def as_bool(value: Optional[object]) -> bool:
    """Return True iff the cell reads ``true`` in any letter case."""
    return tidy(value).lower() == "true"


def parse_float(value: Optional[object]) -> float:
    """Parse the leading number of a cell, NaN when there is none."""
    match = _LEADING_FLOAT.match(tidy(value))
    if match is None:
        return math.nan
    return float(match.group(0))


def parse_gps(value: Optional[object]) -> Tuple[float, float]:
    """Parse a ``"<lat>, <lng>"`` cell.

    Every comma-separated token is parsed; with fewer than two tokens the
    location is unknown and both coordinates are NaN. Extra tokens are
    ignored and a token that fails to parse still occupies its position.
    """
    values = [parse_float(token) for token in tidy(value).split(",")]
    if len(values) < 2:
        return math.nan, math.nan
    return values[0], values[1]


def normalize(raw: RawRecord) -> SiteRecord:
    """Turn one raw dataset row into a ``SiteRecord``."""
    participation = parse_float(raw.get(PARTICIPATION))
    if math.isnan(participation):
        participation = 0.0

    lat, lng = parse_gps(raw.get(GPS))

    return SiteRecord(
        site=tidy(raw.get(SITE)),
        educator=tidy(raw.get(EDUCATOR)),
        partner=tidy(raw.get(PARTNER)) or UNKNOWN,
        address=tidy(raw.get(ADDRESS)),
        title=tidy(raw.get(TITLE)),
        photo_url=tidy(raw.get(PHOTO)),
        link=tidy(raw.get(LINK)),
        early_on=as_bool(raw.get(EARLY_ON)),
        participation=participation,
        lat=lat,
        lng=lng,
    )


def normalize_rows(rows: Iterable[RawRecord]) -> List[SiteRecord]:
    """Normalize every row, preserving input order."""
    return [normalize(row) for row in rows]
