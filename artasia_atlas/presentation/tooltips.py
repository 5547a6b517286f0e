"""Tooltip markup for sites and distance edges.

Node tooltips are small HTML fragments shown on hover by the network
renderer. Field values are escaped; the surrounding markup is not.
"""

from __future__ import annotations

import html
import math
from typing import Optional

from ..domain.models import SiteRecord

EM_DASH = "—"
REPRESENTATIVE_MARKER = "\U0001F4CD REPRESENTATIVE"
DISTANCE_UNAVAILABLE = "distance unavailable"


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` for whole values."""
    value = float(value)
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if math.isnan(value):
        return "NaN"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def distance_title(distance_km: Optional[float]) -> str:
    """Tooltip of an edge: its distance, or a distinct unavailable text."""
    if distance_km is None:
        return DISTANCE_UNAVAILABLE
    return f"{format_number(distance_km)} km"


def site_tooltip(record: SiteRecord) -> str:
    """Describe a site for the node tooltip."""
    esc = html.escape
    parts = [f"<b>{esc(record.site)}</b><br>"]
    if record.address:
        parts.append(f"{esc(record.address)}<br>")
    if record.title:
        parts.append(f"Project: {esc(record.title)}<br>")
    parts.append(f"Artist Educator: {esc(record.educator) or EM_DASH}<br>")
    parts.append(f"Partner: {esc(record.partner) or EM_DASH}<br>")
    participation = (
        format_number(record.participation) if record.participation else EM_DASH
    )
    parts.append(f"Participation: {participation}<br>")
    parts.append(f"EarlyON: {'Yes' if record.early_on else 'No'}<br>")
    if record.link:
        parts.append(
            f'<a href="{esc(record.link)}" target="_blank">View Project</a><br>'
        )
    if record.has_location:
        parts.append(f"GPS: {record.lat:.6f}, {record.lng:.6f}")
    else:
        parts.append(f"GPS: {EM_DASH}")
    return "".join(parts)


def representative_tooltip(label: str, tooltip: str) -> str:
    """Prefix a tooltip with the representative marker."""
    return f"<b>{REPRESENTATIVE_MARKER}: {html.escape(label)}</b><br>{tooltip}"
