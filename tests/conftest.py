from typing import Dict, List, Optional

import pytest

from artasia_atlas.config import reset_config
from artasia_atlas.container import reset_container

HEADER = [
    "Site",
    "Artist Educator",
    "Partner Org",
    "Address",
    "Title",
    "Photo link",
    "Link",
    "EarlyON",
    "Participation",
    "GPS",
]


def make_row(
    site: str,
    partner: str = "",
    participation: str = "",
    gps: str = "",
    educator: str = "",
    early_on: str = "",
    **extra: str,
) -> Dict[str, Optional[str]]:
    row: Dict[str, Optional[str]] = {
        "Site": site,
        "Partner Org": partner,
        "Participation": participation,
        "GPS": gps,
        "Artist Educator": educator,
        "EarlyON": early_on,
    }
    row.update(extra)
    return row


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def sample_rows() -> List[Dict[str, Optional[str]]]:
    return [
        make_row("Bayfront", "Harbour Arts", "48", "43.2700, -79.8710", "Maya", "TRUE"),
        make_row("Gage Park", "Harbour Arts", "22", "43.2413, -79.8287", "Maya", "false"),
        make_row("Westdale", "Library", "35", "43.2606, -79.9066", "Omar", "true"),
        make_row("Central", "Library", "35", "43.2590, -79.8720", "Omar"),
        make_row("Kenilworth", "Library", "12", ""),
        make_row("Dundas", "", "not recorded", "43.2680, -79.9550", "Lea"),
    ]
