"""Dataset port - Abstraction for reading the site dataset.

The atlas core only needs the rows of the dataset as column -> text
mappings; where they come from is up to the adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from ..domain.models import RawRecord


class SiteDatasetPort(Protocol):
    """Port for loading raw site rows.

    Implementation: adapters/dataset/csv_dataset.py
    """

    def load(self) -> List[RawRecord]:
        """Load every row of the dataset.

        Returns:
            Rows in file order, one mapping per row.

        Raises:
            DatasetError: If the dataset cannot be read.
        """
        ...
