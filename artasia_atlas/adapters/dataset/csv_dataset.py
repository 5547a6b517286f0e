"""CSV site dataset adapter.

Reads the delimited site export (header row, one site per line) into raw
rows for the row normalizer. Column order does not matter, unknown
columns are carried along and ignored downstream, and missing cells come
back as ``None``.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ...config import DatasetConfig, get_config
from ...domain.errors import DatasetError
from ...domain.models import RawRecord


def read_rows(lines: Iterable[str]) -> List[RawRecord]:
    """Parse CSV text lines into raw rows.

    Blank lines are skipped. Cells beyond the header width are dropped.
    """
    rows: List[RawRecord] = []
    for row in csv.DictReader(lines):
        record: Dict[str, Optional[str]] = {
            key.strip(): value for key, value in row.items() if key is not None
        }
        rows.append(record)
    return rows


@dataclass
class CSVSiteDataset:
    """Site dataset backed by a CSV file.

    This adapter implements SiteDatasetPort.

    Attributes:
        config: Dataset configuration (directory, file name, encoding)
        path: Explicit file to read instead of the configured one
    """

    config: DatasetConfig = field(default_factory=lambda: get_config().dataset)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def source(self) -> Path:
        """File the rows are read from."""
        return self.path if self.path is not None else self.config.sites_path

    def load(self) -> List[RawRecord]:
        """Load every row of the CSV file.

        Returns:
            Rows in file order.

        Raises:
            DatasetError: If the file cannot be read or decoded.
        """
        source = self.source
        self._logger.debug("Loading sites", extra={"sites_path": str(source)})

        try:
            with source.open(newline="", encoding=self.config.encoding) as f:
                rows = read_rows(f)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DatasetError(
                f"Failed to load sites: {e}",
                file_path=str(source),
                cause=e,
            )

        self._logger.info("Sites loaded", extra={"rows": len(rows)})
        return rows
