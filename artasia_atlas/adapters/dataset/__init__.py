"""Dataset adapters - Implementations of SiteDatasetPort.

Available implementations:
- CSVSiteDataset: Reads the site export from a CSV file
"""

from .csv_dataset import CSVSiteDataset, read_rows

__all__ = ["CSVSiteDataset", "read_rows"]
