"""Typed domain errors for the Artasia Atlas.

The graph core is total over its input and never raises on data. These
errors only surface at the adapter boundary: reading the dataset, writing
the rendered network, or resolving configuration.

All errors inherit from AtlasError and can optionally wrap a root cause
exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AtlasError(Exception):
    """Base error for the atlas domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DatasetError(AtlasError):
    """The site dataset could not be read.

    Attributes:
        file_path: Path to the dataset if relevant
    """

    file_path: Optional[str] = None


@dataclass
class RenderingError(AtlasError):
    """Network rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""


@dataclass
class ConfigurationError(AtlasError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
