"""Schema definitions for pagebreak."""

from .config import PaginationConfig
from .report import BatchReport, PaginationReport

__all__ = [
    "BatchReport",
    "PaginationConfig",
    "PaginationReport",
]
