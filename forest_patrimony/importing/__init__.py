"""Bulk import of patrimony hierarchy levels from CSV/XLSX uploads."""

from .constants import (
    DEFAULT_MAX_FILE_SIZE_BYTES,
    DEFAULT_MAX_ROWS,
    ImportIssueCode,
)
from .types import AuthorizationScope, NormalizedRow, ParsedImportFile, RawRow, RowRejection

__all__ = [
    "DEFAULT_MAX_FILE_SIZE_BYTES",
    "DEFAULT_MAX_ROWS",
    "ImportIssueCode",
    "AuthorizationScope",
    "NormalizedRow",
    "ParsedImportFile",
    "RawRow",
    "RowRejection",
]
