"""Service layer for patrimony import orchestration."""

from .access_control import (
    default_scope_provider,
    require_import_access,
    resolve_authorization_scope,
)
from .audit_log import log_import_event
from .batch_report import BatchReport
from .errors import (
    EmptyFileError,
    FormatError,
    ImportAccessError,
    ImportServiceError,
    MissingColumnError,
    ParentNotFoundError,
)
from .file_parser import detect_file_format, parse_uploaded_file
from .header_resolver import normalize_header, resolve_headers
from .import_service import import_patrimony_file
from .reconciliation import RowOutcome, reconcile_row, reconcile_rows
from .repositories import DjangoPatrimonyRepository, PatrimonyRepository, get_repository
from .row_normalizer import normalize_row, normalize_rows
from .template_resolver import resolve_import_template, resolve_level_descriptor

__all__ = [
    "default_scope_provider",
    "require_import_access",
    "resolve_authorization_scope",
    "log_import_event",
    "BatchReport",
    "EmptyFileError",
    "FormatError",
    "ImportAccessError",
    "ImportServiceError",
    "MissingColumnError",
    "ParentNotFoundError",
    "detect_file_format",
    "parse_uploaded_file",
    "normalize_header",
    "resolve_headers",
    "import_patrimony_file",
    "RowOutcome",
    "reconcile_row",
    "reconcile_rows",
    "DjangoPatrimonyRepository",
    "PatrimonyRepository",
    "get_repository",
    "normalize_row",
    "normalize_rows",
    "resolve_import_template",
    "resolve_level_descriptor",
]
