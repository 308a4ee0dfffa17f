"""End-to-end import of one uploaded file into one patrimony level."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

from ..config import get_import_settings
from ..constants import ImportIssueCode
from ..levels import LevelDescriptor
from ..types import AuthorizationScope, BatchOutcome
from .audit_log import log_import_event
from .errors import EmptyFileError, ImportAccessError, ImportServiceError, ParentNotFoundError
from .file_parser import detect_file_format, parse_uploaded_file
from .header_resolver import resolve_headers
from .reconciliation import reconcile_rows
from .repositories import PatrimonyRepository, get_repository
from .row_normalizer import normalize_rows
from .template_resolver import resolve_level_descriptor

logger = logging.getLogger(__name__)

RepositoryFactory = Callable[[LevelDescriptor], PatrimonyRepository]


def _resolve_parent(
    descriptor: LevelDescriptor,
    parent_id: Optional[str],
    scope: AuthorizationScope,
    repository_factory: RepositoryFactory,
) -> Optional[str]:
    if descriptor.is_root:
        return None
    parent_id = str(parent_id or "").strip()
    if not parent_id:
        raise ImportServiceError(
            ImportIssueCode.PARENT_REQUIRED,
            f"A parent level {descriptor.parent_level} record is required to import level "
            f"{descriptor.level}.",
            field_path="parent_id",
        )
    parent_descriptor = resolve_level_descriptor(descriptor.parent_level)
    parent = repository_factory(parent_descriptor).get_in_scope(parent_id, scope)
    if parent is None:
        raise ParentNotFoundError(descriptor.parent_level, parent_id)
    return str(parent.pk)


def import_patrimony_file(
    uploaded_file: Any,
    *,
    level: str | int,
    scope: AuthorizationScope,
    parent_id: Optional[str] = None,
    file_name: Optional[str] = None,
    content_type: Optional[str] = None,
    user_id: Optional[str] = None,
    strict_enums: Optional[bool] = None,
    repository_factory: RepositoryFactory = get_repository,
) -> BatchOutcome:
    """Decode, normalize and reconcile an uploaded file for one level.

    Batch-fatal problems raise ``ImportServiceError`` before any row is
    written. Row-level problems are reported in the returned outcome.
    """
    started = time.perf_counter()
    import_settings = get_import_settings()
    descriptor = resolve_level_descriptor(level)

    if not scope.is_privileged and not scope.tenant_id:
        raise ImportAccessError("The user is not associated with an organization.")

    resolved_parent_id = _resolve_parent(descriptor, parent_id, scope, repository_factory)

    file_name = file_name or getattr(uploaded_file, "name", None)
    content_type = content_type or getattr(uploaded_file, "content_type", None)
    file_format = detect_file_format(file_name, content_type)
    parsed_file = parse_uploaded_file(
        uploaded_file,
        file_format=file_format,
        max_rows=import_settings.limits.max_rows,
        max_file_size_bytes=import_settings.limits.max_file_size_bytes,
        file_name=file_name,
    )

    columns = resolve_headers(parsed_file.headers, descriptor)
    rows = normalize_rows(
        parsed_file.rows,
        columns,
        descriptor,
        strict_enums=import_settings.strict_enums if strict_enums is None else strict_enums,
    )
    if not rows:
        raise EmptyFileError()

    logger.debug(
        "Importing %s rows into level %s from %s",
        len(rows),
        descriptor.level,
        parsed_file.file_name,
    )
    report = reconcile_rows(
        rows,
        descriptor=descriptor,
        repository=repository_factory(descriptor),
        scope=scope,
        parent_id=resolved_parent_id,
    )

    log_import_event(
        "patrimony_import",
        level=descriptor.level,
        scope=scope,
        user_id=user_id,
        details={
            "parent_id": resolved_parent_id,
            "file_name": parsed_file.file_name,
            "file_format": parsed_file.file_format,
        },
        kpis={
            "processed": report.processed,
            "created": report.created,
            "updated": report.updated,
            "skipped": report.skipped,
            "duration_ms": int((time.perf_counter() - started) * 1000),
        },
    )
    return report.as_dict()
