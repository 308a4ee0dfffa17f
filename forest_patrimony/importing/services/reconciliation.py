"""Create-or-update reconciliation of normalized rows by natural key."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Optional

from django.db import models

from ..levels import LevelDescriptor
from ..types import AuthorizationScope, NormalizedRow, RowRejection
from .batch_report import BatchReport
from .repositories import PatrimonyRepository

logger = logging.getLogger(__name__)


class RowOutcome(models.TextChoices):
    CREATED = "CREATED", "Created"
    UPDATED = "UPDATED", "Updated"
    REJECTED = "REJECTED", "Rejected"


def _measurement_error(row: NormalizedRow, descriptor: LevelDescriptor) -> str | None:
    value = row.measurement
    if descriptor.allow_zero_measurement:
        if value is None or value < 0:
            return f"Invalid total area: {descriptor.measurement_field} must be a number >= 0."
        return None
    if value is None or value <= 0:
        return (
            f"Invalid area for level {descriptor.level}: "
            f"{descriptor.measurement_field} must be a number > 0."
        )
    return None


def _mutable_fields(row: NormalizedRow, descriptor: LevelDescriptor) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "name": row.name,
        "type": row.type,
        descriptor.measurement_field: row.measurement,
    }
    if descriptor.shape_choices is not None:
        fields["shape_type"] = row.shape_type
    if descriptor.legal_status_choices is not None and row.legal_status is not None:
        fields["legal_status"] = row.legal_status
    if row.is_active is not None:
        fields["is_active"] = row.is_active
    return fields


def _persistence_message(exc: Exception) -> str:
    messages = getattr(exc, "messages", None)
    if messages:
        return "; ".join(str(message) for message in messages)
    return str(exc) or "The row could not be imported."


def reconcile_row(
    row: NormalizedRow | RowRejection,
    *,
    descriptor: LevelDescriptor,
    repository: PatrimonyRepository,
    scope: AuthorizationScope,
    parent_id: Optional[str] = None,
) -> tuple[str, str | None]:
    """Apply one row and return ``(outcome, error_message)``."""
    if isinstance(row, RowRejection):
        return RowOutcome.REJECTED, row.message

    measurement_error = _measurement_error(row, descriptor)
    if measurement_error:
        return RowOutcome.REJECTED, measurement_error

    try:
        existing = repository.find_by_natural_key(parent_id, scope, row.code)
        fields = _mutable_fields(row, descriptor)
        if existing is not None:
            repository.update(existing.pk, fields)
            return RowOutcome.UPDATED, None

        fields["code"] = row.code
        fields.setdefault("is_active", True)
        repository.create(
            fields,
            parent_id=parent_id,
            tenant_id=scope.tenant_id if descriptor.is_root else None,
        )
        return RowOutcome.CREATED, None
    except Exception as exc:
        logger.warning(
            "Level %s row %s (code=%s) could not be persisted: %s",
            descriptor.level,
            row.row_number,
            row.code,
            exc,
        )
        return RowOutcome.REJECTED, _persistence_message(exc)


def reconcile_rows(
    rows: Iterable[NormalizedRow | RowRejection],
    *,
    descriptor: LevelDescriptor,
    repository: PatrimonyRepository,
    scope: AuthorizationScope,
    parent_id: Optional[str] = None,
    report: Optional[BatchReport] = None,
) -> BatchReport:
    """Reconcile rows strictly in order; a failed row never stops the batch."""
    report = report if report is not None else BatchReport()
    for row in rows:
        outcome, message = reconcile_row(
            row,
            descriptor=descriptor,
            repository=repository,
            scope=scope,
            parent_id=parent_id,
        )
        if outcome == RowOutcome.CREATED:
            report.record_created()
        elif outcome == RowOutcome.UPDATED:
            report.record_updated()
        else:
            report.record_skipped(row.row_number, row.code, message or "")
    return report
