"""Cell coercion from raw strings into typed import rows."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from django.db import models

from ..constants import MEASUREMENT_DECIMAL_PLACES, ImportIssueCode
from ..levels import LevelDescriptor
from ..types import NormalizedRow, RawRow, RowRejection

MEASUREMENT_QUANTUM = Decimal(1).scaleb(-MEASUREMENT_DECIMAL_PLACES)

TRUE_VALUES = frozenset({"true", "1", "si", "sí", "activo"})
FALSE_VALUES = frozenset({"false", "0", "no", "inactivo"})

NormalizationResult = Union[NormalizedRow, RowRejection]


def parse_boolean(value: str) -> bool | None:
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return None


def parse_decimal(value: str, *, quantum: Decimal | None = None) -> Decimal | None:
    """Parse a measurement accepting a comma decimal separator.

    Returns ``None`` for empty, unparsable or non-finite input. With
    ``quantum`` the value is rounded half-up to that precision; values too
    large to round are returned unchanged and fail model validation later.
    """
    text = value.strip().replace(",", ".", 1)
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    if quantum is None:
        return number
    try:
        return number.quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return number


def parse_choice(value: str, choices: type[models.TextChoices]) -> str | None:
    normalized = value.strip().upper()
    return normalized if normalized in choices.values else None


def _cell(raw_row: RawRow, columns: dict[str, int], field_name: str) -> str:
    index = columns.get(field_name)
    if index is None or index >= len(raw_row.cells):
        return ""
    return str(raw_row.cells[index] or "").strip()


def _enum_rejection(
    raw_row: RawRow,
    code: str,
    field_name: str,
    raw_value: str,
    choices: type[models.TextChoices],
) -> RowRejection:
    allowed = ", ".join(choices.values)
    return RowRejection(
        row_number=raw_row.row_number,
        code=code,
        issue_code=ImportIssueCode.INVALID_ENUM_VALUE,
        message=f"Invalid value '{raw_value}' for {field_name}. Allowed values: {allowed}.",
    )


def normalize_row(
    raw_row: RawRow,
    columns: dict[str, int],
    descriptor: LevelDescriptor,
    *,
    strict_enums: bool = False,
) -> NormalizationResult | None:
    """Coerce one raw row for ``descriptor``.

    Returns ``None`` when both code and name are blank, a ``RowRejection``
    when the row cannot be imported, and a ``NormalizedRow`` otherwise.
    Measurement range checks are left to the reconciliation step.
    """
    code = _cell(raw_row, columns, "code")
    name = _cell(raw_row, columns, "name")
    if not code and not name:
        return None
    if not code or not name:
        return RowRejection(
            row_number=raw_row.row_number,
            code=code,
            issue_code=ImportIssueCode.MISSING_REQUIRED_FIELD,
            message="Code and name are required.",
        )

    raw_type = _cell(raw_row, columns, "type")
    row_type = parse_choice(raw_type, descriptor.type_choices)
    if row_type is None:
        if strict_enums:
            return _enum_rejection(raw_row, code, "type", raw_type, descriptor.type_choices)
        row_type = str(descriptor.default_type)

    shape_type = None
    if descriptor.shape_choices is not None:
        raw_shape = _cell(raw_row, columns, "shape_type")
        shape_type = parse_choice(raw_shape, descriptor.shape_choices)
        if shape_type is None:
            if strict_enums:
                return _enum_rejection(
                    raw_row, code, "shape_type", raw_shape, descriptor.shape_choices
                )
            shape_type = str(descriptor.default_shape_type)

    legal_status = None
    if descriptor.legal_status_choices is not None:
        raw_status = _cell(raw_row, columns, "legal_status")
        legal_status = parse_choice(raw_status, descriptor.legal_status_choices)
        if legal_status is None and raw_status and strict_enums:
            return _enum_rejection(
                raw_row, code, "legal_status", raw_status, descriptor.legal_status_choices
            )

    return NormalizedRow(
        row_number=raw_row.row_number,
        code=code,
        name=name,
        type=row_type,
        measurement=parse_decimal(
            _cell(raw_row, columns, descriptor.measurement_field),
            quantum=MEASUREMENT_QUANTUM,
        ),
        is_active=parse_boolean(_cell(raw_row, columns, "is_active")),
        legal_status=legal_status,
        shape_type=shape_type,
    )


def normalize_rows(
    raw_rows: Iterable[RawRow],
    columns: dict[str, int],
    descriptor: LevelDescriptor,
    *,
    strict_enums: bool = False,
) -> list[NormalizationResult]:
    """Normalize rows in file order, dropping blank ones."""
    results: list[NormalizationResult] = []
    for raw_row in raw_rows:
        result = normalize_row(raw_row, columns, descriptor, strict_enums=strict_enums)
        if result is not None:
            results.append(result)
    return results
