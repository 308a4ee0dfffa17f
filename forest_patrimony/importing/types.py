"""Typed contracts shared across importing services."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import NotRequired, TypedDict


@dataclass(frozen=True)
class RawRow:
    row_number: int
    cells: list[str]


@dataclass(frozen=True)
class ParsedImportFile:
    headers: list[str]
    rows: list[RawRow]
    file_format: str
    file_name: str
    file_size_bytes: int


@dataclass(frozen=True)
class ImportLimits:
    max_rows: int
    max_file_size_bytes: int


@dataclass(frozen=True)
class AuthorizationScope:
    is_privileged: bool
    tenant_id: str | None = None


@dataclass(frozen=True)
class NormalizedRow:
    row_number: int
    code: str
    name: str
    type: str
    measurement: Decimal | None
    is_active: bool | None = None
    legal_status: str | None = None
    shape_type: str | None = None


@dataclass(frozen=True)
class RowRejection:
    row_number: int
    code: str
    issue_code: str
    message: str


class ImportRowError(TypedDict):
    row: int
    code: NotRequired[str | None]
    error: str


class BatchOutcome(TypedDict):
    created: int
    updated: int
    skipped: int
    errors: list[ImportRowError]


class ImportColumnRule(TypedDict):
    name: str
    required: bool
    data_type: str
    spellings: list[str]
    allowed_values: NotRequired[list[str] | None]
    default_value: NotRequired[str | None]


class PatrimonyImportTemplate(TypedDict):
    level: str
    label: str
    parent_level: str | None
    natural_key: list[str]
    required_columns: list[ImportColumnRule]
    optional_columns: list[ImportColumnRule]
    accepted_formats: list[str]
    max_rows: int
    max_file_size_bytes: int
