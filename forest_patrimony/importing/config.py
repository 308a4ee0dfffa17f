"""
Import configuration, defaults, and settings helpers.

Settings are read from the ``FOREST_PATRIMONY_IMPORT`` dict in Django settings
and merged over ``IMPORT_DEFAULTS``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from django.conf import settings

from .constants import DEFAULT_MAX_FILE_SIZE_BYTES, DEFAULT_MAX_ROWS
from .types import ImportLimits

SETTINGS_NAME = "FOREST_PATRIMONY_IMPORT"

IMPORT_DEFAULTS: Dict[str, Any] = {
    "max_rows": DEFAULT_MAX_ROWS,
    "max_file_size_bytes": DEFAULT_MAX_FILE_SIZE_BYTES,
    "strict_enums": False,
    "scope_provider": (
        "forest_patrimony.importing.services.access_control.default_scope_provider"
    ),
    "tenant_attribute": "organization_id",
}


@dataclass(frozen=True)
class ImportSettings:
    max_rows: int
    max_file_size_bytes: int
    strict_enums: bool
    scope_provider: str
    tenant_attribute: str

    @property
    def limits(self) -> ImportLimits:
        return ImportLimits(
            max_rows=self.max_rows,
            max_file_size_bytes=self.max_file_size_bytes,
        )


def _merge_dict(defaults: Dict[str, Any], overrides: Any) -> Dict[str, Any]:
    merged = dict(defaults)
    if isinstance(overrides, dict):
        merged.update({key: value for key, value in overrides.items() if value is not None})
    return merged


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_str(value: Any, default: str) -> str:
    if value is None:
        return default
    value = str(value).strip()
    return value or default


def get_import_settings() -> ImportSettings:
    """Return the effective import settings."""
    raw = _merge_dict(IMPORT_DEFAULTS, getattr(settings, SETTINGS_NAME, None))
    return ImportSettings(
        max_rows=_coerce_int(raw["max_rows"], DEFAULT_MAX_ROWS),
        max_file_size_bytes=_coerce_int(
            raw["max_file_size_bytes"], DEFAULT_MAX_FILE_SIZE_BYTES
        ),
        strict_enums=_coerce_bool(raw["strict_enums"], False),
        scope_provider=_coerce_str(
            raw["scope_provider"], IMPORT_DEFAULTS["scope_provider"]
        ),
        tenant_attribute=_coerce_str(
            raw["tenant_attribute"], IMPORT_DEFAULTS["tenant_attribute"]
        ),
    )


def validate_import_settings(import_settings: ImportSettings) -> List[str]:
    """Return human-readable problems found in the import settings."""
    problems: List[str] = []
    if import_settings.max_rows <= 0:
        problems.append("max_rows must be a positive integer.")
    if import_settings.max_file_size_bytes <= 0:
        problems.append("max_file_size_bytes must be a positive integer.")
    if "." not in import_settings.scope_provider:
        problems.append("scope_provider must be a dotted import path.")
    return problems
