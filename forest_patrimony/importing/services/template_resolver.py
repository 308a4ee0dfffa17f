"""Level descriptor lookup and import template descriptions."""

from __future__ import annotations

from ..config import get_import_settings
from ..constants import ImportIssueCode
from ..levels import LEVELS, FieldSpec, LevelDescriptor
from ..types import ImportColumnRule, PatrimonyImportTemplate
from .errors import ImportServiceError
from .file_parser import SUPPORTED_FORMATS


def resolve_level_descriptor(level: str | int | None) -> LevelDescriptor:
    descriptor = LEVELS.get(str(level if level is not None else "").strip())
    if descriptor is None:
        allowed = ", ".join(LEVELS)
        raise ImportServiceError(
            ImportIssueCode.INVALID_LEVEL,
            f"Unsupported patrimony level '{level}'. Expected one of: {allowed}.",
            field_path="level",
        )
    return descriptor


def _allowed_values(field: FieldSpec, descriptor: LevelDescriptor) -> tuple[list[str] | None, str | None]:
    if field.name == "type":
        return list(descriptor.type_choices.values), str(descriptor.default_type)
    if field.name == "shape_type" and descriptor.shape_choices is not None:
        return list(descriptor.shape_choices.values), str(descriptor.default_shape_type)
    if field.name == "legal_status" and descriptor.legal_status_choices is not None:
        return list(descriptor.legal_status_choices.values), None
    if field.name == "is_active":
        return None, "true"
    return None, None


def _column_rule(field: FieldSpec, descriptor: LevelDescriptor, *, required: bool) -> ImportColumnRule:
    allowed_values, default_value = _allowed_values(field, descriptor)
    return {
        "name": field.name,
        "required": required,
        "data_type": field.data_type,
        "spellings": list(field.spellings),
        "allowed_values": allowed_values,
        "default_value": default_value,
    }


def resolve_import_template(level: str | int) -> PatrimonyImportTemplate:
    """Describe the columns accepted when importing ``level``."""
    descriptor = resolve_level_descriptor(level)
    import_settings = get_import_settings()
    return {
        "level": descriptor.level,
        "label": descriptor.label,
        "parent_level": descriptor.parent_level,
        "natural_key": [descriptor.parent_field or "organization", "code"],
        "required_columns": [
            _column_rule(field, descriptor, required=True)
            for field in descriptor.required_fields
        ],
        "optional_columns": [
            _column_rule(field, descriptor, required=False)
            for field in descriptor.optional_fields
        ],
        "accepted_formats": list(SUPPORTED_FORMATS),
        "max_rows": import_settings.max_rows,
        "max_file_size_bytes": import_settings.max_file_size_bytes,
    }
