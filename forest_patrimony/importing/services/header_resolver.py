"""Header row resolution against a level's declarative field specs."""

from __future__ import annotations

import re
from typing import Any

from ..levels import LevelDescriptor
from .errors import MissingColumnError

_WHITESPACE = re.compile(r"\s+")
_SEPARATORS = re.compile(r"[_-]")


def normalize_header(value: Any) -> str:
    """Lower-case and strip whitespace, underscores and hyphens."""
    text = str(value if value is not None else "").strip().lower()
    return _SEPARATORS.sub("", _WHITESPACE.sub("", text))


def resolve_headers(headers: list[str], descriptor: LevelDescriptor) -> dict[str, int]:
    """Map canonical field names to column indexes.

    The first column matching any accepted spelling wins. Optional fields
    without a column are left out of the mapping.

    Raises:
        MissingColumnError: naming the first required field without a column.
    """
    normalized = [normalize_header(header) for header in headers]
    columns: dict[str, int] = {}
    for field in descriptor.fields:
        spellings = {normalize_header(spelling) for spelling in field.spellings}
        for index, header in enumerate(normalized):
            if header and header in spellings:
                columns[field.name] = index
                break

    for field in descriptor.required_fields:
        if field.name not in columns:
            raise MissingColumnError(field.name)
    return columns
