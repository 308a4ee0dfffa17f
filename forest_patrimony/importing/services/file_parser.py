"""CSV/XLSX decoder with import limits.

Both encodings are reduced to the same shape: one header row plus an ordered
list of ``RawRow`` values whose cells are always strings.
"""

from __future__ import annotations

import csv
import io
import zipfile
from datetime import date, datetime, time
from pathlib import PurePath
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..constants import CSV_CONTENT_TYPES, XLSX_CONTENT_TYPES, ImportIssueCode
from ..types import ParsedImportFile, RawRow
from .errors import EmptyFileError, FormatError

CSV = "CSV"
XLSX = "XLSX"
SUPPORTED_FORMATS = (CSV, XLSX)


def detect_file_format(file_name: str | None, content_type: str | None = None) -> str:
    """Pick the decoder from the file extension, falling back to the content type."""
    suffix = PurePath(file_name or "").suffix.lower()
    if suffix == ".csv":
        return CSV
    if suffix == ".xlsx":
        return XLSX
    if not suffix:
        normalized_type = str(content_type or "").split(";")[0].strip().lower()
        if normalized_type in XLSX_CONTENT_TYPES:
            return XLSX
        if normalized_type in CSV_CONTENT_TYPES:
            return CSV
    raise FormatError(
        f"Unsupported file '{file_name or 'upload'}'. Expected a .csv or .xlsx file."
    )


def _too_large(max_file_size_bytes: int) -> FormatError:
    return FormatError(
        f"Uploaded file exceeds {max_file_size_bytes} bytes.",
        code=ImportIssueCode.FILE_TOO_LARGE,
    )


def _as_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data or b"")


def _read_upload(uploaded_file: Any, *, max_file_size_bytes: int) -> bytes:
    """Load the upload into memory, stopping as soon as it exceeds the limit.

    Accepts raw ``bytes``/``str``, Django ``File`` objects (read through
    ``chunks()``) and any binary file-like object.
    """
    if uploaded_file is None:
        raise FormatError("Missing uploaded file.")

    if isinstance(uploaded_file, (str, bytes, bytearray)):
        content = _as_bytes(uploaded_file)
    elif hasattr(uploaded_file, "chunks"):
        buffer = bytearray()
        for chunk in uploaded_file.chunks():
            buffer += _as_bytes(chunk)
            if len(buffer) > max_file_size_bytes:
                raise _too_large(max_file_size_bytes)
        content = bytes(buffer)
    elif hasattr(uploaded_file, "read"):
        if hasattr(uploaded_file, "seek"):
            uploaded_file.seek(0)
        content = _as_bytes(uploaded_file.read(max_file_size_bytes + 1))
    else:
        raise FormatError(
            f"Cannot read upload of type {type(uploaded_file).__name__}; "
            "expected a file or bytes."
        )

    if len(content) > max_file_size_bytes:
        raise _too_large(max_file_size_bytes)
    return content


def _check_row_limit(rows: list[RawRow], max_rows: int) -> None:
    if len(rows) >= max_rows:
        raise FormatError(
            f"File exceeds row limit of {max_rows}.",
            code=ImportIssueCode.ROW_LIMIT_EXCEEDED,
        )


def _is_blank(cells: list[str]) -> bool:
    return not any(cell.strip() for cell in cells)


def _cell_to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _parse_csv(content: bytes, *, max_rows: int) -> tuple[list[str], list[RawRow]]:
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = content.decode("latin-1")

    reader = csv.reader(io.StringIO(text, newline=""))
    headers: list[str] | None = None
    rows: list[RawRow] = []
    line_start = 1
    try:
        for cells in reader:
            row_number = line_start
            line_start = reader.line_num + 1
            if _is_blank(cells):
                continue
            if headers is None:
                headers = [cell.strip() for cell in cells]
                continue
            _check_row_limit(rows, max_rows)
            rows.append(RawRow(row_number=row_number, cells=list(cells)))
    except csv.Error as exc:
        raise FormatError(f"CSV content could not be parsed: {exc}") from exc

    if headers is None:
        raise EmptyFileError("CSV header row is missing.")
    return headers, rows


def _parse_xlsx(content: bytes, *, max_rows: int) -> tuple[list[str], list[RawRow]]:
    try:
        workbook = load_workbook(io.BytesIO(content), data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as exc:
        raise FormatError(f"XLSX content could not be read: {exc}") from exc

    try:
        if not workbook.worksheets:
            raise FormatError("The workbook does not contain any sheets.")
        sheet = workbook.worksheets[0]

        headers: list[str] | None = None
        rows: list[RawRow] = []
        for row_number, values in enumerate(sheet.iter_rows(values_only=True), start=1):
            cells = [_cell_to_text(value) for value in values]
            if _is_blank(cells):
                continue
            if headers is None:
                headers = [cell.strip() for cell in cells]
                continue
            _check_row_limit(rows, max_rows)
            rows.append(RawRow(row_number=row_number, cells=cells))
    finally:
        workbook.close()

    if headers is None:
        raise EmptyFileError("XLSX header row is missing.")
    return headers, rows


def parse_uploaded_file(
    uploaded_file: Any,
    *,
    file_format: str,
    max_rows: int,
    max_file_size_bytes: int,
    file_name: str | None = None,
) -> ParsedImportFile:
    normalized_format = str(file_format).upper()
    if normalized_format not in SUPPORTED_FORMATS:
        raise FormatError(f"Unsupported file format '{file_format}'.")

    content = _read_upload(uploaded_file, max_file_size_bytes=max_file_size_bytes)

    if normalized_format == CSV:
        headers, rows = _parse_csv(content, max_rows=max_rows)
    else:
        headers, rows = _parse_xlsx(content, max_rows=max_rows)

    return ParsedImportFile(
        headers=headers,
        rows=rows,
        file_format=normalized_format,
        file_name=file_name or getattr(uploaded_file, "name", None) or "upload",
        file_size_bytes=len(content),
    )
