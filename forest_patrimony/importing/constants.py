"""Issue codes and limits shared by the import services."""

DEFAULT_MAX_ROWS = 5000
DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024

# Stored precision of every area column.
MEASUREMENT_MAX_DIGITS = 14
MEASUREMENT_DECIMAL_PLACES = 4

CSV_CONTENT_TYPES = ("text/csv", "application/csv", "text/plain", "application/vnd.ms-excel")
XLSX_CONTENT_TYPES = ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",)


class ImportIssueCode:
    # Batch-fatal
    INVALID_FILE_FORMAT = "INVALID_FILE_FORMAT"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    ROW_LIMIT_EXCEEDED = "ROW_LIMIT_EXCEEDED"
    MISSING_REQUIRED_COLUMN = "MISSING_REQUIRED_COLUMN"
    EMPTY_FILE = "EMPTY_FILE"
    INVALID_LEVEL = "INVALID_LEVEL"
    PARENT_REQUIRED = "PARENT_REQUIRED"
    PARENT_NOT_FOUND = "PARENT_NOT_FOUND"
    TENANT_REQUIRED = "TENANT_REQUIRED"

    # Row-level
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"
    INVALID_MEASUREMENT = "INVALID_MEASUREMENT"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"

