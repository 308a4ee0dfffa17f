from decimal import Decimal

import pytest

from forest_patrimony.importing.constants import ImportIssueCode
from forest_patrimony.importing.levels import LEVEL_2, LEVEL_3, LEVEL_5
from forest_patrimony.importing.services import normalize_row, normalize_rows
from forest_patrimony.importing.services.row_normalizer import parse_boolean, parse_decimal
from forest_patrimony.importing.types import NormalizedRow, RawRow, RowRejection

pytestmark = pytest.mark.unit

LEVEL_2_COLUMNS = {"code": 0, "name": 1, "type": 2, "total_area_ha": 3, "legal_status": 4, "is_active": 5}
LEVEL_5_COLUMNS = {"code": 0, "name": 1, "type": 2, "shape_type": 3, "area_m2": 4}


def _row(*cells, row_number=2):
    return RawRow(row_number=row_number, cells=list(cells))


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", Decimal("12.5")),
        ("12,5", Decimal("12.5")),
        (" 7 ", Decimal("7")),
        ("", None),
        ("abc", None),
        ("1,234.5", None),
        ("NaN", None),
        ("inf", None),
    ],
)
def test_parse_decimal(raw, expected):
    assert parse_decimal(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("Sí", True), ("1", True), ("no", False), ("0", False), ("", None), ("maybe", None)],
)
def test_parse_boolean(raw, expected):
    assert parse_boolean(raw) == expected


def test_normalize_row_coerces_level_2_values():
    result = normalize_row(
        _row("P-1", " Finca Uno ", "hato", "120,5", "arriendo", "no"),
        LEVEL_2_COLUMNS,
        LEVEL_2,
    )

    assert result == NormalizedRow(
        row_number=2,
        code="P-1",
        name="Finca Uno",
        type="HATO",
        measurement=Decimal("120.5"),
        is_active=False,
        legal_status="ARRIENDO",
        shape_type=None,
    )


def test_unknown_type_falls_back_to_level_default():
    result = normalize_row(_row("P-1", "Finca", "castle", "1", "", ""), LEVEL_2_COLUMNS, LEVEL_2)

    assert result.type == "FINCA"
    assert result.legal_status is None
    assert result.is_active is None


def test_unknown_legal_status_is_left_empty():
    result = normalize_row(_row("P-1", "Finca", "FINCA", "1", "robado", ""), LEVEL_2_COLUMNS, LEVEL_2)

    assert isinstance(result, NormalizedRow)
    assert result.legal_status is None


def test_unknown_shape_falls_back_to_rectangular():
    result = normalize_row(_row("M-1", "Muestra", "muestra", "oval", "500"), LEVEL_5_COLUMNS, LEVEL_5)

    assert result.type == "MUESTRA"
    assert result.shape_type == "RECTANGULAR"
    assert result.measurement == Decimal("500")


@pytest.mark.parametrize(
    "cells, columns, descriptor, field_name",
    [
        (("P-1", "Finca", "castle", "1", "", ""), LEVEL_2_COLUMNS, LEVEL_2, "type"),
        (("P-1", "Finca", "FINCA", "1", "robado", ""), LEVEL_2_COLUMNS, LEVEL_2, "legal_status"),
        (("M-1", "Muestra", "MUESTRA", "oval", "500"), LEVEL_5_COLUMNS, LEVEL_5, "shape_type"),
    ],
)
def test_strict_enums_reject_unknown_values(cells, columns, descriptor, field_name):
    result = normalize_row(_row(*cells, row_number=9), columns, descriptor, strict_enums=True)

    assert isinstance(result, RowRejection)
    assert result.row_number == 9
    assert result.issue_code == ImportIssueCode.INVALID_ENUM_VALUE
    assert field_name in result.message


def test_strict_enums_allow_empty_legal_status():
    result = normalize_row(_row("P-1", "Finca", "FINCA", "1", "", ""), LEVEL_2_COLUMNS, LEVEL_2, strict_enums=True)

    assert isinstance(result, NormalizedRow)
    assert result.legal_status is None


def test_invalid_measurement_is_kept_as_missing_value():
    result = normalize_row(_row("L-1", "Lote", "LOTE", "abc"), {"code": 0, "name": 1, "type": 2, "total_area_ha": 3}, LEVEL_3)

    assert isinstance(result, NormalizedRow)
    assert result.measurement is None


@pytest.mark.parametrize("cells", [("", "Finca", "FINCA", "1"), ("P-1", "  ", "FINCA", "1")])
def test_missing_code_or_name_is_rejected(cells):
    columns = {"code": 0, "name": 1, "type": 2, "total_area_ha": 3}
    result = normalize_row(_row(*cells, row_number=4), columns, LEVEL_2)

    assert isinstance(result, RowRejection)
    assert result.row_number == 4
    assert result.issue_code == ImportIssueCode.MISSING_REQUIRED_FIELD
    assert result.message == "Code and name are required."


def test_normalize_rows_drops_blank_rows_and_keeps_order():
    columns = {"code": 0, "name": 1, "type": 2, "total_area_ha": 3}
    results = normalize_rows(
        [
            _row("A", "One", "LOTE", "1", row_number=2),
            _row("", "", "LOTE", "4", row_number=3),
            _row("", "Orphan", "LOTE", "1", row_number=4),
            _row("B", "Two", "LOTE", "2", row_number=5),
        ],
        columns,
        LEVEL_3,
    )

    assert [(type(result).__name__, result.row_number) for result in results] == [
        ("NormalizedRow", 2),
        ("RowRejection", 4),
        ("NormalizedRow", 5),
    ]


def test_short_rows_read_missing_cells_as_empty():
    result = normalize_row(_row("P-1", "Finca"), LEVEL_2_COLUMNS, LEVEL_2)

    assert result.type == "FINCA"
    assert result.measurement is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.123456", Decimal("12.1235")),
        ("12,12344", Decimal("12.1234")),
        ("0.00005", Decimal("0.0001")),
        ("7", Decimal("7.0000")),
        ("1e30", Decimal("1e30")),
    ],
)
def test_parse_decimal_rounds_to_quantum(raw, expected):
    result = parse_decimal(raw, quantum=Decimal("0.0001"))

    assert result == expected


def test_measurements_are_rounded_to_stored_precision():
    result = normalize_row(_row("M-1", "Muestra", "MUESTRA", "CIRCULAR", "314,159265"), LEVEL_5_COLUMNS, LEVEL_5)

    assert result.measurement == Decimal("314.1593")
    assert result.measurement.as_tuple().exponent == -4
