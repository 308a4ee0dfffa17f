from io import BytesIO

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from openpyxl import Workbook

from forest_patrimony.importing.constants import ImportIssueCode
from forest_patrimony.importing.services import (
    EmptyFileError,
    FormatError,
    detect_file_format,
    parse_uploaded_file,
)

pytestmark = pytest.mark.unit


def _parse(uploaded, *, file_format="CSV", max_rows=100, max_file_size_bytes=1024 * 1024):
    return parse_uploaded_file(
        uploaded,
        file_format=file_format,
        max_rows=max_rows,
        max_file_size_bytes=max_file_size_bytes,
    )


def _csv(content: str, name: str = "rows.csv", encoding: str = "utf-8") -> SimpleUploadedFile:
    return SimpleUploadedFile(name, content.encode(encoding))


def _xlsx(rows, name: str = "rows.xlsx") -> SimpleUploadedFile:
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    buffer = BytesIO()
    workbook.save(buffer)
    return SimpleUploadedFile(name, buffer.getvalue())


def test_csv_quoted_fields_keep_commas_and_doubled_quotes():
    parsed = _parse(_csv('code,name\nP-1,"Finca ""La Esperanza"", Norte"\n'))

    assert parsed.headers == ["code", "name"]
    assert parsed.rows[0].cells == ["P-1", 'Finca "La Esperanza", Norte']


@pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
def test_csv_accepts_any_line_terminator(newline):
    content = newline.join(["code,name", "A,One", "B,Two"]) + newline
    parsed = _parse(_csv(content))

    assert [row.cells for row in parsed.rows] == [["A", "One"], ["B", "Two"]]
    assert [row.row_number for row in parsed.rows] == [2, 3]


def test_csv_row_numbers_follow_physical_lines_and_skip_blank_rows():
    parsed = _parse(_csv("code,name\n\nA,One\n,\nB,Two\n"))

    assert [(row.row_number, row.cells[0]) for row in parsed.rows] == [(3, "A"), (5, "B")]


def test_csv_multiline_quoted_cell_reports_starting_line():
    parsed = _parse(_csv('code,name\nA,"Line one\nline two"\nB,Two\n'))

    assert parsed.rows[0].cells[1] == "Line one\nline two"
    assert [row.row_number for row in parsed.rows] == [2, 4]


def test_csv_handles_utf8_bom_and_latin1():
    parsed_utf8 = _parse(_csv("\ufeffcódigo,nombre\nP-1,Álamo\n"))
    assert parsed_utf8.headers == ["código", "nombre"]
    assert parsed_utf8.rows[0].cells == ["P-1", "Álamo"]

    parsed_latin = _parse(_csv("codigo,nombre\nP-2,Matería\n", encoding="latin-1"))
    assert parsed_latin.rows[0].cells == ["P-2", "Matería"]


def test_csv_without_header_is_empty():
    with pytest.raises(EmptyFileError) as exc_info:
        _parse(_csv("\n\n"))
    assert exc_info.value.code == ImportIssueCode.EMPTY_FILE


def test_csv_header_only_yields_no_rows():
    parsed = _parse(_csv("code,name\n"))
    assert parsed.rows == []


def test_row_limit_is_enforced():
    content = "code,name\nA,One\nB,Two\n"
    assert len(_parse(_csv(content), max_rows=2).rows) == 2

    with pytest.raises(FormatError) as exc_info:
        _parse(_csv(content + "C,Three\n"), max_rows=2)
    assert exc_info.value.code == ImportIssueCode.ROW_LIMIT_EXCEEDED


def test_file_size_limit_is_enforced():
    with pytest.raises(FormatError) as exc_info:
        _parse(_csv("code,name\nA,One\n"), max_file_size_bytes=8)
    assert exc_info.value.code == ImportIssueCode.FILE_TOO_LARGE


def test_xlsx_cells_are_converted_to_text():
    parsed = _parse(
        _xlsx(
            [
                ["Código", "Nombre", "Tipo", "Superficie", "Activo"],
                ["P-1", "Finca Uno", "FINCA", 12.5, True],
                [None, None, None, None, None],
                ["P-2", "Finca Dos", "HATO", 40.0, False],
            ]
        ),
        file_format="XLSX",
    )

    assert parsed.file_format == "XLSX"
    assert parsed.headers == ["Código", "Nombre", "Tipo", "Superficie", "Activo"]
    assert [row.row_number for row in parsed.rows] == [2, 4]
    assert parsed.rows[0].cells == ["P-1", "Finca Uno", "FINCA", "12.5", "true"]
    assert parsed.rows[1].cells == ["P-2", "Finca Dos", "HATO", "40", "false"]


def test_csv_and_xlsx_produce_the_same_rows():
    header = ["code", "name", "type", "total_area_ha"]
    values = [["S-1", "Rodal Norte", "RODAL", "12.5"], ["S-2", "Rodal Sur", "RODAL", "3"]]
    csv_content = "\n".join(",".join(row) for row in [header, *values]) + "\n"

    from_csv = _parse(_csv(csv_content))
    from_xlsx = _parse(_xlsx([header, *values]), file_format="XLSX")

    assert from_csv.headers == from_xlsx.headers
    assert [(row.row_number, row.cells) for row in from_csv.rows] == [
        (row.row_number, row.cells) for row in from_xlsx.rows
    ]


def test_corrupt_xlsx_is_a_format_error():
    with pytest.raises(FormatError) as exc_info:
        _parse(SimpleUploadedFile("broken.xlsx", b"not a workbook"), file_format="XLSX")
    assert exc_info.value.code == ImportIssueCode.INVALID_FILE_FORMAT


def test_detect_file_format_prefers_extension():
    assert detect_file_format("stands.CSV") == "CSV"
    assert detect_file_format("stands.xlsx", "text/csv") == "XLSX"
    assert (
        detect_file_format(
            "upload",
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
        == "XLSX"
    )
    assert detect_file_format(None, "text/csv; charset=utf-8") == "CSV"


@pytest.mark.parametrize("file_name", ["stands.xls", "stands.pdf", "stands.json"])
def test_detect_file_format_rejects_other_extensions(file_name):
    with pytest.raises(FormatError):
        detect_file_format(file_name, "text/csv")


def test_parse_accepts_raw_bytes_and_rewinds_streams():
    content = b"code,name\nA,One\n"
    assert _parse(content).rows[0].cells == ["A", "One"]

    stream = BytesIO(content)
    stream.read()
    parsed = _parse(stream)
    assert parsed.rows[0].cells == ["A", "One"]
    assert parsed.file_name == "upload"


def test_stream_over_size_limit_is_rejected():
    with pytest.raises(FormatError) as exc_info:
        _parse(BytesIO(b"code,name\n" + b"A,One\n" * 10), max_file_size_bytes=32)
    assert exc_info.value.code == ImportIssueCode.FILE_TOO_LARGE


@pytest.mark.parametrize("upload", [None, 12345, object()])
def test_unreadable_upload_is_a_format_error(upload):
    with pytest.raises(FormatError) as exc_info:
        _parse(upload)
    assert exc_info.value.code == ImportIssueCode.INVALID_FILE_FORMAT
