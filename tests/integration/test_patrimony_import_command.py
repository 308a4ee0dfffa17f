import json
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from forest_patrimony.models import Organization, PatrimonyLevel2, PatrimonyLevel3

pytestmark = [pytest.mark.integration, pytest.mark.django_db]


@pytest.fixture
def organization():
    return Organization.objects.create(name="Forestal Norte")


def _run(*args):
    stdout, stderr = StringIO(), StringIO()
    call_command("import_patrimony", *args, stdout=stdout, stderr=stderr)
    return stdout.getvalue(), stderr.getvalue()


def test_command_imports_properties_for_organization(tmp_path, organization):
    source = tmp_path / "properties.csv"
    source.write_text("codigo,nombre,tipo,superficie\nP-01,Finca Uno,FINCA,\"10,5\"\n", encoding="utf-8")

    stdout, _ = _run(str(source), "--level", "2", "--organization", str(organization.id))

    outcome = json.loads(stdout[: stdout.rindex("}") + 1])
    assert outcome == {"created": 1, "updated": 0, "skipped": 0, "errors": []}
    record = PatrimonyLevel2.objects.get(code="P-01")
    assert record.organization_id == organization.id
    assert record.total_area_ha == Decimal("10.5")


def test_command_warns_about_skipped_rows(tmp_path, organization):
    parent = PatrimonyLevel2.objects.create(
        organization=organization,
        code="P-01",
        name="Finca Uno",
        type="FINCA",
        total_area_ha=Decimal("1"),
    )
    source = tmp_path / "compartments.csv"
    source.write_text("code,name,type,totalareaha\nL-01,Lote,LOTE,2\nL-02,Lote Dos,LOTE,-4\n", encoding="utf-8")

    _, stderr = _run(str(source), "--level", "3", "--parent", str(parent.id), "--privileged")

    assert "1 row(s) were skipped." in stderr
    assert PatrimonyLevel3.objects.filter(level2=parent).count() == 1


def test_command_strict_enums_flag(tmp_path, organization):
    source = tmp_path / "properties.csv"
    source.write_text("code,name,type,totalareaha\nP-01,Finca,CASTILLO,1\n", encoding="utf-8")

    stdout, _ = _run(
        str(source), "--level", "2", "--organization", str(organization.id), "--strict-enums"
    )

    assert '"skipped": 1' in stdout
    assert not PatrimonyLevel2.objects.exists()


def test_command_turns_batch_errors_into_command_error(tmp_path, organization):
    source = tmp_path / "compartments.csv"
    source.write_text("code,name,type,totalareaha\nL-01,Lote,LOTE,2\n", encoding="utf-8")

    with pytest.raises(CommandError, match="PARENT_REQUIRED"):
        _run(str(source), "--level", "3", "--organization", str(organization.id))


def test_command_rejects_missing_file(tmp_path):
    with pytest.raises(CommandError, match="File not found"):
        _run(str(tmp_path / "missing.csv"), "--level", "2", "--privileged")
