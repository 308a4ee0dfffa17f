"""
Level descriptors for the patrimony hierarchy.

Each hierarchy level is described by a ``LevelDescriptor`` value: its model,
parent relation, tenant lookup path, column specs, enum vocabularies, and
measurement rule. The import services are generic over these values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.db import models

from ..models import (
    CompartmentType,
    LegalStatus,
    PlotShapeType,
    PlotType,
    PropertyType,
    StandType,
)


@dataclass(frozen=True)
class FieldSpec:
    """Canonical import field and the header spellings it accepts."""

    name: str
    spellings: tuple[str, ...]
    data_type: str


CODE = FieldSpec("code", ("code", "codigo", "código"), "string")
NAME = FieldSpec("name", ("name", "nombre"), "string")
TYPE = FieldSpec("type", ("type", "tipo"), "enum")
TOTAL_AREA_HA = FieldSpec(
    "total_area_ha",
    ("totalareaha", "totalarea", "superficieha", "superficietotal", "superficie"),
    "decimal",
)
AREA_M2 = FieldSpec("area_m2", ("aream2", "área m2", "area", "área"), "decimal")
SHAPE_TYPE = FieldSpec("shape_type", ("shapetype", "forma", "tipoforma"), "enum")
LEGAL_STATUS = FieldSpec(
    "legal_status", ("legalstatus", "estadolegal", "situacionlegal"), "enum"
)
IS_ACTIVE = FieldSpec("is_active", ("isactive", "active", "activo"), "boolean")


@dataclass(frozen=True)
class LevelDescriptor:
    level: str
    label: str
    model_label: str
    parent_level: Optional[str]
    parent_field: Optional[str]
    tenant_lookup: str
    type_choices: type[models.TextChoices]
    default_type: str
    measurement: FieldSpec
    allow_zero_measurement: bool
    required_fields: tuple[FieldSpec, ...]
    optional_fields: tuple[FieldSpec, ...]
    shape_choices: Optional[type[models.TextChoices]] = None
    default_shape_type: Optional[str] = None
    legal_status_choices: Optional[type[models.TextChoices]] = None

    @property
    def is_root(self) -> bool:
        return self.parent_level is None

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return self.required_fields + self.optional_fields

    @property
    def measurement_field(self) -> str:
        return self.measurement.name


LEVEL_2 = LevelDescriptor(
    level="2",
    label="Property",
    model_label="forest_patrimony.PatrimonyLevel2",
    parent_level=None,
    parent_field=None,
    tenant_lookup="organization_id",
    type_choices=PropertyType,
    default_type=PropertyType.FINCA,
    measurement=TOTAL_AREA_HA,
    allow_zero_measurement=True,
    required_fields=(CODE, NAME, TYPE, TOTAL_AREA_HA),
    optional_fields=(LEGAL_STATUS, IS_ACTIVE),
    legal_status_choices=LegalStatus,
)

LEVEL_3 = LevelDescriptor(
    level="3",
    label="Compartment",
    model_label="forest_patrimony.PatrimonyLevel3",
    parent_level="2",
    parent_field="level2",
    tenant_lookup="level2__organization_id",
    type_choices=CompartmentType,
    default_type=CompartmentType.LOTE,
    measurement=TOTAL_AREA_HA,
    allow_zero_measurement=True,
    required_fields=(CODE, NAME, TYPE, TOTAL_AREA_HA),
    optional_fields=(IS_ACTIVE,),
)

LEVEL_4 = LevelDescriptor(
    level="4",
    label="Stand",
    model_label="forest_patrimony.PatrimonyLevel4",
    parent_level="3",
    parent_field="level3",
    tenant_lookup="level3__level2__organization_id",
    type_choices=StandType,
    default_type=StandType.RODAL,
    measurement=TOTAL_AREA_HA,
    allow_zero_measurement=True,
    required_fields=(CODE, NAME, TYPE, TOTAL_AREA_HA),
    optional_fields=(IS_ACTIVE,),
)

LEVEL_5 = LevelDescriptor(
    level="5",
    label="Plot",
    model_label="forest_patrimony.PatrimonyLevel5",
    parent_level="4",
    parent_field="level4",
    tenant_lookup="level4__level3__level2__organization_id",
    type_choices=PlotType,
    default_type=PlotType.SUBUNIDAD,
    measurement=AREA_M2,
    allow_zero_measurement=False,
    required_fields=(CODE, NAME, TYPE, SHAPE_TYPE, AREA_M2),
    optional_fields=(IS_ACTIVE,),
    shape_choices=PlotShapeType,
    default_shape_type=PlotShapeType.RECTANGULAR,
)

LEVELS: dict[str, LevelDescriptor] = {
    descriptor.level: descriptor
    for descriptor in (LEVEL_2, LEVEL_3, LEVEL_4, LEVEL_5)
}
