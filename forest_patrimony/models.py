"""Land-patrimony hierarchy models (levels 2 to 5) and their owning tenant."""

from __future__ import annotations

import uuid

from django.db import models

from .importing.constants import MEASUREMENT_DECIMAL_PLACES, MEASUREMENT_MAX_DIGITS


class PropertyType(models.TextChoices):
    FINCA = "FINCA", "Finca"
    PREDIO = "PREDIO", "Predio"
    HATO = "HATO", "Hato"
    FUNDO = "FUNDO", "Fundo"
    HACIENDA = "HACIENDA", "Hacienda"


class LegalStatus(models.TextChoices):
    ADQUISICION = "ADQUISICION", "Adquisición"
    ARRIENDO = "ARRIENDO", "Arriendo"
    USUFRUCTO = "USUFRUCTO", "Usufructo"
    COMODATO = "COMODATO", "Comodato"


class CompartmentType(models.TextChoices):
    COMPARTIMIENTO = "COMPARTIMIENTO", "Compartimiento"
    BLOCK = "BLOCK", "Block"
    SECCION = "SECCION", "Sección"
    LOTE = "LOTE", "Lote"
    ZONA = "ZONA", "Zona"
    BLOQUE = "BLOQUE", "Bloque"


class StandType(models.TextChoices):
    RODAL = "RODAL", "Rodal"
    PARCELA = "PARCELA", "Parcela"
    ENUMERATION = "ENUMERATION", "Enumeration"
    UNIDAD_DE_MANEJO = "UNIDAD_DE_MANEJO", "Unidad de manejo"


class PlotType(models.TextChoices):
    REFERENCIA = "REFERENCIA", "Referencia"
    SUBUNIDAD = "SUBUNIDAD", "Subunidad"
    SUBPARCELA = "SUBPARCELA", "Subparcela"
    MUESTRA = "MUESTRA", "Muestra"
    SUBMUESTRA = "SUBMUESTRA", "Submuestra"


class PlotShapeType(models.TextChoices):
    RECTANGULAR = "RECTANGULAR", "Rectangular"
    CUADRADA = "CUADRADA", "Cuadrada"
    CIRCULAR = "CIRCULAR", "Circular"
    HEXAGONAL = "HEXAGONAL", "Hexagonal"


class Organization(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "forest_patrimony"
        db_table = "forest_organization"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class PatrimonyNode(models.Model):
    """Fields shared by every level of the hierarchy."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=80)
    name = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["code"]

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"


class PatrimonyLevel2(PatrimonyNode):
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="patrimony_level2",
        null=True,
        blank=True,
    )
    type = models.CharField(max_length=32, choices=PropertyType.choices)
    legal_status = models.CharField(
        max_length=32,
        choices=LegalStatus.choices,
        null=True,
        blank=True,
    )
    total_area_ha = models.DecimalField(
        max_digits=MEASUREMENT_MAX_DIGITS,
        decimal_places=MEASUREMENT_DECIMAL_PLACES,
    )

    class Meta(PatrimonyNode.Meta):
        app_label = "forest_patrimony"
        db_table = "forest_patrimony_level2"
        constraints = [
            models.UniqueConstraint(
                fields=["organization", "code"],
                name="forest_patrimony_level2_org_code_uniq",
            ),
        ]


class PatrimonyLevel3(PatrimonyNode):
    level2 = models.ForeignKey(
        PatrimonyLevel2,
        on_delete=models.CASCADE,
        related_name="children",
    )
    type = models.CharField(max_length=32, choices=CompartmentType.choices)
    total_area_ha = models.DecimalField(
        max_digits=MEASUREMENT_MAX_DIGITS,
        decimal_places=MEASUREMENT_DECIMAL_PLACES,
    )

    class Meta(PatrimonyNode.Meta):
        app_label = "forest_patrimony"
        db_table = "forest_patrimony_level3"
        constraints = [
            models.UniqueConstraint(
                fields=["level2", "code"],
                name="forest_patrimony_level3_parent_code_uniq",
            ),
        ]


class PatrimonyLevel4(PatrimonyNode):
    level3 = models.ForeignKey(
        PatrimonyLevel3,
        on_delete=models.CASCADE,
        related_name="children",
    )
    type = models.CharField(max_length=32, choices=StandType.choices)
    total_area_ha = models.DecimalField(
        max_digits=MEASUREMENT_MAX_DIGITS,
        decimal_places=MEASUREMENT_DECIMAL_PLACES,
    )

    class Meta(PatrimonyNode.Meta):
        app_label = "forest_patrimony"
        db_table = "forest_patrimony_level4"
        constraints = [
            models.UniqueConstraint(
                fields=["level3", "code"],
                name="forest_patrimony_level4_parent_code_uniq",
            ),
        ]


class PatrimonyLevel5(PatrimonyNode):
    level4 = models.ForeignKey(
        PatrimonyLevel4,
        on_delete=models.CASCADE,
        related_name="children",
    )
    type = models.CharField(max_length=32, choices=PlotType.choices)
    shape_type = models.CharField(max_length=32, choices=PlotShapeType.choices)
    area_m2 = models.DecimalField(
        max_digits=MEASUREMENT_MAX_DIGITS,
        decimal_places=MEASUREMENT_DECIMAL_PLACES,
    )

    class Meta(PatrimonyNode.Meta):
        app_label = "forest_patrimony"
        db_table = "forest_patrimony_level5"
        constraints = [
            models.UniqueConstraint(
                fields=["level4", "code"],
                name="forest_patrimony_level5_parent_code_uniq",
            ),
        ]
