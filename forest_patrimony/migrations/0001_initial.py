import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Organization',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'forest_organization',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='PatrimonyLevel2',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(max_length=80)),
                ('name', models.CharField(max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('type', models.CharField(choices=[('FINCA', 'Finca'), ('PREDIO', 'Predio'), ('HATO', 'Hato'), ('FUNDO', 'Fundo'), ('HACIENDA', 'Hacienda')], max_length=32)),
                ('legal_status', models.CharField(blank=True, choices=[('ADQUISICION', 'Adquisición'), ('ARRIENDO', 'Arriendo'), ('USUFRUCTO', 'Usufructo'), ('COMODATO', 'Comodato')], max_length=32, null=True)),
                ('total_area_ha', models.DecimalField(decimal_places=4, max_digits=14)),
                ('organization', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='patrimony_level2', to='forest_patrimony.organization')),
            ],
            options={
                'db_table': 'forest_patrimony_level2',
                'ordering': ['code'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='PatrimonyLevel3',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(max_length=80)),
                ('name', models.CharField(max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('type', models.CharField(choices=[('COMPARTIMIENTO', 'Compartimiento'), ('BLOCK', 'Block'), ('SECCION', 'Sección'), ('LOTE', 'Lote'), ('ZONA', 'Zona'), ('BLOQUE', 'Bloque')], max_length=32)),
                ('total_area_ha', models.DecimalField(decimal_places=4, max_digits=14)),
                ('level2', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='children', to='forest_patrimony.patrimonylevel2')),
            ],
            options={
                'db_table': 'forest_patrimony_level3',
                'ordering': ['code'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='PatrimonyLevel4',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(max_length=80)),
                ('name', models.CharField(max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('type', models.CharField(choices=[('RODAL', 'Rodal'), ('PARCELA', 'Parcela'), ('ENUMERATION', 'Enumeration'), ('UNIDAD_DE_MANEJO', 'Unidad de manejo')], max_length=32)),
                ('total_area_ha', models.DecimalField(decimal_places=4, max_digits=14)),
                ('level3', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='children', to='forest_patrimony.patrimonylevel3')),
            ],
            options={
                'db_table': 'forest_patrimony_level4',
                'ordering': ['code'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='PatrimonyLevel5',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(max_length=80)),
                ('name', models.CharField(max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('type', models.CharField(choices=[('REFERENCIA', 'Referencia'), ('SUBUNIDAD', 'Subunidad'), ('SUBPARCELA', 'Subparcela'), ('MUESTRA', 'Muestra'), ('SUBMUESTRA', 'Submuestra')], max_length=32)),
                ('shape_type', models.CharField(choices=[('RECTANGULAR', 'Rectangular'), ('CUADRADA', 'Cuadrada'), ('CIRCULAR', 'Circular'), ('HEXAGONAL', 'Hexagonal')], max_length=32)),
                ('area_m2', models.DecimalField(decimal_places=4, max_digits=14)),
                ('level4', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='children', to='forest_patrimony.patrimonylevel4')),
            ],
            options={
                'db_table': 'forest_patrimony_level5',
                'ordering': ['code'],
                'abstract': False,
            },
        ),
        migrations.AddConstraint(
            model_name='patrimonylevel2',
            constraint=models.UniqueConstraint(fields=('organization', 'code'), name='forest_patrimony_level2_org_code_uniq'),
        ),
        migrations.AddConstraint(
            model_name='patrimonylevel3',
            constraint=models.UniqueConstraint(fields=('level2', 'code'), name='forest_patrimony_level3_parent_code_uniq'),
        ),
        migrations.AddConstraint(
            model_name='patrimonylevel4',
            constraint=models.UniqueConstraint(fields=('level3', 'code'), name='forest_patrimony_level4_parent_code_uniq'),
        ),
        migrations.AddConstraint(
            model_name='patrimonylevel5',
            constraint=models.UniqueConstraint(fields=('level4', 'code'), name='forest_patrimony_level5_parent_code_uniq'),
        ),
    ]
