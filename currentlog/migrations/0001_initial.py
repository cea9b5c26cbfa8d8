from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Indicator",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("indicator_id", models.IntegerField(db_index=True, unique=True)),
                ("value", models.FloatField()),
                ("motor", models.CharField(blank=True, max_length=64)),
                ("updated_at", models.DateTimeField()),
            ],
        ),
        migrations.CreateModel(
            name="Log1",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sample", models.IntegerField()),
                ("i", models.FloatField()),
                ("timestamp", models.DateTimeField(db_index=True)),
                ("identifier", models.CharField(max_length=64)),
                ("indicator_id", models.IntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "log1",
                "abstract": False,
                "indexes": [
                    models.Index(fields=["identifier", "timestamp"], name="log1_ident_ts_idx"),
                    models.Index(fields=["indicator_id", "timestamp"], name="log1_ind_ts_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Log2",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sample", models.IntegerField()),
                ("i", models.FloatField()),
                ("timestamp", models.DateTimeField(db_index=True)),
                ("identifier", models.CharField(max_length=64)),
                ("indicator_id", models.IntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "log2",
                "abstract": False,
                "indexes": [
                    models.Index(fields=["identifier", "timestamp"], name="log2_ident_ts_idx"),
                    models.Index(fields=["indicator_id", "timestamp"], name="log2_ind_ts_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Log3",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sample", models.IntegerField()),
                ("i", models.FloatField()),
                ("timestamp", models.DateTimeField(db_index=True)),
                ("identifier", models.CharField(max_length=64)),
                ("indicator_id", models.IntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "log3",
                "abstract": False,
                "indexes": [
                    models.Index(fields=["identifier", "timestamp"], name="log3_ident_ts_idx"),
                    models.Index(fields=["indicator_id", "timestamp"], name="log3_ind_ts_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Log4",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sample", models.IntegerField()),
                ("i", models.FloatField()),
                ("timestamp", models.DateTimeField(db_index=True)),
                ("identifier", models.CharField(max_length=64)),
                ("indicator_id", models.IntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "log4",
                "abstract": False,
                "indexes": [
                    models.Index(fields=["identifier", "timestamp"], name="log4_ident_ts_idx"),
                    models.Index(fields=["indicator_id", "timestamp"], name="log4_ind_ts_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Log5",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sample", models.IntegerField()),
                ("i", models.FloatField()),
                ("timestamp", models.DateTimeField(db_index=True)),
                ("identifier", models.CharField(max_length=64)),
                ("indicator_id", models.IntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "log5",
                "abstract": False,
                "indexes": [
                    models.Index(fields=["identifier", "timestamp"], name="log5_ident_ts_idx"),
                    models.Index(fields=["indicator_id", "timestamp"], name="log5_ind_ts_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Log6",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sample", models.IntegerField()),
                ("i", models.FloatField()),
                ("timestamp", models.DateTimeField(db_index=True)),
                ("identifier", models.CharField(max_length=64)),
                ("indicator_id", models.IntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "log6",
                "abstract": False,
                "indexes": [
                    models.Index(fields=["identifier", "timestamp"], name="log6_ident_ts_idx"),
                    models.Index(fields=["indicator_id", "timestamp"], name="log6_ind_ts_idx"),
                ],
            },
        ),
    ]
