from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("price", models.DecimalField(decimal_places=2, max_digits=19)),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["price"], name="products_price_idx"),
                ],
            },
        ),
    ]
