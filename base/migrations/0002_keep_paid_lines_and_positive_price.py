import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("base", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="productincartmodel",
            name="product",
            field=models.ForeignKey(db_column="model", db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, to="base.productmodel", to_field="model"),
        ),
        migrations.AddConstraint(
            model_name="productmodel",
            constraint=models.CheckConstraint(condition=models.Q(("sellingPrice__gt", 0)), name="product_selling_price_positive"),
        ),
    ]
