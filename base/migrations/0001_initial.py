import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import base.managers
import base.utils


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UserModel",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ("username", models.CharField(max_length=255, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("surname", models.CharField(max_length=255)),
                ("role", models.CharField(choices=[("Customer", "Customer"), ("Manager", "Manager"), ("Admin", "Admin")], default="Customer", max_length=10)),
                ("address", models.CharField(blank=True, max_length=255, null=True)),
                ("birthdate", models.DateField(blank=True, null=True)),
                ("refreshToken", models.CharField(blank=True, max_length=255, null=True, unique=True)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "user",
            },
            managers=[
                ("objects", base.managers.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="ProductModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ("model", models.CharField(max_length=255, unique=True)),
                ("category", models.CharField(choices=[("Smartphone", "Smartphone"), ("Laptop", "Laptop"), ("Appliance", "Appliance")], max_length=20)),
                ("quantity", models.PositiveIntegerField(default=0)),
                ("details", models.TextField(blank=True, null=True)),
                ("sellingPrice", models.FloatField(validators=[django.core.validators.MinValueValidator(0.0)])),
                ("arrivalDate", models.DateField(default=base.utils.today)),
            ],
            options={
                "db_table": "product",
            },
        ),
        migrations.CreateModel(
            name="CartModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ("paid", models.BooleanField(default=False)),
                ("paymentDate", models.DateField(blank=True, null=True)),
                ("total", models.FloatField(default=0)),
                ("customer", models.ForeignKey(db_column="customer", on_delete=django.db.models.deletion.CASCADE, related_name="carts", to=settings.AUTH_USER_MODEL, to_field="username")),
            ],
            options={
                "db_table": "cart",
                "constraints": [
                    models.UniqueConstraint(condition=models.Q(("paid", False)), fields=("customer",), name="single_active_cart_per_customer"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ProductInCartModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ("quantity", models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ("category", models.CharField(choices=[("Smartphone", "Smartphone"), ("Laptop", "Laptop"), ("Appliance", "Appliance")], max_length=20)),
                ("sellingPrice", models.FloatField()),
                ("cart", models.ForeignKey(db_column="cartId", on_delete=django.db.models.deletion.CASCADE, related_name="products", to="base.cartmodel")),
                ("product", models.ForeignKey(db_column="model", on_delete=django.db.models.deletion.CASCADE, to="base.productmodel", to_field="model")),
            ],
            options={
                "db_table": "productInCart",
                "unique_together": {("cart", "product")},
            },
        ),
        migrations.CreateModel(
            name="ReviewModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ("score", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ("date", models.DateField(default=base.utils.today)),
                ("comment", models.TextField()),
                ("product", models.ForeignKey(db_column="model", on_delete=django.db.models.deletion.CASCADE, related_name="reviews", to="base.productmodel", to_field="model")),
                ("user", models.ForeignKey(db_column="user", on_delete=django.db.models.deletion.CASCADE, related_name="reviews", to=settings.AUTH_USER_MODEL, to_field="username")),
            ],
            options={
                "db_table": "review",
                "unique_together": {("product", "user")},
            },
        ),
    ]
