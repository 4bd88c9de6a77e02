from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator
import uuid

from base.enums import CATEGORY
from base.utils import today

class ProductModel(models.Model):
    """
    A model to generate the product table.
    Columns:
        id            UUID to store each product uniquely.
        model         Unique model name, the public identifier of the product.
        category      One of Smartphone, Laptop, Appliance.
        quantity      Units currently available in stock.
        details       Optional free text description.
        sellingPrice  Price of a single unit.
        arrivalDate   Date the product arrived, never after today.
    """
    id           = models.UUIDField(default=uuid.uuid4, editable=False, unique=True, primary_key=True)
    model        = models.CharField(max_length=255, unique=True)
    category     = models.CharField(
        max_length=20,
        choices=[(category.value, category.value) for category in CATEGORY],
    )
    quantity     = models.PositiveIntegerField(default=0)
    details      = models.TextField(blank=True, null=True)
    sellingPrice = models.FloatField(validators=[MinValueValidator(0.0)])
    arrivalDate  = models.DateField(default=today)

    def __str__(self):
        return self.model

    class Meta:
        db_table = "product"  # Overwrites the default table name
        constraints = [
            models.CheckConstraint(condition=Q(sellingPrice__gt=0), name="product_selling_price_positive"),
        ]
