import uuid

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator

from base.utils import today
from .user_model import UserModel
from .product_model import ProductModel

class ReviewModel(models.Model):
    """
    A customer's review of a product, one per (product, user) pair.
    """
    id = models.UUIDField(default=uuid.uuid4, editable=False, unique=True, primary_key=True)
    product = models.ForeignKey(
        ProductModel,
        to_field="model",
        db_column="model",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    user = models.ForeignKey(
        UserModel,
        to_field="username",
        db_column="user",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    score = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    date = models.DateField(default=today)
    comment = models.TextField()

    class Meta:
        db_table = "review"
        unique_together = [("product", "user")]
