import uuid

from django.db import models
from django.core.validators import MinValueValidator

from base.enums import CATEGORY
from .cart_model import CartModel
from .product_model import ProductModel

class ProductInCartModel(models.Model):
  """
  Model that represents a product line inside a cart.
  category and sellingPrice are captured when the product is first added
  so that paid carts keep the price the customer actually paid.
  """
  id = models.UUIDField(default=uuid.uuid4, editable=False, unique=True, primary_key=True)
  cart = models.ForeignKey(CartModel, on_delete=models.CASCADE, db_column="cartId", related_name="products")
  # no database constraint: paid lines outlive the product they refer to,
  # unpaid lines are removed by ProductService when the product is deleted
  product = models.ForeignKey(
    ProductModel,
    to_field="model",
    db_column="model",
    on_delete=models.DO_NOTHING,
    db_constraint=False,
  )
  quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
  category = models.CharField(
    max_length=20,
    choices=[(category.value, category.value) for category in CATEGORY],
  )
  sellingPrice = models.FloatField()

  class Meta:
    db_table = "productInCart"
    unique_together = [("cart", "product")]
