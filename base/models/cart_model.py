import uuid

from django.db import models
from django.db.models import Q

from .user_model import UserModel

class CartModel(models.Model):
  """
  Model that represents a customer's cart.
  A cart is active while unpaid; checkout marks it paid and it becomes
  read-only history. A customer holds at most one unpaid cart.
  """
  id = models.UUIDField(default=uuid.uuid4, editable=False, unique=True, primary_key=True)
  customer = models.ForeignKey(
    UserModel,
    to_field="username",
    db_column="customer",
    on_delete=models.CASCADE,
    related_name="carts",
  )
  paid = models.BooleanField(default=False)
  paymentDate = models.DateField(null=True, blank=True)
  total = models.FloatField(default=0)

  class Meta:
    db_table = "cart"
    constraints = [
      models.UniqueConstraint(
        fields=["customer"],
        condition=Q(paid=False),
        name="single_active_cart_per_customer",
      ),
    ]
