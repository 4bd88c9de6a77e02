import logging

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import F

from base.enums import GROUPING
from base.errors import (
    DateError,
    EmptyProductStockError,
    IncorrectCategoryGroupingError,
    IncorrectGroupingError,
    IncorrectModelGroupingError,
    LowProductStockError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from base.models import CartModel, ProductInCartModel, ProductModel
from base.utils import today

logger = logging.getLogger(__name__)


class ProductService:
    """Service for the product catalog and its stock bookkeeping."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def _products(self):
        return ProductModel.objects.using(self.using)

    def _get_product(self, model, lock=False):
        products = self._products().filter(model=model)
        if lock:
            products = products.select_for_update()
        product = products.first()
        if product is None:
            raise ProductNotFoundError()
        return product

    @staticmethod
    def _check_change_date(change_date, product):
        # a stock change can only happen between the arrival of the product and today
        if change_date > today() or change_date < product.arrivalDate:
            raise DateError()

    def register_products(self, model, category, quantity, details, sellingPrice, arrivalDate=None):
        """
        Registers a new product model with its initial stock.

        Args:
            model (str): Unique model name.
            category (str): One of the CATEGORY values.
            quantity (int): Units initially available.
            details (str): Optional description.
            sellingPrice (float): Price of one unit.
            arrivalDate (date): Optional arrival date, today when omitted.

        Raises:
            ProductAlreadyExistsError: The model is already registered.
            DateError: arrivalDate is after today.
        """
        if self._products().filter(model=model).exists():
            raise ProductAlreadyExistsError()

        arrivalDate = arrivalDate or today()
        if arrivalDate > today():
            raise DateError()

        try:
            with transaction.atomic(using=self.using):
                self._products().create(
                    model=model,
                    category=category,
                    quantity=quantity,
                    details=details,
                    sellingPrice=sellingPrice,
                    arrivalDate=arrivalDate,
                )
        except IntegrityError:
            raise ProductAlreadyExistsError()

        logger.info(f"Registered product {model} with {quantity} units")
        return True

    def change_product_quantity(self, model, quantity, changeDate=None):
        """
        Restocks `model` by `quantity` units and returns the new stock.

        Raises:
            ProductNotFoundError: No product with that model.
            DateError: changeDate is after today or before the arrival date.
        """
        with transaction.atomic(using=self.using):
            product = self._get_product(model, lock=True)
            self._check_change_date(changeDate or today(), product)

            self._products().filter(pk=product.pk).update(quantity=F("quantity") + quantity)
            product.refresh_from_db(fields=["quantity"])

        logger.info(f"Restocked {model} by {quantity}, now {product.quantity}")
        return product.quantity

    def sell_product(self, model, quantity, sellingDate=None):
        """
        Records the sale of `quantity` units of `model` and returns the new stock.

        Raises:
            ProductNotFoundError: No product with that model.
            DateError: sellingDate is after today or before the arrival date.
            EmptyProductStockError: No units available.
            LowProductStockError: Fewer units available than requested.
        """
        with transaction.atomic(using=self.using):
            product = self._get_product(model, lock=True)
            self._check_change_date(sellingDate or today(), product)

            if product.quantity == 0:
                raise EmptyProductStockError()
            if product.quantity < quantity:
                raise LowProductStockError()

            updated = (
                self._products()
                .filter(pk=product.pk, quantity__gte=quantity)
                .update(quantity=F("quantity") - quantity)
            )
            if not updated:
                raise LowProductStockError()
            product.refresh_from_db(fields=["quantity"])

        logger.info(f"Sold {quantity} of {model}, {product.quantity} left")
        return product.quantity

    def _grouped(self, grouping, category, model):
        """
        Validates a grouping combination and returns the matching queryset.
        Exactly one of {nothing, category, model} may be used as a filter.
        """
        if grouping == GROUPING.CATEGORY.value:
            if not category or model:
                raise IncorrectCategoryGroupingError()
            return self._products().filter(category=category)

        if grouping == GROUPING.MODEL.value:
            if not model or category:
                raise IncorrectModelGroupingError()
            if not self._products().filter(model=model).exists():
                raise ProductNotFoundError()
            return self._products().filter(model=model)

        if category or model:
            raise IncorrectGroupingError()
        return self._products().all()

    def get_products(self, grouping=None, category=None, model=None):
        return list(self._grouped(grouping, category, model).order_by("model"))

    def get_available_products(self, grouping=None, category=None, model=None):
        """
        Same as get_products, limited to products with at least one unit in stock.
        """
        return list(
            self._grouped(grouping, category, model)
            .filter(quantity__gt=0)
            .order_by("model")
        )

    def _drop_unpaid_lines(self, models=None):
        """
        Removes the lines of `models` (every line if None) from the unpaid
        carts and takes their subtotals off the cart totals. Paid carts keep
        their lines. Must run inside a transaction.
        """
        lines = ProductInCartModel.objects.using(self.using).filter(cart__paid=False)
        if models is not None:
            lines = lines.filter(product_id__in=models)

        subtotals = {}
        for line in lines.select_for_update():
            subtotals[line.cart_id] = subtotals.get(line.cart_id, 0) + line.quantity * line.sellingPrice

        for cart_id, subtotal in subtotals.items():
            CartModel.objects.using(self.using).filter(pk=cart_id).update(total=F("total") - subtotal)
        lines.delete()

        if subtotals:
            logger.info(f"Removed {models or 'all products'} from {len(subtotals)} unpaid carts")

    def delete_product(self, model):
        """
        Deletes a product, dropping it from unpaid carts. Paid carts are untouched.

        Raises:
            ProductNotFoundError: No product with that model.
        """
        with transaction.atomic(using=self.using):
            product = self._get_product(model, lock=True)
            self._drop_unpaid_lines([model])
            self._products().filter(pk=product.pk).delete()

        logger.info(f"Deleted product {model}")
        return True

    def delete_all_products(self):
        with transaction.atomic(using=self.using):
            self._drop_unpaid_lines()
            deleted, _ = self._products().all().delete()

        logger.info(f"Deleted all products ({deleted} rows)")
        return True
