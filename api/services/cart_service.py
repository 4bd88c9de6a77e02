import logging

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import F

from base.errors import (
    CartNotFoundError,
    EmptyCartError,
    EmptyProductStockError,
    InsufficientStockError,
    ProductNotFoundError,
    ProductNotInCartError,
    ProductSoldOutError,
)
from base.models import CartModel, ProductInCartModel, ProductModel
from base.utils import today

logger = logging.getLogger(__name__)


class CartService:
    """
    Service for a customer's active cart and its checkout.

    A customer owns at most one unpaid cart. It is opened lazily by the first
    add_to_cart, emptied by clear_cart and closed for good by checkout_cart,
    after which the next add opens a fresh one. Paid carts are history.

    Args:
        using (str): Database alias every query and transaction runs against.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def _carts(self):
        return CartModel.objects.using(self.using)

    def _lines(self):
        return ProductInCartModel.objects.using(self.using)

    def _products(self):
        return ProductModel.objects.using(self.using)

    def _get_product(self, model):
        product = self._products().filter(model=model).first()
        if product is None:
            raise ProductNotFoundError()
        return product

    def _find_active_cart(self, user, lock=False):
        carts = self._carts().filter(customer=user, paid=False)
        if lock:
            carts = carts.select_for_update()
        return carts.first()

    def _open_cart(self, user):
        """
        Return the active cart of `user`, opening one if there is none.
        Must run inside a transaction.
        """
        cart = self._find_active_cart(user, lock=True)
        if cart is not None:
            return cart

        try:
            with transaction.atomic(using=self.using):
                cart = self._carts().create(customer=user)
        except IntegrityError:
            # a concurrent request opened it first
            cart = self._find_active_cart(user, lock=True)
        else:
            logger.info(f"Opened cart {cart.id} for {user.username}")

        return cart

    def _lock_stock(self, models):
        """
        Lock the product rows for `models` and return {model: quantity}.
        Rows are locked in model order so checkouts sharing products cannot deadlock.
        """
        products = (
            self._products()
            .select_for_update()
            .filter(model__in=models)
            .order_by("model")
        )
        return {product.model: product.quantity for product in products}

    def get_active_cart(self, user):
        """
        Returns the unpaid cart of `user`, or an unsaved empty cart if there is none.
        """
        cart = self._find_active_cart(user)
        if cart is None:
            return CartModel(customer=user, paid=False, paymentDate=None, total=0)
        return cart

    def add_to_cart(self, user, model):
        """
        Adds one unit of `model` to the active cart, opening the cart if needed.
        Stock is only checked here, it is decremented at checkout.

        Raises:
            ProductNotFoundError: No product with that model.
            EmptyProductStockError: The product has no units available.
        """
        product = self._get_product(model)
        if product.quantity == 0:
            logger.warning(f"{user.username} tried to add out of stock product {model}")
            raise EmptyProductStockError()

        with transaction.atomic(using=self.using):
            cart = self._open_cart(user)

            line = self._lines().select_for_update().filter(cart=cart, product=product).first()
            if line is not None:
                self._lines().filter(pk=line.pk).update(quantity=F("quantity") + 1)
            else:
                self._lines().create(
                    cart=cart,
                    product=product,
                    quantity=1,
                    category=product.category,
                    sellingPrice=product.sellingPrice,
                )

            self._carts().filter(pk=cart.pk).update(total=F("total") + product.sellingPrice)

        logger.debug(f"Added {model} to cart {cart.id}")
        return True

    def remove_product_from_cart(self, user, model):
        """
        Removes one unit of `model` from the active cart, dropping the line when it reaches zero.

        Raises:
            ProductNotFoundError: No product with that model.
            CartNotFoundError: No active cart, or the active cart is empty.
            ProductNotInCartError: The product is not in the active cart.
        """
        product = self._get_product(model)

        with transaction.atomic(using=self.using):
            cart = self._find_active_cart(user, lock=True)
            if cart is None or not self._lines().filter(cart=cart).exists():
                raise CartNotFoundError()

            line = self._lines().select_for_update().filter(cart=cart, product=product).first()
            if line is None:
                raise ProductNotInCartError()

            if line.quantity > 1:
                self._lines().filter(pk=line.pk).update(quantity=F("quantity") - 1)
            else:
                self._lines().filter(pk=line.pk).delete()

            self._carts().filter(pk=cart.pk).update(total=F("total") - product.sellingPrice)

        return True

    def clear_cart(self, user):
        """
        Empties the active cart. The cart itself stays open.

        Raises:
            CartNotFoundError: No active cart.
        """
        with transaction.atomic(using=self.using):
            cart = self._find_active_cart(user, lock=True)
            if cart is None:
                raise CartNotFoundError()

            self._lines().filter(cart=cart).delete()
            self._carts().filter(pk=cart.pk).update(total=0)

        return True

    def checkout_cart(self, user):
        """
        Pays the active cart: every product's stock is decremented by its cart
        quantity and the cart is marked paid, all in one transaction. If any
        line cannot be served nothing is applied.

        Raises:
            CartNotFoundError: No active cart.
            EmptyCartError: The active cart has no products.
            ProductNotFoundError: A product in the cart no longer exists.
            ProductSoldOutError: A product in the cart has no stock left.
            InsufficientStockError: A product has fewer units than the cart asks for.
        """
        with transaction.atomic(using=self.using):
            cart = self._find_active_cart(user, lock=True)
            if cart is None:
                raise CartNotFoundError()

            lines = list(self._lines().filter(cart=cart))
            if not lines:
                raise EmptyCartError()

            stock = self._lock_stock([line.product_id for line in lines])
            for line in lines:
                if line.product_id not in stock:
                    raise ProductNotFoundError()
                if stock[line.product_id] == 0:
                    logger.warning(f"Checkout of cart {cart.id} rejected: {line.product_id} is sold out")
                    raise ProductSoldOutError()
                if stock[line.product_id] < line.quantity:
                    logger.warning(f"Checkout of cart {cart.id} rejected: not enough {line.product_id}")
                    raise InsufficientStockError()

            for line in lines:
                updated = (
                    self._products()
                    .filter(model=line.product_id, quantity__gte=line.quantity)
                    .update(quantity=F("quantity") - line.quantity)
                )
                if not updated:
                    raise InsufficientStockError()

            self._carts().filter(pk=cart.pk).update(paid=True, paymentDate=today())

        logger.info(f"Cart {cart.id} of {user.username} checked out ({len(lines)} products)")
        return True

    def get_customer_carts(self, user):
        """
        Paid carts of `user`, oldest first.
        """
        return list(
            self._carts()
            .filter(customer=user, paid=True)
            .order_by("paymentDate")
            .prefetch_related("products")
        )

    def get_all_carts(self):
        return list(self._carts().all().prefetch_related("products"))

    def delete_all_carts(self):
        with transaction.atomic(using=self.using):
            self._lines().all().delete()
            deleted, _ = self._carts().all().delete()

        logger.info(f"Deleted {deleted} carts")
        return True
