import logging

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction

from base.errors import ExistingReviewError, NoReviewProductError, ProductNotFoundError
from base.models import ProductModel, ReviewModel
from base.utils import today

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for product reviews. One review per (product, user)."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def _reviews(self):
        return ReviewModel.objects.using(self.using)

    def _get_product(self, model):
        product = ProductModel.objects.using(self.using).filter(model=model).first()
        if product is None:
            raise ProductNotFoundError()
        return product

    def add_review(self, model, user, score, comment):
        """
        Adds the review of `user` for `model`, dated today.

        Raises:
            ProductNotFoundError: No product with that model.
            ExistingReviewError: The user already reviewed the product.
        """
        product = self._get_product(model)
        if self._reviews().filter(product=product, user=user).exists():
            raise ExistingReviewError()

        try:
            with transaction.atomic(using=self.using):
                self._reviews().create(
                    product=product,
                    user=user,
                    score=score,
                    comment=comment,
                    date=today(),
                )
        except IntegrityError:
            raise ExistingReviewError()

        logger.info(f"{user.username} reviewed {model} with score {score}")

    def get_product_reviews(self, model):
        return list(self._reviews().filter(product_id=model).order_by("date"))

    def delete_review(self, model, user):
        """
        Deletes the review of `user` for `model`.

        Raises:
            ProductNotFoundError: No product with that model.
            NoReviewProductError: The user has not reviewed the product.
        """
        product = self._get_product(model)
        deleted, _ = self._reviews().filter(product=product, user=user).delete()
        if not deleted:
            raise NoReviewProductError()

    def delete_reviews_of_product(self, model):
        product = self._get_product(model)
        deleted, _ = self._reviews().filter(product=product).delete()

        logger.info(f"Deleted {deleted} reviews of {model}")

    def delete_all_reviews(self):
        deleted, _ = self._reviews().all().delete()

        logger.info(f"Deleted all reviews ({deleted} rows)")
