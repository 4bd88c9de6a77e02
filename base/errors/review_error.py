from rest_framework import status
from rest_framework.exceptions import APIException

__all__ = ["ExistingReviewError", "NoReviewProductError"]

class ExistingReviewError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "You have already reviewed this product"
    default_code = "existing_review"

class NoReviewProductError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "You have not reviewed this product"
    default_code = "no_review"
