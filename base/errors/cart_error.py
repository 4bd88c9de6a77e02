from rest_framework import status
from rest_framework.exceptions import APIException

__all__ = ["CartNotFoundError", "ProductNotInCartError", "EmptyCartError"]

class CartNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Cart not found"
    default_code = "cart_not_found"

class ProductNotInCartError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Product not in cart"
    default_code = "product_not_in_cart"

class EmptyCartError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Cart is empty"
    default_code = "empty_cart"
