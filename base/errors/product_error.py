from rest_framework import status
from rest_framework.exceptions import APIException

__all__ = [
    "ProductNotFoundError",
    "ProductAlreadyExistsError",
    "EmptyProductStockError",
    "LowProductStockError",
    "ProductSoldOutError",
    "InsufficientStockError",
    "IncorrectGroupingError",
    "IncorrectCategoryGroupingError",
    "IncorrectModelGroupingError",
]

class ProductNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Product not found"
    default_code = "product_not_found"

class ProductAlreadyExistsError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The product already exists"
    default_code = "product_already_exists"

class EmptyProductStockError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Product stock is empty"
    default_code = "empty_product_stock"

class LowProductStockError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Product stock cannot satisfy the requested quantity"
    default_code = "low_product_stock"

class ProductSoldOutError(APIException):
    """
    Raised at checkout when a product in the cart has no stock left.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Product is sold out"
    default_code = "product_sold_out"

class InsufficientStockError(APIException):
    """
    Raised at checkout when a cart line asks for more units than are in stock.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Product stock cannot satisfy the quantity in the cart"
    default_code = "insufficient_stock"

class IncorrectGroupingError(APIException):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "Grouping cannot be `null` when specifying a `category` or `model`"
    default_code = "incorrect_grouping"

class IncorrectCategoryGroupingError(APIException):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "`category` cannot be `null` when specifying a `category` as a grouping and `model` should be `null`"
    default_code = "incorrect_category_grouping"

class IncorrectModelGroupingError(APIException):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "`model` cannot be `null` when specifying a `model` as a grouping and `category` should be `null`"
    default_code = "incorrect_model_grouping"
