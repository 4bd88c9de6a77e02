from rest_framework import status
from rest_framework.exceptions import APIException

__all__ = ["DateError"]

class DateError(APIException):
    """
    A date falls outside the range allowed for the operation
    (after today, or before the product's arrival).
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Input date is not compatible with the current date"
    default_code = "date_error"
