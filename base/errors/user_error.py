from rest_framework import status
from rest_framework.exceptions import APIException

__all__ = [
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "UnauthorizedUserError",
    "UserIsAdminError",
]

class UserNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "The user does not exist"
    default_code = "user_not_found"

class UserAlreadyExistsError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The username already exists"
    default_code = "user_already_exists"

class UnauthorizedUserError(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You cannot access the information of other users"
    default_code = "unauthorized_user"

class UserIsAdminError(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Admins cannot be modified or deleted by other admins"
    default_code = "user_is_admin"
