from rest_framework.permissions import BasePermission

from base.enums import ROLE


class HasRole(BasePermission):
    """
    Grants access to authenticated users whose role is in `roles`.
    Anonymous requests fail with 401, authenticated ones with the wrong role with 403.
    """
    roles = ()

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role in self.roles)


class IsCustomer(HasRole):
    message = "User is not a customer"
    roles = (ROLE.CUSTOMER.value,)


class IsAdmin(HasRole):
    message = "User is not an admin"
    roles = (ROLE.ADMIN.value,)


class IsAdminOrManager(HasRole):
    message = "User is not an admin or manager"
    roles = (ROLE.ADMIN.value, ROLE.MANAGER.value)
