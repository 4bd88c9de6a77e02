import logging

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction

from base.enums import ROLE
from base.errors import (
    DateError,
    UnauthorizedUserError,
    UserAlreadyExistsError,
    UserIsAdminError,
    UserNotFoundError,
)
from base.models import UserModel
from base.utils import today

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user accounts.

    Role gates (who may call what) are enforced by the views; ownership
    rules that depend on the target user are enforced here.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def _users(self):
        return UserModel.objects.db_manager(self.using)

    def _get_user(self, username):
        user = self._users().filter(username=username).first()
        if user is None:
            raise UserNotFoundError()
        return user

    def _check_ownership(self, requester, target):
        # non-admins only act on themselves, admins on themselves and non-admins
        if not requester.is_admin:
            if requester.username != target:
                raise UnauthorizedUserError()
            return self._get_user(target)

        user = self._get_user(target)
        if user.is_admin and user.username != requester.username:
            raise UserIsAdminError()
        return user

    def create_user(self, username, name, surname, password, role):
        """
        Creates a new user with a salted password hash.

        Raises:
            UserAlreadyExistsError: The username is taken.
        """
        if self._users().filter(username=username).exists():
            raise UserAlreadyExistsError()

        try:
            with transaction.atomic(using=self.using):
                self._users().create_user(
                    username,
                    password,
                    name=name,
                    surname=surname,
                    role=role,
                )
        except IntegrityError:
            raise UserAlreadyExistsError()

        logger.info(f"Created {role} {username}")
        return True

    def authenticate(self, username, password):
        """
        Returns the active user matching the credentials, or None.
        """
        user = self._users().filter(username=username).first()
        if user is None or not user.is_active or not user.check_password(password):
            logger.warning(f"Failed login for {username}")
            return None
        return user

    def get_users(self):
        return list(self._users().all().order_by("username"))

    def get_users_by_role(self, role):
        return list(self._users().filter(role=role).order_by("username"))

    def get_user_by_username(self, requester, username):
        """
        Raises:
            UnauthorizedUserError: A non-admin asked for another user.
            UserNotFoundError: No user with that username.
        """
        if not requester.is_admin and requester.username != username:
            raise UnauthorizedUserError()
        return self._get_user(username)

    def delete_user(self, requester, username):
        """
        Deletes a user. Non-admins may only delete themselves; admins may
        delete any user that is not another admin.

        Raises:
            UnauthorizedUserError: A non-admin targeted another user.
            UserIsAdminError: An admin targeted another admin.
            UserNotFoundError: No user with that username.
        """
        user = self._check_ownership(requester, username)
        self._users().filter(pk=user.pk).delete()

        logger.info(f"{requester.username} deleted user {username}")
        return True

    def delete_all(self):
        """
        Deletes every user except Admins.
        """
        deleted, _ = self._users().exclude(role=ROLE.ADMIN.value).delete()

        logger.info(f"Deleted all non-admin users ({deleted} rows)")
        return True

    def update_user_info(self, requester, name, surname, address, birthdate, username):
        """
        Updates personal information and returns the updated user.

        Raises:
            DateError: birthdate is after today.
            UnauthorizedUserError: A non-admin targeted another user.
            UserIsAdminError: An admin targeted another admin.
            UserNotFoundError: No user with that username.
        """
        if birthdate > today():
            raise DateError()

        user = self._check_ownership(requester, username)
        user.name = name
        user.surname = surname
        user.address = address
        user.birthdate = birthdate
        user.save(update_fields=["name", "surname", "address", "birthdate"])

        return user
