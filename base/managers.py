from django.contrib.auth.models import BaseUserManager

from base.enums import ROLE

class UserManager(BaseUserManager):
    """
    Custom manager for UserModel that handles user creation.
    Provides methods for creating customers, managers and admins.
    """
    # Allow this manager to be serialized into migrations
    use_in_migrations = True

    def create_user(self, username, password=None, **extra_fields):
        """
        Create a user, a Customer unless another role is given.

        Args:
            username (str):    The unique username.
            password (str):    Raw password (optional; if None, user has no usable password).
            **extra_fields:    Additional model fields (e.g., name, surname, role).

        Returns:
            UserModel: The created user.
        """
        extra_fields.setdefault("role", ROLE.CUSTOMER.value)

        return self._create_user(username, password, **extra_fields)


    def create_superuser(self, username, password=None, **extra_fields):
        """
        Create an Admin. Used by `manage.py createsuperuser`.

        Args:
            username (string):    The unique username.
            password (string):    Raw password (should not be None).
            **extra_fields:    Additional model fields.

        Returns:
            UserModel: The created admin.

        Raises:
            ValueError: If `role` is set to anything other than Admin.
        """
        extra_fields.setdefault("role", ROLE.ADMIN.value)

        if extra_fields.get("role") != ROLE.ADMIN.value:
            raise ValueError("Superuser must have role=Admin.")

        return self._create_user(username, password, **extra_fields)


    def _create_user(self, username, password, **extra_fields):
        """
        Internal helper to create and save a UserModel.

        Raises:
            ValueError: If no username is provided.
        """
        if not username:
            raise ValueError("The Username must be set")

        user = self.model(username=self.model.normalize_username(username), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)

        return user
