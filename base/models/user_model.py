from django.contrib.auth.models import AbstractBaseUser
from django.contrib.auth.hashers import make_password
from django.db import models
import uuid
from base.enums import ROLE
from base.managers import UserManager

class UserModel(AbstractBaseUser):
    """
    A model to generate the user table.
    Columns:
        id            UUID to store each user uniquely.
        username      Unique login name, used as the public identifier.
        name          First name.
        surname       Last name.
        role          One of Customer, Manager, Admin.
        address       Optional postal address.
        birthdate     Optional date of birth, never after today.
        refreshToken  Hash of the last refresh token issued to the user.
    is_active is Django naming convention, DO NOT OVERWRITE
    """
    id = models.UUIDField(default=uuid.uuid4, editable=False, unique=True, primary_key=True)
    username = models.CharField(max_length=255, unique=True)
    name = models.CharField(max_length=255)
    surname = models.CharField(max_length=255)
    role = models.CharField(
        max_length=10,
        choices=[(role.value, role.name.title()) for role in ROLE],
        default=ROLE.CUSTOMER.value,
    )
    address = models.CharField(max_length=255, blank=True, null=True)
    birthdate = models.DateField(blank=True, null=True)
    refreshToken = models.CharField(max_length=255, unique=True, blank=True, null=True)
    is_active = models.BooleanField(default=True)

    objects = UserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = ["name", "surname"]

    def set_password(self, raw_password):
        self.password = make_password(raw_password)

    @property
    def is_customer(self):
        return self.role == ROLE.CUSTOMER.value

    @property
    def is_admin(self):
        return self.role == ROLE.ADMIN.value

    @property
    def is_manager(self):
        return self.role == ROLE.MANAGER.value

    def __str__(self):
        return f"{self.username}"

    class Meta:
        db_table = "user"  # Overwrites the default table name
