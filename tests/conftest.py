import pytest
from rest_framework.test import APIClient

from base.enums import ROLE, CATEGORY
from base.models import ProductModel, UserModel


@pytest.fixture(autouse=True)
def fast_password_hashing(settings):
    # bcrypt is deliberately slow; the peppered hasher has its own tests
    settings.PASSWORD_HASHERS = [
        "django.contrib.auth.hashers.MD5PasswordHasher",
        "django.contrib.auth.hashers.PBKDF2PasswordHasher",
    ]


def _user(username, role):
    return UserModel.objects.create_user(
        username,
        "password",
        name=username.title(),
        surname="Test",
        role=role,
    )


@pytest.fixture
def customer(db):
    return _user("customer", ROLE.CUSTOMER.value)


@pytest.fixture
def other_customer(db):
    return _user("customer2", ROLE.CUSTOMER.value)


@pytest.fixture
def manager(db):
    return _user("manager", ROLE.MANAGER.value)


@pytest.fixture
def admin(db):
    return _user("admin", ROLE.ADMIN.value)


@pytest.fixture
def make_product(db):
    def make(model="iPhone13", quantity=10, sellingPrice=200.0, category=CATEGORY.SMARTPHONE.value, **extra):
        return ProductModel.objects.create(
            model=model,
            category=category,
            quantity=quantity,
            sellingPrice=sellingPrice,
            **extra,
        )
    return make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    """
    APIClient authenticated as the given user, bypassing the cookie login.
    """
    def make(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return make
