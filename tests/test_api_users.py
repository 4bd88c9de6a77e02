import pytest
from rest_framework import status

from base.models import UserModel

pytestmark = pytest.mark.django_db

NEW_USER = {
    "username": "mario",
    "name": "Mario",
    "surname": "Rossi",
    "password": "secret",
    "role": "Customer",
}

UPDATE = {
    "name": "Maria",
    "surname": "Bianchi",
    "address": "Via Roma 1, Torino",
    "birthdate": "1990-05-17",
}


class TestCreateUser:
    def test_open_to_anonymous(self, api_client):
        response = api_client.post("/api/users", NEW_USER, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert UserModel.objects.get(username="mario").check_password("secret")

    def test_no_clear_auth_header_on_sign_up(self, api_client):
        response = api_client.post("/api/users", NEW_USER, format="json")

        assert "X-Clear-Auth-State" not in response

    def test_duplicate(self, api_client, customer):
        response = api_client.post("/api/users", {**NEW_USER, "username": "customer"}, format="json")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"error": "The username already exists", "status": 409}

    @pytest.mark.parametrize("field, value", [("username", ""), ("role", "Owner"), ("password", "")])
    def test_invalid_body(self, api_client, field, value):
        response = api_client.post("/api/users", {**NEW_USER, field: value}, format="json")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert field in response.json()


class TestListUsers:
    def test_admin_lists(self, client_for, admin, customer, manager):
        response = client_for(admin).get("/api/users")

        assert response.status_code == status.HTTP_200_OK
        assert [u["username"] for u in response.json()] == ["admin", "customer", "manager"]
        assert "password" not in response.json()[0]

    def test_admin_lists_by_role(self, client_for, admin, customer, manager):
        response = client_for(admin).get("/api/users/roles/Manager")

        assert [u["username"] for u in response.json()] == ["manager"]

    @pytest.mark.parametrize("path", ["/api/users", "/api/users/roles/Customer"])
    def test_manager_is_forbidden(self, client_for, manager, path):
        assert client_for(manager).get(path).status_code == status.HTTP_403_FORBIDDEN

    def test_anonymous_gets_clear_auth_header(self, api_client):
        response = api_client.get("/api/users")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response["X-Clear-Auth-State"] == "true"


class TestSingleUser:
    def test_get_self(self, client_for, customer):
        response = client_for(customer).get("/api/users/customer")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "username": "customer",
            "name": "Customer",
            "surname": "Test",
            "role": "Customer",
            "address": None,
            "birthdate": None,
        }

    def test_get_other(self, client_for, customer, other_customer):
        response = client_for(customer).get("/api/users/customer2")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_gets_missing(self, client_for, admin):
        assert client_for(admin).get("/api/users/ghost").status_code == status.HTTP_404_NOT_FOUND

    def test_update_self(self, client_for, customer):
        response = client_for(customer).patch("/api/users/customer", UPDATE, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["birthdate"] == "1990-05-17"
        assert response.json()["address"] == "Via Roma 1, Torino"

    def test_update_future_birthdate(self, client_for, customer):
        response = client_for(customer).patch("/api/users/customer", {**UPDATE, "birthdate": "2999-01-01"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_missing_field(self, client_for, customer):
        body = {key: value for key, value in UPDATE.items() if key != "address"}

        response = client_for(customer).patch("/api/users/customer", body, format="json")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_admin_cannot_update_admin(self, client_for, admin):
        UserModel.objects.create_user("admin2", "password", name="A", surname="B", role="Admin")

        response = client_for(admin).patch("/api/users/admin2", UPDATE, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_self(self, client_for, customer):
        assert client_for(customer).delete("/api/users/customer").status_code == status.HTTP_200_OK
        assert not UserModel.objects.filter(username="customer").exists()

    def test_delete_other(self, client_for, customer, other_customer):
        assert client_for(customer).delete("/api/users/customer2").status_code == status.HTTP_403_FORBIDDEN


class TestDeleteAll:
    def test_admin_deletes_non_admins(self, client_for, admin, customer, manager):
        response = client_for(admin).delete("/api/users")

        assert response.status_code == status.HTTP_200_OK
        assert list(UserModel.objects.values_list("username", flat=True)) == ["admin"]

    def test_customer_is_forbidden(self, client_for, customer):
        assert client_for(customer).delete("/api/users").status_code == status.HTTP_403_FORBIDDEN
