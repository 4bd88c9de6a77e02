import pytest
from rest_framework import status

from base.models import CartModel, ProductModel
from base.utils import today

pytestmark = pytest.mark.django_db


@pytest.fixture
def shopper(client_for, customer):
    return client_for(customer)


class TestActiveCart:
    def test_empty_cart_before_first_add(self, shopper):
        response = shopper.get("/api/carts")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "customer": "customer",
            "paid": False,
            "paymentDate": None,
            "total": 0,
            "products": [],
        }

    def test_renders_lines(self, shopper, make_product):
        make_product(sellingPrice=20.0)
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")

        cart = shopper.get("/api/carts").json()

        assert cart["total"] == 40.0
        assert cart["products"] == [
            {"model": "iPhone13", "quantity": 2, "category": "Smartphone", "price": 20.0},
        ]

    @pytest.mark.parametrize("user", ["manager", "admin"])
    def test_staff_have_no_cart(self, request, client_for, user):
        staff = request.getfixturevalue(user)

        response = client_for(staff).get("/api/carts")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_anonymous(self, api_client):
        assert api_client.get("/api/carts").status_code == status.HTTP_401_UNAUTHORIZED


class TestAddProduct:
    def test_missing_product(self, shopper):
        response = shopper.post("/api/carts", {"model": "ghost"}, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert not CartModel.objects.exists()

    def test_out_of_stock(self, shopper, make_product):
        make_product(quantity=0)

        response = shopper.post("/api/carts", {"model": "iPhone13"}, format="json")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert not CartModel.objects.exists()

    def test_blank_model(self, shopper):
        response = shopper.post("/api/carts", {"model": ""}, format="json")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestRemoveAndClear:
    def test_remove_one_unit(self, shopper, make_product):
        make_product(sellingPrice=20.0)
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")

        response = shopper.delete("/api/carts/products/iPhone13")

        assert response.status_code == status.HTTP_200_OK
        assert shopper.get("/api/carts").json()["products"][0]["quantity"] == 1

    def test_remove_without_cart(self, shopper, make_product):
        make_product()

        response = shopper.delete("/api/carts/products/iPhone13")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Cart not found", "status": 404}

    def test_remove_product_not_in_cart(self, shopper, make_product):
        make_product()
        make_product(model="XPS13", category="Laptop")
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")

        response = shopper.delete("/api/carts/products/XPS13")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "Product not in cart"

    def test_clear(self, shopper, make_product):
        make_product()
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")

        assert shopper.delete("/api/carts/current").status_code == status.HTTP_200_OK
        cart = shopper.get("/api/carts").json()
        assert (cart["total"], cart["products"]) == (0, [])

    def test_clear_without_cart(self, shopper):
        assert shopper.delete("/api/carts/current").status_code == status.HTTP_404_NOT_FOUND


class TestCheckout:
    def test_checkout_then_history(self, shopper, make_product):
        make_product(model="X", quantity=1, sellingPrice=20.0)
        shopper.post("/api/carts", {"model": "X"}, format="json")

        response = shopper.patch("/api/carts")

        assert response.status_code == status.HTTP_200_OK
        assert ProductModel.objects.get(model="X").quantity == 0
        assert shopper.get("/api/carts").json()["products"] == []
        history = shopper.get("/api/carts/history").json()
        assert len(history) == 1
        assert history[0]["paid"] is True
        assert history[0]["paymentDate"] == today().isoformat()
        assert history[0]["total"] == 20.0

    def test_checkout_without_cart(self, shopper):
        assert shopper.patch("/api/carts").status_code == status.HTTP_404_NOT_FOUND

    def test_checkout_empty_cart(self, shopper, make_product):
        make_product()
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")
        shopper.delete("/api/carts/current")

        response = shopper.patch("/api/carts")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"error": "Cart is empty", "status": 409}

    def test_checkout_more_than_stock(self, shopper, make_product):
        make_product(quantity=1)
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")

        response = shopper.patch("/api/carts")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert ProductModel.objects.get(model="iPhone13").quantity == 1
        assert shopper.get("/api/carts/history").json() == []


class TestStaffEndpoints:
    @pytest.fixture
    def carts(self, shopper, client_for, other_customer, make_product):
        make_product()
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")
        shopper.patch("/api/carts")
        shopper.post("/api/carts", {"model": "iPhone13"}, format="json")
        client_for(other_customer).post("/api/carts", {"model": "iPhone13"}, format="json")

    def test_list_all(self, carts, client_for, manager):
        response = client_for(manager).get("/api/carts/all")

        assert response.status_code == status.HTTP_200_OK
        assert sorted((c["customer"], c["paid"]) for c in response.json()) == [
            ("customer", False),
            ("customer", True),
            ("customer2", False),
        ]

    def test_customer_cannot_list_all(self, carts, shopper):
        assert shopper.get("/api/carts/all").status_code == status.HTTP_403_FORBIDDEN

    def test_delete_all(self, carts, client_for, admin):
        response = client_for(admin).delete("/api/carts")

        assert response.status_code == status.HTTP_200_OK
        assert not CartModel.objects.exists()

    def test_customer_cannot_delete_all(self, carts, shopper):
        assert shopper.delete("/api/carts").status_code == status.HTTP_403_FORBIDDEN
        assert CartModel.objects.count() == 3


class TestDeletedProducts:
    def test_history_still_lists_deleted_product(self, shopper, client_for, manager, make_product):
        make_product(model="X", quantity=2, sellingPrice=20.0)
        shopper.post("/api/carts", {"model": "X"}, format="json")
        shopper.patch("/api/carts")
        shopper.post("/api/carts", {"model": "X"}, format="json")

        assert client_for(manager).delete("/api/products/X").status_code == status.HTTP_200_OK

        history = shopper.get("/api/carts/history").json()
        assert history[0]["products"] == [{"model": "X", "quantity": 1, "category": "Smartphone", "price": 20.0}]
        active = shopper.get("/api/carts").json()
        assert (active["total"], active["products"]) == (0, [])
