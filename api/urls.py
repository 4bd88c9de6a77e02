from django.urls import path

from .controllers import *

# Collection routes also answer DELETE (bulk delete), which DefaultRouter
# cannot express, so every viewset is bound explicitly.

users = UserViewSet.as_view({"get": "list", "post": "create", "delete": "destroy_all"})
users_by_role = UserViewSet.as_view({"get": "list_by_role"})
user_detail = UserViewSet.as_view({"get": "retrieve", "patch": "partial_update", "delete": "destroy"})

products = ProductViewSet.as_view({"get": "list", "post": "create", "delete": "destroy_all"})
products_available = ProductViewSet.as_view({"get": "available"})
product_detail = ProductViewSet.as_view({"patch": "partial_update", "delete": "destroy"})
product_sell = ProductViewSet.as_view({"patch": "sell"})

carts = CartViewSet.as_view({"get": "active", "post": "add_product", "patch": "checkout", "delete": "destroy_all"})
carts_history = CartViewSet.as_view({"get": "history"})
carts_all = CartViewSet.as_view({"get": "list_all"})
cart_current = CartViewSet.as_view({"delete": "clear"})
cart_product = CartViewSet.as_view({"delete": "remove_product"})

reviews = ReviewViewSet.as_view({"delete": "destroy_all"})
product_reviews = ReviewViewSet.as_view({"get": "list", "post": "create", "delete": "destroy"})
product_reviews_all = ReviewViewSet.as_view({"delete": "destroy_product_reviews"})

urlpatterns = [
    path("users", users, name="users"),
    path("users/roles/<str:role>", users_by_role, name="users-by-role"),
    path("users/<str:username>", user_detail, name="user-detail"),

    path("products", products, name="products"),
    path("products/available", products_available, name="products-available"),
    path("products/<str:model>", product_detail, name="product-detail"),
    path("products/<str:model>/sell", product_sell, name="product-sell"),

    path("carts", carts, name="carts"),
    path("carts/history", carts_history, name="carts-history"),
    path("carts/all", carts_all, name="carts-all"),
    path("carts/current", cart_current, name="cart-current"),
    path("carts/products/<str:model>", cart_product, name="cart-product"),

    path("reviews", reviews, name="reviews"),
    path("reviews/<str:model>", product_reviews, name="product-reviews"),
    path("reviews/<str:model>/all", product_reviews_all, name="product-reviews-all"),
]
