from .cart_view import CartViewSet
from .product_view import ProductViewSet
from .review_view import ReviewViewSet
from .user_view import UserViewSet
