from .cart_service import CartService
from .product_service import ProductService
from .review_service import ReviewService
from .user_service import UserService
