from .user_model import UserModel
from .product_model import ProductModel
from .cart_model import CartModel
from .product_in_cart_model import ProductInCartModel
from .review_model import ReviewModel
