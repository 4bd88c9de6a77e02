from .product_error import *
from .cart_error import *
from .review_error import *
from .user_error import *
from .date_error import *
