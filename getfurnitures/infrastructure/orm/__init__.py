"""Infrastructure ORM Models"""

from .user_model import UserModel, FavouriteModel
from .admin_model import AdminModel
from .product_model import ProductModel
from .order_model import OrderModel
from .password_reset_token_model import PasswordResetTokenORM

__all__ = [
    'UserModel',
    'FavouriteModel',
    'AdminModel',
    'ProductModel',
    'OrderModel',
    'PasswordResetTokenORM',
]
