#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.user import UserModel, UserRole
from app.data.models.product import ProductModel
from app.data.models.order import OrderModel, OrderStatus
from app.data.models.order_item import OrderItemModel
from app.data.models.review import ReviewModel
from app.data.models.message import MessageModel
from app.data.models.cart_item import CartItemModel
from app.data.models.notification import NotificationModel
from app.data.models.modification_request import ProductModificationRequestModel
from app.data.models.session import SessionModel

__all__ = [
    "UserModel",
    "UserRole",
    "ProductModel",
    "OrderModel",
    "OrderStatus",
    "OrderItemModel",
    "ReviewModel",
    "MessageModel",
    "CartItemModel",
    "NotificationModel",
    "ProductModificationRequestModel",
    "SessionModel",
]
