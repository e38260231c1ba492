from app.models.profile import Profile
from app.models.like import Like, LikeAction
from app.models.notification import Notification
from app.models.username import Username
from app.models.wishlist import Wishlist

__all__ = [
    "Profile",
    "Like",
    "LikeAction",
    "Notification",
    "Username",
    "Wishlist",
]
