# Models package (re-export feature modules for stable imports)
from .users.user import User
from .catalog.sector import Sector
from .catalog.product import Product
from .catalog.watchlist import WatchlistEntry
from .alerts.notification import Notification, LOW_STOCK

__all__ = [
    "User",
    "Sector",
    "Product",
    "WatchlistEntry",
    "Notification",
    "LOW_STOCK",
]
