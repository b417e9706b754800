# Routers package
from . import auth_router
from . import sectors_router
from . import products_router
from . import stats_router
from . import notifications_router
from . import watchlist_router
from . import users_router
from . import debug_router

__all__ = [
    "auth_router",
    "sectors_router",
    "products_router",
    "stats_router",
    "notifications_router",
    "watchlist_router",
    "users_router",
    "debug_router",
]
