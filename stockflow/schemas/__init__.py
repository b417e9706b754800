# Schemas package (re-export feature modules for stable imports)
from .auth.auth import *
from .products.product import *
from .notifications.notification import *
from .users.user import *
from .common.common import *
