import jwt
import logging
from datetime import datetime, timedelta
from typing import Optional
from passlib.context import CryptContext

from .core.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# =========================
# Password Hashing
# =========================
def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        return False

# =========================
# JWT Token Handling
# =========================
def create_jwt_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token with expiration"""
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "type": "access"})

    if not settings.SECRET_KEY:
        raise ValueError("SECRET_KEY not properly configured")
    if settings.SECRET_KEY == "change-me-in-prod":
        logger.warning("Signing tokens with the default JWT secret; set JWT_SECRET_KEY")

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_jwt_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        return None
    except jwt.InvalidTokenError:
        return None

# =========================
# SKU Handling
# =========================
def normalize_sku(sku: str) -> str:
    """Canonical SKU form used for storage and uniqueness checks."""
    return sku.strip().upper()
