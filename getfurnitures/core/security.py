"""Security utilities"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional
from jose import jwt, JWTError
from passlib.context import CryptContext
from .config import settings
import secrets
import string


# Password context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password"""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(subject: str, role: str, email: str) -> str:
    """Create a signed session token for a user or an admin"""
    expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.utcnow() + expires_delta

    to_encode = {"exp": expire, "sub": subject, "role": role, "email": email}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify token and return its claims, or None when invalid or expired"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if not payload.get("sub") or not payload.get("role"):
        return None
    return payload


def generate_otp() -> int:
    """Six digit numeric one-time code, uniform in [100000, 999999]."""
    return 100000 + secrets.randbelow(900000)


def generate_reset_token(length: int = 64) -> str:
    """Generate a secure password reset token."""
    alphabet = string.digits + "abcdef"
    return ''.join(secrets.choice(alphabet) for _ in range(length))
