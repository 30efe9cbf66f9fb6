"""
JWT verification for bearer-token authentication.

Tokens are issued by the auth service and signed with SECRET_KEY/ALGORITHM;
the "sub" claim carries the user id that owns the requested jobs.
"""

from jose import jwt
from app.core.config import settings


def decode_token(token: str) -> dict:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token to decode

    Returns:
        Dictionary containing the token payload

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
