from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(
    user_id: UUID,
    email: Optional[str] = None,
    expires_delta: timedelta = timedelta(hours=1),
    **claims,
) -> str:
    """
    Generate an access token shaped like the ones the authentication
    provider issues (subject = user id). Used by local tooling and tests;
    production tokens come from the provider.

    Args:
        user_id: User UUID
        email: Email claim
        expires_delta: Token expiration duration
        claims: Extra claims (first_name, last_name)

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "email": email,
        "exp": now + expires_delta,
        "iat": now,
        **claims,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
            options={"verify_aud": False},
        )
        return payload
    except JWTError:
        return None
