"""JWT issuing and authentication dependency for FastAPI."""
from datetime import datetime, timedelta, timezone
from fastapi import HTTPException, status, Request
from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import BaseModel

from taskmanagement.config import AUTH_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES


class CurrentUser(BaseModel):
    """User information extracted from JWT."""
    user_id: str


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """Sign a bearer token whose ``sub`` claim is the caller identity."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": subject,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, AUTH_SECRET, algorithm=JWT_ALGORITHM)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(request: Request) -> CurrentUser:
    """
    Validate JWT token from Authorization header and extract the caller identity.

    Args:
        request: FastAPI request object to extract Authorization header

    Returns:
        CurrentUser with user_id taken from the token subject

    Raises:
        HTTPException: If token is missing, invalid or expired
    """
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise _unauthorized("Missing or invalid Authorization header")

    token = auth_header[7:]  # Remove "Bearer " prefix

    try:
        payload = jwt.decode(token, AUTH_SECRET, algorithms=[JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except JWTError as e:
        raise _unauthorized(f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Invalid token: missing user ID")

    return CurrentUser(user_id=user_id)
