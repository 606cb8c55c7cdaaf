import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


class InvalidTokenError(ValueError):
    pass


class TokenExpiredError(InvalidTokenError):
    pass


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password[:72], hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password[:72])


def create_access_token(
    user_id: uuid.UUID | str,
    secret_key: str,
    algorithm: str,
    expires_delta: timedelta,
) -> str:
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode: Dict[str, Any] = {
        "id": str(user_id),
        "exp": expire,
    }
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_token(token: str, secret_key: str, algorithm: str) -> Dict[str, Any]:
    """Verify signature and expiry, returning the token payload.

    Raises ``TokenExpiredError`` when the ``exp`` claim has passed and
    ``InvalidTokenError`` for any other verification failure.
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except ExpiredSignatureError as exc:
        raise TokenExpiredError("Token expired") from exc
    except JWTError as exc:
        raise InvalidTokenError("Invalid token") from exc
