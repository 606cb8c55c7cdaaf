import logging
import uuid

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from livefit.core.config import Settings, get_settings
from livefit.core.errors import AuthenticationError, AuthorizationError
from livefit.core.security import TokenExpiredError, InvalidTokenError, decode_token
from livefit.db.session import get_db
from livefit.models.user import User, UserRole

logger = logging.getLogger(__name__)

NOT_LOGGED_IN = "未登入"
INVALID_TOKEN = "無效的 token"
TOKEN_EXPIRED = "Token 已過期"
NOT_A_COACH = "使用者尚未成為教練"

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),  # noqa: B008
    db: Session = Depends(get_db),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> User:
    """Resolve the bearer token to a User row or reject the request with 401."""
    if credentials is None or not credentials.credentials:
        logger.warning(NOT_LOGGED_IN)
        raise AuthenticationError(NOT_LOGGED_IN)

    try:
        payload = decode_token(
            credentials.credentials, settings.jwt_secret_key, settings.jwt_algorithm
        )
        user_id = uuid.UUID(str(payload["id"]))
    except TokenExpiredError as exc:
        logger.warning(TOKEN_EXPIRED)
        raise AuthenticationError(TOKEN_EXPIRED) from exc
    except (InvalidTokenError, KeyError, ValueError) as exc:
        logger.warning(f"{INVALID_TOKEN}: {exc}")
        raise AuthenticationError(INVALID_TOKEN) from exc

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.warning(f"{INVALID_TOKEN}: user {user_id} not found")
        raise AuthenticationError(INVALID_TOKEN)
    return user


def require_coach(current_user: User = Depends(get_current_user)) -> User:  # noqa: B008
    if current_user.role != UserRole.COACH:
        logger.warning(f"{NOT_A_COACH}: user {current_user.id}")
        raise AuthorizationError(NOT_A_COACH)
    return current_user
