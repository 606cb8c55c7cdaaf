import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from livefit.api import deps
from livefit.core.config import Settings, get_settings
from livefit.core.errors import (
    ConflictError,
    FieldValidationError,
    MutationFailure,
    NotFoundError,
)
from livefit.core.responses import send_success
from livefit.core.security import create_access_token, get_password_hash, verify_password
from livefit.core.validation import is_valid_password
from livefit.db.session import get_db
from livefit.models.user import User, UserRole
from livefit.schemas.user import LoginRequest, ProfileUpdate, SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter()

PASSWORD_POLICY = "密碼不符合規則，需要包含英文數字大小寫，最短8個字，最長16個字"


def _check_password_policy(password: str) -> None:
    if not is_valid_password(password):
        logger.warning(PASSWORD_POLICY)
        raise FieldValidationError(PASSWORD_POLICY)


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    db: Session = Depends(get_db),  # noqa: B008
) -> JSONResponse:
    _check_password_policy(payload.password)

    existing = db.query(User).filter(User.email == payload.email).first()
    if existing:
        logger.warning(f"Signup rejected, email already used: {payload.email}")
        raise ConflictError("Email 已被使用")

    user = User(
        name=payload.name,
        email=payload.email,
        role=UserRole.USER,
        password=get_password_hash(payload.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User created: {user.id}")

    return send_success(
        status.HTTP_201_CREATED, {"user": {"id": user.id, "name": user.name}}
    )


@router.post("/login", status_code=status.HTTP_201_CREATED)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> JSONResponse:
    user = db.query(User).filter(User.email == payload.email).first()
    if not user:
        logger.warning(f"Login rejected, unknown email: {payload.email}")
        raise NotFoundError("使用者不存在")

    _check_password_policy(payload.password)

    if not verify_password(payload.password, user.password):
        logger.warning(f"Login rejected, wrong password for user {user.id}")
        raise FieldValidationError("密碼輸入錯誤")

    token = create_access_token(
        user.id,
        settings.jwt_secret_key,
        settings.jwt_algorithm,
        timedelta(days=settings.jwt_expires_day),
    )
    return send_success(
        status.HTTP_201_CREATED, {"token": token, "user": {"name": user.name}}
    )


@router.get("/profile")
def get_profile(current_user: User = Depends(deps.get_current_user)) -> JSONResponse:  # noqa: B008
    return send_success(
        status.HTTP_200_OK, {"name": current_user.name, "email": current_user.email}
    )


@router.put("/profile")
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),  # noqa: B008
    current_user: User = Depends(deps.get_current_user),  # noqa: B008
) -> JSONResponse:
    if current_user.name == payload.name:
        logger.warning(f"Profile unchanged for user {current_user.id}")
        raise FieldValidationError("使用者名稱未變更")

    # Guarded on the old name so a concurrent rename reports zero rows.
    affected = (
        db.query(User)
        .filter(User.id == current_user.id, User.name == current_user.name)
        .update({User.name: payload.name}, synchronize_session=False)
    )
    if affected == 0:
        db.rollback()
        logger.warning(f"Profile update matched no rows for user {current_user.id}")
        raise MutationFailure("更新使用者資料失敗")
    db.commit()
    db.refresh(current_user)

    return send_success(status.HTTP_200_OK, {"user": {"name": current_user.name}})
