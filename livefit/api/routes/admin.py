import logging
import uuid

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from livefit.api import deps
from livefit.core.errors import (
    ConflictError,
    FieldValidationError,
    MutationFailure,
    NotFoundError,
)
from livefit.core.responses import send_success
from livefit.core.validation import is_valid_uuid
from livefit.db.session import get_db
from livefit.models.coach import Coach
from livefit.models.course import Course
from livefit.models.skill import Skill
from livefit.models.user import User, UserRole
from livefit.schemas.coach import CoachCreate, CoachPublic
from livefit.schemas.course import CourseCreate, CoursePublic, CourseUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

USER_NOT_FOUND = "使用者不存在"
SKILL_NOT_FOUND = "技能不存在"


def _parse_id(raw_id: str) -> uuid.UUID:
    if not is_valid_uuid(raw_id):
        logger.warning(f"Invalid id in path: {raw_id}")
        raise FieldValidationError()
    return uuid.UUID(raw_id)


def _get_user_or_400(db: Session, user_id: uuid.UUID) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.warning(f"{USER_NOT_FOUND}: {user_id}")
        raise NotFoundError(USER_NOT_FOUND)
    return user


def _get_skill_or_400(db: Session, skill_id: str) -> Skill:
    skill = db.query(Skill).filter(Skill.id == uuid.UUID(skill_id)).first()
    if not skill:
        logger.warning(f"{SKILL_NOT_FOUND}: {skill_id}")
        raise NotFoundError(SKILL_NOT_FOUND)
    return skill


@router.post("/courses", status_code=status.HTTP_201_CREATED)
def create_course(
    payload: CourseCreate,
    db: Session = Depends(get_db),  # noqa: B008
    current_user: User = Depends(deps.require_coach),  # noqa: B008
) -> JSONResponse:
    owner = _get_user_or_400(db, uuid.UUID(payload.user_id))
    if owner.role != UserRole.COACH:
        logger.warning(f"User {owner.id} is not a coach, course rejected")
        raise NotFoundError("使用者尚未成為教練")
    skill = _get_skill_or_400(db, payload.skill_id)

    data = payload.model_dump()
    data["user_id"] = owner.id
    data["skill_id"] = skill.id
    course = Course(**data)
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info(f"Course created: {course.id} by {current_user.id}")

    return send_success(
        status.HTTP_201_CREATED, {"course": CoursePublic.model_validate(course)}
    )


@router.put("/courses/{course_id}")
def edit_course(
    course_id: str,
    payload: CourseUpdate,
    db: Session = Depends(get_db),  # noqa: B008
    current_user: User = Depends(deps.require_coach),  # noqa: B008
) -> JSONResponse:
    course_uuid = _parse_id(course_id)

    existing = db.query(Course).filter(Course.id == course_uuid).first()
    if not existing:
        logger.warning(f"Course not found: {course_uuid}")
        raise NotFoundError("課程不存在")
    skill = _get_skill_or_400(db, payload.skill_id)

    data = payload.model_dump()
    data["skill_id"] = skill.id
    affected = (
        db.query(Course)
        .filter(Course.id == course_uuid)
        .update(data, synchronize_session=False)
    )
    if affected == 0:
        db.rollback()
        logger.warning(f"Course update matched no rows: {course_uuid}")
        raise MutationFailure("更新課程失敗")
    db.commit()
    db.refresh(existing)
    logger.info(f"Course edited: {course_uuid} by {current_user.id}")

    return send_success(
        status.HTTP_200_OK, {"course": CoursePublic.model_validate(existing)}
    )


@router.post("/{user_id}", status_code=status.HTTP_201_CREATED)
def change_role(
    user_id: str,
    payload: CoachCreate,
    db: Session = Depends(get_db),  # noqa: B008
    current_user: User = Depends(deps.get_current_user),  # noqa: B008
) -> JSONResponse:
    """Promote a user to COACH and create their coach profile."""
    target_id = _parse_id(user_id)

    user = _get_user_or_400(db, target_id)
    if user.role == UserRole.COACH:
        logger.warning(f"User {user.id} is already a coach")
        raise ConflictError("使用者已經是教練")

    affected = (
        db.query(User)
        .filter(User.id == target_id, User.role == UserRole.USER)
        .update({User.role: UserRole.COACH}, synchronize_session=False)
    )
    if affected == 0:
        db.rollback()
        logger.warning(f"Role update matched no rows for user {target_id}")
        raise MutationFailure("更新使用者失敗")

    coach = Coach(user_id=target_id, **payload.model_dump())
    db.add(coach)
    db.commit()
    db.refresh(coach)
    db.refresh(user)
    logger.info(f"User {target_id} promoted to coach {coach.id} by {current_user.id}")

    return send_success(
        status.HTTP_201_CREATED,
        {
            "user": {"name": user.name, "role": user.role.value},
            "coach": CoachPublic.model_validate(coach),
        },
    )
