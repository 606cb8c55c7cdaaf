import logging
import uuid

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, joinedload

from livefit.core.errors import FieldValidationError, NotFoundError
from livefit.core.responses import send_success
from livefit.core.validation import is_not_valid_integer, is_undefined, is_valid_uuid
from livefit.db.session import get_db
from livefit.models.coach import Coach
from livefit.schemas.coach import CoachListItem, CoachPublic

logger = logging.getLogger(__name__)

router = APIRouter()


MAX_PER_PAGE = 100
# OFFSET is bound as a signed 64-bit integer by every supported driver.
MAX_OFFSET = 2**63 - 1


def _is_page_number(value: int | None) -> bool:
    return not (is_undefined(value) or is_not_valid_integer(value)) and value >= 1


def _is_valid_page(per: int | None, page: int | None) -> bool:
    if not (_is_page_number(per) and _is_page_number(page)):
        return False
    return per <= MAX_PER_PAGE and (page - 1) * per <= MAX_OFFSET


@router.get("")
def list_coaches(
    per: int | None = None,
    page: int | None = None,
    db: Session = Depends(get_db),  # noqa: B008
) -> JSONResponse:
    """Page through coaches, newest first.

    ``per`` and ``page`` are 1-based; ``per`` is capped at ``MAX_PER_PAGE``.
    """
    if not _is_valid_page(per, page):
        logger.warning(f"Invalid pagination per={per} page={page}")
        raise FieldValidationError()

    coaches = (
        db.query(Coach)
        .options(joinedload(Coach.user))
        .order_by(Coach.created_at.desc(), Coach.id.desc())
        .offset((page - 1) * per)
        .limit(per)
        .all()
    )
    result = [CoachListItem(id=coach.id, name=coach.user.name) for coach in coaches]
    return send_success(status.HTTP_200_OK, result)


@router.get("/{coach_id}")
def get_coach_detail(
    coach_id: str,
    db: Session = Depends(get_db),  # noqa: B008
) -> JSONResponse:
    if not is_valid_uuid(coach_id):
        logger.warning(f"Invalid coach id: {coach_id}")
        raise FieldValidationError()

    coach = (
        db.query(Coach)
        .options(joinedload(Coach.user))
        .filter(Coach.id == uuid.UUID(coach_id))
        .first()
    )
    if not coach:
        logger.warning(f"Coach not found: {coach_id}")
        raise NotFoundError("找不到該教練")

    return send_success(
        status.HTTP_200_OK,
        {
            "user": {"name": coach.user.name, "role": coach.user.role.value},
            "coach": CoachPublic.model_validate(coach),
        },
    )
