import logging
import uuid

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from livefit.core.errors import ConflictError, NotFoundError
from livefit.core.responses import send_success
from livefit.core.validation import is_valid_uuid
from livefit.db.session import get_db
from livefit.models.course import Course
from livefit.models.skill import Skill
from livefit.schemas.catalog import SkillCreate, SkillPublic

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def list_skills(db: Session = Depends(get_db)) -> JSONResponse:  # noqa: B008
    skills = db.query(Skill).order_by(Skill.created_at).all()
    return send_success(
        status.HTTP_200_OK, [SkillPublic.model_validate(skill) for skill in skills]
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_skill(
    payload: SkillCreate,
    db: Session = Depends(get_db),  # noqa: B008
) -> JSONResponse:
    if db.query(Skill).filter(Skill.name == payload.name).first():
        logger.warning(f"Skill name already exists: {payload.name}")
        raise ConflictError("資料重複")

    skill = Skill(name=payload.name)
    db.add(skill)
    db.commit()
    db.refresh(skill)
    logger.info(f"Skill created: {skill.id}")
    return send_success(status.HTTP_201_CREATED, SkillPublic.model_validate(skill))


@router.delete("/{skill_id}")
def delete_skill(
    skill_id: str,
    db: Session = Depends(get_db),  # noqa: B008
) -> JSONResponse:
    skill = None
    if is_valid_uuid(skill_id):
        skill = db.query(Skill).filter(Skill.id == uuid.UUID(skill_id)).first()
    if not skill:
        logger.warning(f"Skill not found for delete: {skill_id}")
        raise NotFoundError("ID錯誤")
    if db.query(Course).filter(Course.skill_id == skill.id).first():
        logger.warning(f"Skill {skill_id} still referenced by courses")
        raise ConflictError("技能使用中")

    db.delete(skill)
    db.commit()
    logger.info(f"Skill deleted: {skill_id}")
    return send_success(status.HTTP_200_OK, None)
