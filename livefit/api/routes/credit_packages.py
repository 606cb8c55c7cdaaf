import logging
import uuid

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from livefit.core.errors import ConflictError, NotFoundError
from livefit.core.responses import send_success
from livefit.core.validation import is_valid_uuid
from livefit.db.session import get_db
from livefit.models.credit_package import CreditPackage
from livefit.schemas.catalog import CreditPackageCreate, CreditPackagePublic

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def list_credit_packages(db: Session = Depends(get_db)) -> JSONResponse:  # noqa: B008
    packages = db.query(CreditPackage).order_by(CreditPackage.created_at).all()
    return send_success(
        status.HTTP_200_OK,
        [CreditPackagePublic.model_validate(package) for package in packages],
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_credit_package(
    payload: CreditPackageCreate,
    db: Session = Depends(get_db),  # noqa: B008
) -> JSONResponse:
    if db.query(CreditPackage).filter(CreditPackage.name == payload.name).first():
        logger.warning(f"Credit package name already exists: {payload.name}")
        raise ConflictError("資料重複")

    package = CreditPackage(**payload.model_dump())
    db.add(package)
    db.commit()
    db.refresh(package)
    logger.info(f"Credit package created: {package.id}")
    return send_success(
        status.HTTP_201_CREATED, CreditPackagePublic.model_validate(package)
    )


@router.delete("/{credit_package_id}")
def delete_credit_package(
    credit_package_id: str,
    db: Session = Depends(get_db),  # noqa: B008
) -> JSONResponse:
    package = None
    if is_valid_uuid(credit_package_id):
        package = (
            db.query(CreditPackage)
            .filter(CreditPackage.id == uuid.UUID(credit_package_id))
            .first()
        )
    if not package:
        logger.warning(f"Credit package not found for delete: {credit_package_id}")
        raise NotFoundError("ID錯誤")

    db.delete(package)
    db.commit()
    logger.info(f"Credit package deleted: {credit_package_id}")
    return send_success(status.HTTP_200_OK, None)
