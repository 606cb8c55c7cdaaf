import uuid
from decimal import Decimal

from pydantic import BaseModel

from livefit.schemas.fields import Count, RequiredStr


class SkillCreate(BaseModel):
    name: RequiredStr


class SkillPublic(BaseModel):
    id: uuid.UUID
    name: str

    class Config:
        from_attributes = True


class CreditPackageCreate(BaseModel):
    name: RequiredStr
    credit_amount: Count
    price: Count


class CreditPackagePublic(BaseModel):
    id: uuid.UUID
    name: str
    credit_amount: int
    price: Decimal

    class Config:
        from_attributes = True
