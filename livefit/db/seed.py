from decimal import Decimal

from sqlalchemy.orm import Session

from livefit.core.security import get_password_hash
from livefit.models.coach import Coach
from livefit.models.credit_package import CreditPackage
from livefit.models.skill import Skill
from livefit.models.user import User, UserRole

DEMO_PASSWORD = "Livefit123"

SKILLS = ["重訓", "瑜伽", "有氧運動", "皮拉提斯"]

CREDIT_PACKAGES = [
    ("7 堂組合包方案", 7, Decimal("1400")),
    ("14 堂組合包方案", 14, Decimal("2520")),
    ("21 堂組合包方案", 21, Decimal("4800")),
]


def seed_demo_data(db: Session) -> None:
    existing = db.query(User).filter(User.email == "coach@livefit.dev").first()
    if existing:
        return

    db.add_all(Skill(name=name) for name in SKILLS)
    db.add_all(
        CreditPackage(name=name, credit_amount=amount, price=price)
        for name, amount, price in CREDIT_PACKAGES
    )

    member = User(
        name="Demo Member",
        email="member@livefit.dev",
        password=get_password_hash(DEMO_PASSWORD),
        role=UserRole.USER,
    )
    coach_user = User(
        name="Demo Coach",
        email="coach@livefit.dev",
        password=get_password_hash(DEMO_PASSWORD),
        role=UserRole.COACH,
    )
    db.add_all([member, coach_user])
    db.flush()

    db.add(
        Coach(
            user_id=coach_user.id,
            experience_years=5,
            description="Strength and conditioning coach.",
            profile_image_url="https://example.com/coach.png",
        )
    )
    db.commit()

