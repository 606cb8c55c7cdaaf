from livefit.models.user import User, UserRole
from livefit.models.coach import Coach
from livefit.models.skill import Skill
from livefit.models.course import Course
from livefit.models.credit_package import CreditPackage

__all__ = [
    "User",
    "UserRole",
    "Coach",
    "Skill",
    "Course",
    "CreditPackage",
]
