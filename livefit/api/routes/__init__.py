from fastapi import APIRouter

from livefit.api.routes import (
    admin,
    coaches,
    credit_packages,
    skills,
    users,
)


api_router = APIRouter()
api_router.include_router(credit_packages.router, prefix="/credit-package", tags=["credit-package"])
# Must precede /coaches so "skill" is not read as a coach id.
api_router.include_router(skills.router, prefix="/coaches/skill", tags=["skills"])
api_router.include_router(coaches.router, prefix="/coaches", tags=["coaches"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(admin.router, prefix="/admin/coaches", tags=["admin"])
