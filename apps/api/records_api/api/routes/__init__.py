"""
API routes aggregation.

Role checks happen in AccessGateMiddleware against ROUTE_POLICIES, so the
routers here carry no auth dependencies beyond reading the caller's email.
"""

from fastapi import APIRouter

from .auth import router as auth_router
from .student import router as student_router
from .teacher import router as teacher_router
from .admin import router as admin_router

router = APIRouter()

router.include_router(auth_router, tags=["auth"])
router.include_router(student_router, prefix="/student", tags=["student"])
router.include_router(teacher_router, prefix="/teacher", tags=["teacher"])
router.include_router(admin_router, prefix="/admin", tags=["admin"])
