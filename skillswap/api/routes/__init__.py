from fastapi import APIRouter

from skillswap.api.routes import admin, auth, messages, ratings, skills, swap_requests, users

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["authentication"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(skills.router, prefix="/skills", tags=["skills"])
router.include_router(swap_requests.router, prefix="/swap-requests", tags=["swap_requests"])
router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(messages.announcements_router, prefix="/announcements", tags=["messages"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
