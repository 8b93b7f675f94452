"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.events import router as events_router
from api.v1.routes.jobs import router as jobs_router
from api.v1.routes.mentorship import router as mentorship_router
from api.v1.routes.messages import router as messages_router
from api.v1.routes.profiles import router as profiles_router

router = APIRouter()
router.include_router(profiles_router)
router.include_router(mentorship_router)
router.include_router(messages_router)
router.include_router(jobs_router)
router.include_router(events_router)
