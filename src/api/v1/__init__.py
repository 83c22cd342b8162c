"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.books import router as books_router
from api.v1.routes.events import router as events_router
from api.v1.routes.me import router as me_router
from api.v1.routes.music import router as music_router
from api.v1.routes.users import router as users_router

router = APIRouter()
router.include_router(me_router)
router.include_router(events_router)
router.include_router(books_router)
router.include_router(music_router)
router.include_router(users_router)
