"""FastAPI endpoints.

JSON API under /api: health, settings, packs, cards, setups.
HTML pages at /: the setup form and its result page.
"""

from fastapi import APIRouter

from .catalog import router as catalog_router
from .pages import router as pages_router  # noqa: F401
from .settings import router as settings_router
from .setups import router as setups_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(catalog_router)
router.include_router(setups_router)
