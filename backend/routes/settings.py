"""Health check and settings endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from .deps import get_app_config

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings(config: dict[str, Any] = Depends(get_app_config)):
    """Get the effective app settings (defaults merged with the config file)."""
    return config
