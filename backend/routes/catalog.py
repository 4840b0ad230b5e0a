"""Pack and card listing endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from sentinels_setup import SetupEngine
from sentinels_setup.catalog import EligiblePool
from sentinels_setup.models import PACK_TITLES, PackId

from .deps import get_app_config, get_engine
from .models import PackInfo

router = APIRouter()


@router.get("/packs", response_model=list[PackInfo])
async def list_packs():
    """List the selectable card packs in display order."""
    return [PackInfo(id=pack, title=title) for pack, title in PACK_TITLES.items()]


@router.get("/cards", response_model=EligiblePool)
async def list_cards(
    packs: Annotated[list[PackId] | None, Query()] = None,
    engine: SetupEngine = Depends(get_engine),
    config: dict[str, Any] = Depends(get_app_config),
):
    """List heroes, villains and environments in the selected packs."""
    return engine.eligible(packs or config["default_packs"])
