"""HTML form and result pages."""

import logging
import random
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from backend.pages import render_page
from sentinels_setup import SearchExhausted, SetupEngine, StructuralError
from sentinels_setup.models import PACK_TITLES, PackId

from .deps import get_app_config, get_engine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def form_page(config: dict[str, Any] = Depends(get_app_config)):
    """Setup form: player count, loss percentage and card sets."""
    context = {
        "title": "Sentinels Setup",
        "loss_pct": config["default_loss_pct"],
        "player_counts": [
            {"value": n, "checked": n == config["default_player_count"]}
            for n in (3, 4, 5)
        ],
        "packs": [
            {"id": pack, "title": title, "checked": pack in config["default_packs"]}
            for pack, title in PACK_TITLES.items()
        ],
    }
    return render_page("form", context)


@router.get("/result", response_class=HTMLResponse)
async def result_page(
    pc: Annotated[int, Query(ge=3, le=5)],
    lp: Annotated[int, Query(ge=1, le=99)],
    packs: Annotated[list[PackId] | None, Query()] = None,
    engine: SetupEngine = Depends(get_engine),
    config: dict[str, Any] = Depends(get_app_config),
):
    """Run a search with the configured web tolerance and show the outcome."""
    context: dict[str, Any] = {"title": "Sentinels Setup", "pc": pc, "lp": lp}
    if not packs:
        context["msg"] = "No card set selected."
        return render_page("result", context)

    context["nump"] = f"{pc} heroes"
    try:
        candidate, trials = await run_in_threadpool(
            engine.find_setup, pc, lp, config["web_tolerance"], packs, random.Random(),
        )
    except (StructuralError, SearchExhausted) as e:
        logger.info("no setup for pc=%d lp=%d: %s", pc, lp, e)
        context["msg"] = str(e)
        return render_page("result", context)

    context["setup"] = candidate.model_dump()
    context["iterations"] = trials
    return render_page("result", context)
