"""Setup search endpoint."""

import random
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from sentinels_setup import SearchExhausted, SetupEngine, StructuralError

from .deps import get_app_config, get_engine
from .models import FindSetupBody, SetupResponse

router = APIRouter()


@router.post("/setups", response_model=SetupResponse)
async def find_setup(
    body: FindSetupBody,
    engine: SetupEngine = Depends(get_engine),
    config: dict[str, Any] = Depends(get_app_config),
):
    """Find a random setup near the target loss percentage."""
    tolerance = body.tolerance if body.tolerance is not None else config["web_tolerance"]
    # One generator per request; the search itself runs off the event loop.
    rng = random.Random(body.seed)
    try:
        candidate, trials = await run_in_threadpool(
            engine.find_setup, body.player_count, body.loss_pct, tolerance, body.packs, rng,
        )
    except StructuralError as e:
        raise HTTPException(422, str(e))
    except SearchExhausted as e:
        raise HTTPException(404, str(e))
    return SetupResponse(setup=candidate, iterations=trials)
