"""Search controller: bounded rejection sampling over candidates.

The band is computed once per search; each trial is a full independent
draw-and-score. The first candidate inside [min - tolerance, max + tolerance]
wins. StructuralError from the sampler propagates before any trial counts.
"""

from __future__ import annotations

import logging

from .calibration import CalibrationTable
from .catalog import EligiblePool
from .errors import SearchExhausted
from .formatting import format_setup
from .models import Candidate
from .sampler import DEFAULT_MAX_REDRAWS, Rng, check_pool, draw

logger = logging.getLogger(__name__)

DEFAULT_MAX_TRIALS = 100_000


def find_setup(
    *,
    pool: EligiblePool,
    table: CalibrationTable,
    player_count: int,
    loss_pct: int,
    tolerance: int,
    offset: int,
    rng: Rng,
    max_trials: int = DEFAULT_MAX_TRIALS,
    max_redraws: int = DEFAULT_MAX_REDRAWS,
) -> tuple[Candidate, int]:
    """Return (candidate, 1-based trial index) or raise SearchExhausted."""
    check_pool(pool, player_count)
    band = table.band_for(loss_pct)
    logger.debug(
        "band for lp=%d: [%d, %d] rg=%d",
        loss_pct, band.min_score, band.max_score, tolerance,
    )

    for trial in range(1, max_trials + 1):
        candidate = draw(pool, player_count, offset, rng, max_redraws)
        if band.contains(candidate.score, tolerance):
            logger.debug("accepted trial %d: %s", trial, format_setup(candidate))
            return candidate, trial

    raise SearchExhausted(max_trials)
