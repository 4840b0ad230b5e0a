"""SetupEngine: the injected, immutable configuration the search runs on.

Built once (normally by data.load_engine) and shared across requests.
Nothing here mutates after __init__; each find_setup call owns its own
random generator and loop state.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from . import search
from .calibration import CalibrationTable
from .catalog import Catalog, EligiblePool
from .errors import SearchExhausted, StructuralError
from .formatting import format_setup
from .models import Candidate
from .sampler import DEFAULT_MAX_REDRAWS, Rng

logger = logging.getLogger(__name__)


class SetupEngine:
    """Catalog + calibration table + per-player-count base offsets.

    Args:
        catalog:      All known records.
        table:        Calibration breakpoints.
        offsets:      Base difficulty offset keyed by player count.
        max_trials:   Trial cap per search.
        max_redraws:  Cap on duplicate-base redraws inside one trial.
    """

    def __init__(
        self,
        catalog: Catalog,
        table: CalibrationTable,
        offsets: Mapping[int, int],
        max_trials: int = search.DEFAULT_MAX_TRIALS,
        max_redraws: int = DEFAULT_MAX_REDRAWS,
    ) -> None:
        self._catalog = catalog
        self._table = table
        self._offsets = MappingProxyType(dict(offsets))
        self._max_trials = max_trials
        self._max_redraws = max_redraws

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def table(self) -> CalibrationTable:
        return self._table

    @property
    def offsets(self) -> Mapping[int, int]:
        return self._offsets

    @property
    def max_trials(self) -> int:
        return self._max_trials

    def offset_for(self, player_count: int) -> int:
        try:
            return self._offsets[player_count]
        except KeyError:
            raise StructuralError(
                f"No difficulty data for {player_count} players."
            ) from None

    def eligible(self, packs: Iterable[str]) -> EligiblePool:
        return self._catalog.eligible(packs)

    def find_setup(
        self,
        player_count: int,
        loss_pct: int,
        tolerance: int,
        packs: Iterable[str],
        rng: Rng | None = None,
    ) -> tuple[Candidate, int]:
        """Find a setup for the selected packs. Returns (candidate, trials)."""
        packs = sorted(set(packs))
        logger.info("pc: %d, lp: %d, rg: %d, packs: %s", player_count, loss_pct, tolerance, packs)
        offset = self.offset_for(player_count)
        pool = self.eligible(packs)
        try:
            candidate, trials = search.find_setup(
                pool=pool,
                table=self._table,
                player_count=player_count,
                loss_pct=loss_pct,
                tolerance=tolerance,
                offset=offset,
                rng=rng if rng is not None else random.Random(),
                max_trials=self._max_trials,
                max_redraws=self._max_redraws,
            )
        except SearchExhausted as e:
            logger.warning("search exhausted after %d iterations", e.trials)
            raise
        logger.info("iterations: %d, setup: %s", trials, format_setup(candidate))
        return candidate, trials
