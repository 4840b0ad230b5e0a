"""Difficulty calibration: maps a target loss percentage to a score band.

The table is the play-data scale: breakpoints sorted by descending score.
Walking it top to bottom the loss percentage never goes up, but it may
plateau across several scores.

band_for() is a contiguous exact-match scan, not an interpolation:

  1. Walk breakpoints in stored order.
  2. Stop at the first breakpoint whose loss is below the target.
  3. Breakpoints above the target are skipped.
  4. The run whose loss equals the target gives (lowest, highest) score.

A target with no exactly matching breakpoint yields the (0, 0) band.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import CalibrationBreakpoint, ScoreBand


class CalibrationTable:
    def __init__(self, breakpoints: Iterable[CalibrationBreakpoint]) -> None:
        self._breakpoints = tuple(breakpoints)
        for prev, cur in zip(self._breakpoints, self._breakpoints[1:]):
            if cur.score > prev.score:
                raise ValueError(
                    f"Calibration breakpoints must be sorted by descending score "
                    f"({prev.score} before {cur.score})"
                )

    def __len__(self) -> int:
        return len(self._breakpoints)

    @property
    def breakpoints(self) -> tuple[CalibrationBreakpoint, ...]:
        return self._breakpoints

    def band_for(self, loss_pct: int) -> ScoreBand:
        """Return the score band for an exact loss percentage, or (0, 0)."""
        min_score = max_score = 0
        matched = False
        for bp in self._breakpoints:
            if bp.loss_pct <= loss_pct - 1:
                break
            if bp.loss_pct <= loss_pct:
                if not matched:
                    max_score = bp.score
                    matched = True
                min_score = bp.score
        return ScoreBand(min_score=min_score, max_score=max_score)
