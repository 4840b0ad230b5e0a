"""Core domain models.

Catalog records, calibration breakpoints, score bands and drawn candidates.
Pydantic is used for validation and serialisation at every data boundary;
all models are frozen so the catalog and calibration table can be shared
freely between concurrent searches.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

CardType = Literal["hero", "villain", "environment"]

PackId = Literal[
    "baseset",
    "miniexpansion",
    "rookcity",
    "infernalrelics",
    "shatteredtimelines",
    "vengeance",
    "promos",
]

# Display order matches the web form.
PACK_TITLES: dict[str, str] = {
    "baseset": "Base Set",
    "miniexpansion": "Mini-Expansion",
    "rookcity": "Rook City",
    "infernalrelics": "Infernal Relics",
    "shatteredtimelines": "Shattered Timelines",
    "vengeance": "Vengeance",
    "promos": "Promos",
}


class CharacterRecord(BaseModel):
    """A hero, villain or environment with its difficulty contribution."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: CardType
    pack: PackId = "baseset"
    points: int
    base: str  # name of the original card; variants share it
    advanced: int = 0  # villain advanced-mode stats, carried but never scored
    adv_count: int = 0
    promo: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_base(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("base"):
            data = {**data, "base": data.get("name")}
        return data


class CalibrationBreakpoint(BaseModel):
    """Expected loss percentage for a given difficulty total."""

    model_config = ConfigDict(frozen=True)

    score: int
    loss_pct: int


class ScoreBand(BaseModel):
    """Inclusive score range for a target loss percentage.

    (0, 0) is the degenerate band returned when no breakpoint matches.
    """

    model_config = ConfigDict(frozen=True)

    min_score: int = 0
    max_score: int = 0

    def contains(self, score: int, tolerance: int) -> bool:
        return self.min_score - tolerance <= score <= self.max_score + tolerance


class Candidate(BaseModel):
    """One drawn setup: heroes, a villain and an environment."""

    model_config = ConfigDict(frozen=True)

    heroes: tuple[CharacterRecord, ...] = Field(min_length=1)
    villain: CharacterRecord
    environment: CharacterRecord
    offset: int = 0  # per-player-count base offset

    @model_validator(mode="after")
    def _distinct_bases(self) -> Candidate:
        bases = [h.base for h in self.heroes]
        if len(set(bases)) != len(bases):
            raise ValueError(f"heroes share a base identity: {bases}")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hero_points(self) -> int:
        return sum(h.points for h in self.heroes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        return self.offset + self.hero_points + self.villain.points + self.environment.points
