"""Static dataset loading: difficulty points, calibration scale, packs.

The dataset is a single JSON document (data/sentinels.json):

    difficulty.hero / villain / env   {name, points, base?, advanced?, advcount?, promo?}
    difficulty.nump                   base offsets for 3, 4 and 5 players, in order
    scale                             {total, losspct}, descending by total
    packs                             pack id -> card names; unlisted cards are base set

Original data at http://x.gray.org/sentinels.json, with some names
normalized (e.g. "Silver Gulch, 1883").
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .calibration import CalibrationTable
from .catalog import Catalog
from .config import get_config
from .engine import SetupEngine
from .models import CalibrationBreakpoint, CardType, CharacterRecord, PackId

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).parent / "data" / "sentinels.json"

# difficulty.nump[0] is the offset for this many players
FIRST_PLAYER_COUNT = 3


class DifficultyEntry(BaseModel):
    name: str
    points: int
    base: str = ""
    advanced: int = 0
    advcount: int = 0
    promo: bool = False


class DifficultyData(BaseModel):
    hero: list[DifficultyEntry]
    villain: list[DifficultyEntry]
    env: list[DifficultyEntry]
    nump: list[DifficultyEntry]


class ScaleEntry(BaseModel):
    total: int
    losspct: int


class SentinelsData(BaseModel):
    difficulty: DifficultyData
    scale: list[ScaleEntry]
    packs: dict[PackId, list[str]] = Field(default_factory=dict)


def load_dataset(path: Path | None = None) -> SentinelsData:
    """Read and validate the dataset file. Raises pydantic.ValidationError."""
    path = path or DEFAULT_DATA_FILE
    logger.debug("loading dataset from %s", path)
    return SentinelsData.model_validate_json(path.read_text(encoding="utf-8"))


def build_catalog(data: SentinelsData) -> Catalog:
    """Turn difficulty entries into records and assign each its pack."""
    groups: list[tuple[CardType, list[DifficultyEntry]]] = [
        ("hero", data.difficulty.hero),
        ("villain", data.difficulty.villain),
        ("environment", data.difficulty.env),
    ]
    known = {entry.name for _, entries in groups for entry in entries}

    pack_of: dict[str, str] = {}
    for pack, names in data.packs.items():
        for name in names:
            if name in known:
                pack_of[name] = pack
            else:
                logger.warning("Couldn't find card %s while setting packs.", name)

    records = []
    for card_type, entries in groups:
        for entry in entries:
            records.append(CharacterRecord(
                name=entry.name,
                type=card_type,
                pack=pack_of.get(entry.name, "baseset"),
                points=entry.points,
                base=entry.base,
                advanced=entry.advanced,
                adv_count=entry.advcount,
                promo=entry.promo,
            ))
    return Catalog(records)


def build_table(data: SentinelsData) -> CalibrationTable:
    return CalibrationTable(
        CalibrationBreakpoint(score=s.total, loss_pct=s.losspct) for s in data.scale
    )


def build_offsets(data: SentinelsData) -> dict[int, int]:
    """Map player count -> base offset (nump[0] is FIRST_PLAYER_COUNT players)."""
    return {
        FIRST_PLAYER_COUNT + i: entry.points
        for i, entry in enumerate(data.difficulty.nump)
    }


def load_engine(
    path: Path | None = None, config: dict[str, Any] | None = None
) -> SetupEngine:
    """Build a SetupEngine from the dataset file and optional config."""
    config = config or get_config()
    data = load_dataset(path)
    engine = SetupEngine(
        catalog=build_catalog(data),
        table=build_table(data),
        offsets=build_offsets(data),
        max_trials=config["max_trials"],
        max_redraws=config["max_redraws"],
    )
    logger.info(
        "loaded %d cards, %d breakpoints", len(engine.catalog), len(engine.table)
    )
    return engine
