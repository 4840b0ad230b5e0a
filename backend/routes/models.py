"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel, Field

from sentinels_setup.models import Candidate, PackId


class FindSetupBody(BaseModel):
    player_count: int = Field(3, ge=3, le=5)
    loss_pct: int = Field(50, ge=1, le=99)
    tolerance: int | None = Field(None, ge=0, le=100)  # None: configured web tolerance
    packs: list[PackId] = Field(min_length=1)
    seed: int | None = None


class SetupResponse(BaseModel):
    setup: Candidate
    iterations: int


class PackInfo(BaseModel):
    id: PackId
    title: str
