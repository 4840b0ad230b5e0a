"""Card catalog: immutable collection of records filtered by pack."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from .models import CharacterRecord


class EligiblePool(BaseModel):
    """Records from the selected packs, in catalog order, split by type."""

    model_config = ConfigDict(frozen=True)

    heroes: tuple[CharacterRecord, ...] = ()
    villains: tuple[CharacterRecord, ...] = ()
    environments: tuple[CharacterRecord, ...] = ()


class Catalog:
    """All known records. Names are unique; order is preserved."""

    def __init__(self, records: Iterable[CharacterRecord]) -> None:
        self._records = tuple(records)
        self._by_name: dict[str, CharacterRecord] = {}
        for record in self._records:
            if record.name in self._by_name:
                raise ValueError(f"Duplicate card name: {record.name}")
            self._by_name[record.name] = record

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[CharacterRecord, ...]:
        return self._records

    def get(self, name: str) -> CharacterRecord | None:
        return self._by_name.get(name)

    def eligible(self, packs: Iterable[str]) -> EligiblePool:
        """Build the pool of records whose pack is in `packs`."""
        selected = set(packs)
        by_type: dict[str, list[CharacterRecord]] = {
            "hero": [], "villain": [], "environment": [],
        }
        for record in self._records:
            if record.pack in selected:
                by_type[record.type].append(record)
        return EligiblePool(
            heroes=tuple(by_type["hero"]),
            villains=tuple(by_type["villain"]),
            environments=tuple(by_type["environment"]),
        )
