"""Reference table entry models.

Every entry is a frozen pydantic model so the static tables built from them
cannot be altered while an analysis is running.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ecolojia.schemas.enums import Credibility, IrritationLevel, Level, ToxicityLevel


class ReferenceEntry(BaseModel):
    """Base class for reference table rows."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Normalized INCI name")


class HazardEntry(ReferenceEntry):
    """Cosmetic hazard (endocrine disruptor or sensitive-skin irritant)."""

    risk_level: Level
    effect: str
    source: str


class AllergenEntry(ReferenceEntry):
    """Cosmetic allergen with its prevalence among sensitized people."""

    prevalence: Level
    source: str


class BenefitEntry(ReferenceEntry):
    """Beneficial cosmetic active."""

    benefit: str
    evidence_level: Level


class DetergentHazardEntry(ReferenceEntry):
    """Detergent ingredient with a toxicity, irritation or environmental concern."""

    toxicity: ToxicityLevel | None = None
    irritation: IrritationLevel = IrritationLevel.NONE
    biodegradable: bool | None = None
    environmental: str | None = None
    carcinogen: str | None = None
    allergen: bool = False
    corrosive: bool = False
    penalty: int = Field(..., ge=0, description="Points removed from ecotoxicity")
    source: str


class EcoIngredientEntry(ReferenceEntry):
    """Detergent ingredient rewarded for its environmental profile."""

    biodegradable: bool = False
    natural: bool = False
    plant_based: bool = False
    gentle: bool = False
    bonus: int = Field(..., ge=0)
    source: str


class CertificationEntry(ReferenceEntry):
    """Eco or organic certification label."""

    bonus: int = Field(..., ge=0)
    credibility: Credibility


class _Named(Protocol):
    name: str


EntryT = TypeVar("EntryT", bound=_Named)


def build_table(entries: Iterable[EntryT]) -> Mapping[str, EntryT]:
    """Index entries by name into a read-only mapping.

    Raises:
        ValueError: If two entries share the same name.
    """
    table: dict[str, EntryT] = {}
    for entry in entries:
        if entry.name in table:
            msg = f"Duplicate reference entry: {entry.name}"
            raise ValueError(msg)
        table[entry.name] = entry
    return MappingProxyType(table)
