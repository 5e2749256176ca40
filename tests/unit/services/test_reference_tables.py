"""Unit tests for the static reference tables.

Tests cover:
- Read-only tables and frozen entries
- Key normalization and citations
- Duplicate detection
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ecolojia.schemas.enums import Credibility, Level
from ecolojia.services.reference import (
    ALLERGENS,
    BENEFICIAL_ACTIVES,
    BENEFIT_CATEGORIES,
    DETERGENT_CERTIFICATIONS,
    DETERGENT_HAZARDS,
    ECO_INGREDIENTS,
    ENDOCRINE_DISRUPTORS,
    SENSITIVE_SKIN_IRRITANTS,
    AllergenEntry,
    HazardEntry,
)
from ecolojia.services.reference.models import build_table


pytestmark = pytest.mark.unit


ALL_TABLES = [
    ENDOCRINE_DISRUPTORS,
    SENSITIVE_SKIN_IRRITANTS,
    ALLERGENS,
    BENEFICIAL_ACTIVES,
    DETERGENT_HAZARDS,
    ECO_INGREDIENTS,
    DETERGENT_CERTIFICATIONS,
]


class TestReferenceTables:
    """Tests for the shipped tables."""

    @pytest.mark.parametrize("table", ALL_TABLES)
    def test_keys_are_normalized(self, table: dict) -> None:
        """Should key every entry by its uppercase, trimmed name."""
        for key, entry in table.items():
            assert key == entry.name
            assert key == key.strip().upper()

    @pytest.mark.parametrize("table", ALL_TABLES)
    def test_tables_are_read_only(self, table: dict) -> None:
        """Should refuse insertion at runtime."""
        with pytest.raises(TypeError):
            table["NEW"] = next(iter(table.values()))

    def test_entries_are_frozen(self) -> None:
        """Should refuse mutation of an entry."""
        entry = ENDOCRINE_DISRUPTORS["BUTYLPARABEN"]

        with pytest.raises(ValidationError):
            entry.risk_level = Level.LOW  # type: ignore[misc]

    def test_hazards_carry_sources(self) -> None:
        """Should cite a source for every hazard and allergen."""
        for table in (
            ENDOCRINE_DISRUPTORS,
            SENSITIVE_SKIN_IRRITANTS,
            ALLERGENS,
            DETERGENT_HAZARDS,
            ECO_INGREDIENTS,
        ):
            assert all(entry.source for entry in table.values())

    def test_known_values(self) -> None:
        """Should expose the documented reference values."""
        assert ENDOCRINE_DISRUPTORS["BUTYLPARABEN"].risk_level == Level.HIGH
        assert ENDOCRINE_DISRUPTORS["PHENOXYETHANOL"].risk_level == Level.LOW
        assert DETERGENT_HAZARDS["DICHLOROMETHANE"].penalty == 50
        assert DETERGENT_CERTIFICATIONS["EU ECOLABEL"].bonus == 20
        assert DETERGENT_CERTIFICATIONS["ECOGARANTIE"].credibility == (
            Credibility.MEDIUM
        )

    def test_benefit_categories_reference_known_actives(self) -> None:
        """Should only group actives present in the benefit table."""
        for names in BENEFIT_CATEGORIES.values():
            assert names <= set(BENEFICIAL_ACTIVES)


class TestBuildTable:
    """Tests for build_table."""

    def test_indexes_by_name(self) -> None:
        """Should index entries by name."""
        table = build_table(
            [AllergenEntry(name="EUGENOL", prevalence=Level.HIGH, source="x")]
        )

        assert list(table) == ["EUGENOL"]

    def test_rejects_duplicates(self) -> None:
        """Should raise on a duplicated name."""
        entry = HazardEntry(name="BHT", risk_level=Level.MEDIUM, effect="e", source="s")

        with pytest.raises(ValueError, match="Duplicate reference entry: BHT"):
            build_table([entry, entry])

    def test_rejects_empty_name(self) -> None:
        """Should validate entry names."""
        with pytest.raises(ValidationError):
            AllergenEntry(name="", prevalence=Level.LOW, source="x")
