"""Versioned scoring policy: grade scale, bands, weights, thresholds and collateral rates"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from surety_gateway.domain.catalog import Section
from surety_gateway.domain.models import EmployerType


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(mapping)


@dataclass(frozen=True)
class ScoringPolicy:
    """
    Every number the engine decides with.

    Question weights are part of the policy rather than the question catalog, so the
    form can be changed without touching scoring and vice versa.

    Decision bands:
    - final score < 60:  rejected
    - 60 <= score < 78:  approved, tier 2 (collateral always required)
    - score >= 78:       approved, tier 1 (no collateral up to the threshold)
    """

    version: str = "2024.1"

    # Letter answer -> normalized score
    grade_scale: Mapping[str, float] = field(
        default_factory=lambda: _frozen({"A": 100.0, "B": 66.67, "C": 33.33})
    )

    # YoY growth bands (percent, inclusive lower bounds)
    financial_band_a: float = 15.0
    financial_band_b: float = 5.0

    section_weights: Mapping[Section, Mapping[str, int]] = field(
        default_factory=lambda: _frozen({
            Section.CHARACTER: _frozen({"q1": 7, "q2": 7, "q3": 7, "q4": 5, "q5": 5}),
            Section.CAPITAL: _frozen({"q1": 5, "q2": 5, "q3": 5, "q4": 5, "q5": 5, "q6": 5}),
            Section.CONDITION: _frozen({"q1": 8, "q2": 3, "q3": 3, "q4": 5}),
            Section.CAPACITY: _frozen({"q1": 7, "q2": 3, "q3": 5, "q4": 5}),
        })
    )

    # 5C pillar weights for the final score (technical capacity does not enter)
    character_weight: float = 0.25
    capital_weight: float = 0.25
    capacity_weight: float = 0.25
    condition_weight: float = 0.25

    approval_threshold: float = 60.0
    high_tier_threshold: float = 78.0

    # Guarantee value ceilings (whole IDR) by obligee type
    collateral_thresholds: Mapping[EmployerType, int] = field(
        default_factory=lambda: _frozen({
            EmployerType.PRIVATE: 500_000_000,
            EmployerType.STATE_OWNED: 1_000_000_000,
        })
    )

    # Cash collateral rates in percent of guarantee value
    tier1_over_threshold_rate: int = 5
    tier2_within_threshold_rate: int = 5
    tier2_over_threshold_rate: int = 10

    # Financial capacity score above which capacity reads as "strong"
    strong_capacity_score: float = 70.0

    def weights_for(self, section: Section) -> Mapping[str, int]:
        return self.section_weights[section]


DEFAULT_POLICY = ScoringPolicy()
