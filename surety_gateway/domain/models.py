"""Domain models - immutable dataclasses and enums for the 5C assessment"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping

from surety_gateway.domain.catalog import LineItem

# Line item -> whole IDR amount. Missing items count as 0.
FinancialStatement = Mapping[LineItem, int]

# Question key ("q1", ...) -> selected letter ("A" / "B" / "C"). Unanswered keys are absent.
QuestionnaireAnswers = Mapping[str, str]


class BondType(str, Enum):
    """Surety bond product"""

    BID = "Penawaran"
    PERFORMANCE = "Pelaksanaan"
    ADVANCE_PAYMENT = "Uang Muka"
    MAINTENANCE = "Pemeliharaan"


class EmployerType(str, Enum):
    """Obligee (project owner) type"""

    PRIVATE = "Private"
    STATE_OWNED = "StateOwned"


class DecisionBand(str, Enum):
    APPROVED_TIER_1 = "approved_tier_1"
    APPROVED_TIER_2 = "approved_tier_2"
    REJECTED = "rejected"

    @property
    def label(self) -> str:
        return _DECISION_LABELS[self]


_DECISION_LABELS = {
    DecisionBand.APPROVED_TIER_1: "DIPROSES - Agunan Range 1",
    DecisionBand.APPROVED_TIER_2: "DIPROSES - Agunan Range 2",
    DecisionBand.REJECTED: "PENGAJUAN DITOLAK",
}


class CollateralStatus(str, Enum):
    """Which branch of the collateral rule produced the requirement"""

    NO_COLLATERAL = "no collateral"  # bid bonds
    REJECTED = "rejected"
    NONE_REQUIRED = "0%"
    TIER1_OVER_THRESHOLD = "5% tier-1"
    TIER2_WITHIN_THRESHOLD = "5% tier-2"
    TIER2_OVER_THRESHOLD = "10% tier-2"

    @property
    def label(self) -> str:
        return _COLLATERAL_LABELS[self]


_COLLATERAL_LABELS = {
    CollateralStatus.NO_COLLATERAL: "Tidak ada Agunan",
    CollateralStatus.REJECTED: "Agunan ditolak (Score Rendah)",
    CollateralStatus.NONE_REQUIRED: "Cash Collateral 0%",
    CollateralStatus.TIER1_OVER_THRESHOLD: "Cash Collateral 5% (Range 1 > Threshold)",
    CollateralStatus.TIER2_WITHIN_THRESHOLD: "Cash Collateral 5% (Range 2)",
    CollateralStatus.TIER2_OVER_THRESHOLD: "Cash Collateral 10% (Range 2)",
}


@dataclass(frozen=True)
class FinancialSummary:
    """Aggregate totals of one statement year"""

    assets: int
    liabilities: int
    equity: int  # assets - liabilities, may be negative
    profit: int
    sales: int
    current_assets: int
    current_liabilities: int


@dataclass(frozen=True)
class RatioSet:
    """Current-year ratios in percent; 0 when the denominator is 0"""

    liquidity: float
    solvency: float
    profitability: float


@dataclass(frozen=True)
class YoYDeltaSet:
    """Year-over-year change in percent; 0 when the prior year is 0"""

    assets: float
    liabilities: float
    equity: float
    profit: float


@dataclass(frozen=True)
class FinancialAnalysis:
    summary_y1: FinancialSummary
    summary_y2: FinancialSummary
    yoy: YoYDeltaSet
    ratios: RatioSet


@dataclass(frozen=True)
class FinancialGrade:
    grade: str
    score: float


@dataclass(frozen=True)
class ApplicantProfile:
    """Applicant and project metadata; name and address are never scored"""

    name: str
    address: str
    bond_type: BondType
    employer_type: EmployerType
    guarantee_value: int
    coverage_percent: float

    @property
    def project_value(self) -> float:
        return self.coverage_percent / 100 * self.guarantee_value


@dataclass(frozen=True)
class SectionScores:
    """Per-pillar scores, all 0-100"""

    character: float
    capital: float
    financial_capacity: float
    condition: float
    tech_capacity: float


@dataclass(frozen=True)
class CollateralRequirement:
    status: CollateralStatus
    rate_percent: int
    amount: int


@dataclass(frozen=True)
class AssessmentInput:
    """Complete input set for one assessment, supplied wholesale on every call"""

    financials_y1: FinancialStatement
    financials_y2: FinancialStatement
    capacity_answers: QuestionnaireAnswers
    character_answers: QuestionnaireAnswers
    capital_answers: QuestionnaireAnswers
    condition_answers: QuestionnaireAnswers
    profile: ApplicantProfile


@dataclass(frozen=True)
class AssessmentResult:
    """Output of the 5C assessment"""

    character_score: float
    capital_score: float
    condition_score: float
    financial_capacity_score: float
    tech_capacity_score: float
    final_score: float
    approved: bool
    high_tier: bool
    decision_band: DecisionBand
    collateral: CollateralRequirement
    project_value: float
    analysis: FinancialAnalysis
    capacity_strength: str  # "strong" | "adequate"
    trend_notes: List[str]
    policy_version: str
