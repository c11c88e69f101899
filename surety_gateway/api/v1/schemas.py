"""Pydantic schemas for API request/response validation"""

from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from surety_gateway.domain.models import BondType, EmployerType
from surety_gateway.utils.currency import parse_amount


def _coerce_amount(value: Any) -> Any:
    # Locale-formatted text ("Rp 1.250.000") is parsed; anything else is left to int validation
    if isinstance(value, str):
        return parse_amount(value)
    return value


Amount = Annotated[int, BeforeValidator(_coerce_amount), Field(ge=0)]


class ApplicantSchema(BaseModel):
    """Applicant and project data"""

    name: str = ""
    address: str = ""
    bond_type: BondType = BondType.PERFORMANCE
    employer_type: EmployerType = EmployerType.PRIVATE
    guarantee_value: Amount = Field(0, description="Nilai Jaminan in whole IDR")
    coverage_percent: float = Field(100.0, ge=0, le=100)


class AnalysisRequest(BaseModel):
    """Request body for POST /v1/analysis"""

    financials_y1: Dict[str, Amount] = Field(default_factory=dict, description="Prior year, line item label -> amount")
    financials_y2: Dict[str, Amount] = Field(default_factory=dict, description="Current year, line item label -> amount")


class AssessmentRequest(AnalysisRequest):
    """Request body for POST /v1/assessment"""

    applicant: ApplicantSchema
    capacity_answers: Dict[str, str] = Field(default_factory=dict)
    character_answers: Dict[str, str] = Field(default_factory=dict)
    capital_answers: Dict[str, str] = Field(default_factory=dict)
    condition_answers: Dict[str, str] = Field(default_factory=dict)


class SummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    assets: int
    liabilities: int
    equity: int
    profit: int
    sales: int
    current_assets: int
    current_liabilities: int


class YoYSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    assets: float
    liabilities: float
    equity: float
    profit: float


class RatioSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    liquidity: float
    solvency: float
    profitability: float


class AnalysisResponse(BaseModel):
    """Response for POST /v1/analysis"""

    model_config = ConfigDict(from_attributes=True)

    summary_y1: SummarySchema
    summary_y2: SummarySchema
    yoy: YoYSchema
    ratios: RatioSchema


class CollateralSchema(BaseModel):
    status: str
    label: str
    rate_percent: int
    amount: int


class AssessmentResponse(BaseModel):
    """Response for POST /v1/assessment"""

    character_score: float
    capital_score: float
    condition_score: float
    financial_capacity_score: float
    tech_capacity_score: float
    final_score: float
    approved: bool
    high_tier: bool
    decision_band: str
    decision_label: str
    collateral: CollateralSchema
    project_value: float
    capacity_strength: str
    trend_notes: List[str]
    analysis: AnalysisResponse
    policy_version: str


class AnswerOptionSchema(BaseModel):
    letter: str
    label: str


class QuestionSchema(BaseModel):
    """Question as shown on the form; weights are not exposed"""

    key: str
    title: str
    options: List[AnswerOptionSchema]


class SectionQuestionsSchema(BaseModel):
    section: str
    questions: List[QuestionSchema]


class LineItemGroupSchema(BaseModel):
    title: str
    items: List[str]
