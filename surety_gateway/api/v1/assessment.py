"""POST /v1/assessment - surety bond 5C assessment endpoint"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from surety_gateway.api.dependencies import get_policy, get_request_id
from surety_gateway.api.v1.schemas import (
    AnalysisResponse,
    AssessmentRequest,
    AssessmentResponse,
    CollateralSchema,
)
from surety_gateway.domain.financials import new_statement
from surety_gateway.domain.models import ApplicantProfile, AssessmentInput, AssessmentResult
from surety_gateway.domain.policy import ScoringPolicy
from surety_gateway.domain.scoring import assess
from surety_gateway.infrastructure.observability.logging import log_assessment
from surety_gateway.infrastructure.observability.metrics import record_assessment

router = APIRouter()


def _to_response(result: AssessmentResult) -> AssessmentResponse:
    return AssessmentResponse(
        character_score=result.character_score,
        capital_score=result.capital_score,
        condition_score=result.condition_score,
        financial_capacity_score=result.financial_capacity_score,
        tech_capacity_score=result.tech_capacity_score,
        final_score=result.final_score,
        approved=result.approved,
        high_tier=result.high_tier,
        decision_band=result.decision_band.value,
        decision_label=result.decision_band.label,
        collateral=CollateralSchema(
            status=result.collateral.status.value,
            label=result.collateral.status.label,
            rate_percent=result.collateral.rate_percent,
            amount=result.collateral.amount,
        ),
        project_value=result.project_value,
        capacity_strength=result.capacity_strength,
        trend_notes=result.trend_notes,
        analysis=AnalysisResponse.model_validate(result.analysis),
        policy_version=result.policy_version,
    )


@router.post("/assessment", response_model=AssessmentResponse)
def create_assessment(
    request_body: AssessmentRequest,
    request: Request,
    policy: ScoringPolicy = Depends(get_policy),
):
    """
    Score an applicant and decide on the bond.

    Flow:
    1. Build both statements (every line item present, defaulted to 0)
    2. Score Character, Capital, Capacity and Condition
    3. Apply approval thresholds and size the cash collateral
    4. Record metrics and the audit log line
    5. Return the full result

    Nothing is stored; the caller re-sends the full input to recompute.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    applicant = request_body.applicant

    inputs = AssessmentInput(
        financials_y1=new_statement(request_body.financials_y1),
        financials_y2=new_statement(request_body.financials_y2),
        capacity_answers=dict(request_body.capacity_answers),
        character_answers=dict(request_body.character_answers),
        capital_answers=dict(request_body.capital_answers),
        condition_answers=dict(request_body.condition_answers),
        profile=ApplicantProfile(
            name=applicant.name,
            address=applicant.address,
            bond_type=applicant.bond_type,
            employer_type=applicant.employer_type,
            guarantee_value=applicant.guarantee_value,
            coverage_percent=applicant.coverage_percent,
        ),
    )

    try:
        result = assess(inputs, policy)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_assessment(result)
    log_assessment(request_id, applicant.name, result, duration_ms)

    return _to_response(result)
