"""POST /v1/analysis - financial ratios and YoY preview for the capital step"""

from fastapi import APIRouter

from surety_gateway.api.v1.schemas import AnalysisRequest, AnalysisResponse
from surety_gateway.domain.financials import analyze, new_statement

router = APIRouter()


@router.post("/analysis", response_model=AnalysisResponse)
def create_analysis(request_body: AnalysisRequest):
    """
    Summaries, YoY deltas and current-year ratios for two statements.

    Unknown line items are rejected with 422 by the app's domain error handler.

    Returns:
        Both yearly summaries (including equity), YoY percentages and ratios
    """
    y1 = new_statement(request_body.financials_y1)
    y2 = new_statement(request_body.financials_y2)

    return AnalysisResponse.model_validate(analyze(y1, y2))
