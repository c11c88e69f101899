"""FastAPI application factory"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from surety_gateway.api.dependencies import get_request_id
from surety_gateway.api.middleware import MetricsMiddleware, RequestIDMiddleware
from surety_gateway.api.v1 import analysis, assessment, catalog
from surety_gateway.config import settings
from surety_gateway.domain.catalog import LineItem, Section
from surety_gateway.domain.exceptions import DomainException
from surety_gateway.domain.policy import DEFAULT_POLICY
from surety_gateway.infrastructure.observability.logging import setup_logging

setup_logging(settings.log_level)


async def reject_domain_input(request: Request, exc: DomainException) -> JSONResponse:
    """Input outside the assessment vocabulary is the caller's fault"""
    logging.warning(f"Rejected input: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Build the surety assessment API with tracing, metrics and the v1 routers"""
    app = FastAPI(
        title=settings.api_title,
        description="5C credit risk scoring and cash collateral sizing for surety bonds",
        version=settings.api_version,
    )

    # Last added runs first
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(DomainException, reject_domain_input)

    @app.get("/health")
    def health_check():
        return {
            "status": "ok",
            "service": settings.service_name,
            "policy_version": DEFAULT_POLICY.version,
            "line_items": len(LineItem),
            "sections": [section.value for section in Section],
        }

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(assessment.router, prefix="/v1", tags=["assessments"])
    app.include_router(analysis.router, prefix="/v1", tags=["analysis"])
    app.include_router(catalog.router, prefix="/v1", tags=["catalog"])

    return app


app = create_app()
