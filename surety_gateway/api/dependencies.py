"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from surety_gateway.api.middleware import REQUEST_ID_HEADER
from surety_gateway.domain.policy import DEFAULT_POLICY, ScoringPolicy


def get_request_id(request: Request) -> str:
    """Request ID minted by RequestIDMiddleware, else whatever the caller sent"""
    request_id = getattr(request.state, "request_id", None)
    return request_id or request.headers.get(REQUEST_ID_HEADER, "unknown")


def get_policy() -> ScoringPolicy:
    """Provide the scoring policy in force"""
    return DEFAULT_POLICY
