"""Liveness endpoint."""

from fastapi import APIRouter

from student_records.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Report that the process is up."""
    return HealthResponse(status="ok")
