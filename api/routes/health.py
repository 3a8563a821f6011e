"""Health check route"""

from fastapi import APIRouter
import logging

from api.responses import HealthResponse
from app.config import settings
from patterns.catalog import EXAMPLES

router = APIRouter(tags=["Health"])
logger = logging.getLogger("patterns.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        examples=len(EXAMPLES),
    )
