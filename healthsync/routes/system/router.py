import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from healthsync.config.constants import API_VERSION
from healthsync.core.errors import ApiError
from healthsync.core.middleware import get_db

logger = logging.getLogger(__name__)

index_router = APIRouter(tags=["system"])
router = APIRouter(tags=["system"])

ENDPOINTS = {
    "health": ["/api/health", "/api/database/status"],
    "auth": [
        "/api/auth/register",
        "/api/auth/login",
        "/api/auth/refresh",
        "/api/auth/logout",
        "/api/auth/me",
    ],
    "ai": [
        "/api/biogpt/status",
        "/api/biogpt/medical-query",
        "/api/biogpt/emotional-support",
        "/api/biogpt/check-symptoms",
        "/api/biogpt/medication-info",
        "/api/openai/status",
        "/api/openai/analyze-image",
    ],
    "patients": [
        "/api/patients/{patientId}",
        "/api/patients/{patientId}/health-records",
        "/api/patients/{patientId}/medications",
        "/api/patients/{patientId}/doctors",
        "/api/patients/{patientId}/caretakers",
    ],
    "care": [
        "/api/doctors",
        "/api/doctors/{doctorId}",
        "/api/caretakers/{caretakerId}/patients",
    ],
    "appointments": ["/api/appointments"],
}


@index_router.get("/")
async def index():
    return {
        "status": "success",
        "message": "HealthSync API is running",
        "version": API_VERSION,
        "endpoints": ENDPOINTS,
    }


@router.get("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/database/status")
async def database_status(db: AsyncSession = Depends(get_db)):
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database connectivity check failed: {e}", exc_info=True)
        raise ApiError(500, "Database connection failed", str(e))
    return {"status": "connected", "message": "Database connection is established"}
