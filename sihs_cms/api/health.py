"""Health check endpoints"""
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sihs_cms import __version__
from sihs_cms.database import get_db
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
STARTUP_TIME = time.time()


@router.get("")
def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint

    Returns 200 if the service is running
    """
    return {
        "success": True,
        "message": "Server is running",
        "version": __version__,
        "uptime_seconds": round(time.time() - STARTUP_TIME, 2),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/ready")
def readiness_check(db: Session = Depends(get_db)):
    """
    Readiness check - verifies the database answers

    Returns 200 if ready to serve traffic, 503 if not
    """
    start = time.time()
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.error("Readiness check failed", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"success": False, "message": "Database check failed"},
        )

    return {
        "success": True,
        "message": "ready",
        "database_latency_ms": round((time.time() - start) * 1000, 2),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
