# backend/routes/system.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.engine import Engine

from database import get_engine, check_connection
from schemas.common import ApiInfo, HealthResponse

router = APIRouter(tags=["System"])


# Describe the available endpoints
@router.get("/api", response_model=ApiInfo)
def api_info():
    return {
        "message": "Maintenance API",
        "endpoints": {
            "users": "/api/users",
            "tasks": "/api/tasks",
            "login": "/api/login",
            "health": "/health",
        },
    }


# Report database reachability: 200 when a pooled connection answers, 503 otherwise
@router.get("/health", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
def health(response: Response, engine: Engine = Depends(get_engine)):
    connected = check_connection(engine)
    if not connected:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return {
        "status": "healthy" if connected else "unhealthy",
        "database": "connected" if connected else "disconnected",
        "timestamp": timestamp,
    }
