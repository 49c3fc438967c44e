"""Health check endpoint."""

import asyncio
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from adapter.mongodb.connection import ping

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(request: Request):
    """Health check endpoint with database status."""
    client = getattr(request.app.state, 'mongo_client', None)
    healthy = await asyncio.to_thread(ping, client)

    if healthy:
        mongodb = {"status": "healthy", "message": "Connection successful"}
    elif client is None:
        mongodb = {"status": "unhealthy", "message": "Not connected or not configured"}
    else:
        mongodb = {"status": "unhealthy", "message": "Ping failed"}

    health_status = {
        "status": "healthy" if healthy else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {"mongodb": mongodb},
    }
    status_code = status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(content=health_status, status_code=status_code)
