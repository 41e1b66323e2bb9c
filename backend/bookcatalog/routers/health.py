"""
Liveness and readiness checks for the catalog API.
"""
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from bookcatalog.database.connections import get_mongo_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="Liveness check")
async def liveness():
    """The process is up and serving requests."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    responses={503: {"description": "MongoDB is unreachable"}},
)
async def readiness() -> JSONResponse:
    """Ping MongoDB; answers 503 with status ``degraded`` when the ping fails."""
    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
    except Exception as e:
        logger.warning("Readiness ping to MongoDB failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "degraded",
                "checks": {"api": "healthy", "mongodb": f"unhealthy: {e}"},
            },
        )

    return JSONResponse(
        content={"status": "healthy", "checks": {"api": "healthy", "mongodb": "healthy"}}
    )
