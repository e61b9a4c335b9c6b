"""Health check router."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health():
    """Return liveness status for container health checks."""
    return {"status": "ok"}
