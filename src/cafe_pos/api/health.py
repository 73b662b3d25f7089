from fastapi import APIRouter
from datetime import datetime, timezone

router = APIRouter(tags=["health"])


@router.get("/", summary="Ping")
async def root():
    return {"ok": True}


@router.get("/health", summary="Health check")
async def health_check():
    """
    Простейший health-check эндпоинт.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc)
    }
