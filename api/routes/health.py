"""Health check routes"""

from fastapi import APIRouter, Request
import logging

from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("dormidine.api.health")


@router.get("/health-check")
def health_check(request: Request):
    """Basic health check endpoint, reporting whether MongoDB answers a ping"""
    store = getattr(request.app.state, "store", None)
    mongo = "disabled" if store is None else ("ok" if store.ping() else "unavailable")
    return {"status": "ok", "service": settings.app_name, "mongo": mongo}
