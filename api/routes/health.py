"""Health check routes"""

from fastapi import APIRouter, Depends
import logging

from adapters import mongo_adapter
from adapters.mongo_adapter import Collections
from api.dependencies import get_collections, get_settings
from app.config import Settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("restaurant.api.health")


@router.get("/health-check")
def health_check(
    collections: Collections = Depends(get_collections),
    settings: Settings = Depends(get_settings),
):
    """Report service liveness and whether MongoDB answers a ping"""
    database_ok = mongo_adapter.ping(collections.food.database)
    if not database_ok:
        logger.warning("Health check: database is not answering")
    return {
        "status": "ok" if database_ok else "degraded",
        "service": settings.app_name,
        "version": settings.app_version,
        "database": "up" if database_ok else "down",
    }
