"""
System Routes - health and key listing
Mounted under /api so they never shadow single-segment entry keys
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_entry_service, get_store
from config.settings import settings
from redis_client import KeyValueStore
from services.entries import EntryService
from utils.errors import handle_api_errors

router = APIRouter()

@router.get("/health")
async def health_check(store: KeyValueStore = Depends(get_store)):
    """Report service and store status; always 200"""
    health_info = {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "timestamp": datetime.utcnow().isoformat(),
        "store_status": "connected",
    }

    if not await store.ping():
        health_info["store_status"] = "error"
        health_info["status"] = "degraded"

    return health_info

@router.get("/keys")
@handle_api_errors
async def list_keys(
    pattern: str = Query("*", description="Glob-style key pattern"),
    entries: EntryService = Depends(get_entry_service)
):
    keys = await entries.list_keys(pattern)
    return {"pattern": pattern, "count": len(keys), "keys": keys}
