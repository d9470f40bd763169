"""
Entry Routes - greeting, write and read endpoints
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from api.dependencies import get_entry_service
from config.settings import settings
from services.entries import EntryService, capture_payload
from utils.errors import handle_api_errors

router = APIRouter()

@router.get("/", response_class=PlainTextResponse)
async def greeting():
    """Fixed greeting; never touches the store"""
    return settings.GREETING

@router.post("/store/{key}", response_class=PlainTextResponse)
@handle_api_errors
async def store_entry(
    key: str,
    request: Request,
    entries: EntryService = Depends(get_entry_service)
):
    """
    Store the query string under key

    Every query parameter becomes a field of the stored JSON object,
    e.g. POST /store/tomato?color=red stores {"color": "red"}.
    """
    payload = capture_payload(request.query_params.multi_items())
    await entries.store_entry(key, payload)
    return "Success"

@router.get("/{key}")
@handle_api_errors
async def fetch_entry(
    key: str,
    entries: EntryService = Depends(get_entry_service)
):
    """Return the JSON document stored under key"""
    return JSONResponse(content=await entries.fetch_entry(key))
