from fastapi import Depends, Request

from redis_client import KeyValueStore
from services.entries import EntryService

def get_store(request: Request) -> KeyValueStore:
    """Return the store client created at startup and attached to the app state"""
    return request.app.state.store

def get_entry_service(store: KeyValueStore = Depends(get_store)) -> EntryService:
    return EntryService(store)
