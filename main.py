from fastapi import FastAPI

# Use centralized configuration
from config.settings import settings
from redis_client import create_store
from utils.logger import logger
import uvicorn

from api.routes import entries, system

# Key/value store service
# GET / greets, POST /store/{key} writes the query string as JSON,
# GET /{key} reads it back. Redis owns all data; this process is stateless.

app = FastAPI(
    title="Key-Value Store Service",
    version=settings.VERSION,
    description="Stores query-string payloads as JSON entries in Redis",
    # Keep docs off single-segment paths, those belong to GET /{key}
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

# Multi-segment operational routes first, then the single-segment entry routes
app.include_router(system.router, prefix="/api", tags=["system"])
app.include_router(entries.router, tags=["entries"])

@app.on_event("startup")
async def on_startup():
    """Create the shared store client and check connectivity"""
    app.state.store = create_store()

    if await app.state.store.ping():
        logger.info(f"✅ Key-value store reachable at {settings.REDIS_URL}")
    else:
        # Requests that need the store will answer 503 until it comes up
        logger.warning(f"⚠️ Key-value store not reachable at {settings.REDIS_URL}")

    logger.info(f"🚀 {settings.APP_NAME} {settings.VERSION} listening on port {settings.PORT}")

@app.on_event("shutdown")
async def on_shutdown():
    store = getattr(app.state, "store", None)
    if store is not None:
        await store.close()

def run():
    """Console entry point"""
    uvicorn.run("main:app", **settings.get_server_config())

if __name__ == "__main__":
    run()
