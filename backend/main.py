"""
Hospital Bed Board API.
FastAPI service holding the bed map state of each browser tab, with a
WebSocket channel for notifications.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from bedboard.config import settings
from bedboard.api.router import api_router
from bedboard.core.context import AppContext
from bedboard.core.database import create_db_and_tables, get_session_direct
from bedboard.utils.init_data import seed_data
from bedboard.utils.logger import configure_logging

logger = logging.getLogger("bedboard")

# Create application
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

app.include_router(api_router, prefix="/api")

# Clock, sidebar flag and open board sessions
app.state.context = AppContext()


# ============================================
# STARTUP EVENTS
# ============================================

@app.on_event("startup")
def on_startup():
    configure_logging()
    create_db_and_tables()

    if settings.SEED_ON_STARTUP:
        session = get_session_direct()
        try:
            seed_data(session)
        finally:
            session.close()

    app.state.context = AppContext()
    logger.info(f"{settings.APP_TITLE} {settings.APP_VERSION} started")


@app.get("/")
def root():
    return {
        "name": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
