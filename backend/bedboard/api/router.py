"""
Main router grouping every sub-router.
"""
from fastapi import APIRouter

from bedboard.api import health
from bedboard.api import bed_map
from bedboard.api import sessions
from bedboard.api import transfers
from bedboard.api import ui
from bedboard.api import websocket

api_router = APIRouter()

# ============================================
# INCLUDE EVERY ROUTER
# ============================================

api_router.include_router(health.router)

api_router.include_router(
    bed_map.router,
    prefix="/bed-map",
    tags=["Bed map"]
)

api_router.include_router(
    sessions.router,
    prefix="/sessions",
    tags=["Sessions"]
)

api_router.include_router(
    transfers.router,
    prefix="/sessions",
    tags=["Transfers"]
)

api_router.include_router(
    ui.router,
    prefix="/ui",
    tags=["UI"]
)

api_router.include_router(
    websocket.router,
    tags=["WebSocket"]
)
