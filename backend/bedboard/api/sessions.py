"""
Board session endpoints.

One session per browser tab: filters, floor tab, selection, summary bar
and occupancy panel.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import Optional
import logging

from bedboard.core.context import AppContext, get_app_context
from bedboard.core.database import get_session
from bedboard.core.websocket_manager import manager
from bedboard.core.exceptions import (
    BedNotFoundError,
    CatalogIntegrityError,
    InvalidStateError,
    NotFoundError,
    SessionNotFoundError,
)
from bedboard.models.enums import NotificationKindEnum
from bedboard.schemas.filters import FilterCriteria
from bedboard.schemas.occupancy import OccupancyDetail
from bedboard.schemas.responses import MessageResponse
from bedboard.schemas.session import (
    SessionCreateRequest,
    ActiveFloorRequest,
    SessionView,
    ClickResponse,
)
from bedboard.schemas.summary import SelectionSummary
from bedboard.services.catalog_service import CatalogService
from bedboard.services.session_service import BoardSession
from bedboard.api.deps import get_board

router = APIRouter()
logger = logging.getLogger("bedboard.sessions")


# ============================================
# LIFECYCLE
# ============================================

@router.post("", response_model=SessionView, status_code=status.HTTP_201_CREATED)
def open_session(
    request: Optional[SessionCreateRequest] = None,
    session: Session = Depends(get_session),
    ctx: AppContext = Depends(get_app_context)
):
    """Opens a board session with a fresh catalog snapshot."""
    request = request or SessionCreateRequest()
    service = CatalogService(session)

    try:
        catalog = service.load_catalog()
        patients = service.load_inpatients()
    except CatalogIntegrityError as e:
        raise HTTPException(status_code=500, detail=e.message)

    board = ctx.sessions.open(catalog, patients, ctx.clock, request.filters)

    if request.active_floor:
        try:
            board.set_active_floor(request.active_floor)
        except NotFoundError:
            ctx.sessions.close(board.id)
            raise HTTPException(status_code=404, detail="Floor not found")

    return board.view()


@router.get("/{session_id}", response_model=SessionView)
def get_session_view(board: BoardSession = Depends(get_board)):
    """Full render state of a session."""
    return board.view()


@router.delete("/{session_id}", response_model=MessageResponse)
def close_session(
    session_id: str,
    ctx: AppContext = Depends(get_app_context)
):
    """Closes a session (the tab navigated away)."""
    try:
        ctx.sessions.close(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return MessageResponse(success=True, message="Session closed")


# ============================================
# FILTERS
# ============================================

@router.put("/{session_id}/filters", response_model=SessionView)
def update_filters(
    criteria: FilterCriteria,
    board: BoardSession = Depends(get_board)
):
    """Replaces the filter criteria."""
    board.set_filters(criteria)
    return board.view()


@router.post("/{session_id}/search/clear", response_model=SessionView)
def clear_search(board: BoardSession = Depends(get_board)):
    """Clears only the search text."""
    board.clear_search()
    return board.view()


@router.put("/{session_id}/active-floor", response_model=SessionView)
def set_active_floor(
    request: ActiveFloorRequest,
    board: BoardSession = Depends(get_board)
):
    """Chooses the floor tab."""
    try:
        board.set_active_floor(request.floor_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Floor not found")
    return board.view()


# ============================================
# SELECTION
# ============================================

@router.post("/{session_id}/beds/{bed_id}/click", response_model=ClickResponse)
def click_bed(bed_id: str, board: BoardSession = Depends(get_board)):
    """Click on a bed tile."""
    try:
        return board.click(bed_id)
    except BedNotFoundError:
        raise HTTPException(status_code=404, detail="Bed not found")


@router.get("/{session_id}/summary", response_model=Optional[SelectionSummary])
def get_summary(board: BoardSession = Depends(get_board)):
    """Summary bar; null when nothing is selected."""
    return board.summary()


@router.post("/{session_id}/selection/clear", response_model=MessageResponse)
def clear_selection(board: BoardSession = Depends(get_board)):
    """Empties the selection."""
    count = board.clear_selection()
    return MessageResponse(success=True, message="Selection cleared", data={"cleared": count})


@router.post("/{session_id}/selection/assign", response_model=MessageResponse)
async def assign_selection(board: BoardSession = Depends(get_board)):
    """Assign action of the summary bar (notification only)."""
    try:
        message = board.assign()
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=e.message)

    await manager.notify(NotificationKindEnum.SUCCESS.value, message, session_id=board.id)
    return MessageResponse(success=True, message=message)


@router.post("/{session_id}/selection/reserve", response_model=MessageResponse)
async def reserve_selection(board: BoardSession = Depends(get_board)):
    """Reserve action of the summary bar (notification only)."""
    try:
        message = board.reserve()
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=e.message)

    await manager.notify(NotificationKindEnum.SUCCESS.value, message, session_id=board.id)
    return MessageResponse(success=True, message=message)


# ============================================
# OCCUPANCY PANEL
# ============================================

@router.get("/{session_id}/occupancy", response_model=OccupancyDetail)
def get_occupancy(board: BoardSession = Depends(get_board)):
    """Detail of the occupied bed shown in the panel."""
    try:
        return board.occupancy_detail()
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/{session_id}/occupancy/close", response_model=MessageResponse)
def close_occupancy(board: BoardSession = Depends(get_board)):
    board.close_occupancy()
    return MessageResponse(success=True, message="Panel closed")


@router.post("/{session_id}/occupancy/release", response_model=MessageResponse)
async def release_bed(board: BoardSession = Depends(get_board)):
    """Discharge action of the panel (notification only)."""
    try:
        message = board.release_bed()
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=e.message)

    await manager.notify(NotificationKindEnum.SUCCESS.value, message, session_id=board.id)
    return MessageResponse(success=True, message=message)
