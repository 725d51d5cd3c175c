"""
Board session schemas.
"""
from pydantic import BaseModel
from typing import Optional, List

from bedboard.models.enums import BedClickOutcomeEnum
from bedboard.schemas.bed import FloorView, FloorTab, BedStats
from bedboard.schemas.filters import FilterCriteria
from bedboard.schemas.occupancy import OccupancyDetail
from bedboard.schemas.summary import SelectionSummary
from bedboard.schemas.transfer import TransferWorkflowView


class SessionCreateRequest(BaseModel):
    """Opening a board session (one per browser tab)."""
    filters: Optional[FilterCriteria] = None
    active_floor: Optional[str] = None


class ActiveFloorRequest(BaseModel):
    """Floor tab chosen by the user."""
    floor_id: str


class SessionView(BaseModel):
    """
    Everything a tab needs to render the bed map.

    `floor` is the active floor with its visible wards; `empty` is set
    when no bed matches the filters.
    """
    id: str
    filters: FilterCriteria
    tabs: List[FloorTab]
    active_floor: Optional[str] = None
    floor: Optional[FloorView] = None
    stats: BedStats
    empty: bool = False
    empty_message: Optional[str] = None
    selected_bed_ids: List[str] = []
    summary: Optional[SelectionSummary] = None
    occupancy: Optional[OccupancyDetail] = None
    transfer: TransferWorkflowView


class ClickResponse(BaseModel):
    """Result of a click on a bed tile."""
    bed_id: str
    outcome: BedClickOutcomeEnum
    selected_bed_ids: List[str]
    summary: Optional[SelectionSummary] = None
    occupancy: Optional[OccupancyDetail] = None


# ============================================
# UI CONTEXT
# ============================================

class SidebarRequest(BaseModel):
    collapsed: bool


class UIContextView(BaseModel):
    """Ambient layout state."""
    sidebar_collapsed: bool
    now: str
    open_sessions: int
