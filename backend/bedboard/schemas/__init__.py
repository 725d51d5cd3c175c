"""
Pydantic schemas for validation and serialisation.
"""
from bedboard.schemas.bed import (
    OccupantSnapshot,
    BedSnapshot,
    WardView,
    FloorView,
    FloorTab,
    BedStats,
)
from bedboard.schemas.filters import FilterCriteria
from bedboard.schemas.occupancy import OccupancyDetail
from bedboard.schemas.summary import BedChip, SingleBedDetail, SelectionSummary
from bedboard.schemas.transfer import (
    InpatientSnapshot,
    TransferAction,
    TransferActionRequest,
    TransferReasonOption,
    TransferRequest,
    TransferWorkflowView,
)
from bedboard.schemas.session import (
    SessionCreateRequest,
    ActiveFloorRequest,
    SessionView,
    ClickResponse,
    SidebarRequest,
    UIContextView,
)
from bedboard.schemas.responses import MessageResponse, BedMapResponse
