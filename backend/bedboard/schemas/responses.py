"""
Generic API responses.
"""
from pydantic import BaseModel
from typing import Any, List, Optional

from bedboard.schemas.bed import FloorView, FloorTab, BedStats
from bedboard.schemas.filters import FilterCriteria


class MessageResponse(BaseModel):
    """Response carrying a user-facing message."""
    success: bool = True
    message: str
    data: Optional[Any] = None


class BedMapResponse(BaseModel):
    """Stateless filtered bed map."""
    filters: FilterCriteria
    floors: List[FloorView]
    tabs: List[FloorTab]
    stats: BedStats
    empty: bool = False
    empty_message: Optional[str] = None
