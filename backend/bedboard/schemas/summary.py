"""
Selection summary bar schemas.
"""
from pydantic import BaseModel
from typing import Optional, List

from bedboard.models.enums import BedTypeEnum


class BedChip(BaseModel):
    """Chip for one selected bed."""
    bed_id: str
    label: str


class SingleBedDetail(BaseModel):
    """Inline detail shown when exactly one bed is selected."""
    type: BedTypeEnum
    room_number: str
    price_per_day: int
    price_label: str
    amenities: List[str] = []


class SelectionSummary(BaseModel):
    """
    Summary bar for the current selection.

    `single` is set only for one selected bed; `total_per_day` only for
    more than one.
    """
    count: int
    chips: List[BedChip]
    overflow_label: Optional[str] = None
    single: Optional[SingleBedDetail] = None
    total_per_day: Optional[int] = None
    total_label: Optional[str] = None
    transfer_enabled: bool = False
