"""
Bed model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
import json

from bedboard.models.enums import BedStatusEnum, BedTypeEnum

if TYPE_CHECKING:
    from bedboard.models.ward import Ward
    from bedboard.models.occupant import Occupant


class Bed(SQLModel, table=True):
    """
    Hospital bed.

    A schedulable unit of capacity with location, price and status.
    The occupant row exists only while the bed is occupied; the
    backend owns that transition.
    """
    __tablename__ = "bed"

    id: str = Field(primary_key=True)  # F3-WARD-A-3001
    bed_number: str = Field(index=True)
    ward_id: str = Field(foreign_key="ward.id", index=True)
    room_number: str
    type: BedTypeEnum
    status: BedStatusEnum = Field(default=BedStatusEnum.AVAILABLE, index=True)
    price_per_day: int

    # JSON list stored as text
    amenities: Optional[str] = Field(default=None)

    last_cleaned_at: Optional[datetime] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    # Grid position inside the ward (6 beds per row)
    grid_row: int = Field(default=0)
    grid_col: int = Field(default=0)

    # Relationships
    ward: Optional["Ward"] = Relationship(back_populates="beds")
    occupant: Optional["Occupant"] = Relationship(
        back_populates="bed",
        sa_relationship_kwargs={"uselist": False}
    )

    def __repr__(self) -> str:
        return f"Bed(id={self.id}, bed_number={self.bed_number}, status={self.status})"

    def get_amenities(self) -> List[str]:
        """Returns the amenities as a list."""
        if not self.amenities:
            return []
        try:
            return json.loads(self.amenities)
        except json.JSONDecodeError:
            return []

    def set_amenities(self, amenities: List[str]) -> None:
        """Stores the amenities as JSON."""
        self.amenities = json.dumps(list(amenities))

    @property
    def is_occupied(self) -> bool:
        """Whether a patient is using the bed."""
        return self.status == BedStatusEnum.OCCUPIED
