"""
Occupant model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime
import uuid

from bedboard.models.enums import AcuityEnum

if TYPE_CHECKING:
    from bedboard.models.bed import Bed


class Occupant(SQLModel, table=True):
    """
    Patient record attached to an occupied bed.

    Read-only for the bed board; created by the backend when
    the bed becomes occupied.
    """
    __tablename__ = "occupant"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True
    )
    bed_id: str = Field(foreign_key="bed.id", unique=True, index=True)
    name: str
    mrn: str = Field(index=True)
    admitted_at: datetime
    acuity: Optional[AcuityEnum] = Field(default=None)
    diagnosis: Optional[str] = Field(default=None)
    attending_doctor: Optional[str] = Field(default=None)

    # Relationships
    bed: Optional["Bed"] = Relationship(back_populates="occupant")

    def __repr__(self) -> str:
        return f"Occupant(id={self.id}, name={self.name}, bed_id={self.bed_id})"
