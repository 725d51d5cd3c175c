"""
Ward model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

from bedboard.models.enums import BedTypeEnum

if TYPE_CHECKING:
    from bedboard.models.floor import Floor
    from bedboard.models.bed import Bed


class Ward(SQLModel, table=True):
    """
    Ward model.

    Named group of beds on a floor. Its id is `<floor id>-<code>`
    (e.g. F3-WARD-A) so the ward filter can match by code.
    """
    __tablename__ = "ward"

    id: str = Field(primary_key=True)
    code: str = Field(index=True)      # ICU, WARD-A, ...
    name: str
    floor_id: str = Field(foreign_key="floor.id", index=True)
    type: BedTypeEnum
    price_per_day: int = Field(default=0)
    position: int = Field(default=0)

    # Relationships
    floor: Optional["Floor"] = Relationship(back_populates="wards")
    beds: List["Bed"] = Relationship(back_populates="ward")

    def __repr__(self) -> str:
        return f"Ward(id={self.id}, name={self.name}, type={self.type})"
