"""
Floor model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from bedboard.models.ward import Ward


class Floor(SQLModel, table=True):
    """
    Floor of the hospital building.

    Groups wards; the bed map shows one tab per floor.
    """
    __tablename__ = "floor"

    id: str = Field(primary_key=True)  # F1, F2, ...
    name: str                          # Ground Floor
    position: int = Field(default=0, index=True)  # tab order

    # Relationships
    wards: List["Ward"] = Relationship(back_populates="floor")

    def __repr__(self) -> str:
        return f"Floor(id={self.id}, name={self.name})"
