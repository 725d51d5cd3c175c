"""
Bed repository.
"""
from typing import List
from sqlmodel import Session, select

from bedboard.repositories.base import BaseRepository
from bedboard.models.bed import Bed
from bedboard.models.ward import Ward
from bedboard.models.floor import Floor
from bedboard.models.enums import BedStatusEnum


class BedRepository(BaseRepository[Bed]):
    """Repository for beds and the floor/ward hierarchy around them."""

    def __init__(self, session: Session):
        super().__init__(session, Bed)

    def get_floors(self) -> List[Floor]:
        """
        Returns every floor in tab order.

        Returns:
            Floors sorted by position, then id
        """
        query = select(Floor).order_by(Floor.position, Floor.id)
        return list(self.session.exec(query).all())

    def get_wards(self, floor_id: str) -> List[Ward]:
        """
        Returns the wards of a floor in display order.

        Args:
            floor_id: Floor id

        Returns:
            List of wards
        """
        query = (
            select(Ward)
            .where(Ward.floor_id == floor_id)
            .order_by(Ward.position, Ward.id)
        )
        return list(self.session.exec(query).all())

    def get_by_ward(self, ward_id: str) -> List[Bed]:
        """
        Returns the beds of a ward in grid order.

        Args:
            ward_id: Ward id

        Returns:
            List of beds
        """
        query = (
            select(Bed)
            .where(Bed.ward_id == ward_id)
            .order_by(Bed.grid_row, Bed.grid_col, Bed.bed_number)
        )
        return list(self.session.exec(query).all())

    def count_by_status(self) -> dict:
        """
        Counts beds per status across the hospital.

        Returns:
            Dictionary status value -> count
        """
        counts = {status.value: 0 for status in BedStatusEnum}
        for bed in self.get_all():
            counts[bed.status.value] += 1
        return counts
