"""
Inpatient repository.
"""
from typing import List
from sqlmodel import Session, select

from bedboard.repositories.base import BaseRepository
from bedboard.models.inpatient import Inpatient


class InpatientRepository(BaseRepository[Inpatient]):
    """Repository for the admitted patient list."""

    def __init__(self, session: Session):
        super().__init__(session, Inpatient)

    def get_all_ordered(self) -> List[Inpatient]:
        """
        Returns every inpatient ordered by MRN.

        Returns:
            List of inpatients
        """
        query = select(Inpatient).order_by(Inpatient.id)
        return list(self.session.exec(query).all())
