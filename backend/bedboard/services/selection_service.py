"""
Selection tracker.

Ordered set of bed ids picked on the map for bulk actions.
"""
from typing import Dict, List, Optional
import logging

from bedboard.models.enums import (
    BedStatusEnum,
    BedClickOutcomeEnum,
    UNSELECTABLE_BED_STATUSES,
)
from bedboard.schemas.bed import BedSnapshot

logger = logging.getLogger("bedboard.selection")


class SelectionTracker:
    """
    Selection Set of one board session.

    Insertion order is kept, so the first selected bed is well defined
    (the transfer workflow only uses that one).
    """

    def __init__(self):
        self._ids: Dict[str, None] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, bed_id: str) -> bool:
        return bed_id in self._ids

    @property
    def ids(self) -> List[str]:
        return list(self._ids)

    def first(self) -> Optional[str]:
        """Id of the first selected bed, or None."""
        return next(iter(self._ids), None)

    def click(self, bed: BedSnapshot) -> BedClickOutcomeEnum:
        """
        Handles a click on a bed tile.

        - occupied: the set is untouched, the caller opens the detail panel
        - maintenance: nothing happens
        - anything else: membership is toggled

        Args:
            bed: Clicked bed

        Returns:
            What the click did
        """
        if bed.status == BedStatusEnum.OCCUPIED:
            return BedClickOutcomeEnum.OPENED_DETAIL

        if bed.status in UNSELECTABLE_BED_STATUSES:
            return BedClickOutcomeEnum.IGNORED

        if bed.id in self._ids:
            del self._ids[bed.id]
            logger.debug(f"Bed {bed.id} deselected")
            return BedClickOutcomeEnum.DESELECTED

        self._ids[bed.id] = None
        logger.debug(f"Bed {bed.id} selected")
        return BedClickOutcomeEnum.SELECTED

    def clear(self) -> int:
        """
        Empties the set.

        Returns:
            How many beds were selected
        """
        count = len(self._ids)
        self._ids.clear()
        return count

    def resolve(self, catalog) -> List[BedSnapshot]:
        """
        Selected beds as catalog records, in selection order.

        Args:
            catalog: BedCatalog of the session

        Returns:
            List of beds (ids missing from the catalog are skipped)
        """
        beds = []
        for bed_id in self._ids:
            bed = catalog.find_bed(bed_id)
            if bed is not None:
                beds.append(bed)
        return beds
