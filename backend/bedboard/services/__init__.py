"""
Business services of the bed board.
"""
from bedboard.services.catalog_service import BedCatalog, CatalogService
from bedboard.services.filter_service import filter_floors, EMPTY_RESULT_MESSAGE
from bedboard.services.selection_service import SelectionTracker
from bedboard.services.occupancy_service import build_occupancy_detail
from bedboard.services.summary_service import build_selection_summary
from bedboard.services.transfer_service import TransferWorkflow
from bedboard.services.session_service import BoardSession, BoardSessionStore

__all__ = [
    "BedCatalog",
    "CatalogService",
    "filter_floors",
    "EMPTY_RESULT_MESSAGE",
    "SelectionTracker",
    "build_occupancy_detail",
    "build_selection_summary",
    "TransferWorkflow",
    "BoardSession",
    "BoardSessionStore",
]
