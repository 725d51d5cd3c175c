"""
Repositories for data access.
They wrap the SQL queries behind a small interface.
"""
from bedboard.repositories.base import BaseRepository
from bedboard.repositories.bed_repo import BedRepository
from bedboard.repositories.inpatient_repo import InpatientRepository

__all__ = [
    "BaseRepository",
    "BedRepository",
    "InpatientRepository",
]
