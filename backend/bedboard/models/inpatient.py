"""
Inpatient model.
"""
from sqlmodel import SQLModel, Field


class Inpatient(SQLModel, table=True):
    """
    Admitted (IP) patient, as listed in the transfer patient search.

    `id` is the internal MRN and `gdid` the external id printed on
    wristbands; both are searchable.
    """
    __tablename__ = "inpatient"

    id: str = Field(primary_key=True)  # MRN0100001
    gdid: str = Field(index=True)      # 001
    name: str = Field(index=True)
    age: int
    gender: str
    ward_name: str
    room: str
    bed_label: str
    tariff: int

    def __repr__(self) -> str:
        return f"Inpatient(id={self.id}, name={self.name}, bed_label={self.bed_label})"
