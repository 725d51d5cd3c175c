"""
Initial data for the bed board.
Creates floors, wards, beds, occupants and the admitted patient list.

BUILDING LAYOUT:
================

F1 Ground Floor   - Emergency (12, from 1001), Observation (8, from 1013)
F2 First Floor    - Intensive Care Unit (18, from 2001), High Dependency Unit (12, from 2019)
F3 Second Floor   - General Ward A, General Ward B (room-labelled beds, e.g. WA-102-1)
F4 Third Floor    - Private Rooms (16, from 4001), Isolation Ward (8, from 4017)
F5 Fourth Floor   - Surgical Ward (20, from 5001), Orthopedics (16, from 5021)

Statuses follow each ward's occupancy rate but are deterministic, so a
fresh database always looks the same.
"""
from sqlmodel import Session
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple
import logging

from bedboard.models.floor import Floor
from bedboard.models.ward import Ward
from bedboard.models.bed import Bed
from bedboard.models.occupant import Occupant
from bedboard.models.inpatient import Inpatient
from bedboard.models.enums import BedStatusEnum, BedTypeEnum, AcuityEnum
from bedboard.repositories.bed_repo import BedRepository

logger = logging.getLogger("bedboard.seed")

BEDS_PER_ROW = 6

PRICE_BY_TYPE = {
    BedTypeEnum.ICU: 15000,
    BedTypeEnum.HDU: 10000,
    BedTypeEnum.WARD: 2500,
    BedTypeEnum.PRIVATE: 8000,
    BedTypeEnum.ISOLATION: 6000,
}

AMENITIES_BY_TYPE = {
    BedTypeEnum.ICU: ["O2", "Ventilator", "Monitor", "IV Pump", "Suction"],
    BedTypeEnum.HDU: ["O2", "Monitor", "IV Pump"],
    BedTypeEnum.WARD: ["O2"],
    BedTypeEnum.PRIVATE: ["O2", "Monitor"],
    BedTypeEnum.ISOLATION: ["O2", "Negative Pressure", "Monitor"],
}

MAINTENANCE_NOTE = "Scheduled maintenance - electrical check"

OCCUPANT_NAMES = [
    "Amit Sharma", "Priya Patel", "Rahul Reddy", "Sneha Kumar", "Vikram Singh",
    "Anjali Nair", "Karthik Menon", "Divya Rao", "Suresh Gupta", "Lakshmi Joshi",
    "Rajan Iyer", "Meena Bhat", "Arjun Verma", "Kavitha Mishra", "Sanjay Das",
]
DOCTORS = [
    "Dr. Meera Nair", "Dr. Rajesh Kumar", "Dr. Anita Singh",
    "Dr. Sunil Reddy", "Dr. Prakash Shah",
]
DIAGNOSES = [
    "Hypertension", "Type 2 Diabetes", "COPD", "Coronary Artery Disease",
    "Pneumonia", "Appendicitis", "Fracture - Femur", "Post-Op Recovery",
]
ACUITIES = [AcuityEnum.LOW, AcuityEnum.MEDIUM, AcuityEnum.HIGH, AcuityEnum.CRITICAL]

# (floor id, floor name, [(code, name, type, bed count, first bed number, occupancy rate)])
GENERATED_FLOORS = [
    ("F1", "Ground Floor", [
        ("ER", "Emergency", BedTypeEnum.WARD, 12, 1001, 0.75),
        ("OBS", "Observation", BedTypeEnum.WARD, 8, 1013, 0.60),
    ]),
    ("F2", "First Floor", [
        ("ICU", "Intensive Care Unit", BedTypeEnum.ICU, 18, 2001, 0.85),
        ("HDU", "High Dependency Unit", BedTypeEnum.HDU, 12, 2019, 0.70),
    ]),
    ("F4", "Third Floor", [
        ("PVT", "Private Rooms", BedTypeEnum.PRIVATE, 16, 4001, 0.65),
        ("ISO", "Isolation Ward", BedTypeEnum.ISOLATION, 8, 4017, 0.40),
    ]),
    ("F5", "Fourth Floor", [
        ("SURG", "Surgical Ward", BedTypeEnum.WARD, 20, 5001, 0.60),
        ("ORTHO", "Orthopedics", BedTypeEnum.WARD, 16, 5021, 0.55),
    ]),
]

# General wards carry room-labelled beds with their own tariff.
# (bed number, room, status, price per day, occupant MRN)
GENERAL_WARD_A = [
    ("WA-101-1", "101", BedStatusEnum.AVAILABLE, 3000, None),
    ("WA-101-2", "101", BedStatusEnum.OCCUPIED, 3000, "MRN0100001"),
    ("WA-102-1", "102", BedStatusEnum.AVAILABLE, 3500, None),
    ("WA-102-2", "102", BedStatusEnum.RESERVED, 3500, None),
    ("WA-103-1", "103", BedStatusEnum.AVAILABLE, 4000, None),
    ("WA-104-1", "104", BedStatusEnum.MAINTENANCE, 3000, None),
    ("WA-104-2", "104", BedStatusEnum.AVAILABLE, 3000, None),
    ("WA-105-1", "105", BedStatusEnum.AVAILABLE, 3000, None),
    ("WA-105-2", "105", BedStatusEnum.OCCUPIED, 3500, "MRN0100006"),
    ("WA-108-1", "108", BedStatusEnum.OCCUPIED, 3500, "MRN0100011"),
]
GENERAL_WARD_B = [
    ("WB-201-1", "201", BedStatusEnum.AVAILABLE, 3000, None),
    ("WB-201-2", "201", BedStatusEnum.OCCUPIED, 3000, "MRN0100002"),
    ("WB-202-1", "202", BedStatusEnum.AVAILABLE, 3500, None),
    ("WB-203-1", "203", BedStatusEnum.AVAILABLE, 3000, None),
    ("WB-203-2", "203", BedStatusEnum.OCCUPIED, 3000, "MRN0100007"),
    ("WB-204-1", "204", BedStatusEnum.RESERVED, 3000, None),
    ("WB-204-2", "204", BedStatusEnum.MAINTENANCE, 3000, None),
    ("WB-205-1", "205", BedStatusEnum.AVAILABLE, 3000, None),
]

# (MRN, gdid, name, age, gender, ward, room, bed label, tariff)
INPATIENTS = [
    ("MRN0100001", "001", "Harish Kalyan", 44, "Male", "Ward A", "Room 101", "WA-101-2", 3000),
    ("MRN0100002", "002", "Priya Sharma", 32, "Female", "Ward B", "Room 201", "WB-201-2", 3000),
    ("MRN0100003", "003", "Rajesh Kumar", 56, "Male", "ICU", "ICU Bay 1", "IC-02", 15000),
    ("MRN0100004", "004", "Anjali Menon", 28, "Female", "Step-Down Unit", "SD Bay 1", "SD-02", 8000),
    ("MRN0100005", "005", "Suresh Nair", 61, "Male", "Private Wing", "Suite 402", "PW-402", 12000),
    ("MRN0100006", "006", "Lakshmi Devi", 72, "Female", "Ward A", "Room 105", "WA-105-2", 3500),
    ("MRN0100007", "007", "Vikram Singh", 38, "Male", "Ward B", "Room 203", "WB-203-2", 3000),
    ("MRN0100008", "008", "Meena Kumari", 55, "Female", "ICU", "ICU Bay 2", "IC-04", 15000),
    ("MRN0100009", "009", "Arjun Reddy", 29, "Male", "Emergency", "ER Bay 3", "ER-06", 2500),
    ("MRN0100010", "010", "Kavitha Rao", 48, "Female", "Private Wing", "Suite 405", "PW-405", 12000),
    ("MRN0100011", "011", "Mohammed Ali", 65, "Male", "Ward A", "Room 108", "WA-108-1", 3500),
    ("MRN0100012", "012", "Sunita Patel", 41, "Female", "Step-Down Unit", "SD Bay 2", "SD-04", 8000),
]


def seed_data(session: Session, now: Optional[datetime] = None) -> None:
    """
    Seeds the database if it is empty.

    Args:
        session: Database session
        now: Reference time for admissions and cleaning timestamps
    """
    if BedRepository(session).count():
        logger.info("Database already seeded")
        return

    if now is None:
        now = datetime.now()

    patients = seed_inpatients(session)

    # ========================================
    # GENERATED FLOORS
    # ========================================
    occupant_index = 0
    for floor_id, floor_name, wards in GENERATED_FLOORS:
        floor = _create_floor(session, floor_id, floor_name, _floor_position(floor_id))
        for ward_position, (code, name, bed_type, count, start, rate) in enumerate(wards):
            ward = _create_ward(session, floor, code, name, bed_type, ward_position)
            occupant_index = _generate_ward_beds(
                session, ward, count, start, rate, occupant_index, now
            )

    # ========================================
    # F3 - GENERAL WARDS
    # ========================================
    floor = _create_floor(session, "F3", "Second Floor", _floor_position("F3"))
    ward_a = _create_ward(session, floor, "WARD-A", "General Ward A", BedTypeEnum.WARD, 0)
    _create_listed_beds(session, ward_a, GENERAL_WARD_A, patients, now)
    ward_b = _create_ward(session, floor, "WARD-B", "General Ward B", BedTypeEnum.WARD, 1)
    _create_listed_beds(session, ward_b, GENERAL_WARD_B, patients, now)

    session.commit()
    logger.info("Bed board data seeded")


def seed_inpatients(session: Session) -> Dict[str, Inpatient]:
    """
    Creates the admitted patient list.

    Returns:
        Patients by MRN
    """
    patients = {}
    for mrn, gdid, name, age, gender, ward, room, bed_label, tariff in INPATIENTS:
        patient = Inpatient(
            id=mrn,
            gdid=gdid,
            name=name,
            age=age,
            gender=gender,
            ward_name=ward,
            room=room,
            bed_label=bed_label,
            tariff=tariff,
        )
        session.add(patient)
        patients[mrn] = patient
    return patients


def _floor_position(floor_id: str) -> int:
    return int(floor_id[1:])


def _create_floor(session: Session, floor_id: str, name: str, position: int) -> Floor:
    floor = Floor(id=floor_id, name=name, position=position)
    session.add(floor)
    return floor


def _create_ward(
    session: Session,
    floor: Floor,
    code: str,
    name: str,
    bed_type: BedTypeEnum,
    position: int
) -> Ward:
    ward = Ward(
        id=f"{floor.id}-{code}",
        code=code,
        name=name,
        floor_id=floor.id,
        type=bed_type,
        price_per_day=PRICE_BY_TYPE[bed_type],
        position=position,
    )
    session.add(ward)
    return ward


def _status_for(index: int, occupancy_rate: float) -> BedStatusEnum:
    """
    Deterministic status for the n-th bed of a ward.

    Spreads beds over twenty evenly spaced slots, so over twenty beds the
    shares match the rate: occupied, then 8% reserved, then 7% maintenance.
    """
    slot = ((index * 7 + 3) % 20) / 20
    if slot < occupancy_rate:
        return BedStatusEnum.OCCUPIED
    if slot < occupancy_rate + 0.08:
        return BedStatusEnum.RESERVED
    if slot < occupancy_rate + 0.15:
        return BedStatusEnum.MAINTENANCE
    return BedStatusEnum.AVAILABLE


def _generate_ward_beds(
    session: Session,
    ward: Ward,
    count: int,
    start_number: int,
    occupancy_rate: float,
    occupant_index: int,
    now: datetime
) -> int:
    """
    Creates `count` numbered beds for a ward.

    Returns:
        Next occupant index
    """
    for i in range(count):
        bed_number = str(start_number + i)
        status = _status_for(start_number + i, occupancy_rate)

        bed = Bed(
            id=f"{ward.id}-{bed_number}",
            bed_number=bed_number,
            ward_id=ward.id,
            room_number=f"{ward.code[0]}{i // 4 + 1}{chr(65 + i % 4)}",
            type=ward.type,
            status=status,
            price_per_day=PRICE_BY_TYPE[ward.type],
            last_cleaned_at=None if status == BedStatusEnum.OCCUPIED else now - timedelta(hours=i % 24 + 1),
            notes=MAINTENANCE_NOTE if status == BedStatusEnum.MAINTENANCE else None,
            grid_row=i // BEDS_PER_ROW,
            grid_col=i % BEDS_PER_ROW,
        )
        bed.set_amenities(AMENITIES_BY_TYPE[ward.type])
        session.add(bed)

        if status == BedStatusEnum.OCCUPIED:
            session.add(_generated_occupant(bed, occupant_index, now))
            occupant_index += 1

    return occupant_index


def _generated_occupant(bed: Bed, index: int, now: datetime) -> Occupant:
    return Occupant(
        bed_id=bed.id,
        name=OCCUPANT_NAMES[index % len(OCCUPANT_NAMES)],
        mrn=f"MRN{200000 + index:07d}",
        admitted_at=now - timedelta(days=index % 10 + 1, hours=index % 7),
        acuity=ACUITIES[index % len(ACUITIES)],
        diagnosis=DIAGNOSES[index % len(DIAGNOSES)],
        attending_doctor=DOCTORS[index % len(DOCTORS)],
    )


def _create_listed_beds(
    session: Session,
    ward: Ward,
    rows: List[Tuple[str, str, BedStatusEnum, int, Optional[str]]],
    patients: Dict[str, Inpatient],
    now: datetime
) -> None:
    for i, (bed_number, room, status, price, mrn) in enumerate(rows):
        bed = Bed(
            id=f"{ward.id}-{bed_number}",
            bed_number=bed_number,
            ward_id=ward.id,
            room_number=room,
            type=ward.type,
            status=status,
            price_per_day=price,
            last_cleaned_at=None if status == BedStatusEnum.OCCUPIED else now - timedelta(hours=i + 2),
            notes=MAINTENANCE_NOTE if status == BedStatusEnum.MAINTENANCE else None,
            grid_row=i // BEDS_PER_ROW,
            grid_col=i % BEDS_PER_ROW,
        )
        bed.set_amenities(AMENITIES_BY_TYPE[ward.type])
        session.add(bed)

        if mrn is not None:
            patient = patients[mrn]
            session.add(Occupant(
                bed_id=bed.id,
                name=patient.name,
                mrn=patient.id,
                admitted_at=now - timedelta(days=i % 5 + 1, hours=3),
                acuity=ACUITIES[i % len(ACUITIES)],
                diagnosis=DIAGNOSES[i % len(DIAGNOSES)],
                attending_doctor=DOCTORS[0],
            ))
