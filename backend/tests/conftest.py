"""
pytest fixtures.
"""
import os

# Keep the application away from the on-disk database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from datetime import datetime
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

import bedboard.models  # noqa: F401
from bedboard.config import settings
from bedboard.core.context import AppContext, get_app_context
from bedboard.core.database import get_session
from main import app

# Every test runs at this wall-clock time
NOW = datetime(2026, 3, 10, 9, 30)


def fixed_clock() -> datetime:
    return NOW


@pytest.fixture(autouse=True)
def no_confirm_delay(monkeypatch):
    """Transfers confirm instantly in tests."""
    monkeypatch.setattr(settings, "TRANSFER_CONFIRM_DELAY_SECONDS", 0)


# In-memory engine
@pytest.fixture(name="engine")
def engine_fixture():
    """Creates an in-memory test engine."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Creates a test session."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="ctx")
def ctx_fixture():
    """Application context with a fixed clock."""
    return AppContext(clock=fixed_clock)


@pytest.fixture(name="client")
def client_fixture(session, ctx):
    """Test client with the session and context injected."""
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_app_context] = lambda: ctx

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


# ============================================
# FACTORY FIXTURES
# ============================================

@pytest.fixture
def create_floor(session):
    """Factory fixture for floors."""
    from bedboard.models.floor import Floor

    def _create_floor(floor_id="F1", name="Ground Floor", position=1):
        floor = Floor(id=floor_id, name=name, position=position)
        session.add(floor)
        session.commit()
        session.refresh(floor)
        return floor

    return _create_floor


@pytest.fixture
def create_ward(session):
    """Factory fixture for wards."""
    from bedboard.models.ward import Ward
    from bedboard.models.enums import BedTypeEnum

    def _create_ward(floor_id, code="ER", name="Emergency", type=BedTypeEnum.WARD,
                     price_per_day=2500, position=0):
        ward = Ward(
            id=f"{floor_id}-{code}",
            code=code,
            name=name,
            floor_id=floor_id,
            type=type,
            price_per_day=price_per_day,
            position=position,
        )
        session.add(ward)
        session.commit()
        session.refresh(ward)
        return ward

    return _create_ward


@pytest.fixture
def create_bed(session):
    """Factory fixture for beds."""
    from bedboard.models.bed import Bed
    from bedboard.models.enums import BedStatusEnum

    def _create_bed(ward, bed_number="1001", status=BedStatusEnum.AVAILABLE,
                    price_per_day=None, room_number="E1A", amenities=("O2",),
                    grid_row=0, grid_col=0, notes=None):
        bed = Bed(
            id=f"{ward.id}-{bed_number}",
            bed_number=bed_number,
            ward_id=ward.id,
            room_number=room_number,
            type=ward.type,
            status=status,
            price_per_day=price_per_day if price_per_day is not None else ward.price_per_day,
            grid_row=grid_row,
            grid_col=grid_col,
            notes=notes,
        )
        bed.set_amenities(list(amenities))
        session.add(bed)
        session.commit()
        session.refresh(bed)
        return bed

    return _create_bed


@pytest.fixture
def create_occupant(session):
    """Factory fixture for occupants."""
    from bedboard.models.occupant import Occupant
    from bedboard.models.enums import AcuityEnum

    def _create_occupant(bed, name="Harish Kalyan", mrn="MRN0100001",
                         admitted_at=None, acuity=AcuityEnum.MEDIUM,
                         diagnosis="Pneumonia", attending_doctor="Dr. Meera Nair"):
        occupant = Occupant(
            bed_id=bed.id,
            name=name,
            mrn=mrn,
            admitted_at=admitted_at or datetime(2026, 3, 7, 9, 30),
            acuity=acuity,
            diagnosis=diagnosis,
            attending_doctor=attending_doctor,
        )
        session.add(occupant)
        session.commit()
        session.refresh(occupant)
        return occupant

    return _create_occupant


@pytest.fixture
def create_inpatient(session):
    """Factory fixture for admitted patients."""
    from bedboard.models.inpatient import Inpatient

    def _create_inpatient(mrn="MRN0100002", gdid="002", name="Priya Sharma", age=32,
                          gender="Female", ward_name="Ward B", room="Room 201",
                          bed_label="WB-201-2", tariff=3000):
        patient = Inpatient(
            id=mrn,
            gdid=gdid,
            name=name,
            age=age,
            gender=gender,
            ward_name=ward_name,
            room=room,
            bed_label=bed_label,
            tariff=tariff,
        )
        session.add(patient)
        session.commit()
        session.refresh(patient)
        return patient

    return _create_inpatient


# ============================================
# SEEDED DATA
# ============================================

@pytest.fixture
def seeded(session):
    """Database filled with the standard bed board data."""
    from bedboard.utils.init_data import seed_data

    seed_data(session, now=NOW)
    return session


@pytest.fixture
def catalog(seeded):
    """Catalog snapshot of the seeded data."""
    from bedboard.services.catalog_service import CatalogService

    return CatalogService(seeded).load_catalog()


@pytest.fixture
def inpatients(seeded):
    """Admitted patient snapshots of the seeded data."""
    from bedboard.services.catalog_service import CatalogService

    return CatalogService(seeded).load_inpatients()


@pytest.fixture
def board(catalog, inpatients):
    """Board session over the seeded catalog."""
    from bedboard.services.session_service import BoardSession

    return BoardSession(catalog, inpatients, fixed_clock)


@pytest.fixture
def board_id(client, seeded):
    """Id of a board session opened through the API."""
    response = client.post("/api/sessions")
    assert response.status_code == 201
    return response.json()["id"]
