"""Initial migration - bed board tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

BED_TYPES = ('ICU', 'HDU', 'WARD', 'PRIVATE', 'ISOLATION')
BED_STATUSES = ('AVAILABLE', 'OCCUPIED', 'RESERVED', 'MAINTENANCE')
ACUITIES = ('LOW', 'MEDIUM', 'HIGH', 'CRITICAL')


def upgrade() -> None:
    """Creates every bed board table."""

    # Floor
    op.create_table(
        'floor',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, default=0),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_floor_position', 'floor', ['position'])

    # Ward
    op.create_table(
        'ward',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('floor_id', sa.String(), nullable=False),
        sa.Column('type', sa.Enum(*BED_TYPES, name='bedtypeenum'), nullable=False),
        sa.Column('price_per_day', sa.Integer(), nullable=False, default=0),
        sa.Column('position', sa.Integer(), nullable=False, default=0),
        sa.ForeignKeyConstraint(['floor_id'], ['floor.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_ward_code', 'ward', ['code'])
    op.create_index('ix_ward_floor_id', 'ward', ['floor_id'])

    # Bed
    op.create_table(
        'bed',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('bed_number', sa.String(), nullable=False),
        sa.Column('ward_id', sa.String(), nullable=False),
        sa.Column('room_number', sa.String(), nullable=False),
        sa.Column('type', sa.Enum(*BED_TYPES, name='bedtypeenum'), nullable=False),
        sa.Column('status', sa.Enum(*BED_STATUSES, name='bedstatusenum'), nullable=False),
        sa.Column('price_per_day', sa.Integer(), nullable=False),
        sa.Column('amenities', sa.String(), nullable=True),
        sa.Column('last_cleaned_at', sa.DateTime(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('grid_row', sa.Integer(), nullable=False, default=0),
        sa.Column('grid_col', sa.Integer(), nullable=False, default=0),
        sa.ForeignKeyConstraint(['ward_id'], ['ward.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_bed_bed_number', 'bed', ['bed_number'])
    op.create_index('ix_bed_ward_id', 'bed', ['ward_id'])
    op.create_index('ix_bed_status', 'bed', ['status'])

    # Occupant
    op.create_table(
        'occupant',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('bed_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('mrn', sa.String(), nullable=False),
        sa.Column('admitted_at', sa.DateTime(), nullable=False),
        sa.Column('acuity', sa.Enum(*ACUITIES, name='acuityenum'), nullable=True),
        sa.Column('diagnosis', sa.String(), nullable=True),
        sa.Column('attending_doctor', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['bed_id'], ['bed.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_occupant_bed_id', 'occupant', ['bed_id'], unique=True)
    op.create_index('ix_occupant_mrn', 'occupant', ['mrn'])

    # Inpatient
    op.create_table(
        'inpatient',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('gdid', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('gender', sa.String(), nullable=False),
        sa.Column('ward_name', sa.String(), nullable=False),
        sa.Column('room', sa.String(), nullable=False),
        sa.Column('bed_label', sa.String(), nullable=False),
        sa.Column('tariff', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_inpatient_gdid', 'inpatient', ['gdid'])
    op.create_index('ix_inpatient_name', 'inpatient', ['name'])


def downgrade() -> None:
    """Drops every bed board table."""
    op.drop_table('inpatient')
    op.drop_table('occupant')
    op.drop_table('bed')
    op.drop_table('ward')
    op.drop_table('floor')
