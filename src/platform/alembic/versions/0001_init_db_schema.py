"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2024-04-20

Schema:
- cinema: Cinemas (catalog)
- seat: Seats with price, each tied to one cinema
- payment_method: Accepted payment methods
- booking: Reservation ledger with UUID7 primary key

The partial unique index uq_booking_active_seat_showtime allows at most one
reserved or paid booking per (cinema, seat, date, time).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ACTIVE_BOOKING_PREDICATE = "booking_status IN ('reserved', 'paid')"


def upgrade() -> None:
    """Create all tables with final schema."""

    # ========== Catalog ==========

    op.create_table(
        'cinema',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('total_seats', sa.Integer(), nullable=False),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'seat',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cinema_id', sa.Integer(), nullable=False),
        sa.Column('seat_number', sa.String(length=10), nullable=False),
        sa.Column('row_number', sa.String(length=10), nullable=False),
        sa.Column('seat_type', sa.String(length=50), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.ForeignKeyConstraint(['cinema_id'], ['cinema.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'cinema_id', 'row_number', 'seat_number', name='uq_seat_cinema_position'
        ),
    )
    op.create_index(op.f('ix_seat_cinema_id'), 'seat', ['cinema_id'], unique=False)

    op.create_table(
        'payment_method',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    # ========== Reservation ledger ==========

    op.create_table(
        'booking',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('cinema_id', sa.Integer(), nullable=False),
        sa.Column('seat_id', sa.Integer(), nullable=False),
        sa.Column('booking_date', sa.Date(), nullable=False),
        sa.Column('booking_time', sa.Time(), nullable=False),
        sa.Column('payment_method_id', sa.Integer(), nullable=True),
        sa.Column('payment_status', sa.String(length=20), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('booking_status', sa.String(length=20), nullable=False),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.ForeignKeyConstraint(['cinema_id'], ['cinema.id']),
        sa.ForeignKeyConstraint(['seat_id'], ['seat.id']),
        sa.ForeignKeyConstraint(['payment_method_id'], ['payment_method.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_booking_user_id'), 'booking', ['user_id'], unique=False)
    op.create_index(
        'uq_booking_active_seat_showtime',
        'booking',
        ['cinema_id', 'seat_id', 'booking_date', 'booking_time'],
        unique=True,
        postgresql_where=sa.text(ACTIVE_BOOKING_PREDICATE),
        sqlite_where=sa.text(ACTIVE_BOOKING_PREDICATE),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index('uq_booking_active_seat_showtime', table_name='booking')
    op.drop_index(op.f('ix_booking_user_id'), table_name='booking')
    op.drop_table('booking')
    op.drop_table('payment_method')
    op.drop_index(op.f('ix_seat_cinema_id'), table_name='seat')
    op.drop_table('seat')
    op.drop_table('cinema')
