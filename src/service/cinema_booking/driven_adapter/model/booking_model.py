from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Time,
    Uuid,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


# Only reserved and paid bookings occupy a seat; cancelled rows stay as history
ACTIVE_BOOKING_PREDICATE = "booking_status IN ('reserved', 'paid')"


class BookingModel(Base):
    __tablename__ = 'booking'
    __table_args__ = (
        # At most one active booking per seat and showtime, enforced by the database
        Index(
            'uq_booking_active_seat_showtime',
            'cinema_id',
            'seat_id',
            'booking_date',
            'booking_time',
            unique=True,
            postgresql_where=text(ACTIVE_BOOKING_PREDICATE),
            sqlite_where=text(ACTIVE_BOOKING_PREDICATE),
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)  # UUID7
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    cinema_id: Mapped[int] = mapped_column(Integer, ForeignKey('cinema.id'), nullable=False)
    seat_id: Mapped[int] = mapped_column(Integer, ForeignKey('seat.id'), nullable=False)
    booking_date: Mapped[date] = mapped_column(Date, nullable=False)
    booking_time: Mapped[time] = mapped_column(Time, nullable=False)
    payment_method_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('payment_method.id'), nullable=True
    )
    payment_status: Mapped[str] = mapped_column(String(20), nullable=False, default='pending')
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    booking_status: Mapped[str] = mapped_column(String(20), nullable=False, default='reserved')
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
