from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class SeatModel(Base):
    __tablename__ = 'seat'
    __table_args__ = (
        UniqueConstraint('cinema_id', 'row_number', 'seat_number', name='uq_seat_cinema_position'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cinema_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('cinema.id', ondelete='CASCADE'), nullable=False, index=True
    )
    seat_number: Mapped[str] = mapped_column(String(10), nullable=False)
    row_number: Mapped[str] = mapped_column(String(10), nullable=False)
    seat_type: Mapped[str] = mapped_column(String(50), nullable=False, default='regular')
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
