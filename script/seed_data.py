#!/usr/bin/env python3
"""
Database Seed Script
Populate demo catalog data into the database

Features:
1. Create Cinemas - 2 cinemas with a grid of seats each (regular / premium rows)
2. Create Payment Methods - 3 active methods + 1 inactive

Notes:
- Run `alembic upgrade head` (or `python script/reset_database.py`) first
- Bookings are never seeded; create them through POST /api/booking
"""

import asyncio
from dataclasses import dataclass
from decimal import Decimal
import string

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import engine_manager, get_session_maker
from src.service.cinema_booking.driven_adapter.model import (
    BookingModel,
    CinemaModel,
    PaymentMethodModel,
    SeatModel,
)


@dataclass
class CinemaConfig:
    """Cinema seed configuration"""
    name: str
    location: str
    description: str
    rows: int
    seats_per_row: int
    regular_price: Decimal
    premium_price: Decimal


CINEMAS = [
    CinemaConfig(
        name='Grand Cinema',
        location='Downtown',
        description='Flagship theatre, premium back rows',
        rows=8,
        seats_per_row=12,
        regular_price=Decimal('12.50'),
        premium_price=Decimal('18.00'),
    ),
    CinemaConfig(
        name='Riverside Screens',
        location='Harbour District',
        description='Small neighbourhood cinema',
        rows=5,
        seats_per_row=10,
        regular_price=Decimal('9.00'),
        premium_price=Decimal('13.50'),
    ),
]

PAYMENT_METHODS = [
    ('credit_card', 'Visa / Mastercard', True),
    ('debit_card', 'Debit card', True),
    ('e_wallet', 'Mobile e-wallet', True),
    ('bank_transfer', 'Manual bank transfer (discontinued)', False),
]

PREMIUM_ROWS = 2  # last N rows of each cinema


async def create_cinemas(session: AsyncSession) -> None:
    print('🎬 Creating cinemas...')
    for config in CINEMAS:
        cinema = CinemaModel(
            name=config.name,
            location=config.location,
            description=config.description,
            total_seats=config.rows * config.seats_per_row,
        )
        session.add(cinema)
        await session.flush()

        for row_index in range(config.rows):
            row_label = string.ascii_uppercase[row_index]
            is_premium = row_index >= config.rows - PREMIUM_ROWS
            for seat_index in range(1, config.seats_per_row + 1):
                session.add(
                    SeatModel(
                        cinema_id=cinema.id,
                        row_number=row_label,
                        seat_number=f'{seat_index:02d}',
                        seat_type='premium' if is_premium else 'regular',
                        price=config.premium_price if is_premium else config.regular_price,
                    )
                )
        print(f'   ✅ Created cinema: ID={cinema.id}, Name={cinema.name}, Seats={cinema.total_seats}')


async def create_payment_methods(session: AsyncSession) -> None:
    print('💳 Creating payment methods...')
    for name, description, is_active in PAYMENT_METHODS:
        session.add(PaymentMethodModel(name=name, description=description, is_active=is_active))
    print(f'   ✅ Created payment methods: {len(PAYMENT_METHODS)}')


async def verify_data():
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with get_session_maker()() as session:
        for model in (CinemaModel, SeatModel, PaymentMethodModel, BookingModel):
            result = await session.execute(select(func.count()).select_from(model))
            print(f'   {model.__tablename__} count: {result.scalar()}')

    print('   ✅ Data verification completed!')


async def _seed_data():
    """Seed catalog in a single transaction"""
    async with get_session_maker()() as session:
        try:
            await create_cinemas(session)
            print()

            await create_payment_methods(session)
            print()

            await session.commit()
            print('✅ All data committed successfully!')

        except Exception as e:
            await session.rollback()
            print(f'❌ Rolling back: {e}')
            raise


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await _seed_data()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)

    finally:
        await engine_manager.dispose()


if __name__ == '__main__':
    asyncio.run(main())
