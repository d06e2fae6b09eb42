from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel


class CinemaResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'name': 'Grand Cinema',
                'location': 'Downtown',
                'description': 'Flagship theatre with 3 screens',
                'total_seats': 120,
            }
        },
    }

    id: int
    name: str
    location: str
    description: Optional[str] = None
    total_seats: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaginationMeta(BaseModel):
    current_page: int
    page_size: int
    total_items: int
    total_pages: int


class CinemaListResponse(BaseModel):
    data: List[CinemaResponse]
    pagination: PaginationMeta


class SeatAvailabilityResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'seat_id': 12,
                'cinema_id': 1,
                'seat_number': '4',
                'row_number': 'B',
                'seat_type': 'regular',
                'price': '12.50',
                'is_available': True,
            }
        },
    }

    seat_id: int
    cinema_id: int
    seat_number: str
    row_number: str
    seat_type: str
    price: Decimal
    is_available: bool
