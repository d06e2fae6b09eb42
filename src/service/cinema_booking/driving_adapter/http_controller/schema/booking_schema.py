from datetime import date, datetime, time
from decimal import Decimal
import re
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


_HH_MM = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'cinema_id': 1,
                'seat_id': 12,
                'date': '2024-05-01',
                'time': '19:00',
                'payment_method_id': 1,
            }
        },
    )

    cinema_id: int = Field(gt=0)
    seat_id: int = Field(gt=0)
    booking_date: date = Field(alias='date')
    booking_time: time = Field(alias='time')
    payment_method_id: int = Field(gt=0)

    @field_validator('booking_time', mode='before')
    @classmethod
    def require_hh_mm(cls, v: Any) -> Any:
        if isinstance(v, str) and not _HH_MM.match(v):
            raise ValueError('time must be in HH:MM format')
        return v


class PaymentRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'payment_method_id': 1}})

    payment_method_id: int = Field(gt=0)


class BookingResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'user_id': 2,
                'cinema_id': 1,
                'seat_id': 12,
                'booking_date': '2024-05-01',
                'booking_time': '19:00',
                'payment_method_id': 1,
                'payment_status': 'pending',
                'booking_status': 'reserved',
                'total_amount': '12.50',
                'created_at': '2024-04-20T10:30:00Z',
                'updated_at': '2024-04-20T10:30:00Z',
            }
        },
    }

    id: UUID  # UUID7
    user_id: int
    cinema_id: int
    seat_id: int
    booking_date: date
    booking_time: time
    payment_method_id: Optional[int] = None
    payment_status: str
    booking_status: str
    total_amount: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_serializer('booking_time')
    def serialize_booking_time(self, value: time) -> str:
        return value.strftime('%H:%M')


class BookingWithDetailsResponse(BookingResponse):
    cinema_name: str
    cinema_location: str
    seat_number: str
    seat_type: str
    payment_method_name: Optional[str] = None
