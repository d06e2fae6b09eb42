"""Paginated cinema listing DTO."""

from typing import List

import attrs

from src.service.cinema_booking.domain.entity.cinema_entity import Cinema


@attrs.define(frozen=True)
class CinemaPage:
    cinemas: List[Cinema]
    total_items: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return (self.total_items + self.page_size - 1) // self.page_size
