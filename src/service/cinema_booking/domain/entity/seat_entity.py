from decimal import Decimal

import attrs


@attrs.define(frozen=True)
class Seat:
    """A physical seat of one cinema; price is the current list price"""

    id: int
    cinema_id: int
    seat_number: str
    row_number: str
    seat_type: str
    price: Decimal

    def belongs_to(self, cinema_id: int) -> bool:
        return self.cinema_id == cinema_id
