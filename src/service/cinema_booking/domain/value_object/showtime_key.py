from datetime import date, time

import attrs


def truncate_to_minute(value: time) -> time:
    """Showtimes have minute resolution; seconds and sub-seconds are dropped"""
    return value.replace(second=0, microsecond=0, tzinfo=None)


@attrs.define(frozen=True)
class ShowtimeKey:
    """
    A specific screening instance: (cinema, date, time).

    Not stored on its own; together with a seat id it is the unit of
    uniqueness for seat occupancy.
    """

    cinema_id: int
    booking_date: date
    booking_time: time = attrs.field(converter=truncate_to_minute)
