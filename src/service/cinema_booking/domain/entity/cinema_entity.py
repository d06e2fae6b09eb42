from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Cinema:
    id: int
    name: str
    location: str
    total_seats: int
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
