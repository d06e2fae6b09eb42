from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class PaymentMethod:
    id: int
    name: str
    is_active: bool = True
    description: Optional[str] = None
    created_at: Optional[datetime] = None
