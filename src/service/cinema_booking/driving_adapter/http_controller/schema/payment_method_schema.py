from typing import Optional

from pydantic import BaseModel


class PaymentMethodResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {'id': 1, 'name': 'credit_card', 'description': 'Visa / Mastercard'}
        },
    }

    id: int
    name: str
    description: Optional[str] = None
