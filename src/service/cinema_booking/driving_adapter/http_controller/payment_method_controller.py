from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.query.list_payment_methods_use_case import (
    ListPaymentMethodsUseCase,
)
from src.service.cinema_booking.driving_adapter.http_controller.schema.payment_method_schema import (
    PaymentMethodResponse,
)


router = APIRouter()


@router.get('', response_model=List[PaymentMethodResponse])
@Logger.io
async def list_payment_methods(
    use_case: ListPaymentMethodsUseCase = Depends(ListPaymentMethodsUseCase.depends),
) -> List[PaymentMethodResponse]:
    methods = await use_case.list_active()
    return [PaymentMethodResponse.model_validate(m, from_attributes=True) for m in methods]
