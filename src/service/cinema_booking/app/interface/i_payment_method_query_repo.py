from abc import ABC, abstractmethod
from typing import List

from src.service.cinema_booking.domain.entity.payment_method_entity import PaymentMethod


class IPaymentMethodQueryRepo(ABC):
    @abstractmethod
    async def is_payment_method_active(self, *, payment_method_id: int) -> bool:
        pass

    @abstractmethod
    async def list_active(self) -> List[PaymentMethod]:
        pass
