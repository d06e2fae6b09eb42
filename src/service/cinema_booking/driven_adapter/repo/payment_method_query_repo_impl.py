from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_payment_method_query_repo import (
    IPaymentMethodQueryRepo,
)
from src.service.cinema_booking.domain.entity.payment_method_entity import PaymentMethod
from src.service.cinema_booking.driven_adapter.model.payment_method_model import (
    PaymentMethodModel,
)


class PaymentMethodQueryRepoImpl(IPaymentMethodQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    def _model_to_entity(self, model: PaymentMethodModel) -> PaymentMethod:
        return PaymentMethod(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    @Logger.io
    async def is_payment_method_active(self, *, payment_method_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PaymentMethodModel.id).where(
                    PaymentMethodModel.id == payment_method_id,
                    PaymentMethodModel.is_active.is_(True),
                )
            )
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_active(self) -> List[PaymentMethod]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PaymentMethodModel)
                .where(PaymentMethodModel.is_active.is_(True))
                .order_by(PaymentMethodModel.id)
            )
            return [self._model_to_entity(model) for model in result.scalars().all()]
