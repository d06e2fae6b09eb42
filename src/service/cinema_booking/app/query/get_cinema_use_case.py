from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.cinema_booking.domain.entity.cinema_entity import Cinema


class GetCinemaUseCase:
    def __init__(self, catalog_query_repo: ICatalogQueryRepo):
        self.catalog_query_repo = catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
    ) -> Self:
        return cls(catalog_query_repo=catalog_query_repo)

    @Logger.io
    async def get_cinema(self, cinema_id: int) -> Cinema:
        cinema = await self.catalog_query_repo.get_cinema_by_id(cinema_id=cinema_id)
        if not cinema:
            raise NotFoundError('cinema not found')
        return cinema
