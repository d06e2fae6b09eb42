from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.dto.cinema_page import CinemaPage
from src.service.cinema_booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo


DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class ListCinemasUseCase:
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
    async def list_cinemas(self, *, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> CinemaPage:
        if page < 1:
            raise DomainError('page must be at least 1')
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise DomainError(f'page_size must be between 1 and {MAX_PAGE_SIZE}')

        cinemas = await self.catalog_query_repo.list_cinemas(
            limit=page_size, offset=(page - 1) * page_size
        )
        total_items = await self.catalog_query_repo.count_cinemas()
        return CinemaPage(
            cinemas=cinemas, total_items=total_items, page=page, page_size=page_size
        )
