"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.cinema_booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.cinema_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.cinema_booking.driven_adapter.repo.catalog_query_repo_impl import (
    CatalogQueryRepoImpl,
)
from src.service.cinema_booking.driven_adapter.repo.payment_method_query_repo_impl import (
    PaymentMethodQueryRepoImpl,
)
from src.service.cinema_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (session factory over the loop-aware AsyncEngineManager)
    database = providers.Singleton(Database)

    # Repositories (stateless - open one session per call)
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    catalog_query_repo = providers.Singleton(
        CatalogQueryRepoImpl, session_factory=database.provided.session
    )
    payment_method_query_repo = providers.Singleton(
        PaymentMethodQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
