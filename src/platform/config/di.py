"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from typing import Any, Callable

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.state.event_lock_registry import EventLockRegistry
from src.service.booking.driven_adapter.payment.http_payment_gateway_impl import (
    HttpPaymentGatewayImpl,
)
from src.service.booking.driven_adapter.payment.simulated_payment_gateway_impl import (
    SimulatedPaymentGatewayImpl,
)
from src.service.booking.driven_adapter.repo import in_memory_seed_data
from src.service.booking.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
from src.service.booking.driven_adapter.repo.event_repo_impl import EventRepoImpl
from src.service.booking.driven_adapter.repo.in_memory_booking_repo_impl import (
    InMemoryBookingRepoImpl,
)
from src.service.booking.driven_adapter.repo.in_memory_event_repo_impl import (
    InMemoryEventRepoImpl,
)
from src.service.booking.driven_adapter.repo.in_memory_user_repo_impl import InMemoryUserRepoImpl
from src.service.booking.driven_adapter.repo.in_memory_venue_repo_impl import (
    InMemoryVenueRepoImpl,
)
from src.service.booking.driven_adapter.repo.user_repo_impl import UserRepoImpl
from src.service.booking.driven_adapter.repo.venue_repo_impl import VenueRepoImpl


def _demo_seed(settings: Settings, factory: Callable[[], list[Any]]) -> list[Any]:
    return factory() if settings.SEED_DEMO_DATA else []


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    data_access_mode = providers.Callable(lambda s: str(s.DATA_ACCESS_MODE), config_service)
    payment_mode = providers.Callable(lambda s: str(s.PAYMENT_MODE), config_service)

    # Database (only touched in sql mode)
    database = providers.Singleton(
        Database, url=config_service.provided.DATABASE_URL_ASYNC
    )

    # Repositories: in_memory or sql, chosen by DATA_ACCESS_MODE
    user_repo = providers.Selector(
        data_access_mode,
        in_memory=providers.Singleton(
            InMemoryUserRepoImpl,
            seed=providers.Callable(_demo_seed, config_service, in_memory_seed_data.seed_users),
        ),
        sql=providers.Singleton(UserRepoImpl, session_factory=database.provided.session),
    )
    venue_repo = providers.Selector(
        data_access_mode,
        in_memory=providers.Singleton(
            InMemoryVenueRepoImpl,
            seed=providers.Callable(_demo_seed, config_service, in_memory_seed_data.seed_venues),
        ),
        sql=providers.Singleton(VenueRepoImpl, session_factory=database.provided.session),
    )
    event_repo = providers.Selector(
        data_access_mode,
        in_memory=providers.Singleton(
            InMemoryEventRepoImpl,
            seed=providers.Callable(_demo_seed, config_service, in_memory_seed_data.seed_events),
        ),
        sql=providers.Singleton(EventRepoImpl, session_factory=database.provided.session),
    )
    booking_repo = providers.Selector(
        data_access_mode,
        in_memory=providers.Singleton(
            InMemoryBookingRepoImpl,
            seed=providers.Callable(
                _demo_seed, config_service, in_memory_seed_data.seed_bookings
            ),
        ),
        sql=providers.Singleton(BookingRepoImpl, session_factory=database.provided.session),
    )

    # Payment gateway: simulated or external, chosen by PAYMENT_MODE
    payment_gateway = providers.Selector(
        payment_mode,
        simulated=providers.Singleton(SimulatedPaymentGatewayImpl),
        external=providers.Singleton(
            HttpPaymentGatewayImpl,
            base_url=config_service.provided.PAYMENT_API_BASE_URL,
            timeout_seconds=config_service.provided.PAYMENT_API_TIMEOUT_SECONDS,
        ),
    )

    # Serializes capacity check + insert per event inside this process
    event_lock_registry = providers.Singleton(EventLockRegistry)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
