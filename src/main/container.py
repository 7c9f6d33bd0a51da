"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.actuation_use_cases import (
    GetActuationByIdUseCase,
    GetActuationsUseCase,
)
from src.application.use_cases.auth_use_cases import (
    AuthorizeUseCase,
    IssueTokenUseCase,
    LoginPageUseCase,
)
from src.application.use_cases.health_use_cases import (
    GetBridgeHealthUseCase,
    GetBridgeInfoUseCase,
)
from src.application.use_cases.smart_home_use_cases import (
    DisconnectUseCase,
    ExecuteCommandsUseCase,
    FulfillmentUseCase,
    QueryDevicesUseCase,
    SyncDevicesUseCase,
)
from src.application.use_cases.state_reporting_use_cases import (
    ReportStateUseCase,
    RequestSyncUseCase,
    UpdateDeviceStateUseCase,
)
from src.domain.entities.device import Trait
from src.domain.entities.device_state import LockStatus, LockUnlockState
from src.infrastructure.database import MongoDatabase
from src.infrastructure.gateways.home_graph_gateway import HomeGraphGateway
from src.infrastructure.gateways.little_bird_lock_gateway import LittleBirdLockGateway
from src.infrastructure.repositories.in_memory_device_state_repository import (
    InMemoryDeviceStateRepository,
)
from src.infrastructure.repositories.mongo_device_state_repository import (
    MongoDeviceStateRepository,
)
from src.infrastructure.services.account_resolver import StaticAccountResolver
from src.infrastructure.services.actuation_dispatcher import (
    BackgroundActuationDispatcher,
)
from src.infrastructure.services.health_check_service import HealthCheckService
from src.infrastructure.services.state_change_bus import InProcessStateChangeBus
from src.infrastructure.services.static_device_catalog import StaticDeviceCatalog
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)

DEFAULT_LOCK_STATE = LockUnlockState(
    is_locked=False,
    is_jammed=False,
    online=True,
    status=LockStatus.SUCCESS.value,
).to_platform()


def _enum_value(value):
    return value.value if hasattr(value, "value") else str(value)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    state_change_bus = providers.Singleton(InProcessStateChangeBus)

    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    state_repository = providers.Selector(
        providers.Callable(_enum_value, config.store.backend),
        mongo=providers.Singleton(
            MongoDeviceStateRepository,
            mongo_database=mongo_database,
            state_change_bus=state_change_bus,
            collection_name=config.database.state_collection,
        ),
        memory=providers.Singleton(
            InMemoryDeviceStateRepository,
            state_change_bus=state_change_bus,
        ),
    )

    device_catalog = providers.Singleton(
        StaticDeviceCatalog.single_lock,
        device_id=config.catalog.lock_device_id,
        name=config.catalog.lock_name,
        default_names=config.catalog.lock_default_names,
        nicknames=config.catalog.lock_nicknames,
        manufacturer=config.catalog.manufacturer,
        model=config.catalog.model,
        hw_version=config.catalog.hw_version,
        sw_version=config.catalog.sw_version,
        will_report_state=config.catalog.will_report_state,
    )

    account_resolver = providers.Singleton(
        StaticAccountResolver,
        agent_user_id=config.homegraph.agent_user_id,
    )

    # Gateways
    home_graph_gateway = providers.Singleton(
        HomeGraphGateway,
        base_url=config.homegraph.base_url,
        credentials_path=config.homegraph.credentials_path,
        timeout=config.homegraph.timeout,
    )

    lock_gateway = providers.Singleton(
        LittleBirdLockGateway,
        base_url=config.lock_vendor.base_url,
        property_id=config.lock_vendor.property_id,
        unit_id=config.lock_vendor.unit_id,
        lock_id=config.lock_vendor.lock_id,
        auth_token=config.lock_vendor.auth_token,
        api_version=config.lock_vendor.api_version,
        timeout=config.lock_vendor.timeout,
    )

    actuation_dispatcher = providers.Singleton(
        BackgroundActuationDispatcher,
        gateway=lock_gateway,
        timeout_seconds=config.lock_vendor.actuation_timeout,
        history_size=config.lock_vendor.history_size,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        state_repository=state_repository,
        store_backend=providers.Callable(_enum_value, config.store.backend),
        home_graph_url=config.homegraph.base_url,
        lock_vendor_url=config.lock_vendor.base_url,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(_enum_value, config.environment),
        git_commit=config.service.git_commit,
        build_time=config.service.build_time,
        store_backend=providers.Callable(_enum_value, config.store.backend),
        mongo_uri=config.database.mongo_uri,
        state_collection=config.database.state_collection,
        homegraph_url=config.homegraph.base_url,
        agent_user_id=config.homegraph.agent_user_id,
        lock_vendor_url=config.lock_vendor.base_url,
        lock_id=config.lock_vendor.lock_id,
    )

    # Application (use cases)
    sync_devices_use_case = providers.Factory(
        SyncDevicesUseCase,
        device_catalog=device_catalog,
        account_resolver=account_resolver,
    )

    query_devices_use_case = providers.Factory(
        QueryDevicesUseCase,
        device_state_repository=state_repository,
    )

    execute_commands_use_case = providers.Factory(
        ExecuteCommandsUseCase,
        device_state_repository=state_repository,
        device_catalog=device_catalog,
        actuation_dispatcher=actuation_dispatcher,
        actuated_device_ids=providers.List(config.catalog.lock_device_id),
    )

    disconnect_use_case = providers.Factory(
        DisconnectUseCase,
        account_resolver=account_resolver,
    )

    fulfillment_use_case = providers.Factory(
        FulfillmentUseCase,
        sync_use_case=sync_devices_use_case,
        query_use_case=query_devices_use_case,
        execute_use_case=execute_commands_use_case,
        disconnect_use_case=disconnect_use_case,
    )

    report_state_use_case = providers.Singleton(
        ReportStateUseCase,
        home_graph_gateway=home_graph_gateway,
        account_resolver=account_resolver,
    )

    request_sync_use_case = providers.Factory(
        RequestSyncUseCase,
        home_graph_gateway=home_graph_gateway,
        account_resolver=account_resolver,
    )

    update_device_state_use_case = providers.Factory(
        UpdateDeviceStateUseCase,
        device_state_repository=state_repository,
        device_catalog=device_catalog,
        default_device_id=config.catalog.lock_device_id,
    )

    get_actuations_use_case = providers.Factory(
        GetActuationsUseCase,
        actuation_dispatcher=actuation_dispatcher,
    )

    get_actuation_by_id_use_case = providers.Factory(
        GetActuationByIdUseCase,
        actuation_dispatcher=actuation_dispatcher,
    )

    login_page_use_case = providers.Factory(LoginPageUseCase)

    authorize_use_case = providers.Factory(
        AuthorizeUseCase,
        authorization_code=config.auth_stub.authorization_code,
    )

    issue_token_use_case = providers.Factory(
        IssueTokenUseCase,
        access_token=config.auth_stub.access_token,
        refresh_token=config.auth_stub.refresh_token,
        expires_in=config.auth_stub.expires_in,
    )

    get_bridge_health_use_case = providers.Factory(
        GetBridgeHealthUseCase,
        health_check_service=health_check_service,
    )

    get_bridge_info_use_case = providers.Factory(
        GetBridgeInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
        device_catalog=device_catalog,
        actuation_dispatcher=actuation_dispatcher,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Opens the device state store, subscribes state reporting to store
    changes and seeds the lock record. On shutdown, pending reports and
    actuations are awaited before the store is closed.
    """
    container = get_container()

    repository = container.state_repository()
    state_change_bus = container.state_change_bus()
    actuation_dispatcher = container.actuation_dispatcher()
    report_state_use_case = container.report_state_use_case()

    try:
        logger.info("container.store.open")
        await repository.open()

        state_change_bus.subscribe(report_state_use_case.on_state_change)

        if container.config.store.seed():
            device_id = container.config.catalog.lock_device_id()
            seeded = await repository.ensure_trait(
                device_id, Trait.LOCK_UNLOCK, DEFAULT_LOCK_STATE
            )
            logger.info("container.store.seeded", device_id=device_id, created=seeded)

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.background.drain")
        await state_change_bus.drain()
        await actuation_dispatcher.drain()
        state_change_bus.unsubscribe_all()

        logger.info("container.store.close")
        await repository.close()

        logger.info("container.resources.shutdown")
