"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel, EnumStoreBackend
from src.shared.env import load_secret_file_variables  # noqa: F401


class ServiceSettings(BaseSettings):
    """HTTP service configuration settings."""

    title: str = Field(default="Smart Home Lock Bridge", description="Service title")
    description: str = Field(
        default="Smart home fulfillment and state reporting for a vendor door lock",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("SERVICE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("SERVICE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/smarthome_db",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="smarthome_db", description="Name of the MongoDB database"
    )
    state_collection: str = Field(
        default="device_states", description="Collection holding device state"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class StoreSettings(BaseSettings):
    """Device state store configuration settings."""

    backend: EnumStoreBackend = Field(
        default=EnumStoreBackend.MONGO, description="Device state store backend"
    )
    seed: bool = Field(
        default=True,
        description="Create the initial lock state on startup when missing",
    )

    model_config = SettingsConfigDict(
        env_prefix="STORE_", case_sensitive=False, extra="ignore"
    )


class HomeGraphSettings(BaseSettings):
    """HomeGraph API configuration settings."""

    base_url: str = Field(
        default="https://homegraph.googleapis.com/v1",
        description="HomeGraph API root",
    )
    credentials_path: Optional[str] = Field(
        default=None,
        description="Service account key file. Application default "
        "credentials are used when unset",
    )
    agent_user_id: str = Field(
        default="123", description="Agent user id of the linked account"
    )
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="HOMEGRAPH_", case_sensitive=False, extra="ignore"
    )


class LockVendorSettings(BaseSettings):
    """Lock vendor API configuration settings."""

    base_url: str = Field(
        default="https://api.littlebirdliving.com", description="Vendor API root"
    )
    property_id: str = Field(default="", description="Vendor property id")
    unit_id: str = Field(default="", description="Vendor unit id")
    lock_id: str = Field(default="", description="Vendor lock id")
    auth_token: str = Field(default="", description="Vendor API token")
    api_version: str = Field(
        default=">=0.8.0 <2.0.0", description="Value of the api-version header"
    )
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")
    actuation_timeout: float = Field(
        default=15.0, description="Upper bound for one background actuation"
    )
    history_size: int = Field(
        default=100, description="Actuation records kept in memory"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOCK_VENDOR_", case_sensitive=False, extra="ignore"
    )


class CatalogSettings(BaseSettings):
    """Static device catalog settings."""

    lock_device_id: str = Field(default="lock", description="Lock device id")
    lock_name: str = Field(default="Door Lock", description="Lock display name")
    lock_default_names: List[str] = Field(
        default_factory=lambda: ["My Door Lock"], description="Lock default names"
    )
    lock_nicknames: List[str] = Field(
        default_factory=lambda: ["Door Lock"], description="Lock nicknames"
    )
    manufacturer: str = Field(default="Yale", description="Lock manufacturer")
    model: str = Field(default="yale-lock", description="Lock model")
    hw_version: str = Field(default="1.0", description="Hardware version")
    sw_version: str = Field(default="1.0.1", description="Software version")
    will_report_state: bool = Field(
        default=True, description="Advertise proactive state reporting"
    )

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )


class AuthStubSettings(BaseSettings):
    """Fixed values returned by the non-production account-linking stub."""

    access_token: str = Field(default="123access", description="Issued access token")
    refresh_token: str = Field(
        default="123refresh", description="Issued refresh token"
    )
    authorization_code: str = Field(
        default="xxxxxx", description="Code handed back by the authorize stub"
    )
    expires_in: int = Field(default=86400, description="Token lifetime in seconds")

    model_config = SettingsConfigDict(
        env_prefix="AUTH_STUB_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    homegraph: HomeGraphSettings = Field(default_factory=HomeGraphSettings)
    lock_vendor: LockVendorSettings = Field(default_factory=LockVendorSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    auth_stub: AuthStubSettings = Field(default_factory=AuthStubSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()


settings = get_settings()
