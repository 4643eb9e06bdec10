"""Application configuration and environment helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_IDO_BASE_URL = "https://csi10g.erpsl.inforcloudsuite.com/IDORequestService/ido"
DEFAULT_IDO_CONFIG_NAME = "GVNDYXUFKHB5VMB6_PRD_CTI"
DEFAULT_SERVICE_CODES = ("SERVICE", "SV", "SVR")


@dataclass(frozen=True)
class IDOConnection:
    """Immutable connection details handed to the IDO client."""

    base_url: str
    token: str
    config_name: str
    record_cap: int = 0
    timeout_seconds: float | None = None


class AppSettings(BaseSettings):
    """Configuration options for the sales dashboard service."""

    app_name: str = Field(default="CSI Sales Dashboard")

    ido_base_url: str = Field(
        default=DEFAULT_IDO_BASE_URL,
        validation_alias=AliasChoices("INFOR_BASE_URL", "IDO_BASE_URL"),
        description="Base URL of the IDORequestService, up to and including /ido.",
    )
    ido_token: str = Field(
        default="",
        validation_alias=AliasChoices("INFOR_TOKEN", "TOKEN"),
        description="Long-lived Mongoose security token forwarded as Authorization.",
    )
    ido_config_name: str = Field(
        default=DEFAULT_IDO_CONFIG_NAME,
        validation_alias=AliasChoices("INFOR_CONFIG", "IDO_CONFIG_NAME"),
    )
    ido_record_cap: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("IDO_RECORD_CAP"),
        description="Maximum records per load; 0 requests the full collection.",
    )
    ido_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("IDO_TIMEOUT_SECONDS"),
    )

    order_filter: str | None = Field(default=None, validation_alias=AliasChoices("ORDER_FILTER"))
    invoice_filter: str | None = Field(default=None, validation_alias=AliasChoices("INVOICE_FILTER"))

    service_codes: Annotated[frozenset[str], NoDecode] = Field(
        default=frozenset(DEFAULT_SERVICE_CODES),
        validation_alias=AliasChoices("SERVICE_CODES"),
    )

    static_dir: str = Field(default="public", validation_alias=AliasChoices("STATIC_DIR"))
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:4200",
            "http://127.0.0.1:4200",
        ],
        validation_alias=AliasChoices("CORS_ORIGINS"),
    )

    telemetry_enabled: bool = Field(default=False)
    telemetry_service_name: str = Field(default="csi-sales-dashboard")
    telemetry_otlp_endpoint: str | None = Field(default=None)
    telemetry_otlp_insecure: bool = Field(default=True)
    telemetry_sample_ratio: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("service_codes", mode="before")
    @classmethod
    def _split_service_codes(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(code).strip().upper() for code in value if str(code).strip())
        return value

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    def ido_connection(self) -> IDOConnection:
        """Return the immutable connection details for the IDO client."""

        return IDOConnection(
            base_url=self.ido_base_url,
            token=self.ido_token,
            config_name=self.ido_config_name,
            record_cap=self.ido_record_cap,
            timeout_seconds=self.ido_timeout_seconds,
        )

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a sanitized dict for logging purposes."""

        hidden = {"ido_token"}
        return {k: ("***" if k in hidden and v else v) for k, v in self.model_dump().items()}


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """Return cached application settings with optional overrides."""

    if overrides:
        return AppSettings(**overrides)
    return AppSettings()


__all__ = [
    "AppSettings",
    "IDOConnection",
    "DEFAULT_IDO_BASE_URL",
    "DEFAULT_IDO_CONFIG_NAME",
    "get_settings",
]
