"""Settings and IDO client dependencies for API routes."""

from __future__ import annotations

from fastapi import Depends

from app.config import AppSettings, get_settings
from app.providers.ido_service import IDOClient


def get_app_settings() -> AppSettings:
    return get_settings()


def get_ido_client(settings: AppSettings = Depends(get_app_settings)) -> IDOClient:
    return IDOClient(settings.ido_connection())


__all__ = ["get_app_settings", "get_ido_client"]
