"""Configuration package for the sales dashboard service."""

from .settings import AppSettings, IDOConnection, get_settings

__all__ = ["AppSettings", "IDOConnection", "get_settings"]
