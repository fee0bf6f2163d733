"""Adapters layer - external system integrations."""

from mvg_client.adapters.config import ClientConfig
from mvg_client.adapters.mvg_api import MvgHttpClient

__all__ = [
    "ClientConfig",
    "MvgHttpClient",
]
