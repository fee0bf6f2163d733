"""Configuration adapters."""

from mvg_client.adapters.config.app_config import ClientConfig

__all__ = ["ClientConfig"]
