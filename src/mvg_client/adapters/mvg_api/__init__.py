"""MVG API adapters."""

from mvg_client.adapters.mvg_api.http_client import MvgHttpClient

__all__ = ["MvgHttpClient"]
