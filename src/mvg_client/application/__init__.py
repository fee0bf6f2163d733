"""Application layer - use cases."""

from mvg_client.application.services import MvgClientService

__all__ = ["MvgClientService"]
