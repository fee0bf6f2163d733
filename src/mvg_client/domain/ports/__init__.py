"""Ports (interfaces) for the ports-and-adapters architecture."""

from mvg_client.domain.ports.http_transport import HttpTransport

__all__ = ["HttpTransport"]
