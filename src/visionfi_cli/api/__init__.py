"""VisionFi API access."""

from visionfi_cli.api.client import VisionFiClient, create_client

__all__ = ["VisionFiClient", "create_client"]
