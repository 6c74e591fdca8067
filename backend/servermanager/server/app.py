from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from servermanager.server.settings import ServerManagerSettings
from servermanager.servers.registry import ServerRegistry
from shared.logging import setup_logging

if TYPE_CHECKING:
    from servermanager.control.protocol import BridgeFactory, ChannelFactory

logger = structlog.get_logger()


def create_registry(
    channel_factory: ChannelFactory,
    bridge_factory: BridgeFactory,
    settings: ServerManagerSettings | None = None,
) -> ServerRegistry:
    """Configure logging and build a registry seeded from the configured YAML file."""
    if settings is None:  # pragma: no cover
        settings = ServerManagerSettings()

    setup_logging(log_dir=settings.log_dir)

    registry = ServerRegistry(channel_factory, bridge_factory)
    if settings.config_path is not None:
        registry.load_config(settings.config_path)
    logger.info("server registry ready", server_count=len(registry.get_servers()))
    return registry
