from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
import yaml

from servermanager.servers.entry import RemoteServerEntry
from servermanager.servers.exceptions import ServerNotFoundError
from servermanager.servers.types import PublicServerInfo, ServerConfig

if TYPE_CHECKING:
    from pathlib import Path

    from servermanager.control.protocol import BridgeFactory, ChannelFactory

logger = structlog.get_logger()


class ServerRegistry:
    """In-memory list of remote server entries, keyed by their integer id."""

    def __init__(self, channel_factory: ChannelFactory, bridge_factory: BridgeFactory) -> None:
        self._servers: dict[int, RemoteServerEntry] = {}
        self._channel_factory = channel_factory
        self._bridge_factory = bridge_factory
        self._next_id = 1

    def load_config(self, config_path: Path) -> None:
        """Create an entry for every server listed in a YAML file.

        A missing file is not an error and leaves the registry unchanged. Every
        item is validated before any entry is created, so a bad file adds nothing.
        """
        if not config_path.exists():
            return

        with config_path.open() as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            msg = f"{config_path}: expected a mapping with a 'servers' list, got {type(config).__name__}"
            raise ValueError(msg)
        servers = config.get("servers") or []
        if not isinstance(servers, list):
            msg = f"{config_path}: 'servers' must be a list, got {type(servers).__name__}"
            raise ValueError(msg)

        configs = [ServerConfig.model_validate(server_data) for server_data in servers]
        for server_config in configs:
            self.add_server(server_config)

    def add_server(self, config: ServerConfig | None = None) -> RemoteServerEntry:
        server_id = self._next_id
        self._next_id += 1
        entry = RemoteServerEntry(
            server_id,
            channel_factory=self._channel_factory,
            bridge=self._bridge_factory(),
        )
        self._servers[server_id] = entry
        if config is not None:
            entry.set_config(config)
        logger.info("server added", server_id=server_id)
        return entry

    def get_server(self, server_id: int) -> RemoteServerEntry:
        entry = self._servers.get(server_id)
        if entry is None:
            raise ServerNotFoundError(server_id)
        return entry

    def remove_server(self, server_id: int) -> None:
        entry = self._servers.pop(server_id, None)
        if entry is None:
            raise ServerNotFoundError(server_id)
        entry.dispose()
        logger.info("server removed", server_id=server_id)

    def get_servers(self) -> list[RemoteServerEntry]:
        return list(self._servers.values())

    def get_available_servers(self) -> list[RemoteServerEntry]:
        return [s for s in self._servers.values() if s.available]

    def get_public_projections(self) -> list[PublicServerInfo]:
        # available implies public, so no entry here can raise
        return [s.get_public_projection() for s in self.get_available_servers()]

    def close(self) -> None:
        for entry in self._servers.values():
            entry.dispose()
        self._servers.clear()
