"""Managed state of one remote game server."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from servermanager.control.handlers import create_control_handlers
from servermanager.control.protocol import INITIALIZE_CONTROL_SOCKET_MESSAGE
from servermanager.servers.exceptions import ControlChannelNotOpenError, ServerNotPublicError
from servermanager.servers.types import ConnectionState, PublicServerInfo, ServerConfig, is_valid_endpoint

if TYPE_CHECKING:
    from servermanager.control.protocol import ChannelFactory, ControlChannel, Payload, RpcBridge

logger = structlog.get_logger()


class RemoteServerEntry:
    """
    Configuration and control connection for one remote game server.

    The entry owns at most one control channel. A channel exists only while
    the configured endpoint is a valid URL, and it is replaced only when the
    endpoint text changes. All methods are expected to run on a single event
    loop; nothing here blocks on network I/O.
    """

    def __init__(self, server_id: int, *, channel_factory: ChannelFactory, bridge: RpcBridge) -> None:
        self._id = server_id
        self._config = ServerConfig()
        self._endpoint_valid = False
        self._channel: ControlChannel | None = None
        self._channel_opened = False
        self._player_count = 0
        self._channel_factory = channel_factory
        self._log = logger.bind(server_id=server_id)

        self._bridge = bridge
        self._bridge.set_handlers(create_control_handlers(self))
        self._bridge.set_send_function(self._send)

    @property
    def id(self) -> int:
        return self._id

    @property
    def endpoint_is_valid(self) -> bool:
        return self._endpoint_valid

    @property
    def player_count(self) -> int:
        return self._player_count

    @property
    def channel(self) -> ControlChannel | None:
        return self._channel

    @property
    def available(self) -> bool:
        """
        True when the server should be joinable by the public.

        False when the public flag is off or the manager has no live
        connection to the server.
        """
        if not self._config.is_public:
            return False
        if not self._endpoint_valid or self._channel is None:
            return False
        return self._channel.connected

    @property
    def connection_state(self) -> ConnectionState:
        if self._channel is None:
            return ConnectionState.NO_CHANNEL
        if self._channel_opened:
            return ConnectionState.READY
        return ConnectionState.OPENING

    def get_public_projection(self) -> PublicServerInfo:
        if not self._config.is_public:
            raise ServerNotPublicError(self._id)
        return PublicServerInfo(
            display_name=self._config.display_name,
            endpoint=self._config.endpoint,
            is_official=self._config.is_official,
            player_count=self._player_count,
        )

    def get_config(self) -> ServerConfig:
        return self._config

    def set_config(self, config: ServerConfig) -> None:
        """
        Apply a new configuration.

        Display flags are always overwritten. The control channel is only
        refreshed when the endpoint string differs from the stored one;
        equivalent URLs with different spelling count as a change.
        """
        endpoint_changed = config.endpoint != self._config.endpoint
        self._config = config
        if endpoint_changed:
            self._endpoint_valid = is_valid_endpoint(config.endpoint)
            if not self._endpoint_valid:
                self._log.info("invalid endpoint recorded", endpoint=config.endpoint)
            self._refresh_channel()

    def update_player_count(self, count: int) -> None:
        self._log.debug("player count reported", player_count=count)
        self._player_count = count

    def dispose(self) -> None:
        self._close_channel()

    def _send(self, payload: Payload) -> None:
        # Sending before the channel is ready is a bug in the protocol layer.
        if self._channel is None or not self._channel.connected:
            raise ControlChannelNotOpenError(self._id)
        self._channel.send(payload)

    def _close_channel(self) -> None:
        if self._channel is None:
            return
        previous_state = self.connection_state
        channel = self._channel
        self._channel = None
        self._channel_opened = False
        channel.close()
        self._log.info("control channel closed", previous_state=previous_state)

    def _refresh_channel(self) -> None:
        self._close_channel()
        if not self._endpoint_valid:
            return

        channel = self._channel_factory(self._config.endpoint)
        self._channel = channel

        def handle_open() -> None:
            if channel is not self._channel:
                return
            channel.send(INITIALIZE_CONTROL_SOCKET_MESSAGE)
            self._channel_opened = True
            self._log.info("control channel opened, handshake sent")

        def handle_message(payload: Payload) -> None:
            if channel is not self._channel:
                return
            self._bridge.handle_inbound(payload)

        channel.on_open(handle_open)
        channel.on_message(handle_message)
        self._log.info("control channel connecting", endpoint=self._config.endpoint)
