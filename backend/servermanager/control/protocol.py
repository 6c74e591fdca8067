"""Contracts of the transport and RPC collaborators used by server entries.

Both collaborators live outside this package. Server entries only rely on
the methods declared here, so tests and hosts can plug in any implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

# Sent once on every transport "open" event so the game server treats the
# connection as its control channel.
INITIALIZE_CONTROL_SOCKET_MESSAGE = "initializeControlSocket"

Payload = bytes | str


class ControlChannel(ABC):
    """
    Auto-reconnecting connection to one remote game server.

    Starts connecting as soon as it is constructed. Reconnection policy is
    internal to the implementation.
    """

    @property
    @abstractmethod
    def connected(self) -> bool:
        """Whether the underlying socket is open right now."""
        ...

    @abstractmethod
    def send(self, payload: Payload) -> None:
        """
        Send a raw payload. Fails when not connected.
        """
        ...

    @abstractmethod
    def on_open(self, callback: Callable[[], None]) -> None:
        """
        Register a callback fired each time the connection opens.
        """
        ...

    @abstractmethod
    def on_message(self, callback: Callable[[Payload], None]) -> None:
        """
        Register a callback fired with every raw inbound payload.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """
        Close the connection and stop reconnecting. Safe to call more than once.
        """
        ...


class RpcBridge(ABC):
    """Typed request/response layer carried over a control channel."""

    @abstractmethod
    def set_handlers(self, handlers: Mapping[str, Callable[..., Any]]) -> None:
        """Register the named handlers for inbound calls."""
        ...

    @abstractmethod
    def set_send_function(self, send: Callable[[Payload], None]) -> None:
        """Register the function used to transmit encoded outbound messages."""
        ...

    @abstractmethod
    def handle_inbound(self, payload: Payload) -> None:
        """Decode a raw payload and dispatch it to a handler or a pending call."""
        ...


ChannelFactory = Callable[[str], ControlChannel]
BridgeFactory = Callable[[], RpcBridge]
