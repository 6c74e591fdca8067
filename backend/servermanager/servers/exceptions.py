"""Error hierarchy for remote server entries."""


class ServerManagerError(Exception):
    """Base class for server manager failures."""


class PreconditionError(ServerManagerError):
    """The calling code broke a contract of the entry API.

    These are programmer errors: they are raised immediately and never retried.
    """


class ServerNotPublicError(PreconditionError):
    def __init__(self, server_id: int) -> None:
        self.server_id = server_id
        super().__init__(f"server {server_id} is not public and must not be exposed to clients")


class ControlChannelNotOpenError(PreconditionError):
    def __init__(self, server_id: int) -> None:
        self.server_id = server_id
        super().__init__(f"tried to send a control message to server {server_id} without an open channel")


class ServerNotFoundError(ServerManagerError, KeyError):
    def __init__(self, server_id: int) -> None:
        self.server_id = server_id
        super().__init__(f"unknown server id {server_id}")

    def __str__(self) -> str:
        return str(self.args[0])
