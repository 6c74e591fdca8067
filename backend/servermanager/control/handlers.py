from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from servermanager.servers.entry import RemoteServerEntry

REPORT_PLAYER_COUNT = "reportPlayerCount"


def create_control_handlers(entry: RemoteServerEntry) -> dict[str, Callable[..., Any]]:
    """Build the table of calls a game server may make over its control channel."""

    def report_player_count(count: int) -> None:
        entry.update_player_count(count)

    return {REPORT_PLAYER_COUNT: report_player_count}
