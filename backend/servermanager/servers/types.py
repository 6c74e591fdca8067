from enum import Enum

from pydantic import AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

_URL_ADAPTER = TypeAdapter(AnyUrl)


class ServerConfig(BaseModel):
    """Publish configuration of one remote server, as edited by administrators."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    is_public: bool = False
    is_official: bool = False
    is_recommended: bool = False
    display_name: str = ""
    endpoint: str = ""  # not validated here, see is_valid_endpoint


class PublicServerInfo(BaseModel):
    """Subset of a server entry that is safe to show to untrusted clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    display_name: str
    endpoint: str
    is_official: bool
    player_count: int


class ConnectionState(Enum):
    NO_CHANNEL = "no_channel"
    OPENING = "opening"
    READY = "ready"


def is_valid_endpoint(endpoint: str) -> bool:
    """Return True when the endpoint parses as an absolute URL."""
    try:
        _URL_ADAPTER.validate_python(endpoint)
    except ValidationError:
        return False
    return True
