from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from es_connector.core.config import Settings, get_settings
from es_connector.models.hosts import (
    HOST_FIELDS,
    JoinedHosts,
    as_list,
    is_integer,
    parse_hosts,
)

# Параметры, которые забирает себе Connector и которые не передаются клиенту
RETRY_OPTIONS = ("max_retries", "retry_after")


class ConnectionConfig(BaseModel):
    client_options: dict[str, Any]
    max_retries: int = Field(10, ge=0)
    retry_after: int = Field(5000, gt=0)

    def client_kwargs(self) -> dict[str, Any]:
        """Fresh copy of the client payload.

        The client is built from a new dict on every attempt, so nothing
        it does to its arguments can leak into the stored options.
        """
        return dict(self.client_options)


def normalize_config(
    user_config: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> ConnectionConfig:
    """Merge caller options over the defaults and expand host shorthands.

    Args:
        user_config: Options as the caller wrote them; never mutated.
        settings: Source of the defaults, read from the environment if omitted.

    Returns:
        ConnectionConfig whose ``client_options`` can be passed straight to
        ``AsyncElasticsearch``.
    """
    settings = settings or get_settings()
    retry_options = {
        "max_retries": settings.max_retries,
        "retry_after": settings.retry_after,
    }
    client_options: dict[str, Any] = {"hosts": [settings.default_host]}

    if not user_config:
        return ConnectionConfig(client_options=client_options, **retry_options)

    payload = dict(user_config)

    for option in RETRY_OPTIONS:
        if is_integer(payload.get(option)):
            retry_options[option] = payload.pop(option)

    port = payload.get("port")
    port_used = False
    for field in HOST_FIELDS:
        if field not in payload:
            continue
        hosts = parse_hosts(payload[field], port)
        if isinstance(hosts, JoinedHosts):
            port_used = True
        payload[field] = hosts.expand()
    if port_used:
        del payload["port"]

    # AsyncElasticsearch знает только "hosts"
    if "host" in payload:
        host = payload.pop("host")
        if "hosts" in payload:
            payload["hosts"] = as_list(host) + as_list(payload["hosts"])
        else:
            payload["hosts"] = host

    client_options.update(payload)
    return ConnectionConfig(client_options=client_options, **retry_options)
