import re
from typing import Any, Union

from pydantic import BaseModel

PORT_PATTERN = re.compile(r":\d{1,5}")

# Поля конфигурации, в которых допускается сокращённая запись "host1,host2" + port
HOST_FIELDS = ("host", "hosts")


class JoinedHosts(BaseModel):
    """Comma-joined host string sharing one default port, e.g. ``"es1,es2:9201"``."""

    hosts: str
    port: int

    def expand(self) -> list[str]:
        return [with_port(token, self.port) for token in self.hosts.split(",")]


class ExplicitHosts(BaseModel):
    """Hosts the caller already spelled out: a list of URLs, node dicts, etc."""

    value: Any

    def expand(self) -> Any:
        return self.value


HostsSpec = Union[JoinedHosts, ExplicitHosts]


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def with_port(host: str, port: int) -> str:
    if PORT_PATTERN.search(host):
        return host
    return f"{host}:{port}"


def parse_hosts(value: Any, port: Any) -> HostsSpec:
    if isinstance(value, str) and value.strip() and is_integer(port):
        return JoinedHosts(hosts=value, port=port)
    return ExplicitHosts(value=value)


def as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
