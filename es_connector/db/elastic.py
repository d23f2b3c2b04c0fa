"""Process-wide Elasticsearch client obtained through ``Connector``.

``connect_elastic`` (or ``elastic_lifespan`` in an ASGI app) fills the holder
once at startup; request handlers then read it with ``get_elastic``.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Optional

from elasticsearch import AsyncElasticsearch

from es_connector.core.logger import logger
from es_connector.exceptions import ElasticUnavailableError
from es_connector.services.connector import Connector

connected_client: Optional[AsyncElasticsearch] = None


def init_elastic(es_client: AsyncElasticsearch) -> None:
    """Register a client that already answered the connector's health check."""
    global connected_client
    connected_client = es_client


async def get_elastic() -> AsyncElasticsearch:
    if connected_client is None:
        raise ValueError("Elasticsearch client is not connected.")
    return connected_client


async def close_elastic() -> None:
    global connected_client
    if connected_client is not None:
        await connected_client.close()
        connected_client = None
        logger.info("Elasticsearch client closed")


async def connect_elastic(
    user_config: Optional[Mapping[str, Any]] = None,
    client_class: type = AsyncElasticsearch,
) -> Optional[AsyncElasticsearch]:
    """Run a ``Connector`` and register the client it returns.

    The holder is left untouched when the retry budget runs out.
    """
    client = await Connector(user_config, client_class=client_class).connect()
    if client is not None:
        init_elastic(client)
    return client


@asynccontextmanager
async def elastic_lifespan(
    app: Any = None,
    user_config: Optional[Mapping[str, Any]] = None,
    client_class: type = AsyncElasticsearch,
) -> AsyncIterator[AsyncElasticsearch]:
    """Lifespan handler for ASGI apps: connect on startup, close on shutdown.

    Use ``functools.partial(elastic_lifespan, user_config=...)`` to pass options.
    """
    client = await connect_elastic(user_config, client_class=client_class)
    if client is None:
        raise ElasticUnavailableError("Could not connect to Elasticsearch")

    try:
        yield client
    finally:
        await close_elastic()
