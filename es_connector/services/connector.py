from typing import Any, Mapping, Optional, Protocol

from elastic_transport import TransportError
from elasticsearch import ApiError, AsyncElasticsearch

from es_connector.core.logger import logger
from es_connector.models.connection import normalize_config
from es_connector.utils.backoff import RetryState

HEALTH_CHECK_ERRORS = (ApiError, TransportError)


class ElasticClientProtocol(Protocol):
    transport: Any

    async def info(self) -> Any: ...
    async def close(self) -> None: ...


def alive_nodes(client: ElasticClientProtocol) -> list[tuple[str, str]]:
    """Return ``(base_url, status)`` for every node the pool considers alive."""
    node_pool = client.transport.node_pool
    # NodePool has no public view of its alive nodes
    return [(str(node.base_url), "alive") for node in node_pool._alive_nodes.values()]


class Connector:
    """Builds an Elasticsearch client and retries until the cluster answers.

    Every failed health check is followed by a wait that doubles each time. After
    ``max_retries`` retries the connector gives up and ``connect`` returns
    None; connectivity errors never escape it.
    """

    def __init__(
        self,
        user_config: Optional[Mapping[str, Any]] = None,
        client_class: type = AsyncElasticsearch,
    ):
        self.config = normalize_config(user_config)
        self.client_class = client_class
        self.retry_state = RetryState(
            max_tries=self.config.max_retries,
            start_sleep_time=self.config.retry_after,
        )

    @property
    def max_retries(self) -> int:
        return self.config.max_retries

    @property
    def retry_after(self) -> int:
        return self.retry_state.time_to_wait

    @property
    def retry_count(self) -> int:
        return self.retry_state.attempts

    def get_connection_retry_count(self) -> int:
        return self.retry_count

    async def connect(self, retry_after: Optional[int] = None) -> Optional[Any]:
        """Connect to the cluster, waiting ``retry_after`` ms first if given.

        Returns the client once the cluster answers, or None when the retry
        budget is spent.
        """
        delay = retry_after
        while True:
            logger.info("Connecting to Elasticsearch")
            if delay:
                await self.retry_state.wait(delay)

            client = self.client_class(**self.config.client_kwargs())
            try:
                # ping() swallows transport errors, info() keeps the cause
                await client.info()
            except HEALTH_CHECK_ERRORS as error:
                logger.warning(f"Elasticsearch connection error: {error!r}")
                await self._close_quietly(client)
            else:
                self._report_alive_nodes(client)
                return client

            if self.retry_state.exhausted:
                logger.error(
                    f"Maximum connection retries of {self.max_retries} "
                    "to Elasticsearch reached, giving up"
                )
                return None

            delay = self.retry_state.next_attempt()
            logger.warning(
                f"Retrying connection to Elasticsearch after delay of {delay} ms"
            )

    async def _close_quietly(self, client: ElasticClientProtocol) -> None:
        try:
            await client.close()
        except Exception as error:
            logger.warning(f"Failed to close Elasticsearch client: {error!r}")

    def _report_alive_nodes(self, client: ElasticClientProtocol) -> None:
        for node_id, status in alive_nodes(client):
            logger.info(
                f"Connected to Elasticsearch node: id: {node_id}, status: {status}"
            )
