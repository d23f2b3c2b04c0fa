import pytest
import pytest_asyncio

from es_connector.services.connector import Connector
from tests.functional.settings import settings


@pytest.fixture(scope="session")
def es_url():
    if not settings.es_url:
        pytest.skip("ES_URL is not set")
    return settings.es_url


@pytest_asyncio.fixture
async def es_client(es_url):
    client = await Connector({"hosts": [es_url], "max_retries": 3}).connect()
    yield client
    if client is not None:
        await client.close()


__all__ = ["es_url", "es_client"]
