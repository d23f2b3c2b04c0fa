from types import SimpleNamespace

import pytest

ENV_VARS = ("ELASTIC_HOST", "ELASTIC_P1", "ELASTIC_MAX_RETRIES", "ELASTIC_RETRY_AFTER")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sleeps(monkeypatch):
    """Replace the backoff sleep and collect the requested delays, in seconds."""
    calls = []

    async def fake_sleep(delay):
        calls.append(delay)

    monkeypatch.setattr("es_connector.utils.backoff.sleep", fake_sleep)
    return calls


@pytest.fixture
def make_client_class():
    """Build a fake client class whose health checks follow the given script.

    Each entry is an exception to raise from ``info()`` or None for an answer.
    Once the script runs out every check succeeds. ``close_error`` is raised
    from ``close()`` when set.
    """

    def inner(*info_results, close_error=None):
        results = list(info_results)

        class FakeClient:
            instances = []

            def __init__(self, **kwargs):
                self.kwargs = kwargs
                self.closed = False
                self.transport = SimpleNamespace(
                    node_pool=SimpleNamespace(
                        _alive_nodes={
                            "es1": SimpleNamespace(base_url="http://es1:9200"),
                            "es2": SimpleNamespace(base_url="http://es2:9200"),
                        }
                    )
                )
                FakeClient.instances.append(self)

            async def info(self):
                result = results.pop(0) if results else None
                if isinstance(result, BaseException):
                    raise result
                return {"version": {"number": "8.15.0"}}

            async def close(self):
                self.closed = True
                if close_error is not None:
                    raise close_error

        return FakeClient

    return inner
