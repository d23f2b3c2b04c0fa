class ElasticConnectorError(Exception):
    """Base class for es_connector errors."""


class ElasticUnavailableError(ElasticConnectorError):
    """Raised when no client could be obtained within the retry budget."""
