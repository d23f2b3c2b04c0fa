from es_connector.models.connection import ConnectionConfig, normalize_config
from es_connector.services.connector import Connector

__all__ = ["ConnectionConfig", "Connector", "normalize_config"]
