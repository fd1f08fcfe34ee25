"""Results query API client."""

from wca_client.query.client import ResultsClient

__all__ = ["ResultsClient"]
