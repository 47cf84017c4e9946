# trade_client/domain/ports/http.py

"""
Request Dispatch Port - Interface for HTTP calls

Transport details (base URL, headers, serialization) belong to the
adapter. The domain only names a path and hands over a body or params.
"""

from typing import Any, Optional, Protocol

from trade_client.domain.models import QueryParams


class IRequestClient(Protocol):
    """
    Interface for the request-dispatch collaborator

    Results are returned as-is to the caller. An implementation may
    return decoded JSON, a future, or an awaitable; the domain never
    inspects it.
    """

    def post(self, path: str, body: Any) -> Any:
        """
        Send a POST request

        Args:
            path: Endpoint path, e.g. '/trade/orders'
            body: JSON-serializable request body

        Returns:
            The outcome of the call

        Raises:
            RequestDispatchError: If the request fails
        """
        ...

    def get(self, path: str, params: Optional[QueryParams] = None) -> Any:
        """
        Send a GET request

        Args:
            path: Endpoint path
            params: Query-string parameters, serialized by the adapter

        Returns:
            The outcome of the call

        Raises:
            RequestDispatchError: If the request fails
        """
        ...

    def delete(self, path: str) -> Any:
        """
        Send a DELETE request

        Args:
            path: Endpoint path

        Returns:
            The outcome of the call

        Raises:
            RequestDispatchError: If the request fails
        """
        ...
