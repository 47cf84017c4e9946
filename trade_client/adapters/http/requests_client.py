# trade_client/adapters/http/requests_client.py
"""
Requests HTTP Client Adapter

Implements IRequestClient on top of a requests.Session.
"""
import logging
from typing import Any, Dict, Optional

import requests

from trade_client.domain.models import HttpStatusError, QueryParams, RequestDispatchError

logger = logging.getLogger(__name__)


class RequestsClient:
    """
    HTTP client for the trade backend API

    Decodes JSON responses and turns transport failures and error
    statuses into domain exceptions.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize request client

        Args:
            base_url: API root, e.g. 'http://localhost:8080/api'
            timeout: Per-request timeout in seconds
            headers: Extra headers sent with every request
            session: Optional preconfigured session (not closed by close())
        """
        if not base_url:
            raise ValueError("Trade API base URL is required")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {"Accept": "application/json"}
        self.headers.update(headers or {})

        self._owns_session = session is None
        self.session = session or requests.Session()

    def post(self, path: str, body: Any) -> Any:
        return self._request("POST", path, json=body)

    def get(self, path: str, params: Optional[QueryParams] = None) -> Any:
        return self._request("GET", path, params=params)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def url_for(self, path: str) -> str:
        """Absolute URL for an endpoint path"""
        return f"{self.base_url}/{path.lstrip('/')}"

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self.url_for(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                headers=self.headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.Timeout as e:
            logger.error(f"{method} {url} timed out after {self.timeout}s")
            raise RequestDispatchError(f"Request timed out: {e}") from e
        except requests.ConnectionError as e:
            logger.error(f"{method} {url} connection failed: {e}")
            raise RequestDispatchError(f"Connection failed: {e}") from e
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise RequestDispatchError(f"Request failed: {e}") from e

        payload = self._decode(response)

        if response.status_code >= 400:
            message = self._error_message(response, payload)
            logger.error(f"{method} {url} returned {response.status_code}: {message}")
            raise HttpStatusError(response.status_code, message, payload)

        logger.debug(f"{method} {url} -> {response.status_code}")
        return payload

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None

        ctype = response.headers.get("Content-Type", "")
        if "json" in ctype:
            try:
                return response.json()
            except ValueError:
                logger.warning(f"Invalid JSON body from {response.url}")
        return response.text

    @staticmethod
    def _error_message(response: requests.Response, payload: Any) -> str:
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return response.reason or "Request failed"
