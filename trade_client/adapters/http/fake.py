# trade_client/adapters/http/fake.py
"""
Fake Request Client for testing

Records every call and returns canned results without network access.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

Response = Union[Any, Callable[[str, Any], Any]]


class FakeRequestClient:
    """
    Fake request client for unit testing

    Canned results are keyed by HTTP method. A callable result is invoked
    with (path, body_or_params) so tests can build responses per call.
    """

    def __init__(self, responses: Optional[Dict[str, Response]] = None):
        """
        Initialize fake client

        Args:
            responses: Mapping of 'POST'/'GET'/'DELETE' to canned results
        """
        self.responses: Dict[str, Response] = dict(responses or {})
        self.calls: List[Tuple[str, str, Any]] = []
        self._error: Optional[Exception] = None

    def fail_with(self, error: Exception) -> None:
        """Raise error from every subsequent call"""
        self._error = error

    def post(self, path: str, body: Any) -> Any:
        return self._dispatch("POST", path, body)

    def get(self, path: str, params: Optional[Any] = None) -> Any:
        return self._dispatch("GET", path, params)

    def delete(self, path: str) -> Any:
        return self._dispatch("DELETE", path, None)

    @property
    def last_call(self) -> Optional[Tuple[str, str, Any]]:
        return self.calls[-1] if self.calls else None

    def _dispatch(self, method: str, path: str, data: Any) -> Any:
        self.calls.append((method, path, data))

        if self._error is not None:
            raise self._error

        response = self.responses.get(method)
        if callable(response):
            return response(path, data)
        return response
