# trade_client/adapters/tests/test_requests_client.py
"""
Tests for the requests-based HTTP adapter
"""
import logging
from unittest.mock import MagicMock

import pytest
import requests

from trade_client.adapters.http.requests_client import RequestsClient
from trade_client.domain.models import HttpStatusError, RequestDispatchError


def make_response(status_code=200, json_body=None, text="", content_type="application/json", reason="OK"):
    """Build a MagicMock shaped like requests.Response"""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.url = "http://api.test/trade/orders"
    response.headers = {"Content-Type": content_type} if content_type else {}

    if json_body is not None:
        response.content = b"x"
        response.json.return_value = json_body
        response.text = str(json_body)
    else:
        response.content = text.encode()
        response.json.side_effect = ValueError("No JSON")
        response.text = text

    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return RequestsClient(
        base_url="http://api.test/",
        timeout=5,
        headers={"Authorization": "Bearer abc"},
        session=session,
    )


class TestRequestBuilding:
    """Test how requests are sent"""

    def test_post_sends_json_body(self, client, session):
        session.request.return_value = make_response(json_body={"message": "ok"})

        client.post("/trade/orders", {"amount": 10, "userId": 42})

        session.request.assert_called_once_with(
            "POST",
            "http://api.test/trade/orders",
            headers={"Accept": "application/json", "Authorization": "Bearer abc"},
            timeout=5,
            json={"amount": 10, "userId": 42},
        )

    def test_get_sends_params(self, client, session):
        session.request.return_value = make_response(json_body=[])
        params = {"userId": 42}

        client.get("/trade/orders", params=params)

        args, kwargs = session.request.call_args
        assert args == ("GET", "http://api.test/trade/orders")
        assert kwargs["params"] is params

    def test_delete(self, client, session):
        session.request.return_value = make_response(json_body={"message": "Order cancelled successfully"})

        client.delete("/trade/orders/15")

        args, _ = session.request.call_args
        assert args == ("DELETE", "http://api.test/trade/orders/15")

    def test_url_for_joins_slashes(self, client):
        assert client.url_for("trade/orders") == "http://api.test/trade/orders"
        assert client.url_for("/trade/orders") == "http://api.test/trade/orders"

    def test_base_url_required(self):
        with pytest.raises(ValueError):
            RequestsClient(base_url="")


class TestResponseDecoding:
    """Test response payload handling"""

    def test_json_body_decoded(self, client, session):
        body = {"message": "Order created successfully", "trades": [], "balance": 90}
        session.request.return_value = make_response(json_body=body)

        assert client.post("/trade/orders", {}) == body

    def test_empty_body_returns_none(self, client, session):
        session.request.return_value = make_response(status_code=204, content_type=None)

        assert client.delete("/trade/orders/1") is None

    def test_text_body_returned_as_text(self, client, session):
        session.request.return_value = make_response(text="pong", content_type="text/plain")

        assert client.get("/ping") == "pong"

    def test_invalid_json_falls_back_to_text(self, client, session):
        session.request.return_value = make_response(text="{broken", content_type="application/json")

        assert client.get("/trade/orders") == "{broken"


class TestErrors:
    """Test failures become domain exceptions"""

    def test_error_status_raises_http_status_error(self, client, session):
        session.request.return_value = make_response(
            status_code=404, json_body={"message": "Asset not found"}, reason="Not Found"
        )

        with pytest.raises(HttpStatusError) as exc_info:
            client.post("/trade/orders", {"itemId": 999})

        assert exc_info.value.status_code == 404
        assert exc_info.value.payload == {"message": "Asset not found"}
        assert "Asset not found" in str(exc_info.value)

    def test_error_status_without_message_uses_reason(self, client, session):
        session.request.return_value = make_response(
            status_code=500, text="", content_type=None, reason="Internal Server Error"
        )

        with pytest.raises(HttpStatusError, match="Internal Server Error"):
            client.get("/trade/orders")

    def test_http_status_error_is_dispatch_error(self, client, session):
        session.request.return_value = make_response(status_code=400, json_body={})

        with pytest.raises(RequestDispatchError):
            client.get("/trade/orders")

    @pytest.mark.parametrize("exc,fragment", [
        (requests.Timeout("slow"), "timed out"),
        (requests.ConnectionError("refused"), "Connection failed"),
        (requests.RequestException("boom"), "Request failed"),
    ])
    def test_transport_errors(self, client, session, exc, fragment):
        session.request.side_effect = exc

        with pytest.raises(RequestDispatchError, match=fragment) as exc_info:
            client.get("/trade/orders")

        assert exc_info.value.__cause__ is exc

    def test_failure_logged(self, client, session, caplog):
        session.request.side_effect = requests.ConnectionError("refused")

        with caplog.at_level(logging.ERROR, logger="trade_client.adapters.http.requests_client"):
            with pytest.raises(RequestDispatchError):
                client.get("/trade/orders")

        assert "connection failed" in caplog.text


class TestSessionLifecycle:
    """Test session ownership"""

    def test_injected_session_not_closed(self, client, session):
        client.close()

        session.close.assert_not_called()

    def test_owned_session_closed_on_exit(self, monkeypatch):
        created = MagicMock(spec=requests.Session)
        monkeypatch.setattr(requests, "Session", MagicMock(return_value=created))

        with RequestsClient(base_url="http://api.test") as client:
            assert client.session is created

        created.close.assert_called_once()
