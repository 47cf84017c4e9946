# trade_client/tests/test_orders.py
"""
Tests for the module-level order functions
"""
import logging
from unittest.mock import patch

import pytest

import trade_client
from trade_client import orders
from trade_client.adapters.http.fake import FakeRequestClient
from trade_client.adapters.storage.memory import InMemoryKeyValueStore
from trade_client.domain.services.order_service import OrderService


@pytest.fixture
def wired():
    """Install a service backed by fakes as the default"""
    client = FakeRequestClient(responses={"POST": {"message": "Order created successfully"}})
    store = InMemoryKeyValueStore({"userId": "42"})
    orders.set_order_service(OrderService(client, store))
    yield client, store
    orders.reset_order_service()


class TestDefaultService:
    """Test lazy default service"""

    def test_built_from_test_config(self):
        orders.reset_order_service()

        service = orders.get_order_service()

        assert isinstance(service, OrderService)
        assert orders.get_order_service() is service
        orders.reset_order_service()

    def test_reset_rebuilds(self):
        orders.reset_order_service()
        first = orders.get_order_service()

        orders.reset_order_service()

        assert orders.get_order_service() is not first
        orders.reset_order_service()


class TestModuleFunctions:
    """Test delegation to the default service"""

    def test_create_order(self, wired):
        client, _ = wired

        result = trade_client.create_order({"amount": 10})

        assert result == {"message": "Order created successfully"}
        assert client.last_call == ("POST", "/trade/orders", {"amount": 10, "userId": 42})

    def test_create_order_keeps_caller_user_id(self, wired):
        client, _ = wired

        trade_client.create_order({"amount": 10, "userId": 7})

        assert client.last_call[2] == {"amount": 10, "userId": 7}

    def test_create_order_signed_out(self, wired):
        client, store = wired
        store.remove_item("userId")

        trade_client.create_order({"amount": 10})

        assert client.last_call[2] == {"amount": 10}

    def test_fetch_orders(self, wired):
        client, _ = wired
        params = {"userId": 42}

        trade_client.fetch_orders(params)

        assert client.last_call[:2] == ("GET", "/trade/orders")
        assert client.last_call[2] is params

    def test_cancel_order(self, wired):
        client, _ = wired

        trade_client.cancel_order("15")

        assert client.last_call == ("DELETE", "/trade/orders/15", None)


class RecordCollector(logging.Handler):
    """Root handler keeping the messages it receives"""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


class TestHostLoggingUntouched:
    """Test the module-level functions leave the host's logging alone"""

    def setup_method(self):
        orders.reset_order_service()
        self.collector = RecordCollector()
        self.root = logging.getLogger()
        self.root_level = self.root.level
        self.root.addHandler(self.collector)
        self.root.setLevel(logging.DEBUG)

    def teardown_method(self):
        self.root.removeHandler(self.collector)
        self.root.setLevel(self.root_level)
        orders.reset_order_service()

    def test_root_handler_still_receives_records(self):
        logger = logging.getLogger("trade_client.tests")

        logger.info("before")
        trade_client.create_order({"amount": 10})
        logger.info("after")

        assert "before" in self.collector.messages
        assert "after" in self.collector.messages
        assert logging.getLogger("trade_client").propagate is True

    def test_default_service_does_not_apply_dict_config(self):
        with patch("logging.config.dictConfig") as dict_config:
            trade_client.fetch_orders({})

        dict_config.assert_not_called()
