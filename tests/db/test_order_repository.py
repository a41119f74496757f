"""
Unit tests for OrderRepository and OrderStore.

These tests verify statement construction and transaction handling without a
database connection.
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.dialects import postgresql

from ordersync.db.repositories.order import OrderRepository, UnresolvedSubresourceError
from ordersync.db.store import OrderStore
from ordersync.db.tables import build_orders_table
from ordersync.models.order import Order


@pytest.fixture
def mock_session() -> MagicMock:
    return MagicMock()


@pytest.fixture
def order_repo(mock_session: MagicMock) -> OrderRepository:
    return OrderRepository(mock_session, build_orders_table("processed_orders"))


@pytest.fixture
def enriched_order(payload_factory) -> Order:
    order = Order.model_validate(payload_factory(order_id=77, is_digital=True))
    order.products = [{"sku": "EBOOK-1", "quantity": 1, "name": "E-Book"}]
    order.shipping_addresses = []
    order.coupons = [{"code": "SAVE10"}]
    return order


class TestOrdersTable:
    def test_table_is_cached_per_name(self):
        assert build_orders_table("orders_a") is build_orders_table("orders_a")
        assert build_orders_table("orders_a") is not build_orders_table("orders_b")

    def test_keyed_by_order_id(self):
        table = build_orders_table("processed_orders")
        assert [c.name for c in table.primary_key.columns] == ["id"]


class TestOrderRepositoryPut:
    def test_upserts_document(
        self, order_repo: OrderRepository, mock_session: MagicMock, enriched_order: Order
    ):
        order_repo.put(enriched_order)

        mock_session.execute.assert_called_once()
        stmt = mock_session.execute.call_args[0][0]
        sql = str(stmt.compile(dialect=postgresql.dialect()))
        assert "INSERT INTO processed_orders" in sql
        assert "ON CONFLICT (id) DO UPDATE" in sql

        params = stmt.compile(dialect=postgresql.dialect()).params
        assert params["id"] == 77
        assert params["is_digital"] is True
        assert params["document"]["coupons"] == [{"code": "SAVE10"}]

    def test_refuses_unresolved_order(
        self, order_repo: OrderRepository, mock_session: MagicMock, payload_factory
    ):
        order = Order.model_validate(payload_factory(order_id=1))
        order.products = []

        with pytest.raises(UnresolvedSubresourceError) as exc_info:
            order_repo.put(order)

        assert "coupons" in str(exc_info.value)
        assert "shipping_addresses" in str(exc_info.value)
        mock_session.execute.assert_not_called()


class TestOrderRepositoryGet:
    def test_returns_document(self, order_repo: OrderRepository, mock_session: MagicMock):
        row = MagicMock()
        row.document = {"id": 5}
        mock_session.execute.return_value.fetchone.return_value = row

        assert order_repo.get(5) == {"id": 5}

    def test_returns_none_when_missing(
        self, order_repo: OrderRepository, mock_session: MagicMock
    ):
        mock_session.execute.return_value.fetchone.return_value = None

        assert order_repo.get(5) is None


class TestOrderStore:
    def test_put_commits(self, enriched_order: Order):
        with patch("ordersync.db.store.UnitOfWork") as mock_uow_class:
            mock_uow = MagicMock()
            mock_uow.__enter__ = MagicMock(return_value=mock_uow)
            mock_uow.__exit__ = MagicMock(return_value=False)
            mock_uow_class.return_value = mock_uow

            OrderStore("processed_orders").put(enriched_order)

            mock_uow_class.assert_called_once_with("processed_orders")
            mock_uow.orders.put.assert_called_once_with(enriched_order)
            mock_uow.commit.assert_called_once()

    def test_put_error_propagates_without_commit(self, enriched_order: Order):
        with patch("ordersync.db.store.UnitOfWork") as mock_uow_class:
            mock_uow = MagicMock()
            mock_uow.__enter__ = MagicMock(return_value=mock_uow)
            mock_uow.__exit__ = MagicMock(return_value=False)
            mock_uow.orders.put.side_effect = RuntimeError("deadlock")
            mock_uow_class.return_value = mock_uow

            with pytest.raises(RuntimeError):
                OrderStore("processed_orders").put(enriched_order)

            mock_uow.commit.assert_not_called()
