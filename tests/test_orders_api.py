"""
HTTP tests for the Orders API.
"""

import logging
import sqlite3
from datetime import datetime
from unittest.mock import patch
from uuid import UUID, uuid4

from amazon_api.orders.repositories import SQLiteOrderRepository

ORDER_KEYS = {"id", "customerEmail", "description", "totalAmount", "status", "createdAt", "updatedAt"}


def parse_instant(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def create_order(client, **body):
    payload = {"customerEmail": "a@b.com", "description": "x", "totalAmount": "99.99"}
    payload.update(body)
    response = client.post("/api/orders", json=payload)
    assert response.status_code == 201
    return response.json()


def post_raw(client, url, content):
    return client.post(url, content=content, headers={"content-type": "application/json"})


class TestListOrders:

    def test_empty_list_is_200(self, orders_client):
        response = orders_client.get("/api/orders")
        assert response.status_code == 200
        assert response.json() == []

    def test_lists_created_orders(self, orders_client):
        first = create_order(orders_client, description="first")
        second = create_order(orders_client, description="second")
        response = orders_client.get("/api/orders")
        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [first["id"], second["id"]]


class TestCreateOrder:

    def test_create_returns_201_with_body(self, orders_client):
        response = orders_client.post(
            "/api/orders",
            json={"customerEmail": "a@b.com", "description": "x", "totalAmount": "99.99", "status": None},
        )
        assert response.status_code == 201
        body = response.json()
        assert set(body) == ORDER_KEYS
        UUID(body["id"])
        assert body["status"] == "PENDING"
        assert body["totalAmount"] == "99.99"
        assert body["createdAt"] == body["updatedAt"]
        assert "location" not in response.headers

    def test_supplied_status_kept(self, orders_client):
        assert create_order(orders_client, status="PAID")["status"] == "PAID"

    def test_client_id_ignored(self, orders_client):
        client_id = str(uuid4())
        body = create_order(orders_client, id=client_id)
        assert body["id"] != client_id

    def test_timestamps_are_iso_instants(self, orders_client):
        body = create_order(orders_client)
        created = parse_instant(body["createdAt"])
        assert created.utcoffset() is not None

    def test_empty_body_creates_pending_order(self, orders_client):
        response = orders_client.post("/api/orders", json={})
        assert response.status_code == 201
        assert response.json()["status"] == "PENDING"
        assert response.json()["customerEmail"] is None

    def test_malformed_amount_rejected(self, orders_client):
        response = orders_client.post("/api/orders", json={"totalAmount": "a lot"})
        assert response.status_code == 422

    def test_json_number_amount_kept_exact(self, orders_client):
        response = post_raw(orders_client, "/api/orders", b'{"totalAmount": 12345678901234567.89}')
        assert response.status_code == 201
        assert response.json()["totalAmount"] == "12345678901234567.89"

    def test_long_fraction_amount_kept_exact(self, orders_client):
        response = post_raw(
            orders_client, "/api/orders", b'{"totalAmount": 0.1000000000000000055511151231257827}'
        )
        assert response.status_code == 201
        created = response.json()
        assert created["totalAmount"] == "0.1000000000000000055511151231257827"
        fetched = orders_client.get(f"/api/orders/{created['id']}").json()
        assert fetched["totalAmount"] == created["totalAmount"]

    def test_malformed_json_rejected(self, orders_client):
        response = post_raw(orders_client, "/api/orders", b'{"totalAmount": 1.5')
        assert response.status_code == 422


class TestGetOrder:

    def test_get_existing(self, orders_client):
        created = create_order(orders_client)
        response = orders_client.get(f"/api/orders/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_is_404_with_empty_body(self, orders_client):
        response = orders_client.get(f"/api/orders/{uuid4()}")
        assert response.status_code == 404
        assert response.content == b""

    def test_invalid_uuid_rejected(self, orders_client):
        assert orders_client.get("/api/orders/not-a-uuid").status_code == 422


class TestUpdateOrder:

    def test_partial_update(self, orders_client):
        created = create_order(orders_client, status="PENDING")
        response = orders_client.put(
            f"/api/orders/{created['id']}",
            json={"status": "COMPLETED", "customerEmail": None, "description": None, "totalAmount": None},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "COMPLETED"
        for key in ("id", "customerEmail", "description", "totalAmount", "createdAt"):
            assert body[key] == created[key]
        assert parse_instant(body["updatedAt"]) > parse_instant(created["updatedAt"])

    def test_update_missing_is_404_and_creates_nothing(self, orders_client):
        response = orders_client.put(f"/api/orders/{uuid4()}", json={"status": "COMPLETED"})
        assert response.status_code == 404
        assert response.content == b""
        assert orders_client.get("/api/orders").json() == []

    def test_update_visible_on_get(self, orders_client):
        created = create_order(orders_client)
        orders_client.put(f"/api/orders/{created['id']}", json={"totalAmount": "10.50"})
        assert orders_client.get(f"/api/orders/{created['id']}").json()["totalAmount"] == "10.50"

    def test_json_number_amount_update_kept_exact(self, orders_client):
        created = create_order(orders_client)
        response = orders_client.put(
            f"/api/orders/{created['id']}",
            content=b'{"totalAmount": 98765432109876543.21}',
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 200
        assert response.json()["totalAmount"] == "98765432109876543.21"


class TestDeleteOrder:

    def test_delete_existing_is_204(self, orders_client):
        created = create_order(orders_client)
        response = orders_client.delete(f"/api/orders/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""
        assert orders_client.get(f"/api/orders/{created['id']}").status_code == 404

    def test_delete_missing_is_404(self, orders_client):
        response = orders_client.delete(f"/api/orders/{uuid4()}")
        assert response.status_code == 404
        assert response.content == b""


class TestStorageFailure:

    def test_store_error_is_500(self, orders_client):
        with patch.object(
            SQLiteOrderRepository,
            "find_all",
            side_effect=sqlite3.OperationalError("unable to open database file"),
        ):
            response = orders_client.get("/api/orders")
        assert response.status_code == 500
        assert response.content == b""

    def test_store_error_is_logged_with_traceback(self, orders_client, caplog):
        caplog.set_level(logging.ERROR, logger="amazon_api.core.errors")
        with patch.object(
            SQLiteOrderRepository,
            "find_all",
            side_effect=sqlite3.OperationalError("disk I/O error"),
        ):
            orders_client.get("/api/orders")
        records = [r for r in caplog.records if r.name == "amazon_api.core.errors"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert records[0].getMessage() == "Storage failure on GET /api/orders"
        assert isinstance(records[0].exc_info[1], sqlite3.OperationalError)
