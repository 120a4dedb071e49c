"""Unit tests for the invoice API client"""

import json
import httpx
import pytest
from datetime import date

from src.client.api_client import ApiError, InvoiceApiClient
from src.client.session import ClientSession
from src.domain.invoice_draft import InvoiceDraft, DraftItem


@pytest.fixture
def session(tmp_path):
    return ClientSession(str(tmp_path / "session.json")).init()


def make_client(session, handler):
    return InvoiceApiClient(
        "http://invoices.test",
        session,
        transport=httpx.MockTransport(handler),
    )


class TestAuth:
    def test_login_saves_session(self, session):
        def handler(request):
            assert request.url.path == "/api/auth/login"
            assert json.loads(request.content) == {"username": "admin", "password": "secret123"}
            return httpx.Response(
                200,
                json={
                    "message": "Login successful",
                    "token": "jwt",
                    "user": {"id": 1, "username": "admin", "email": "a@b.c", "fullName": "Admin"},
                },
            )

        with make_client(session, handler) as client:
            user = client.login("admin", "secret123")

        assert user["fullName"] == "Admin"
        assert session.token == "jwt"
        assert ClientSession(session.path).init().is_authenticated()

    def test_login_failure_carries_server_message(self, session):
        def handler(request):
            return httpx.Response(
                401, json={"error": {"code": "INVALID_CREDENTIALS", "message": "Invalid credentials"}}
            )

        with make_client(session, handler) as client:
            with pytest.raises(ApiError) as exc_info:
                client.login("admin", "wrong")

        assert exc_info.value.message == "Invalid credentials"
        assert exc_info.value.status_code == 401
        assert exc_info.value.code == "INVALID_CREDENTIALS"
        assert not session.is_authenticated()

    def test_bearer_token_sent(self, session):
        session.save("jwt", {"id": 1})
        seen = {}

        def handler(request):
            seen["authorization"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"valid": True, "user": {"id": 1}})

        with make_client(session, handler) as client:
            assert client.verify() == {"id": 1}

        assert seen["authorization"] == "Bearer jwt"

    def test_logout_clears_session_even_when_offline(self, session):
        session.save("jwt", {"id": 1})

        def handler(request):
            raise httpx.ConnectError("refused")

        with make_client(session, handler) as client:
            client.logout()

        assert not session.is_authenticated()


class TestInvoices:
    def test_connection_failure(self, session):
        def handler(request):
            raise httpx.ConnectError("refused")

        with make_client(session, handler) as client:
            with pytest.raises(ApiError) as exc_info:
                client.list_invoices()

        assert exc_info.value.message == "Unable to connect to server"

    def test_non_json_error_body(self, session):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        with make_client(session, handler) as client:
            with pytest.raises(ApiError) as exc_info:
                client.get_invoice(1)

        assert exc_info.value.status_code == 502

    def test_save_new_invoice_posts(self, session):
        captured = {}

        def handler(request):
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(201, json={"message": "Invoice created successfully", "invoiceId": 42})

        draft = InvoiceDraft(
            invoice_number="INV1",
            invoice_date=date(2024, 5, 1),
            items=[DraftItem(description="x", unit_cost=10, quantity=2)],
        )
        with make_client(session, handler) as client:
            assert client.save_invoice(draft) == 42

        assert captured["method"] == "POST"
        assert captured["path"] == "/api/invoices"
        assert captured["body"]["invoiceNumber"] == "INV1"
        assert captured["body"]["totalAmount"] == 20

    def test_save_existing_invoice_puts(self, session):
        captured = {}

        def handler(request):
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"message": "Invoice updated successfully"})

        with make_client(session, handler) as client:
            assert client.save_invoice(InvoiceDraft(), invoice_id=7, status="paid") == 7

        assert captured["method"] == "PUT"
        assert captured["path"] == "/api/invoices/7"
        assert captured["body"]["status"] == "paid"

    def test_delete_not_found(self, session):
        def handler(request):
            assert request.method == "DELETE"
            return httpx.Response(
                404, json={"error": {"code": "INVOICE_NOT_FOUND", "message": "Invoice not found"}}
            )

        with make_client(session, handler) as client:
            with pytest.raises(ApiError, match="Invoice not found"):
                client.delete_invoice(3)
