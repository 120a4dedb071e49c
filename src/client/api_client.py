"""HTTP client for the invoice API"""

import logging
from typing import Any, Dict, List, Optional
import httpx

from src.client.session import ClientSession
from src.client.mapping import draft_to_payload
from src.domain.invoice_draft import InvoiceDraft

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = "Unable to connect to server"


class ApiError(Exception):
    """Non-2xx response or unreachable server"""

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class InvoiceApiClient:
    """
    Thin wrapper over the REST API

    The bearer token is taken from the session on every request. Requests
    are never retried.
    """

    def __init__(
        self,
        base_url: str,
        session: ClientSession,
        timeout: float = 10.0,
        api_prefix: str = "/api",
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.session = session
        self._client = httpx.Client(
            base_url=base_url.rstrip("/") + api_prefix,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _headers(self) -> Dict[str, str]:
        if self.session.token:
            return {"Authorization": f"Bearer {self.session.token}"}
        return {}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self._client.request(method, path, headers=self._headers(), **kwargs)
        except httpx.TransportError as e:
            logger.debug(f"{method} {path} failed: {e}")
            raise ApiError(CONNECTION_ERROR_MESSAGE) from e

        if response.is_success:
            return response.json()

        code = None
        message = f"Request failed with status {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            code = body["error"].get("code")
            message = body["error"].get("message") or message
        raise ApiError(message, status_code=response.status_code, code=code)

    # Auth

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """Log in and store the returned token and user in the session"""
        data = self._request("POST", "/auth/login", json={"username": username, "password": password})
        self.session.save(data["token"], data["user"])
        return data["user"]

    def verify(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/verify")["user"]

    def logout(self) -> None:
        """Clear the local session; a server that cannot be reached is ignored"""
        try:
            self._request("POST", "/auth/logout")
        except ApiError as e:
            logger.debug(f"Logout request failed: {e.message}")
        finally:
            self.session.clear()

    # Invoices

    def list_invoices(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/invoices")

    def get_invoice(self, invoice_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/invoices/{invoice_id}")

    def save_invoice(
        self,
        draft: InvoiceDraft,
        invoice_id: Optional[int] = None,
        status: Optional[str] = None,
    ) -> int:
        """
        Create the invoice, or overwrite it when invoice_id is given

        Returns:
            ID of the saved invoice
        """
        payload = draft_to_payload(draft, status=status)
        if invoice_id is None:
            return self._request("POST", "/invoices", json=payload)["invoiceId"]
        self._request("PUT", f"/invoices/{invoice_id}", json=payload)
        return invoice_id

    def delete_invoice(self, invoice_id: int) -> None:
        self._request("DELETE", f"/invoices/{invoice_id}")
