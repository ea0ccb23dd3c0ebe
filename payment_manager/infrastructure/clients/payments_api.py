"""HTTP client for the payment manager REST API"""

import logging
import httpx
from typing import Any, Dict, Optional
from payment_manager.domain.models import Envelope
from payment_manager.config import settings


class ResourceClient:
    """CRUD calls against one collection, e.g. /api/cheques"""

    def __init__(self, api: "PaymentsApiClient", path: str):
        self.api = api
        self.path = path

    async def list(self) -> Envelope:
        return await self.api.request("GET", self.path)

    async def get(self, record_id: str) -> Envelope:
        return await self.api.request("GET", f"{self.path}/{record_id}")

    async def create(self, data: Dict[str, Any]) -> Envelope:
        return await self.api.request("POST", self.path, json=data)

    async def update(self, record_id: str, data: Dict[str, Any]) -> Envelope:
        return await self.api.request("PUT", f"{self.path}/{record_id}", json=data)

    async def delete(self, record_id: str) -> Envelope:
        return await self.api.request("DELETE", f"{self.path}/{record_id}")


class PaymentsApiClient:
    """
    Client for the cheque and cash payment endpoints.

    Calls never raise: timeouts, connection failures, non-JSON bodies and
    non-2xx responses all come back as an Envelope with success=False.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport
        self.cheques = ResourceClient(self, "/api/cheques")
        self.cash = ResourceClient(self, "/api/cash")

    async def request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Envelope:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.request(method, path, json=json)
                body = response.json()

                if response.is_error:
                    error = body.get("error") if isinstance(body, dict) else None
                    return Envelope(success=False, error=error or "Request failed")

                return Envelope(
                    success=bool(body.get("success", True)),
                    data=body.get("data"),
                    error=body.get("error"),
                    message=body.get("message"),
                )

            except httpx.TimeoutException:
                error = f"Payments API timeout after {self.timeout}s"
            except httpx.RequestError as e:
                error = f"Payments API unreachable: {e}"
            except (ValueError, AttributeError) as e:
                error = f"Invalid response from payments API: {e}"

        logging.error(f"API request error: {error}", extra={"method": method, "path": path})
        return Envelope(success=False, error=error)
