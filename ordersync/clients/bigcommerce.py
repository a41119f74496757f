"""
BigCommerce REST API client.

Thin wrapper over a `requests.Session` with store credentials attached. All
failures, HTTP or transport, surface as BigCommerceError.
"""

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.bigcommerce.com/stores"


class BigCommerceError(Exception):
    """A BigCommerce request failed."""

    def __init__(
        self,
        message: str,
        method: str,
        resource: str,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.method = method
        self.resource = resource
        self.status_code = status_code


class BigCommerceClient:
    """
    Client for one BigCommerce store.

    Usage:
        client = BigCommerceClient(store_hash="abc123", client_id="...", access_token="...")
        products = client.get("/orders/100/products")
        client.put("/orders/100", {"status_id": 9})
    """

    def __init__(
        self,
        store_hash: str,
        client_id: str,
        access_token: str,
        api_version: str = "v2",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ):
        self.base_url = f"{API_BASE_URL}/{store_hash}/{api_version}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "X-Auth-Client": client_id,
                "X-Auth-Token": access_token,
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def url_for(self, resource: str) -> str:
        """Resolve a resource path (or absolute URL) against the store's API base."""
        if resource.startswith(("http://", "https://")):
            return resource
        return f"{self.base_url}/{resource.lstrip('/')}"

    def get(self, resource: str) -> Any:
        """
        GET a resource.

        Args:
            resource: Path like /orders/100/products, or an absolute URL

        Returns:
            Decoded JSON body; an empty list for 204 No Content

        Raises:
            BigCommerceError: On transport errors or non-2xx responses
        """
        return self._request("GET", resource)

    def put(self, resource: str, payload: dict) -> Any:
        """
        PUT a JSON payload to a resource.

        Raises:
            BigCommerceError: On transport errors or non-2xx responses
        """
        return self._request("PUT", resource, json=payload)

    def close(self):
        self.session.close()

    def _request(self, method: str, resource: str, **kwargs) -> Any:
        url = self.url_for(resource)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise BigCommerceError(
                f"{method} {resource} failed: {e}", method, resource
            ) from e

        if not response.ok:
            raise BigCommerceError(
                f"{method} {resource} returned HTTP {response.status_code}: "
                f"{response.text[:500]}",
                method,
                resource,
                status_code=response.status_code,
            )

        # BigCommerce answers 204 for empty collections
        if response.status_code == 204 or not response.content:
            return []

        try:
            return response.json()
        except ValueError as e:
            raise BigCommerceError(
                f"{method} {resource} returned invalid JSON: {e}",
                method,
                resource,
                status_code=response.status_code,
            ) from e
