"""
HTTP Transport for gateway API calls

The SDK talks to the gateway only through Transport.send(). The default
RequestsTransport uses a requests.Session with HTTP basic auth; any object
with a compatible send() can replace it.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from .. import __version__
from ..config import Configuration
from ..exceptions import TransportError
from .query_codec import is_error_status, raise_exception_from_status
from .serialization import parse_body, render_body

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewayRequest:
    """One API call, relative to the merchant base URL."""
    method: str
    path: str
    body: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class GatewayResponse:
    status: int
    body: Dict[str, Any] = field(default_factory=dict)


class Transport:
    """Sends a GatewayRequest and returns the raw GatewayResponse."""

    def send(self, request: GatewayRequest) -> GatewayResponse:
        raise NotImplementedError


class RequestsTransport(Transport):
    """
    Transport backed by requests.

    Timeouts come from Configuration.timeout; retries, if wanted, belong on
    the session's adapters.
    """

    def __init__(self, config: Configuration, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": f"redirect-gateway-python/{__version__}",
            "X-ApiVersion": self.config.api_version,
        }

    def send(self, request: GatewayRequest) -> GatewayResponse:
        self.config.require_keys()
        url = self.config.base_merchant_url() + request.path
        data = render_body(request.body) if request.body is not None else None

        logger.debug(f"{request.method} {url}")

        try:
            response = self.session.request(
                request.method,
                url,
                data=data,
                headers=self._headers(),
                auth=(self.config.public_key, self.config.private_key),
                timeout=self.config.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            logger.error(f"{request.method} {url} failed: {e}")
            raise TransportError(
                f"Could not reach gateway: {e}",
                details={"method": request.method, "path": request.path}
            ) from e

        logger.debug(f"{request.method} {url} -> {response.status_code}")

        return GatewayResponse(status=response.status_code, body=parse_body(response.content))


class Http:
    """
    Gateway API client.

    Error statuses become exceptions; 2xx and 422 bodies are returned for the
    caller to wrap in a Result.
    """

    def __init__(self, config: Configuration, transport: Optional[Transport] = None):
        self.config = config
        self.transport = transport or RequestsTransport(config)

    def get(self, path: str) -> Dict[str, Any]:
        return self._http_do("GET", path)

    def post(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._http_do("POST", path, params)

    def put(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._http_do("PUT", path, params)

    def delete(self, path: str) -> Dict[str, Any]:
        return self._http_do("DELETE", path)

    def _http_do(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = self.transport.send(GatewayRequest(method=method, path=path, body=params))

        if is_error_status(response.status):
            message = response.body.get("message") if response.body else None
            raise_exception_from_status(response.status, message)

        return response.body
