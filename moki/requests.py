"""Request builder and dispatcher for the Moki API."""

import logging
from typing import Any

import httpx

from .config import MokiConfig
from .error import ConfigurationError, MissingArgumentError, TransportError
from .globals import API_KEY_HEADER, API_PREFIX
from .identifier import action_path_segment, device_path_segment
from .response import Response, parse_json

API_LOGGER = logging.getLogger("moki.requests")
REQUEST_LOGGER = API_LOGGER.getChild("request")
RESPONSE_LOGGER = API_LOGGER.getChild("response")


class MokiAPI:
    """Synchronous dispatcher for the tenant-scoped Moki endpoints.

    Every method issues at most one HTTP request and blocks until the
    response is received. Identifiers and arguments are validated before
    anything is sent.
    """

    def __init__(
        self,
        config: MokiConfig,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """MokiAPI constructor.

        :param config: base url, tenant id and API key
        :param timeout: request timeout in seconds, httpx default when None
        :param transport: httpx transport, mostly useful for testing
        """
        self._config = config
        self._timeout = timeout
        self._transport = transport

    @property
    def config(self) -> MokiConfig:
        """Settings used to build and authenticate the requests."""
        return self._config

    def full_url(self, path: str) -> str:
        """Join the base url, the tenant prefix and the given path.

        Raises:
            ConfigurationError: if the base url or the tenant id is empty.

        """
        if not self._config.base_url:
            raise ConfigurationError("No base url configured for the Moki API")
        if not self._config.tenant_id:
            raise ConfigurationError("No tenant id configured for the Moki API")

        prefix = API_PREFIX.format(tenant_id=self._config.tenant_id)
        return f"{self._config.base_url.rstrip('/')}{prefix}{path}"

    def issue_request(self, method: str, url: str, options: Any = None) -> str:
        """Send a request and return the raw body of the response.

        Args:
            method (str): HTTP method, "GET" or "PUT".
            url (str): full url, see `full_url`.
            options (Any): JSON-encodable payload, sent as the request body
                unless None.

        Returns:
            str: the response body, expected to be JSON.

        Raises:
            ConfigurationError: if the API key is empty.
            TransportError: on network failure or non-2xx status.

        """
        if not self._config.api_key:
            raise ConfigurationError("No API key configured for the Moki API")

        method = method.upper()
        headers = {
            API_KEY_HEADER: self._config.api_key,
            "Accept": "application/json",
        }

        REQUEST_LOGGER.debug("%s %s", method, url)

        timeout = (
            httpx.USE_CLIENT_DEFAULT if self._timeout is None else self._timeout
        )
        try:
            with httpx.Client(transport=self._transport) as client:
                httpx_response = client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    json=options,
                    timeout=timeout,
                )
        except httpx.HTTPError as error:
            raise TransportError(f"{method} {url} failed: {error}") from error

        response = Response.from_httpx(httpx_response)
        RESPONSE_LOGGER.debug(
            "%s %s -> %s (%d bytes)",
            method,
            url,
            response.status,
            len(response.content),
        )
        response.raise_for_status()

        return response.text

    def _get(self, path: str) -> Any:
        return parse_json(self.issue_request("GET", self.full_url(path)))

    def ios_profiles(self) -> Any:
        """List the iOS profiles of the tenant."""
        return self._get("/iosprofiles")

    def device_profile_list(self, device_id: str) -> Any:
        """List the profiles installed on a device, by UDID or serial number."""
        return self._get(f"/devices/{device_path_segment(device_id)}/profiles")

    def device_managed_app_list(self, device_id: str) -> Any:
        """List the managed apps of a device, by UDID or serial number."""
        return self._get(f"/devices/{device_path_segment(device_id)}/managedapps")

    def action(self, device_id: str, action_id: str | None = None) -> Any:
        """Get the status of an action previously sent to a device.

        Raises:
            InvalidIdentifierError: if `device_id` is neither a UDID nor a serial,
                or `action_id` is "." or "..".
            MissingArgumentError: if `action_id` is not given.

        """
        segment = device_path_segment(device_id)
        action_segment = action_path_segment(action_id)

        return self._get(f"/devices/{segment}/actions/{action_segment}")

    def perform_action(self, device_id: str, body: Any = None) -> Any:
        """Send an action to a device, `body` is the JSON payload."""
        segment = device_path_segment(device_id)
        if body is None:
            raise MissingArgumentError("An action body is required")

        url = self.full_url(f"/devices/{segment}/actions")
        return parse_json(self.issue_request("PUT", url, body))

    def tenant_managed_app_list(self) -> Any:
        """List the managed apps of the tenant."""
        return self._get("/iosmanagedapps")
