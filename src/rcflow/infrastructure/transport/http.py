"""
HTTP transport for a Reality Capture Node.

Commands go out as GET /project/command?name=<cmd>&param1=..., authenticated
with the node's bearer token.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from rcflow.domain.exceptions import TransportError
from rcflow.domain.interfaces import NodeTransportInterface
from rcflow.domain.models import NodeConfig, NodeStatus

logger = logging.getLogger(__name__)

COMMAND_PATH = "/project/command"
STATUS_PATH = "/node/status"

# Raised while building the request, before anything is sent
REQUEST_BUILD_ERRORS = (httpx.InvalidURL, UnicodeEncodeError)


@dataclass
class HttpTransportConfig:
    """Configuration for HttpNodeTransport.

    This typed config ensures unknown fields are rejected at construction time.
    """

    timeout: float = 30.0


class HttpNodeTransport(NodeTransportInterface):
    """Talks to an RC Node over its HTTP command API."""

    config_class = HttpTransportConfig

    def __init__(
        self,
        config: HttpTransportConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        **kwargs: Any,
    ):
        """
        Args:
            config: Typed configuration object (preferred)
            transport: Optional httpx transport (e.g. httpx.MockTransport)
            **kwargs: Fields of HttpTransportConfig
        """
        if config is None:
            config = HttpTransportConfig(**kwargs)

        self._config = config
        self._client = httpx.Client(timeout=config.timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def send(
        self,
        config: NodeConfig,
        command_name: str,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        query: list[tuple[str, str]] = [("name", command_name)]
        query.extend((params or {}).items())
        url = f"{config.base_url}{COMMAND_PATH}"
        logger.debug("Sending RC Node command '%s' to %s", command_name, url)

        try:
            response = self._client.get(
                url, params=query, headers=self._headers(config)
            )
        except (httpx.HTTPError, *REQUEST_BUILD_ERRORS) as e:
            raise TransportError(f"Command '{command_name}' failed: {e}") from e

        if response.is_error:
            raise TransportError(
                f"Command failed with status: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON response for command '{command_name}'",
                status_code=response.status_code,
            ) from e

    def check_status(self, config: NodeConfig) -> NodeStatus:
        url = f"{config.base_url}{STATUS_PATH}"
        logger.info("Testing connection to RC Node at: %s", url)

        try:
            response = self._client.get(url, headers=self._headers(config))
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            return NodeStatus(
                reachable=False,
                detail={
                    "error": f"Connection failed with status: "
                    f"{e.response.status_code} - {e.response.text}",
                    "status_code": e.response.status_code,
                },
            )
        except httpx.HTTPError as e:
            return NodeStatus(
                reachable=False,
                detail={"error": f"Network error - server might be down: {e}"},
            )
        except REQUEST_BUILD_ERRORS as e:
            return NodeStatus(
                reachable=False,
                detail={"error": f"Invalid connection settings: {e}"},
            )
        except ValueError:
            return NodeStatus(
                reachable=False, detail={"error": "Invalid JSON response from server"}
            )

        if not isinstance(data, dict):
            data = {"response": data}
        api_version = data.get("apiVersion")
        logger.info("Connected to RC Node version %s", api_version or "unknown")
        return NodeStatus(
            reachable=True,
            api_version=str(api_version) if api_version is not None else None,
            detail=data,
        )

    @staticmethod
    def _headers(config: NodeConfig) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {config.auth_token}",
            "Accept": "application/json",
        }
