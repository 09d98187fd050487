"""
Shared httpx client and the GET-JSON helper used by every gateway.

Errors are reported as plain strings; each gateway wraps them into its own
GatewayError subclass together with the id it was resolving.
"""

import logging
from typing import Any, Optional

import httpx

from chattask.config.settings import Config

logger = logging.getLogger(__name__)


class GatewayCallError(Exception):
    """Internal signal carrying the downstream failure message."""


def create_http_client(timeout: Optional[float] = None) -> httpx.AsyncClient:
    timeout = Config.GATEWAY_TIMEOUT_SECONDS if timeout is None else timeout
    logger.info(f"[HTTP] Gateway client created (timeout={timeout}s)")
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout))


async def close_http_client(client: httpx.AsyncClient) -> None:
    if client:
        await client.aclose()
        logger.info("[HTTP] Gateway client closed")


async def get_json(client: httpx.AsyncClient, url: str, entity: str) -> Any:
    """
    GET url and decode the JSON body.

    Raises:
        GatewayCallError: transport failure, non-200 status or invalid JSON
    """
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.warning(f"[HTTP] GET {url} failed: {e}")
        raise GatewayCallError(f"error in request's processing: {e}") from e

    if response.status_code != httpx.codes.OK:
        error_detail = response.text
        try:
            error_data = response.json()
            if isinstance(error_data, dict):
                error_detail = error_data.get("error", error_detail)
        except ValueError:
            pass
        logger.warning(f"[HTTP] GET {url} returned {response.status_code}: {error_detail}")
        raise GatewayCallError(f"can't get {entity}: {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise GatewayCallError(f"failed to decode {entity} response: {e}") from e


def pick(data: dict, *keys: str, default: Any = None) -> Any:
    """First present key; the services are inconsistent about key casing."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default
