# app/api_clients.py - Upstream product search API integration

import asyncio
import json
import logging
import math
from typing import Optional

import aiohttp

from .config import GatewaySettings, get_settings
from .errors import TransportError
from .models import UpstreamQuery, UpstreamResponse

logger = logging.getLogger(__name__)


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text):
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"{text} is out of range")
    return value


def parse_json(text: str):
    """Strict JSON: no NaN or Infinity, and no numbers that overflow to them"""
    return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)


class SearchApiClient:
    """SearchApi.io client for single product lookups"""

    def __init__(self, settings: Optional[GatewaySettings] = None):
        self.settings = settings or get_settings()

    def build_query(self, product_id: str) -> UpstreamQuery:
        return UpstreamQuery(
            engine=self.settings.engine,
            product_id=product_id,
            api_key=self.settings.api_key,
        )

    async def fetch(self, query: UpstreamQuery, parse_errors: bool = True) -> UpstreamResponse:
        """
        Issue one GET against the upstream endpoint and parse the body as JSON.

        Any response that arrives, whatever its status, is returned. Failing to
        get a response at all, or getting one whose body is not JSON, raises
        TransportError. With parse_errors=False a non-2xx body is left unread
        and comes back as None.
        """
        headers = {'Content-Type': 'application/json'}

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.settings.upstream_url,
                                       headers=headers, params=query.to_params()) as response:
                    logger.info(f"Upstream answered {response.status} for product {query.product_id}")
                    body = None
                    if parse_errors or 200 <= response.status < 300:
                        body = parse_json(await response.text())
                    return UpstreamResponse(
                        status=response.status,
                        reason=response.reason or "",
                        body=body,
                    )
        except aiohttp.ClientResponseError as e:
            raise TransportError(e.message or str(e), status=e.status) from e
        except aiohttp.ClientError as e:
            raise TransportError(str(e) or type(e).__name__) from e
        except asyncio.TimeoutError as e:
            raise TransportError("Upstream request timed out") from e
        except ValueError as e:
            raise TransportError(f"Invalid JSON from upstream: {e}") from e


def get_upstream_client() -> SearchApiClient:
    return SearchApiClient()
