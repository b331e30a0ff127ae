# app/gateway.py - Product lookup pipeline

import logging
from typing import Any, Optional

from .api_clients import SearchApiClient
from .errors import MissingProductIdError, UpstreamHTTPError
from .models import ProductLookupRequest
from .outcomes import LookupOutcome, TransportFailure, ValidationFailure, classify
from .validation import validate_product_id, validate_request

logger = logging.getLogger(__name__)


async def lookup_product(request: ProductLookupRequest, client: SearchApiClient) -> LookupOutcome:
    """
    Validate the request, call upstream once and classify the result.

    Never raises: every failure comes back as an outcome.
    """
    try:
        validate_request(request)
    except MissingProductIdError as e:
        logger.info("Rejected product lookup without a product id")
        return ValidationFailure(message=str(e))

    query = client.build_query(request.product_id)

    try:
        response = await client.fetch(query)
    except Exception as e:
        logger.error(f"Product lookup failed for {request.product_id}: {e}", exc_info=True)
        return TransportFailure.from_exception(e)

    outcome = classify(response)
    logger.info(f"Product {request.product_id} classified as {outcome.kind} ({outcome.status_code()})")
    return outcome


async def fetch_product(product_id: Optional[str], client: Optional[SearchApiClient] = None) -> Any:
    """
    Fetch raw product data, raising instead of returning envelopes.

    Raises MissingProductIdError for a missing or empty id, TransportError when upstream
    cannot be reached, and UpstreamHTTPError for a non-2xx answer. A 2xx body
    is returned as-is, even if it carries an `error` field.
    """
    product_id = validate_product_id(product_id)
    client = client or SearchApiClient()

    response = await client.fetch(client.build_query(product_id), parse_errors=False)
    if not response.ok:
        raise UpstreamHTTPError(
            f"API request failed: {response.status} {response.reason}".rstrip(),
            status=response.status,
            body=response.body,
        )
    return response.body
