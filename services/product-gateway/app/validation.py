# app/validation.py - Input validation for product lookups

from typing import Optional

from .errors import MissingProductIdError
from .models import ProductLookupRequest


def validate_product_id(product_id: Optional[str]) -> str:
    """
    Return the product id if it is usable, otherwise raise MissingProductIdError.

    Only None and "" count as missing; any other id, whitespace included,
    is passed on exactly as given.
    """
    if product_id is None or product_id == "":
        raise MissingProductIdError()
    return product_id


def validate_request(request: ProductLookupRequest) -> ProductLookupRequest:
    validate_product_id(request.product_id)
    return request
