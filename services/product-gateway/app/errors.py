# app/errors.py - Exceptions raised by the product gateway

from typing import Any, Optional


class GatewayError(Exception):
    """Base class for product gateway errors"""


class MissingProductIdError(GatewayError):
    def __init__(self, message: str = "Product ID is required"):
        super().__init__(message)


class TransportError(GatewayError):
    """
    The upstream call could not be completed, or its body was not JSON.
    `status` is set only when the underlying failure carried one.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class UpstreamHTTPError(GatewayError):
    def __init__(self, message: str, status: int, body: Any = None):
        super().__init__(message)
        self.status = status
        self.body = body

