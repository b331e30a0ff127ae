# app/models.py - Product gateway models

from pydantic import BaseModel
from typing import Any, Dict, Optional


class ProductLookupRequest(BaseModel):
    product_id: Optional[str] = None


class UpstreamQuery(BaseModel):
    engine: str
    product_id: str
    api_key: str

    def to_params(self) -> Dict[str, str]:
        """Query string parameters sent upstream, and nothing else"""
        return {
            "engine": self.engine,
            "product_id": self.product_id,
            "api_key": self.api_key,
        }


class UpstreamResponse(BaseModel):
    status: int
    reason: str = ""
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class ErrorEnvelope(BaseModel):
    error: str
    status: Optional[int] = None
    details: Optional[Any] = None
    type: Optional[str] = None
