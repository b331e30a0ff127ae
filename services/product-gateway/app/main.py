# app/main.py (product-gateway)

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from .api_clients import SearchApiClient, get_upstream_client
from .config import LOG_LEVEL, SEARCHAPI_API_KEY
from .gateway import lookup_product
from .models import ProductLookupRequest
from .outcomes import LookupOutcome

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("api")

if not SEARCHAPI_API_KEY:
    logger.warning("SEARCHAPI_API_KEY is not set; upstream will reject product lookups")

app = FastAPI(
    title="Product Lookup Gateway",
    version="1.0.0",
    description="Normalizes third-party product search results for the operations dashboard"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def to_response(outcome: LookupOutcome) -> JSONResponse:
    return JSONResponse(content=outcome.envelope(), status_code=outcome.status_code())


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Product Lookup Gateway API",
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "lookup": "/product-lookup/{product_id}",
            "lookup_alias": "/api/shein/product/{product_id}"
        }
    }

@app.get("/health")
def health():
    return {"status": "ok"}

# Product lookup endpoint
@app.get("/product-lookup/{product_id}")
async def get_product(product_id: str, client: SearchApiClient = Depends(get_upstream_client)):
    """
    Look up a single product upstream and return the normalized result.
    """
    logger.info(f"Received product lookup: {product_id}")
    outcome = await lookup_product(ProductLookupRequest(product_id=product_id), client)
    return to_response(outcome)

# Same lookup under the path the dashboard already calls
@app.get("/api/shein/product/{product_id}")
async def get_product_alias(product_id: str, client: SearchApiClient = Depends(get_upstream_client)):
    logger.info(f"Received product lookup at alias endpoint: {product_id}")
    outcome = await lookup_product(ProductLookupRequest(product_id=product_id), client)
    return to_response(outcome)

# No id in the path at all
@app.get("/product-lookup")
@app.get("/product-lookup/")
async def get_product_missing_id(client: SearchApiClient = Depends(get_upstream_client)):
    outcome = await lookup_product(ProductLookupRequest(), client)
    return to_response(outcome)
