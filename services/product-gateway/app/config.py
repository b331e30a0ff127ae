import os
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

SEARCHAPI_API_KEY = os.getenv("SEARCHAPI_API_KEY", "")
SEARCHAPI_URL = os.getenv("SEARCHAPI_URL", "https://www.searchapi.io/api/v1/search")
SEARCHAPI_ENGINE = os.getenv("SEARCHAPI_ENGINE", "shein_product")  # product lookup engine

GATEWAY_HOST = os.getenv("GATEWAY_HOST", "0.0.0.0")
GATEWAY_PORT = int(os.getenv("GATEWAY_PORT", "8004"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class GatewaySettings(BaseModel):
    api_key: str = ""
    upstream_url: str = "https://www.searchapi.io/api/v1/search"
    engine: str = "shein_product"


def get_settings() -> GatewaySettings:
    """Settings for the upstream service, as loaded from the environment."""
    return GatewaySettings(
        api_key=SEARCHAPI_API_KEY,
        upstream_url=SEARCHAPI_URL,
        engine=SEARCHAPI_ENGINE,
    )
