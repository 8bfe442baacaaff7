"""Configuration management for the Printify client."""

from typing import Optional, Union
from pydantic import BaseModel, Field, ConfigDict

PRINTIFY_BASE_URL = "https://api.printify.com/v1"


class ClientConfig(BaseModel):
    """Main configuration for the Printify client."""
    api_key: str = Field(..., description="Printify personal access token (sent as a bearer token)")
    shop_id: Optional[Union[int, str]] = Field(
        None,
        description="Shop identifier used by every shop-scoped call"
    )
    base_url: str = Field(PRINTIFY_BASE_URL, description="Printify API base URL")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "api_key": "eyJ0eXAiOiJKV1Qi...",
                "shop_id": 1234567,
            }
        }
    )
