"""Gateway configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class GatewayConfig(BaseModel):
    """Connection settings for the assistant endpoint.

    Attributes:
        base_url: Root URL of the assistant API.
        timeout: Seconds to wait for an answer before giving up.
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("ASSISTANT_API_URL", "http://localhost:8000"),
        description="Root URL of the assistant API",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("ASSISTANT_TIMEOUT", "30")),
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Require a URL and drop any trailing slash."""
        if not v or not v.strip():
            raise ValueError("Assistant URL required. Set ASSISTANT_API_URL in .env")
        return v.strip().rstrip("/")


def get_gateway_config() -> GatewayConfig:
    """Create gateway configuration from environment."""
    return GatewayConfig()
