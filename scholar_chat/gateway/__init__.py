"""Client side of the assistant service.

Wraps the HTTP call made for every user turn and normalizes all failures
into GatewayFailure for the session controller.
"""

from scholar_chat.gateway.client import HttpAssistantGateway, get_gateway
from scholar_chat.gateway.config import GatewayConfig, get_gateway_config

__all__ = ["GatewayConfig", "HttpAssistantGateway", "get_gateway", "get_gateway_config"]
