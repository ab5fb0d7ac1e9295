from nutriapp.gateway.envelope import ApiError, ApiResponse
from nutriapp.gateway.gateway import EntityGateway
from nutriapp.gateway.registry import get_gateway
from nutriapp.gateway.session import AuthSession

__all__ = ["ApiError", "ApiResponse", "AuthSession", "EntityGateway", "get_gateway"]
