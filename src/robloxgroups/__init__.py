"""Client for the Roblox Open Cloud group role endpoints."""

from .modules import GroupClient, fetch
from .structures import Role, RequestResult
from .exceptions import (RobloxException, RobloxAPIError, RobloxNotFound,
                         RobloxDown, RobloxUnauthorized, MissingAPIKey)

__version__ = "1.0.0"

__all__ = [
    "GroupClient",
    "fetch",
    "Role",
    "RequestResult",
    "RobloxException",
    "RobloxAPIError",
    "RobloxNotFound",
    "RobloxDown",
    "RobloxUnauthorized",
    "MissingAPIKey",
]
