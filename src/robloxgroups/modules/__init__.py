from .groups import GroupClient
from .utils import fetch

__all__ = ["GroupClient", "fetch"]
