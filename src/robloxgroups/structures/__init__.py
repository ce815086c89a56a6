from .Role import Role
from .RequestResult import RequestResult

__all__ = ["Role", "RequestResult"]
