from ._api_service import Service

__all__ = ["Service"]
