"""Business logic services layer.

- kitsu_service: Kitsu API client (query building, transport, decoding)
"""

from services import kitsu_service

__all__ = ["kitsu_service"]
