"""
Business entities representing core domain concepts.

Exports:
- Show: A tracked TV show with its user watch status
- Season: A numbered season of a show with its own user status
- UserStatusShow: Closed cycle of show statuses
- UserStatusSeason: Closed cycle of season statuses
"""

from showtrakt.core.entities.media import Season, Show, UserStatusSeason, UserStatusShow

__all__ = [
    "Show",
    "Season",
    "UserStatusShow",
    "UserStatusSeason",
]
