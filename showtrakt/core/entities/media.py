"""
Show tracking entities.

Entities representing TV shows and their seasons, each carrying a status
assigned by the user. Statuses are closed cycles: the UI steps through them
with ``next()``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UserStatusShow(str, Enum):
    """Watch status of a show, as set by the user."""

    TODO = "todo"
    WATCHED = "watched"
    UNWATCHED = "unwatched"

    def next(self) -> "UserStatusShow":
        """Return the following status: TODO -> WATCHED -> UNWATCHED -> TODO."""
        return _SHOW_CYCLE[self]


class UserStatusSeason(str, Enum):
    """Tracking status of a season, as set by the user."""

    UNFILLED = "unfilled"
    ON_RELEASE = "on_release"
    OTHER_DATE = "other_date"

    def next(self) -> "UserStatusSeason":
        """Return the following status: UNFILLED -> ON_RELEASE -> OTHER_DATE -> UNFILLED."""
        return _SEASON_CYCLE[self]


_SHOW_CYCLE = {
    UserStatusShow.TODO: UserStatusShow.WATCHED,
    UserStatusShow.WATCHED: UserStatusShow.UNWATCHED,
    UserStatusShow.UNWATCHED: UserStatusShow.TODO,
}

_SEASON_CYCLE = {
    UserStatusSeason.UNFILLED: UserStatusSeason.ON_RELEASE,
    UserStatusSeason.ON_RELEASE: UserStatusSeason.OTHER_DATE,
    UserStatusSeason.OTHER_DATE: UserStatusSeason.UNFILLED,
}


@dataclass
class Show:
    """
    A tracked TV show.

    Created from the local store listing; enriched in place by a Trakt
    detail lookup.

    Attributes:
        imdb_id: IMDb identifier (external id, unique)
        title: Primary title
        year: First air year
        overview: Series description (from Trakt)
        network: Broadcasting network (from Trakt)
        no_episodes: Number of aired episodes (from Trakt)
        trakt_id: Trakt catalog id, assigned on the first detail lookup
        user_status: Watch status chosen by the user
    """

    imdb_id: str
    title: str = ""
    year: Optional[int] = None
    overview: Optional[str] = None
    network: Optional[str] = None
    no_episodes: Optional[int] = None
    trakt_id: Optional[int] = None
    user_status: UserStatusShow = UserStatusShow.TODO


@dataclass
class Season:
    """
    A season of a show.

    Attributes:
        show_imdb_id: IMDb id of the owning show
        number: Season number (0 holds specials on Trakt)
        user_status: Tracking status chosen by the user
        title: Season title
        episode_count: Number of episodes announced
        aired_episodes: Number of episodes already aired
        first_aired: First air date (ISO 8601 string as given by Trakt)
        trakt_id: Trakt id of the season
    """

    show_imdb_id: str
    number: int
    user_status: UserStatusSeason = UserStatusSeason.UNFILLED
    title: Optional[str] = None
    episode_count: Optional[int] = None
    aired_episodes: Optional[int] = None
    first_aired: Optional[str] = None
    trakt_id: Optional[int] = None
