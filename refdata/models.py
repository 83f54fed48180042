"""
Record types for leagues, divisions, teams and venues.

Records are immutable. Attributes are snake_case; each field is also
reachable by its camelCase alias (``leagueId``, ``timeZone``, ...), so
``record.model_dump(by_alias=True)`` gives the statsapi-style shape.
"""

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class League(_Record):
    """A league, e.g. the American League (id "103")."""

    name: str
    abbreviation: str
    id: str
    divisions: Tuple[str, ...] = ()


class Division(_Record):
    """
    A division within one league.

    Abbreviations ("E", "C", "W") repeat across leagues, so a division
    is only identified by abbreviation together with its league.
    """

    name: str
    abbreviation: str
    id: str
    league_id: str
    teams: Tuple[str, ...] = ()


class Team(_Record):
    """A franchise: name, colors, time zone and home venue."""

    id: str
    name: str
    franchise_name: str  # "Boston", "Arizona", ...
    club_name: str       # "Red Sox", "Diamondbacks", ...
    abbreviation: str
    league_id: str
    division_id: str
    background_color: str
    accent_color: str
    text_color: str
    redirect: Optional[str] = None
    time_zone: str
    venue_id: str


class Venue(_Record):
    """
    A ballpark and its display colors.

    An empty ``short_name`` means no short alias is defined.
    """

    id: str
    short_name: str
    name: str
    background_color: str
    background_color2: str
    accent_color: str
    text_color: str
    time_zone: str
