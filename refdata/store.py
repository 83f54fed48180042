"""
Reference data store for leagues, divisions, teams and venues.

All lookups are linear scans over small immutable tables. A lookup that
matches nothing returns None; plural lookups return None rather than an
empty tuple.

Usage:
    from refdata.store import get_team_by_abbreviation

    team = get_team_by_abbreviation('BOS')
    print(team.name, team.venue_id)
"""

from typing import Iterable, Optional, Tuple, Union

from refdata.models import Division, League, Team, Venue
from refdata import tables
from config.logging_config import get_logger

logger = get_logger(__name__)

Identifier = Union[str, int]


def _normalize_id(value: Identifier) -> str:
    """
    Ids are compared as text: 111 and '111' are the same id.

    Only str and int are supported; a float keeps its decimal point
    (111.0 becomes '111.0') and so never matches.
    """
    return str(value)


class ReferenceDataStore:
    """
    Read-only view over the four reference tables.

    Defaults to the canonical tables; a substitute dataset can be passed
    in, and is frozen into tuples on construction.
    """

    def __init__(
        self,
        leagues: Optional[Iterable[League]] = None,
        divisions: Optional[Iterable[Division]] = None,
        teams: Optional[Iterable[Team]] = None,
        venues: Optional[Iterable[Venue]] = None
    ):
        self._leagues = tuple(tables.LEAGUES if leagues is None else leagues)
        self._divisions = tuple(tables.DIVISIONS if divisions is None else divisions)
        self._teams = tuple(tables.TEAMS if teams is None else teams)
        self._venues = tuple(tables.VENUES if venues is None else venues)
        logger.debug(
            f"ReferenceDataStore initialized: {len(self._leagues)} leagues, "
            f"{len(self._divisions)} divisions, {len(self._teams)} teams, "
            f"{len(self._venues)} venues"
        )

    @property
    def leagues(self) -> Tuple[League, ...]:
        return self._leagues

    @property
    def divisions(self) -> Tuple[Division, ...]:
        return self._divisions

    @property
    def teams(self) -> Tuple[Team, ...]:
        return self._teams

    @property
    def venues(self) -> Tuple[Venue, ...]:
        return self._venues

    # Teams

    def get_team_by_abbreviation(self, abbreviation: str) -> Optional[Team]:
        """
        Look up a team by abbreviation.

        Args:
            abbreviation: Exact, case-sensitive abbreviation (e.g., 'BOS', 'KC')

        Returns:
            Team, or None if no team uses the abbreviation
        """
        for team in self._teams:
            if team.abbreviation == abbreviation:
                return team
        return None

    def get_team_by_id(self, team_id: Identifier) -> Optional[Team]:
        """
        Look up a team by statsapi id.

        Args:
            team_id: Team id as str or int (e.g., '111' or 111 for BOS)

        Returns:
            Team, or None if not found
        """
        team_id = _normalize_id(team_id)
        for team in self._teams:
            if team.id == team_id:
                return team
        return None

    def get_teams_by_division(self, division_id: Identifier) -> Optional[Tuple[Team, ...]]:
        """
        Get the teams of a division, in table order.

        Args:
            division_id: Division id (e.g., '201' for AL East)

        Returns:
            Tuple of teams, or None if no team belongs to the division
        """
        division_id = _normalize_id(division_id)
        teams = tuple(team for team in self._teams if team.division_id == division_id)
        return teams or None

    def get_team_by_venue_id(self, venue_id: Identifier) -> Optional[Team]:
        """First team (table order) playing at the venue, or None."""
        venue_id = _normalize_id(venue_id)
        for team in self._teams:
            if team.venue_id == venue_id:
                return team
        return None

    # Leagues

    def get_league_by_abbreviation(self, abbreviation: str) -> Optional[League]:
        """Look up a league by abbreviation ('AL' or 'NL')."""
        for league in self._leagues:
            if league.abbreviation == abbreviation:
                return league
        return None

    def get_league_by_id(self, league_id: Identifier) -> Optional[League]:
        """Look up a league by id ('103' is AL, '104' is NL)."""
        league_id = _normalize_id(league_id)
        for league in self._leagues:
            if league.id == league_id:
                return league
        return None

    def get_leagues(self) -> Tuple[League, ...]:
        return self._leagues

    # Divisions

    def get_divisions_by_league_id(self, league_id: Identifier) -> Optional[Tuple[Division, ...]]:
        """
        Get the divisions of a league, in table order.

        Args:
            league_id: League id ('103' for AL, '104' for NL)

        Returns:
            Tuple of divisions, or None if the league has none
        """
        league_id = _normalize_id(league_id)
        divisions = tuple(
            division for division in self._divisions
            if division.league_id == league_id
        )
        return divisions or None

    def get_division_by_abbreviation(
        self,
        league_abbreviation: str,
        division_abbreviation: str
    ) -> Optional[Division]:
        """
        Look up a division by league and division abbreviation.

        Division abbreviations repeat across leagues ("E" is both AL East
        and NL East), so the league is resolved first. An unknown league
        gives None; there is no fallback across leagues.

        Args:
            league_abbreviation: 'AL' or 'NL'
            division_abbreviation: 'E', 'C' or 'W'

        Returns:
            Division, or None if not found
        """
        league = self.get_league_by_abbreviation(league_abbreviation)
        if league is None:
            return None

        for division in self._divisions:
            if (division.abbreviation == division_abbreviation
                    and division.league_id == league.id):
                return division
        return None

    def get_division_by_id(self, division_id: Identifier) -> Optional[Division]:
        """Look up a division by id ('201' is AL East, '203' is NL West, ...)."""
        division_id = _normalize_id(division_id)
        for division in self._divisions:
            if division.id == division_id:
                return division
        return None

    # Venues

    def get_venue_by_id(self, venue_id: Identifier) -> Optional[Venue]:
        """Look up a venue by id ('3' is Fenway Park)."""
        venue_id = _normalize_id(venue_id)
        for venue in self._venues:
            if venue.id == venue_id:
                return venue
        return None

    def get_venue_by_short_name(self, short_name: str) -> Optional[Venue]:
        """
        Look up a venue by short name ('Fenway', ...).

        Most venues have no short name (''), so an empty query returns the
        first of those in table order.
        """
        for venue in self._venues:
            if venue.short_name == short_name:
                return venue
        return None


# Singleton instance
_store: Optional[ReferenceDataStore] = None


def get_reference_data() -> ReferenceDataStore:
    """
    Get the shared store over the canonical tables.

    Returns:
        ReferenceDataStore: The process-wide store
    """
    global _store
    if _store is None:
        _store = ReferenceDataStore()
    return _store


def get_team_by_abbreviation(abbreviation: str) -> Optional[Team]:
    return get_reference_data().get_team_by_abbreviation(abbreviation)


def get_team_by_id(team_id: Identifier) -> Optional[Team]:
    return get_reference_data().get_team_by_id(team_id)


def get_teams_by_division(division_id: Identifier) -> Optional[Tuple[Team, ...]]:
    return get_reference_data().get_teams_by_division(division_id)


def get_team_by_venue_id(venue_id: Identifier) -> Optional[Team]:
    return get_reference_data().get_team_by_venue_id(venue_id)


def get_league_by_abbreviation(abbreviation: str) -> Optional[League]:
    return get_reference_data().get_league_by_abbreviation(abbreviation)


def get_league_by_id(league_id: Identifier) -> Optional[League]:
    return get_reference_data().get_league_by_id(league_id)


def get_leagues() -> Tuple[League, ...]:
    return get_reference_data().get_leagues()


def get_divisions_by_league_id(league_id: Identifier) -> Optional[Tuple[Division, ...]]:
    return get_reference_data().get_divisions_by_league_id(league_id)


def get_division_by_abbreviation(
    league_abbreviation: str,
    division_abbreviation: str
) -> Optional[Division]:
    return get_reference_data().get_division_by_abbreviation(
        league_abbreviation, division_abbreviation
    )


def get_division_by_id(division_id: Identifier) -> Optional[Division]:
    return get_reference_data().get_division_by_id(division_id)


def get_venue_by_id(venue_id: Identifier) -> Optional[Venue]:
    return get_reference_data().get_venue_by_id(venue_id)


def get_venue_by_short_name(short_name: str) -> Optional[Venue]:
    return get_reference_data().get_venue_by_short_name(short_name)
