"""
MLB reference data: leagues, divisions, teams and venues.
"""

from refdata.models import League, Division, Team, Venue
from refdata.store import (
    ReferenceDataStore,
    get_reference_data,
    get_team_by_abbreviation,
    get_team_by_id,
    get_teams_by_division,
    get_team_by_venue_id,
    get_league_by_abbreviation,
    get_league_by_id,
    get_leagues,
    get_divisions_by_league_id,
    get_division_by_abbreviation,
    get_division_by_id,
    get_venue_by_id,
    get_venue_by_short_name,
)
from refdata.team_assets import get_team_logo_url

__all__ = [
    'League',
    'Division',
    'Team',
    'Venue',
    'ReferenceDataStore',
    'get_reference_data',
    'get_team_by_abbreviation',
    'get_team_by_id',
    'get_teams_by_division',
    'get_team_by_venue_id',
    'get_league_by_abbreviation',
    'get_league_by_id',
    'get_leagues',
    'get_divisions_by_league_id',
    'get_division_by_abbreviation',
    'get_division_by_id',
    'get_venue_by_id',
    'get_venue_by_short_name',
    'get_team_logo_url',
]
