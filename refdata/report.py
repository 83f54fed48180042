"""
League report: walks league -> division -> team -> venue and prints one
line per team.

Doubles as a smoke test of the tables: the exit status is 0 only when
the expected number of teams was enumerated.
"""

import sys
from typing import Optional, TextIO

from refdata.store import ReferenceDataStore, get_reference_data
from config.settings import get_settings
from config.logging_config import get_logger

logger = get_logger(__name__)


def format_team_line(abbreviation: str, name: str, venue_name: str, time_zone: str) -> str:
    return f"    {abbreviation:<5} {name:<22} play at {venue_name:<28} {time_zone}"


def run(
    store: Optional[ReferenceDataStore] = None,
    expected_team_count: Optional[int] = None,
    stream: Optional[TextIO] = None
) -> int:
    """
    Print the league report.

    Args:
        store: Store to walk (defaults to the canonical store)
        expected_team_count: Teams required for success (default from settings)
        stream: Output stream (default: stdout)

    Returns:
        Exit status: 0 if the team count matches, 1 otherwise
    """
    if store is None:
        store = get_reference_data()
    if expected_team_count is None:
        expected_team_count = get_settings().report.expected_team_count
    if stream is None:
        stream = sys.stdout

    teams_count = 0

    for league in store.get_leagues():
        divisions = store.get_divisions_by_league_id(league.id)
        if divisions is None:
            logger.error(f"No divisions for league {league.name}")
            continue

        for division in divisions:
            teams = store.get_teams_by_division(division.id)
            if teams is None:
                logger.error(f"No teams for division {division.name}")
                continue

            print(f"{league.name} {division.name}", file=stream)
            for team in teams:
                teams_count += 1
                venue = store.get_venue_by_id(team.venue_id)
                venue_name = venue.name if venue else 'unknown venue'
                print(format_team_line(team.abbreviation, team.name,
                                       venue_name, team.time_zone), file=stream)

    if teams_count != expected_team_count:
        logger.error(f"Enumerated {teams_count} teams, expected {expected_team_count}")
        return 1

    logger.info(f"Enumerated {teams_count} teams")
    return 0
