"""
Flattened team directory: each team joined to its league, division and venue.
"""

from typing import Optional

import pandas as pd

from refdata.store import ReferenceDataStore, get_reference_data

DIRECTORY_COLUMNS = [
    'league', 'division', 'team_id', 'abbreviation', 'name',
    'franchise_name', 'club_name', 'venue', 'time_zone',
    'background_color', 'accent_color', 'text_color',
]


def build_team_directory(store: Optional[ReferenceDataStore] = None) -> pd.DataFrame:
    """
    Build a DataFrame with one row per team.

    Rows follow league -> division -> team table order. Teams whose venue
    is unknown get an empty venue name.

    Args:
        store: Store to read (defaults to the canonical store)

    Returns:
        DataFrame with DIRECTORY_COLUMNS
    """
    if store is None:
        store = get_reference_data()

    rows = []
    for league in store.get_leagues():
        for division in store.get_divisions_by_league_id(league.id) or ():
            for team in store.get_teams_by_division(division.id) or ():
                venue = store.get_venue_by_id(team.venue_id)
                rows.append({
                    'league': league.abbreviation,
                    'division': division.name,
                    'team_id': team.id,
                    'abbreviation': team.abbreviation,
                    'name': team.name,
                    'franchise_name': team.franchise_name,
                    'club_name': team.club_name,
                    'venue': venue.name if venue else '',
                    'time_zone': team.time_zone,
                    'background_color': team.background_color,
                    'accent_color': team.accent_color,
                    'text_color': team.text_color,
                })

    return pd.DataFrame(rows, columns=DIRECTORY_COLUMNS)
