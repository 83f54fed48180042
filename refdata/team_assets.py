"""
Team asset URLs (logos) built from team ids.
"""

from typing import Union

from refdata.models import Team
from refdata.store import get_reference_data

LOGO_URL_TEMPLATE = "https://www.mlbstatic.com/team-logos/{team_id}.svg"


def get_team_logo_url(team: Union[Team, str, int]) -> str:
    """
    Get team logo URL from MLB static assets.

    Args:
        team: Team, abbreviation (e.g., 'NYY') or team id (e.g., 147)

    Returns:
        URL to team logo SVG, or '' for an unknown team
    """
    if not isinstance(team, Team):
        store = get_reference_data()
        found = None
        if isinstance(team, str):
            found = store.get_team_by_abbreviation(team)
        if found is None:
            found = store.get_team_by_id(team)
        if found is None:
            return ""
        team = found

    return LOGO_URL_TEMPLATE.format(team_id=team.id)
