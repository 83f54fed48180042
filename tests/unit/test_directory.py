"""
Unit tests for the team directory and team asset helpers.
"""

from refdata import tables
from refdata.directory import DIRECTORY_COLUMNS, build_team_directory
from refdata.store import ReferenceDataStore, get_team_by_abbreviation
from refdata.team_assets import get_team_logo_url


def test_directory_has_one_row_per_team():
    df = build_team_directory()

    assert list(df.columns) == DIRECTORY_COLUMNS
    assert len(df) == 30
    assert df['abbreviation'].is_unique


def test_directory_order_and_join():
    df = build_team_directory()

    first = df.iloc[0]
    assert first['league'] == 'AL'
    assert first['division'] == 'AL East'

    boston = df[df['abbreviation'] == 'BOS'].iloc[0]
    assert boston['venue'] == 'Fenway Park'
    assert boston['team_id'] == '111'

    assert df.groupby('division').size().eq(5).all()
    assert df['league'].iloc[-1] == 'NL'


def test_directory_unknown_venue_is_blank():
    teams = [
        t.model_copy(update={'venue_id': '404'}) if t.abbreviation == 'SEA' else t
        for t in tables.TEAMS
    ]
    df = build_team_directory(ReferenceDataStore(teams=teams))

    assert df[df['abbreviation'] == 'SEA'].iloc[0]['venue'] == ''


def test_directory_empty_store():
    df = build_team_directory(ReferenceDataStore(teams=[]))

    assert df.empty
    assert list(df.columns) == DIRECTORY_COLUMNS


def test_logo_url_by_abbreviation_and_id():
    expected = 'https://www.mlbstatic.com/team-logos/147.svg'

    assert get_team_logo_url('NYY') == expected
    assert get_team_logo_url('147') == expected
    assert get_team_logo_url(147) == expected
    assert get_team_logo_url(get_team_by_abbreviation('NYY')) == expected


def test_logo_url_unknown_team():
    assert get_team_logo_url('MTL') == ''
    assert get_team_logo_url(0) == ''
