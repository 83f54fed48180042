"""
Unit tests for the reference data store lookups.
"""

import pytest
from pydantic import ValidationError

import refdata
from refdata import tables
from refdata.models import Division, League, Team, Venue
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


# Teams

def test_team_by_id_string():
    """Test team 111 is the Red Sox."""
    assert get_team_by_id("111").abbreviation == "BOS"


def test_team_by_id_numeric():
    """Test numeric and string ids find the same team."""
    assert get_team_by_id(109).abbreviation == "ARI"
    assert get_team_by_id(109) == get_team_by_id("109")


def test_team_by_id_unknown():
    assert get_team_by_id("000") is None
    assert get_team_by_id("not-a-number") is None
    assert get_team_by_id("") is None


def test_team_by_abbreviation():
    assert get_team_by_abbreviation("LAD").id == "119"


def test_team_by_abbreviation_unknown():
    """Test there is no Montreal team and matching is case-sensitive."""
    assert get_team_by_abbreviation("MTL") is None
    assert get_team_by_abbreviation("lad") is None


@pytest.mark.parametrize("team", tables.TEAMS, ids=lambda t: t.abbreviation)
def test_every_team_found_by_id_and_abbreviation(team):
    assert get_team_by_id(team.id) == team
    assert get_team_by_abbreviation(team.abbreviation) == team


def test_teams_by_division():
    """Test each division has five teams, in table order."""
    for division in tables.DIVISIONS:
        teams = get_teams_by_division(division.id)
        assert len(teams) == 5
        assert all(team.division_id == division.id for team in teams)

    assert get_teams_by_division("204")[0].name == "Atlanta Braves"


def test_teams_by_division_unknown():
    assert get_teams_by_division("500") is None


def test_team_by_venue_id():
    """Test Fenway Park (venue 3) maps to the Red Sox."""
    assert get_team_by_venue_id("3").abbreviation == "BOS"
    assert get_team_by_venue_id(3).abbreviation == "BOS"
    assert get_team_by_venue_id("9999") is None


def test_team_by_venue_id_returns_first_match():
    """Test a shared venue resolves to the first team in table order."""
    boston = get_team_by_abbreviation("BOS")
    tenant = boston.model_copy(update={'id': '999', 'abbreviation': 'TMP'})
    store = ReferenceDataStore(teams=[tenant, boston])

    assert store.get_team_by_venue_id("3").abbreviation == "TMP"


# Leagues

def test_get_leagues():
    leagues = get_leagues()
    assert len(leagues) == 2
    assert [league.abbreviation for league in leagues] == ["AL", "NL"]


def test_league_by_abbreviation():
    assert get_league_by_abbreviation("AL").id == "103"
    assert get_league_by_abbreviation("XL") is None


def test_league_by_id():
    assert get_league_by_id("104").abbreviation == "NL"
    assert get_league_by_id(104).abbreviation == "NL"
    assert get_league_by_id("000") is None


# Divisions

def test_divisions_by_league_id():
    for league_id in ("103", "104"):
        divisions = get_divisions_by_league_id(league_id)
        assert len(divisions) == 3
        assert all(d.league_id == league_id for d in divisions)


def test_divisions_by_league_id_unknown():
    assert get_divisions_by_league_id("999") is None


def test_division_by_abbreviation():
    assert get_division_by_abbreviation("AL", "E").id == "201"


def test_division_by_abbreviation_disambiguates_leagues():
    """Test 'E' resolves to a different division in each league."""
    al_east = get_division_by_abbreviation("AL", "E")
    nl_east = get_division_by_abbreviation("NL", "E")

    assert al_east.id != nl_east.id
    assert nl_east.name == "NL East"


def test_division_by_abbreviation_unknown():
    assert get_division_by_abbreviation("NL", "X") is None
    assert get_division_by_abbreviation("YZ", "E") is None


def test_division_by_id():
    assert get_division_by_id("203").name == "NL West"
    assert get_division_by_id(203).name == "NL West"
    assert get_division_by_id("999") is None


# Venues

def test_venue_by_id():
    assert get_venue_by_id("19").name == "Coors Field"
    assert get_venue_by_id(19).name == "Coors Field"
    assert get_venue_by_id("0") is None


def test_venue_by_short_name():
    assert get_venue_by_short_name("Fenway").name == "Fenway Park"
    assert get_venue_by_short_name("Petco") is None


def test_venue_by_empty_short_name_returns_first_unnamed():
    """Test '' matches the first venue with no short name."""
    venue = get_venue_by_short_name("")
    assert venue.name == "Oriole Park at Camden Yards"


# Store behaviour

def test_reference_data_singleton():
    assert get_reference_data() is get_reference_data()


def test_package_exports_lookups():
    assert refdata.get_team_by_id("147").name == "New York Yankees"


def test_tables_are_immutable():
    store = get_reference_data()
    assert isinstance(store.teams, tuple)
    assert isinstance(get_leagues(), tuple)
    assert isinstance(get_teams_by_division("201"), tuple)
    assert isinstance(get_league_by_id("103").divisions, tuple)

    with pytest.raises(AttributeError):
        store.teams = ()
    with pytest.raises(ValidationError):
        get_team_by_id("111").name = "Boston Americans"


def test_substitute_store_copies_input():
    """Test the store freezes the tables it is given."""
    teams = list(tables.TEAMS)
    store = ReferenceDataStore(teams=teams)
    teams.clear()

    assert len(store.teams) == 30


def test_plural_lookups_return_none_when_empty():
    """Test a known key with no members gives None, not an empty tuple."""
    store = ReferenceDataStore(teams=[], divisions=[])

    assert store.get_division_by_id("201") is None
    assert store.get_teams_by_division("201") is None
    assert store.get_divisions_by_league_id("103") is None
    assert len(store.get_leagues()) == 2


def test_model_aliases():
    """Test records dump with camelCase keys and load from either naming."""
    dumped = get_venue_by_id("3").model_dump(by_alias=True)
    assert dumped['shortName'] == "Fenway"
    assert dumped['backgroundColor2'] == "#44655D"
    assert dumped['timeZone'] == "America/New_York"

    division = Division(name="AL East", abbreviation="E", id="201",
                        leagueId="103", teams=["111"])
    assert division.league_id == "103"
    assert division.teams == ("111",)


def test_corrected_canonical_records():
    """Test the NL West list, Arizona's club name and Globe Life Field's zone."""
    nl_west = get_division_by_id("203")
    assert "135" in nl_west.teams
    assert "145" not in nl_west.teams

    assert get_team_by_abbreviation("ARI").club_name == "Diamondbacks"

    rangers = get_team_by_abbreviation("TEX")
    assert get_venue_by_id(rangers.venue_id).time_zone == "America/Chicago"
    assert rangers.time_zone == "America/Chicago"


def test_float_ids_are_not_normalized():
    """Test only str and int ids match; 111.0 is the text '111.0'."""
    assert get_team_by_id(111.0) is None
    assert get_team_by_id(111) is not None


def test_team_redirect_defaults_to_none():
    assert get_team_by_abbreviation("BOS").redirect is None


def test_record_types():
    assert isinstance(get_league_by_id("103"), League)
    assert isinstance(get_division_by_id("201"), Division)
    assert isinstance(get_team_by_id("111"), Team)
    assert isinstance(get_venue_by_id("3"), Venue)
