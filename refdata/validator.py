"""
Referential-integrity checks for the reference tables.

Not run at load time. Useful when editing the tables or swapping in a
substitute dataset: broken foreign keys otherwise only show up as
unexpected None results from the lookups.
"""

from collections import Counter
from typing import Dict, List, Optional

import pytz

from refdata.store import ReferenceDataStore, get_reference_data
from config.logging_config import get_logger

logger = get_logger(__name__)


class ReferenceDataError(Exception):
    """Raised when the reference tables are inconsistent."""
    pass


def validate_reference_data(
    store: Optional[ReferenceDataStore] = None,
    strict: bool = True
) -> Dict[str, List[str]]:
    """
    Validate the reference tables.

    Args:
        store: Store to check (defaults to the canonical store)
        strict: If True, raise exception on any error

    Returns:
        Dict with 'errors' and 'warnings' lists

    Raises:
        ReferenceDataError: If strict=True and errors were found
    """
    if store is None:
        store = get_reference_data()

    errors = []
    warnings = []

    _check_unique_keys(store, errors)
    _check_leagues(store, errors)
    _check_divisions(store, errors, warnings)
    _check_teams(store, errors, warnings)
    _check_time_zones(store, warnings)

    if errors:
        logger.error(f"Reference data errors ({len(errors)} items):")
        for item in errors:
            logger.error(f"  ✗ {item}")

    if warnings:
        logger.warning(f"Reference data warnings ({len(warnings)} items):")
        for item in warnings:
            logger.warning(f"  ⚠ {item}")

    if strict and errors:
        error_msg = f"Found {len(errors)} reference data errors:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ReferenceDataError(error_msg)

    return {
        'errors': errors,
        'warnings': warnings
    }


def _duplicates(values) -> List:
    return [value for value, count in Counter(values).items() if count > 1]


def _check_unique_keys(store: ReferenceDataStore, errors: List) -> None:
    """Ids unique per table, abbreviations unique in their scope."""
    for label, records in [('league', store.leagues), ('division', store.divisions),
                           ('team', store.teams), ('venue', store.venues)]:
        for dup in _duplicates(r.id for r in records):
            errors.append(f"Duplicate {label} id {dup}")

    for dup in _duplicates(league.abbreviation for league in store.leagues):
        errors.append(f"Duplicate league abbreviation {dup}")

    for league_id, abbr in _duplicates((d.league_id, d.abbreviation) for d in store.divisions):
        errors.append(f"Duplicate division abbreviation {abbr} in league {league_id}")

    for dup in _duplicates(team.abbreviation for team in store.teams):
        errors.append(f"Duplicate team abbreviation {dup}")


def _check_leagues(store: ReferenceDataStore, errors: List) -> None:
    for league in store.leagues:
        for division_id in league.divisions:
            division = store.get_division_by_id(division_id)
            if division is None:
                errors.append(f"League {league.abbreviation}: unknown division {division_id}")
            elif division.league_id != league.id:
                errors.append(
                    f"League {league.abbreviation}: division {division_id} "
                    f"belongs to league {division.league_id}"
                )


def _check_divisions(store: ReferenceDataStore, errors: List, warnings: List) -> None:
    for division in store.divisions:
        if store.get_league_by_id(division.league_id) is None:
            errors.append(f"Division {division.name}: unknown league {division.league_id}")

        members = {team.id for team in store.teams if team.division_id == division.id}
        if set(division.teams) != members:
            warnings.append(
                f"Division {division.name}: team list {sorted(division.teams)} "
                f"does not match teams in division {sorted(members)}"
            )


def _check_teams(store: ReferenceDataStore, errors: List, warnings: List) -> None:
    for team in store.teams:
        division = store.get_division_by_id(team.division_id)
        if division is None:
            errors.append(f"Team {team.abbreviation}: unknown division {team.division_id}")
        elif division.league_id != team.league_id:
            errors.append(
                f"Team {team.abbreviation}: league {team.league_id} does not match "
                f"division {division.name} (league {division.league_id})"
            )

        if store.get_league_by_id(team.league_id) is None:
            errors.append(f"Team {team.abbreviation}: unknown league {team.league_id}")

        # A missing venue is tolerated; venue lookups just return None
        if store.get_venue_by_id(team.venue_id) is None:
            warnings.append(f"Team {team.abbreviation}: unknown venue {team.venue_id}")


def _check_time_zones(store: ReferenceDataStore, warnings: List) -> None:
    for record in store.teams + store.venues:
        if record.time_zone not in pytz.all_timezones_set:
            warnings.append(f"{record.name}: unknown time zone {record.time_zone}")

    for team in store.teams:
        venue = store.get_venue_by_id(team.venue_id)
        if venue is not None and venue.time_zone != team.time_zone:
            warnings.append(
                f"Team {team.abbreviation}: time zone {team.time_zone} differs "
                f"from {venue.name} ({venue.time_zone})"
            )
