#!/usr/bin/env python3
"""
Print the league report: every team with its division and home venue.

Exits 0 when the full set of teams was enumerated, 1 otherwise.

Usage:
    python scripts/league_report.py
    python scripts/league_report.py --validate   # Check table integrity first
    python scripts/league_report.py --directory  # Flat team table
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import get_settings
from config.logging_config import setup_logging, get_logger
from refdata import report
from refdata.directory import build_team_directory
from refdata.validator import validate_reference_data

logger = get_logger(__name__)


def main(argv=None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description='Print MLB leagues, divisions, teams and venues',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/league_report.py
  python scripts/league_report.py --validate --log-level DEBUG
        """
    )

    parser.add_argument('--validate', action='store_true',
                        default=settings.report.validate_data,
                        help='Validate the reference tables before reporting')
    parser.add_argument('--directory', action='store_true',
                        help='Print the flat team directory instead of the report')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default from settings)')

    args = parser.parse_args(argv)

    setup_logging(log_level=args.log_level)

    if args.validate:
        result = validate_reference_data(strict=False)
        if result['errors']:
            print(f"✗ Reference data has {len(result['errors'])} errors")
            return 1
        print(f"✓ Reference data valid ({len(result['warnings'])} warnings)")
        print()

    if args.directory:
        directory = build_team_directory()
        print(directory.to_string(index=False))
        return 0 if len(directory) == settings.report.expected_team_count else 1

    return report.run(expected_team_count=settings.report.expected_team_count)


if __name__ == '__main__':
    sys.exit(main())
