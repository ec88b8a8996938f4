"""
contrib-calendar: GitHub profile card with a contribution calendar

Entry point for the terminal version of the widget.
"""

import argparse
import random
from datetime import date

from contrib_calendar import config
from contrib_calendar.activity_generator import RandomActivityProvider
from contrib_calendar.cli import display_calendar, display_profile, display_summary
from contrib_calendar.config import configure_logging, validate_config
from contrib_calendar.github_client import GitHubClient
from contrib_calendar.presenter import load_page_state, normalize_username


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contrib-calendar",
        description="Show a GitHub profile with a contribution calendar.",
    )
    parser.add_argument(
        "username",
        nargs="?",
        default=None,
        help="GitHub username (defaults to DEFAULT_USERNAME)",
    )
    parser.add_argument(
        "--today",
        type=_parse_date,
        default=None,
        help="Last day of the calendar window (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible activity data",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    print("contrib-calendar - GitHub contributions at a glance")
    print("-" * 50)

    try:
        validate_config()
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}")
        return 1

    if args.username is None:
        username = config.DEFAULT_USERNAME
    else:
        username = normalize_username(args.username)
        if username is None:
            # Blank input is ignored, same as an empty form submission
            return 0

    rng = random.Random(args.seed) if args.seed is not None else None

    print(f"\nFetching profile for {username}...\n")
    state = load_page_state(
        username,
        client=GitHubClient(),
        provider=RandomActivityProvider(rng),
        today=args.today,
    )

    if state.show_error:
        print(state.error)
        return 1

    display_profile(state.profile)
    display_calendar(state.grid)
    display_summary(state.stats)
    return 0


if __name__ == "__main__":
    exit(main())
